"""FastAPI dependency providing the collection store."""

from fastapi import Request

from greenledger_api.storage.service import JSONCollectionStore


def get_store(request: Request) -> JSONCollectionStore:
    """Get the collection store the app was built with."""
    return request.app.state.store
