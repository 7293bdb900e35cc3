"""Domain exceptions raised by the core services."""


class GreenLedgerError(Exception):
    """Base exception for Green Ledger failures."""


class NotFoundError(GreenLedgerError):
    """Raised when a referenced record does not exist."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PersistenceError(GreenLedgerError):
    """Raised when a collection cannot be written."""

    def __init__(self, collection: str, message: str):
        self.collection = collection
        super().__init__(f"Failed to persist {collection}: {message}")
