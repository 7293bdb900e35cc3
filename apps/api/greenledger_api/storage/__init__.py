"""Collection storage."""

from greenledger_api.storage.service import (
    COLLECTIONS,
    COMPANIES,
    ESG_ACTIVITIES,
    REPORTS,
    USERS,
    JSONCollectionStore,
)

__all__ = [
    "JSONCollectionStore",
    "COLLECTIONS",
    "COMPANIES",
    "ESG_ACTIVITIES",
    "REPORTS",
    "USERS",
]
