"""ESG activity ledger routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from greenledger_api.ledger import LedgerService
from greenledger_api.schemas import ActivityCreate, Category, LedgerVerification
from greenledger_api.storage import JSONCollectionStore
from greenledger_api.storage.dependencies import get_store

router = APIRouter(prefix="/api", tags=["activities"])


@router.get("/esg-activities")
async def list_activities(
    company_id: Optional[str] = Query(None),
    category: Optional[Category] = Query(None),
    store: JSONCollectionStore = Depends(get_store),
):
    """List activities, newest first, optionally filtered by company and category."""
    return LedgerService(store).query(
        company_id=company_id,
        category=category.value if category else None,
    )


@router.post("/esg-activities", status_code=status.HTTP_201_CREATED)
async def create_activity(
    activity_data: ActivityCreate,
    store: JSONCollectionStore = Depends(get_store),
):
    """Append an activity to the hash chain."""
    return LedgerService(store).append(activity_data)


@router.get("/ledger/verify", response_model=LedgerVerification)
async def verify_ledger(store: JSONCollectionStore = Depends(get_store)):
    """Walk the activity chain and report the first broken link, if any."""
    return LedgerService(store).verify()
