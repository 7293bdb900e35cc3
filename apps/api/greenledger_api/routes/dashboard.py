"""Dashboard routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from greenledger_api.dashboard import DashboardAggregator
from greenledger_api.errors import NotFoundError
from greenledger_api.schemas import DashboardView
from greenledger_api.storage import JSONCollectionStore
from greenledger_api.storage.dependencies import get_store

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/{company_id}", response_model=DashboardView)
async def get_dashboard(
    company_id: str,
    store: JSONCollectionStore = Depends(get_store),
):
    """Get score, category breakdown, recent activity and monthly trend for a company."""
    try:
        return DashboardAggregator(store).summarize(company_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company not found",
        )
