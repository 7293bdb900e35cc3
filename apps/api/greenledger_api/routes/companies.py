"""Company registration and lookup routes."""

from fastapi import APIRouter, Depends, HTTPException, status

from greenledger_api.errors import NotFoundError
from greenledger_api.schemas import CompanyCreate
from greenledger_api.services.company import CompanyService
from greenledger_api.storage import JSONCollectionStore
from greenledger_api.storage.dependencies import get_store

router = APIRouter(prefix="/api/companies", tags=["companies"])


@router.get("")
async def list_companies(store: JSONCollectionStore = Depends(get_store)):
    """List all registered companies."""
    return CompanyService(store).list_companies()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_company(
    company_data: CompanyCreate,
    store: JSONCollectionStore = Depends(get_store),
):
    """Register a new company."""
    return CompanyService(store).create_company(company_data)


@router.get("/{company_id}")
async def get_company(
    company_id: str,
    store: JSONCollectionStore = Depends(get_store),
):
    """Get a company with its live ESG score and activity count."""
    try:
        return CompanyService(store).get_company(company_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company not found",
        )
