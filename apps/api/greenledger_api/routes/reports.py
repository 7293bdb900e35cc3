"""ESG report routes."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from greenledger_api.errors import NotFoundError
from greenledger_api.reports import ReportGenerator
from greenledger_api.schemas import Report, ReportRequest, ReportVerification
from greenledger_api.storage import JSONCollectionStore
from greenledger_api.storage.dependencies import get_store

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.post("/{company_id}", response_model=Report)
async def generate_report(
    company_id: str,
    report_request: Optional[ReportRequest] = Body(None),
    store: JSONCollectionStore = Depends(get_store),
):
    """Generate a sealed report for a company."""
    report_request = report_request or ReportRequest()
    try:
        return ReportGenerator(store).generate(
            company_id,
            framework=report_request.framework,
            period=report_request.period,
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company not found",
        )


@router.get("", response_model=list[Report])
async def list_reports(
    company_id: Optional[str] = Query(None),
    store: JSONCollectionStore = Depends(get_store),
):
    """List generated reports, newest first."""
    return ReportGenerator(store).list_reports(company_id)


@router.get("/{report_id}", response_model=Report)
async def get_report(
    report_id: str,
    store: JSONCollectionStore = Depends(get_store),
):
    """Get a generated report."""
    try:
        return ReportGenerator(store).get_report(report_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found",
        )


@router.get("/{report_id}/verify", response_model=ReportVerification)
async def verify_report(
    report_id: str,
    store: JSONCollectionStore = Depends(get_store),
):
    """Check a report seal against the current ledger."""
    try:
        return ReportGenerator(store).verify(report_id)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found",
        )
