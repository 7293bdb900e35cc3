"""Sealed ESG report generation and verification."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional, Sequence

from greenledger_api.errors import NotFoundError
from greenledger_api.ledger import LedgerService, hash_payload
from greenledger_api.schemas import Report, ReportVerification
from greenledger_api.scoring import calculate_esg_score, count_by_category
from greenledger_api.services.company import CompanyService
from greenledger_api.settings import get_settings
from greenledger_api.storage import REPORTS, JSONCollectionStore
from greenledger_api.utils.metrics import reports_generated

logger = logging.getLogger(__name__)


def seal_report(company_id: str, framework: str, period: str, activities: Sequence[dict]) -> str:
    """Hash the inputs that define a report."""
    return hash_payload(
        {
            "company_id": company_id,
            "framework": framework,
            "period": period,
            "activities": list(activities),
        }
    )


class ReportGenerator:
    """Snapshot a company's activities into an immutable, hashed report."""

    def __init__(self, store: JSONCollectionStore):
        """Initialize report generator."""
        self.store = store
        self.ledger = LedgerService(store)
        self.companies = CompanyService(store)

    def generate(
        self,
        company_id: str,
        framework: Optional[str] = None,
        period: Optional[str] = None,
    ) -> Report:
        """
        Generate and store a new report for a company.

        Raises:
            NotFoundError: If the company does not exist
        """
        settings = get_settings()
        if framework is None:
            framework = settings.default_framework
        if period is None:
            period = settings.default_period

        company = self.companies.find_company(company_id)
        activities = self.ledger.for_company(company_id)

        report = Report(
            id=str(uuid.uuid4()),
            company_id=company_id,
            company_name=company.get("name"),
            framework=framework,
            period=period,
            generated_at=datetime.now(timezone.utc).isoformat(),
            esg_score=calculate_esg_score(activities),
            total_activities=len(activities),
            activities_by_category=count_by_category(activities),
            activity_ids=[activity["id"] for activity in activities],
            hash=seal_report(company_id, framework, period, activities),
        )

        with self.store.transaction(REPORTS) as reports:
            reports.append(report.model_dump(mode="json"))

        reports_generated.labels(framework=framework).inc()
        logger.info(
            f"Generated {framework} report {report.id} for {report.company_name} "
            f"(score={report.esg_score}, activities={report.total_activities}, "
            f"hash={report.hash[:16]}...)"
        )
        return report

    def list_reports(self, company_id: Optional[str] = None) -> list[Report]:
        """Get stored reports, newest first."""
        reports = [Report(**record) for record in self.store.read_all(REPORTS)]
        if company_id:
            reports = [report for report in reports if report.company_id == company_id]
        return list(reversed(reports))

    def get_report(self, report_id: str) -> Report:
        """
        Get a stored report.

        Raises:
            NotFoundError: If no report has this id
        """
        for record in self.store.read_all(REPORTS):
            if record.get("id") == report_id:
                return Report(**record)
        logger.warning(f"Report not found: {report_id}")
        raise NotFoundError("Report", report_id)

    def verify(self, report_id: str) -> ReportVerification:
        """
        Check a report seal against the current ledger.

        The sealed activities are looked up by id and re-hashed. The report is
        valid if the seal still matches, and current if the company has had no
        activity appended since the report was generated.
        """
        report = self.get_report(report_id)
        activities = self.ledger.for_company(report.company_id)
        by_id = {activity.get("id"): activity for activity in activities}
        sealed = [by_id[activity_id] for activity_id in report.activity_ids if activity_id in by_id]

        actual_hash = seal_report(report.company_id, report.framework, report.period, sealed)
        valid = actual_hash == report.hash
        current = valid and len(activities) == len(report.activity_ids)

        if not valid:
            logger.warning(f"Report {report_id} seal does not match ledger")

        return ReportVerification(
            report_id=report_id,
            valid=valid,
            current=current,
            expected_hash=report.hash,
            actual_hash=actual_hash,
        )
