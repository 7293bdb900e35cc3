"""Dashboard summaries derived from the ledger."""

import logging
from collections import Counter
from datetime import datetime
from typing import Iterable, Mapping

from greenledger_api.ledger import LedgerService
from greenledger_api.schemas import DashboardView
from greenledger_api.scoring import calculate_esg_score, count_by_category
from greenledger_api.services.company import CompanyService
from greenledger_api.settings import get_settings
from greenledger_api.storage import JSONCollectionStore

logger = logging.getLogger(__name__)


def monthly_trend(activities: Iterable[Mapping]) -> dict[str, int]:
    """Count activities per calendar month of creation, keyed "YYYY-MM"."""
    trend: Counter = Counter()
    for activity in activities:
        created_at = activity.get("created_at")
        if not created_at:
            continue
        try:
            month = datetime.fromisoformat(created_at).strftime("%Y-%m")
        except ValueError:
            logger.warning(f"Skipping activity {activity.get('id')} with bad created_at: {created_at}")
            continue
        trend[month] += 1
    return dict(trend)


class DashboardAggregator:
    """Compose a company's dashboard view."""

    def __init__(self, store: JSONCollectionStore):
        """Initialize dashboard aggregator."""
        self.ledger = LedgerService(store)
        self.companies = CompanyService(store)

    def summarize(self, company_id: str) -> DashboardView:
        """
        Build the dashboard for a company.

        Raises:
            NotFoundError: If the company does not exist
        """
        company = self.companies.find_company(company_id)
        activities = self.ledger.for_company(company_id)
        limit = get_settings().recent_activity_limit

        # Latest appended first
        recent = list(reversed(activities[-limit:])) if limit > 0 else []

        return DashboardView(
            company=company.get("name"),
            esg_score=calculate_esg_score(activities),
            total_activities=len(activities),
            categories=count_by_category(activities),
            recent_activities=recent,
            monthly_trend=monthly_trend(activities),
        )
