"""Company registry with live ESG score derivation."""

import logging
import uuid
from datetime import datetime, timezone

from greenledger_api.errors import NotFoundError
from greenledger_api.ledger import LedgerService
from greenledger_api.schemas import CompanyCreate
from greenledger_api.scoring import calculate_esg_score
from greenledger_api.storage import COMPANIES, JSONCollectionStore

logger = logging.getLogger(__name__)


class CompanyService:
    """Register and look up companies."""

    def __init__(self, store: JSONCollectionStore):
        """Initialize company service."""
        self.store = store

    def list_companies(self) -> list[dict]:
        """Get every registered company in registration order."""
        return self.store.read_all(COMPANIES)

    def create_company(self, company: CompanyCreate) -> dict:
        """Register a company with a fresh identifier."""
        record = company.model_dump(mode="json", exclude_none=True)
        record["id"] = str(uuid.uuid4())
        record["created_at"] = datetime.now(timezone.utc).isoformat()
        record["esg_score"] = 0

        with self.store.transaction(COMPANIES) as companies:
            companies.append(record)

        logger.info(f"Created company {record['id']} ({record['name']})")
        return record

    def find_company(self, company_id: str) -> dict:
        """
        Get the stored company record.

        Raises:
            NotFoundError: If no company has this id
        """
        for company in self.store.read_all(COMPANIES):
            if company.get("id") == company_id:
                return company
        logger.warning(f"Company not found: {company_id}")
        raise NotFoundError("Company", company_id)

    def get_company(self, company_id: str) -> dict:
        """Get a company with its score and activity count derived from the ledger."""
        company = dict(self.find_company(company_id))
        activities = LedgerService(self.store).for_company(company_id)
        company["esg_score"] = calculate_esg_score(activities)
        company["total_activities"] = len(activities)
        return company
