"""Seed data for development and testing."""

import logging

from greenledger_api.ledger import LedgerService
from greenledger_api.schemas import ActivityCreate, Category, CompanyCreate
from greenledger_api.services.company import CompanyService
from greenledger_api.storage.service import JSONCollectionStore

logger = logging.getLogger(__name__)

DEMO_COMPANY = {
    "name": "Indus Textiles Ltd",
    "industry": "Textiles",
    "city": "Karachi",
    "framework": "GRI",
}

DEMO_ACTIVITIES = [
    {
        "category": Category.ENVIRONMENTAL,
        "title": "Rooftop solar installation",
        "description": "500 kW rooftop solar array on the main mill",
        "impact_score": 8,
    },
    {
        "category": Category.SOCIAL,
        "title": "Worker health camp",
        "description": "Free annual health screening for factory staff",
        "impact_score": 6,
    },
    {
        "category": Category.GOVERNANCE,
        "title": "Independent audit committee",
        "description": "Board audit committee chaired by an independent director",
        "impact_score": 7,
    },
]


def seed_demo_company(store: JSONCollectionStore) -> dict:
    """Register the demo company and append one activity per category."""
    store.initialize()
    existing = [c for c in CompanyService(store).list_companies() if c.get("name") == DEMO_COMPANY["name"]]
    if existing:
        logger.info(f"Demo company already exists: {existing[0]['id']}")
        return existing[0]

    company = CompanyService(store).create_company(CompanyCreate(**DEMO_COMPANY))
    ledger = LedgerService(store)
    for activity in DEMO_ACTIVITIES:
        ledger.append(ActivityCreate(company_id=company["id"], **activity))
    return company
