"""Record and view schemas for companies, activities, reports and dashboards."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """ESG activity category."""

    ENVIRONMENTAL = "environmental"
    SOCIAL = "social"
    GOVERNANCE = "governance"


# ============================================================================
# Inputs
# ============================================================================


class CompanyCreate(BaseModel):
    """Company registration. Extra profile fields are stored as given."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, description="Company name")
    industry: Optional[str] = None
    city: Optional[str] = None
    framework: Optional[str] = Field(None, description="Preferred reporting framework")


class ActivityCreate(BaseModel):
    """ESG activity submission. Extra descriptive fields are stored as given."""

    model_config = ConfigDict(extra="allow")

    company_id: str = Field(..., min_length=1)
    category: Category
    impact_score: Optional[float] = Field(
        None, ge=0, allow_inf_nan=False, description="Impact score, defaults to 5 when scoring"
    )
    title: Optional[str] = None
    description: Optional[str] = None


class ReportRequest(BaseModel):
    """Report generation options."""

    framework: Optional[str] = None
    period: Optional[str] = None


# ============================================================================
# Views
# ============================================================================


class CategoryCounts(BaseModel):
    """Activity count per category."""

    environmental: int = 0
    social: int = 0
    governance: int = 0


class Report(BaseModel):
    """Sealed point-in-time ESG report."""

    id: str
    company_id: str
    company_name: Optional[str] = None
    framework: str
    period: str
    generated_at: str
    esg_score: int
    total_activities: int
    activities_by_category: CategoryCounts
    activity_ids: List[str] = Field(default_factory=list)
    hash: str


class ReportVerification(BaseModel):
    """Result of checking a report seal against the ledger."""

    report_id: str
    valid: bool
    current: bool
    expected_hash: str
    actual_hash: str


class LedgerVerification(BaseModel):
    """Result of walking the activity hash chain."""

    valid: bool
    length: int
    first_invalid_index: Optional[int] = None


class DashboardView(BaseModel):
    """Summary of a company's ESG activity."""

    company: Optional[str] = None
    esg_score: int
    total_activities: int
    categories: CategoryCounts
    recent_activities: List[Dict[str, Any]] = Field(default_factory=list)
    monthly_trend: Dict[str, int] = Field(default_factory=dict)
