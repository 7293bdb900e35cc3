"""ESG scoring."""

from greenledger_api.scoring.scorer import (
    CATEGORY_WEIGHTS,
    DEFAULT_IMPACT_SCORE,
    calculate_esg_score,
    count_by_category,
)

__all__ = ["CATEGORY_WEIGHTS", "DEFAULT_IMPACT_SCORE", "calculate_esg_score", "count_by_category"]
