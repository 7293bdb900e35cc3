"""Weighted ESG scoring over activity records."""

import logging
import math
from typing import Iterable, Mapping

from greenledger_api.schemas import Category, CategoryCounts

logger = logging.getLogger(__name__)

CATEGORY_WEIGHTS = {
    Category.ENVIRONMENTAL: 0.4,
    Category.SOCIAL: 0.3,
    Category.GOVERNANCE: 0.3,
}
DEFAULT_IMPACT_SCORE = 5
MAX_SCORE = 100


def _partition(activities: Iterable[Mapping]) -> dict[Category, list[float]]:
    """Group impact scores by category, ignoring unknown categories."""
    impacts: dict[Category, list[float]] = {category: [] for category in Category}
    for activity in activities:
        try:
            category = Category(activity.get("category"))
        except ValueError:
            continue
        impact = activity.get("impact_score")
        impacts[category].append(DEFAULT_IMPACT_SCORE if impact is None else impact)
    return impacts


def count_by_category(activities: Iterable[Mapping]) -> CategoryCounts:
    """Count activities per category."""
    impacts = _partition(activities)
    return CategoryCounts(**{category.value: len(values) for category, values in impacts.items()})


def calculate_esg_score(activities: Iterable[Mapping]) -> int:
    """
    Compute the 0-100 ESG score.

    Each category contributes the mean impact score of its activities times
    its weight; a category with no activities contributes 0. The weighted sum
    is rounded half up and capped at 100; a sum past the float range scores 100.
    """
    activities = list(activities)
    if not activities:
        return 0

    impacts = _partition(activities)
    total = 0.0
    for category, weight in CATEGORY_WEIGHTS.items():
        values = impacts[category]
        if not values:
            continue
        try:
            mean = math.fsum(values) / len(values)
        except OverflowError:
            mean = math.inf
        total += mean * weight

    if not math.isfinite(total):
        logger.debug(f"ESG weighted sum overflowed for {len(activities)} activities, capping at {MAX_SCORE}")
        return MAX_SCORE

    score = min(math.floor(total + 0.5), MAX_SCORE)
    logger.debug(f"ESG score {score} from {len(activities)} activities (weighted sum {total:.3f})")
    return score
