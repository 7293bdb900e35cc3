"""Dashboard aggregation."""

from greenledger_api.dashboard.aggregator import DashboardAggregator, monthly_trend

__all__ = ["DashboardAggregator", "monthly_trend"]
