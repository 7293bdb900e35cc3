"""Green Ledger - hash-chained ESG activity ledger and compliance reporting."""

__version__ = "0.1.0"
