"""Prometheus metrics."""

from prometheus_client import Counter, Histogram

# Request metrics
request_duration = Histogram(
    "greenledger_request_duration_seconds",
    "HTTP request duration",
    ["method", "status"],
)

# Ledger metrics
activities_appended = Counter(
    "greenledger_activities_appended_total",
    "Total ESG activities appended to the ledger",
    ["category"],
)

ledger_verification_failures = Counter(
    "greenledger_ledger_verification_failures_total",
    "Ledger verifications that found a broken chain",
)

# Report metrics
reports_generated = Counter(
    "greenledger_reports_generated_total",
    "Total ESG reports generated",
    ["framework"],
)
