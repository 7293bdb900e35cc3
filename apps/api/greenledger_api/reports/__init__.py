"""Report generation."""

from greenledger_api.reports.generator import ReportGenerator, seal_report

__all__ = ["ReportGenerator", "seal_report"]
