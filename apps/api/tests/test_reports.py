"""Tests for sealed report generation."""

import pytest

from greenledger_api.errors import NotFoundError
from greenledger_api.ledger import LedgerService
from greenledger_api.reports import ReportGenerator, seal_report
from greenledger_api.schemas import ActivityCreate
from greenledger_api.storage import ESG_ACTIVITIES, REPORTS, JSONCollectionStore


def _append(store, company_id, category, **fields):
    return LedgerService(store).append(ActivityCreate(company_id=company_id, category=category, **fields))


def test_generate_report_defaults(store: JSONCollectionStore, company: dict):
    """Test framework and period default to GRI / 2024."""
    _append(store, company["id"], "environmental", impact_score=10)
    _append(store, company["id"], "social", impact_score=10)
    _append(store, company["id"], "governance", impact_score=10)

    report = ReportGenerator(store).generate(company["id"])

    assert report.framework == "GRI"
    assert report.period == "2024"
    assert report.company_id == company["id"]
    assert report.company_name == "Test Mills"
    assert report.esg_score == 10
    assert report.total_activities == 3
    assert report.activities_by_category.model_dump() == {
        "environmental": 1,
        "social": 1,
        "governance": 1,
    }
    assert len(report.hash) == 64


def test_empty_framework_and_period_kept(store: JSONCollectionStore, company: dict):
    """Test only missing options fall back to the defaults."""
    report = ReportGenerator(store).generate(company["id"], framework="", period="")

    assert report.framework == ""
    assert report.period == ""
    assert report.hash == seal_report(company["id"], "", "", [])


def test_report_covers_only_company_activities(store: JSONCollectionStore, company: dict):
    """Test another company's activities are excluded from the snapshot."""
    mine = _append(store, company["id"], "environmental")
    _append(store, "someone-else", "social", impact_score=100)

    report = ReportGenerator(store).generate(company["id"], framework="SASB", period="2025-Q1")

    assert report.framework == "SASB"
    assert report.period == "2025-Q1"
    assert report.total_activities == 1
    assert report.activity_ids == [mine["id"]]
    assert report.hash == seal_report(company["id"], "SASB", "2025-Q1", [mine])


def test_report_hash_changes_after_new_activity(store: JSONCollectionStore, company: dict):
    """Test regenerating after an append yields a different seal."""
    generator = ReportGenerator(store)
    _append(store, company["id"], "social")
    first = generator.generate(company["id"], framework="GRI", period="2024")

    _append(store, company["id"], "governance")
    second = generator.generate(company["id"], framework="GRI", period="2024")

    assert first.hash != second.hash
    assert first.id != second.id


def test_report_hash_depends_on_framework_and_period(store: JSONCollectionStore, company: dict):
    """Test framework and period are bound into the seal."""
    generator = ReportGenerator(store)
    _append(store, company["id"], "social")

    gri = generator.generate(company["id"], framework="GRI", period="2024")
    tcfd = generator.generate(company["id"], framework="TCFD", period="2024")
    gri_2025 = generator.generate(company["id"], framework="GRI", period="2025")

    assert len({gri.hash, tcfd.hash, gri_2025.hash}) == 3


def test_reports_append_only(store: JSONCollectionStore, company: dict):
    """Test generation appends and never rewrites earlier reports."""
    generator = ReportGenerator(store)
    first = generator.generate(company["id"])
    before = store.read_all(REPORTS)[0]

    _append(store, company["id"], "environmental")
    generator.generate(company["id"])

    stored = store.read_all(REPORTS)
    assert len(stored) == 2
    assert stored[0] == before
    assert stored[0]["id"] == first.id


def test_generate_unknown_company(store: JSONCollectionStore):
    """Test generation fails for an unknown company."""
    with pytest.raises(NotFoundError):
        ReportGenerator(store).generate("missing")
    assert store.read_all(REPORTS) == []


def test_empty_company_report(store: JSONCollectionStore, company: dict):
    """Test a company with no activities scores 0."""
    report = ReportGenerator(store).generate(company["id"])
    assert report.esg_score == 0
    assert report.total_activities == 0
    assert report.activity_ids == []


def test_list_and_get_reports(store: JSONCollectionStore, company: dict):
    """Test reports are listed newest first and fetched by id."""
    generator = ReportGenerator(store)
    first = generator.generate(company["id"], period="2023")
    second = generator.generate(company["id"], period="2024")

    assert [r.id for r in generator.list_reports()] == [second.id, first.id]
    assert generator.list_reports("other") == []
    assert generator.get_report(first.id).period == "2023"

    with pytest.raises(NotFoundError):
        generator.get_report("missing")


class TestReportVerification:
    """Test report seals against the ledger."""

    def test_fresh_report_is_valid_and_current(self, store: JSONCollectionStore, company: dict):
        """Test a report verifies right after generation."""
        _append(store, company["id"], "environmental")
        report = ReportGenerator(store).generate(company["id"])

        result = ReportGenerator(store).verify(report.id)
        assert result.valid
        assert result.current
        assert result.actual_hash == result.expected_hash == report.hash

    def test_new_activity_makes_report_stale(self, store: JSONCollectionStore, company: dict):
        """Test a later append keeps the seal valid but not current."""
        _append(store, company["id"], "environmental")
        report = ReportGenerator(store).generate(company["id"])
        _append(store, company["id"], "social")

        result = ReportGenerator(store).verify(report.id)
        assert result.valid
        assert not result.current

    def test_altered_activity_invalidates_report(self, store: JSONCollectionStore, company: dict):
        """Test editing a sealed activity breaks the seal."""
        _append(store, company["id"], "environmental", impact_score=2)
        report = ReportGenerator(store).generate(company["id"])

        records = store.read_all(ESG_ACTIVITIES)
        records[0]["impact_score"] = 10
        store.write_all(ESG_ACTIVITIES, records)

        result = ReportGenerator(store).verify(report.id)
        assert not result.valid
        assert not result.current
        assert result.actual_hash != report.hash

    def test_verify_unknown_report(self, store: JSONCollectionStore):
        """Test verifying a missing report."""
        with pytest.raises(NotFoundError):
            ReportGenerator(store).verify("missing")
