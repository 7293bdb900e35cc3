"""Tests for CLI commands."""

import os
from unittest.mock import patch

from click.testing import CliRunner

from greenledger_api.cli import cli
from greenledger_api.storage import COMPANIES, ESG_ACTIVITIES, JSONCollectionStore


def test_init_data(tmp_path):
    """Test init-data creates the collection files."""
    data_dir = tmp_path / "data"
    result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "init-data"])

    assert result.exit_code == 0
    assert (data_dir / "users.json").exists()
    assert (data_dir / "reports.json").exists()


def test_seed_is_idempotent(tmp_path):
    """Test seeding twice creates one demo company."""
    data_dir = tmp_path / "data"
    runner = CliRunner()
    assert runner.invoke(cli, ["--data-dir", str(data_dir), "seed"]).exit_code == 0
    assert runner.invoke(cli, ["--data-dir", str(data_dir), "seed"]).exit_code == 0

    store = JSONCollectionStore(data_dir)
    assert len(store.read_all(COMPANIES)) == 1
    assert len(store.read_all(ESG_ACTIVITIES)) == 3


def test_verify_ledger(tmp_path):
    """Test verify-ledger exit codes."""
    data_dir = tmp_path / "data"
    runner = CliRunner()
    runner.invoke(cli, ["--data-dir", str(data_dir), "seed"])

    result = runner.invoke(cli, ["--data-dir", str(data_dir), "verify-ledger"])
    assert result.exit_code == 0
    assert "3 activities" in result.output

    store = JSONCollectionStore(data_dir)
    records = store.read_all(ESG_ACTIVITIES)
    records[2]["impact_score"] = 1
    store.write_all(ESG_ACTIVITIES, records)

    result = runner.invoke(cli, ["--data-dir", str(data_dir), "verify-ledger"])
    assert result.exit_code == 1
    assert "index 2" in result.output


def test_serve_builds_app_for_data_dir(tmp_path, monkeypatch):
    """Test serve hands uvicorn an app bound to --data-dir without touching the environment."""
    monkeypatch.delenv("DATA_DIR", raising=False)
    data_dir = tmp_path / "served"

    with patch("uvicorn.run") as run:
        result = CliRunner().invoke(cli, ["--data-dir", str(data_dir), "serve", "--port", "8123"])

    assert result.exit_code == 0
    app = run.call_args.args[0]
    assert app.state.store.data_dir == data_dir
    assert run.call_args.kwargs["port"] == 8123
    assert "DATA_DIR" not in os.environ
