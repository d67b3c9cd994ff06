"""Shared fixtures: isolate every test from ambient GHTOOL_* settings."""

from __future__ import annotations

import os

import pytest

from ghreport.logging_config import clear_secrets

LEGACY_VARS = {"BUCKET_NAME", "TOKEN_PATH"}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in list(os.environ):
        if var.startswith("GHTOOL_") or var in LEGACY_VARS:
            monkeypatch.delenv(var)
    yield
    clear_secrets()


@pytest.fixture
def report_env(monkeypatch, tmp_path):
    """A complete, valid non-dry-run configuration pointing at a real file."""
    report = tmp_path / "report.csv"
    report.write_text("repo,admins\nalpha,2\n")
    monkeypatch.setenv("GHTOOL_DRY_RUN", "false")
    monkeypatch.setenv("GHTOOL_BUCKET_NAME", "reports-bucket")
    monkeypatch.setenv("GHTOOL_FILE_PATH", str(report))
    monkeypatch.setenv("GHTOOL_FILE_TYPE", "csv")
    monkeypatch.setenv("GHTOOL_TOKEN_PATH", "/ghtool/token")
    return report
