"""Tests for the local runner script."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from ghreport.core.exceptions import StoreError

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from run_local import env_from_args, build_parser, main  # noqa: E402


class TestEnvFromArgs:
    def test_maps_flags_to_env(self):
        args = build_parser().parse_args([
            "--bucket", "reports-bucket", "--file-path", "/tmp/report.csv",
            "--file-type", "csv", "--token-path", "/ghtool/token", "--no-dry-run",
        ])
        assert env_from_args(args) == {
            "GHTOOL_BUCKET_NAME": "reports-bucket",
            "GHTOOL_FILE_PATH": "/tmp/report.csv",
            "GHTOOL_FILE_TYPE": "csv",
            "GHTOOL_TOKEN_PATH": "/ghtool/token",
            "GHTOOL_DRY_RUN": "false",
        }

    def test_dry_run_omitted_leaves_env_alone(self):
        args = build_parser().parse_args([])
        assert env_from_args(args) == {}


class TestMain:
    def test_success_restores_environment(self, capsys):
        seen = {}

        def run(event, context):
            seen.update({k: v for k, v in os.environ.items() if k.startswith("GHTOOL_")})
            return {"ok": True}

        assert main(["--bucket", "b", "--dry-run"], run=run) == 0
        assert seen == {"GHTOOL_BUCKET_NAME": "b", "GHTOOL_DRY_RUN": "true"}
        assert "GHTOOL_BUCKET_NAME" not in os.environ
        assert "succeeded" in capsys.readouterr().out

    def test_stage_error_exit_code(self, capsys):
        def run(event, context):
            raise StoreError("failed to upload file, denied")

        assert main(["--bucket", "b"], run=run) == 1
        assert "store error: failed to upload file, denied" in capsys.readouterr().err
