"""Run the report pipeline locally, outside Lambda.

Usage:
    python scripts/run_local.py --bucket reports --file-path /tmp/report.csv \
        --file-type csv --token-path /ghtool/token --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Sequence

from ghreport.core.exceptions import StageError
from ghreport.handler import handler

ENV_FLAGS = {
    "bucket": "GHTOOL_BUCKET_NAME",
    "file_path": "GHTOOL_FILE_PATH",
    "file_type": "GHTOOL_FILE_TYPE",
    "token_path": "GHTOOL_TOKEN_PATH",
    "executable": "GHTOOL_RUNNER_EXECUTABLE",
    "endpoint_url": "GHTOOL_AWS_ENDPOINT_URL",
    "region": "GHTOOL_AWS_REGION",
    "log_level": "GHTOOL_LOG_LEVEL",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the GitHub admin report job locally")
    parser.add_argument("--bucket")
    parser.add_argument("--file-path")
    parser.add_argument("--file-type", choices=["csv", "json"])
    parser.add_argument("--token-path")
    parser.add_argument("--executable")
    parser.add_argument("--endpoint-url")
    parser.add_argument("--region")
    parser.add_argument("--log-level")
    parser.add_argument(
        "--dry-run", action=argparse.BooleanOptionalAction, default=None,
        help="Skip the upload stage (default: GHTOOL_DRY_RUN, falling back to a dry run)",
    )
    return parser


def env_from_args(args: argparse.Namespace) -> dict[str, str]:
    """Translate CLI flags into the environment variables the job reads."""
    env: dict[str, str] = {}
    for attr, var in ENV_FLAGS.items():
        value = getattr(args, attr)
        if value is not None:
            env[var] = value
    if args.dry_run is not None:
        env["GHTOOL_DRY_RUN"] = str(args.dry_run).lower()
    return env


def main(argv: Sequence[str] | None = None, run: Callable = handler) -> int:
    args = build_parser().parse_args(argv)
    overrides = env_from_args(args)

    saved = {var: os.environ.get(var) for var in overrides}
    os.environ.update(overrides)
    try:
        result = run({}, None)
    except StageError as exc:
        print(f"Report job failed: {exc}", file=sys.stderr)
        return 1
    finally:
        for var, old in saved.items():
            if old is None:
                os.environ.pop(var, None)
            else:
                os.environ[var] = old

    print(f"Report job succeeded: {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
