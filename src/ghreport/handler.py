"""AWS Lambda entrypoint for the report job."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ghreport.backends import create_backends
from ghreport.core.config import AppSettings
from ghreport.core.exceptions import SetupError, StageError
from ghreport.logging_config import clear_secrets, configure_logging
from ghreport.pipeline.orchestrator import ReportPipeline

logger = logging.getLogger(__name__)


def build_pipeline(settings: AppSettings) -> ReportPipeline:
    """Wire a fresh pipeline with the real AWS and subprocess collaborators."""
    resolver, executor, uploader = create_backends(settings)
    return ReportPipeline(
        settings=settings,
        secret_resolver=resolver,
        executor=executor,
        uploader=uploader,
    )


def handler(event: Any, context: Any) -> dict[str, Any]:
    """Run one report invocation. Stage failures are logged and re-raised."""
    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise SetupError(f"invalid job settings: {exc}") from exc
    configure_logging(settings.log_level)

    pipeline = build_pipeline(settings)
    try:
        result = pipeline.run()
    except StageError as exc:
        logger.error("%s", exc)
        raise
    finally:
        clear_secrets()

    return {
        "ok": True,
        "dry_run": result.dry_run,
        "attempts": result.attempts,
        "location": result.upload.location if result.upload else None,
    }
