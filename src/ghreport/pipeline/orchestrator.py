"""Report pipeline: setup -> generate (retried) -> store.

Every stage failure is re-raised as a stage-qualified ``StageError``
(``SetupError``, ``GenerateError``, ``StoreError``) chained to its cause.
Only generate is retried; setup and store failures are treated as
non-transient.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Callable

from pydantic import SecretStr, ValidationError

from ghreport.core.config import AppSettings, ReportConfig, StoreConfig
from ghreport.core.exceptions import (
    ExecutionError,
    GenerateError,
    RetryExhaustedError,
    SetupError,
    StoreError,
)
from ghreport.core.protocols import IArtifactUploader, IProcessExecutor, ISecretResolver
from ghreport.core.retry import RetryPolicy
from ghreport.core.types import CONTENT_TYPES, ObjectKey
from ghreport.logging_config import register_secret
from ghreport.models.run import ExecutionResult, PreparedRun, RunResult, UploadResult

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_report_args(config: ReportConfig, subcommand: str = "report") -> list[str]:
    """Argument vector handed to the report executable."""
    return [
        subcommand,
        f"--dry-run={str(config.dry_run).lower()}",
        f"--file-path={config.file_path}",
        f"--file-type={config.file_type}",
    ]


def build_object_key(config: ReportConfig, store: StoreConfig, now: datetime) -> ObjectKey:
    """Object key for the uploaded report, e.g. ``20261019T120000Z/report.csv``."""
    name = f"{PurePath(config.file_path).stem}.{config.file_type}"
    if store.timestamped:
        stamp = now.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        name = f"{stamp}/{name}"
    return f"{store.key_prefix}{name}"


def _describe_validation_error(exc: ValidationError) -> str:
    problems = []
    for err in exc.errors():
        msg = err["msg"].removeprefix("Value error, ")
        problems.append(msg)
    return "; ".join(problems)


class ReportPipeline:
    """Sequential report job for a single invocation.

    Collaborators are injected at construction time; nothing here is shared
    between invocations.
    """

    def __init__(
        self,
        *,
        settings: AppSettings,
        secret_resolver: ISecretResolver,
        executor: IProcessExecutor,
        uploader: IArtifactUploader,
        retry_policy: RetryPolicy | None = None,
        clock: Callable[[], datetime] = _utcnow,
        config_loader: Callable[[], ReportConfig] = ReportConfig,
    ) -> None:
        self._settings = settings
        self._resolver = secret_resolver
        self._executor = executor
        self._uploader = uploader
        self._retry = retry_policy or RetryPolicy(
            max_attempts=settings.runner.max_attempts,
            delay=settings.runner.retry_delay,
            retry_on=(ExecutionError,),
        )
        self._clock = clock
        self._config_loader = config_loader

    # ---- stages ----

    def setup(self) -> PreparedRun:
        """Validate configuration, then resolve the token. Nothing external runs before validation."""
        try:
            config = self._config_loader()
        except ValidationError as exc:
            raise SetupError(_describe_validation_error(exc)) from exc

        try:
            token = self._resolver.resolve(config.token_path, decrypt=True)
        except Exception as exc:
            raise SetupError(f"get SSM param failed {exc}") from exc

        register_secret(token)
        logger.info(
            "Configured report: bucket=%s file=%s type=%s dry_run=%s",
            config.bucket_name, config.file_path, config.file_type, config.dry_run,
        )
        return PreparedRun(config=config, token=SecretStr(token))

    def generate(self, prepared: PreparedRun) -> int:
        """Run the report executable, retrying per policy. Returns the attempts used."""
        runner = self._settings.runner
        args = build_report_args(prepared.config, runner.subcommand)

        def attempt() -> ExecutionResult:
            return self._executor.run(
                runner.executable,
                args,
                env={runner.token_env_var: prepared.token.get_secret_value()},
                timeout=runner.timeout,
            )

        try:
            attempts, result = self._retry.call(attempt)
        except RetryExhaustedError as exc:
            last = exc.last_error
            output = getattr(last, "output", b"") or b""
            raise GenerateError(
                f"failed to run after {exc.attempts} attempt(s), got: {last}, "
                f"output: {output.decode('utf-8', errors='replace')}"
            ) from last
        except Exception as exc:
            raise GenerateError(f"failed to run, got: {exc}") from exc

        logger.info("Output was %s", result.output.decode("utf-8", errors="replace"))
        return attempts

    def store(self, prepared: PreparedRun) -> UploadResult:
        """Upload the generated file to the configured bucket."""
        config = prepared.config
        key = build_object_key(config, self._settings.store, self._clock())

        try:
            fh = open(config.file_path, "rb")
        except OSError as exc:
            raise StoreError(f"failed to open file {config.file_path!r}, {exc}") from exc

        with fh:
            try:
                location = self._uploader.upload(
                    config.bucket_name, key, fh, content_type=CONTENT_TYPES[config.file_type],
                )
            except Exception as exc:
                raise StoreError(f"failed to upload file, {exc}") from exc

        logger.info("file uploaded to %s", location)
        return UploadResult(bucket=config.bucket_name, key=key, location=location)

    # ---- entrypoint ----

    def run(self) -> RunResult:
        prepared = self.setup()
        attempts = self.generate(prepared)

        if prepared.config.dry_run:
            logger.info("Dry run: skipping upload of %s", prepared.config.file_path)
            return RunResult(dry_run=True, attempts=attempts)

        upload = self.store(prepared)
        return RunResult(dry_run=False, attempts=attempts, stored=True, upload=upload)
