"""ghreport exception hierarchy."""

from __future__ import annotations

from ghreport.core.types import Stage
from ghreport.logging_config import redact


class ReportJobError(Exception):
    """Base exception for all ghreport errors."""


class ConfigurationError(ReportJobError):
    """Required configuration is missing or malformed."""


class SecretLookupError(ReportJobError):
    """Parameter store lookup failed."""


class ExecutionError(ReportJobError):
    """External executable failed to run or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None, output: bytes = b"") -> None:
        self.returncode = returncode
        self.output = output
        super().__init__(message)


class UploadError(ReportJobError):
    """Object upload to the bucket failed."""


class RetryExhaustedError(ReportJobError):
    """Every attempt allowed by a retry policy failed."""

    def __init__(self, attempts: int, last_error: BaseException) -> None:
        self.attempts = attempts
        self.last_error = last_error
        super().__init__(f"gave up after {attempts} attempt(s): {last_error}")


class StageError(ReportJobError):
    """A pipeline stage failed. Renders as ``"<stage> error: <cause>"``.

    Subclasses fix ``stage``; the base class takes it as an argument. Registered
    secrets are masked in the message.
    """

    stage: Stage

    def __init__(self, message: str, stage: Stage | None = None) -> None:
        if stage is not None:
            self.stage = stage
        elif not hasattr(self, "stage"):
            raise TypeError(f"{type(self).__name__} requires a stage")
        message = redact(message)
        self.message = message
        super().__init__(f"{self.stage} error: {message}")


class SetupError(StageError):
    stage = Stage.SETUP


class GenerateError(StageError):
    stage = Stage.GENERATE


class StoreError(StageError):
    stage = Stage.STORE
