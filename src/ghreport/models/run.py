"""Invocation-scoped run, execution and upload models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, SecretStr

from ghreport.core.config import ReportConfig


class ExecutionResult(BaseModel):
    """Outcome of one run of the external executable."""

    output: bytes = b""
    returncode: int = 0

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


class UploadResult(BaseModel):
    """Where the report ended up."""

    bucket: str
    key: str
    location: str


class PreparedRun(BaseModel):
    """Output of the setup stage: validated configuration plus the resolved token."""

    config: ReportConfig
    token: SecretStr


class RunResult(BaseModel):
    """Summary of a completed invocation."""

    dry_run: bool
    attempts: int
    stored: bool = False
    upload: Optional[UploadResult] = None
