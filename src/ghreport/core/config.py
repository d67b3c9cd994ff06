"""Job configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

from ghreport.core.types import FileType

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_dry_run(value: Any) -> bool:
    """Parse a dry-run flag, treating anything unrecognised as a dry run."""
    if isinstance(value, bool):
        return value
    text = str(value) if value is not None else ""
    if text in _FALSE_LITERALS:
        return False
    if text in _TRUE_LITERALS:
        return True
    return True  # safe fallback


class ReportConfig(BaseSettings):
    """Per-invocation report configuration, validated before any external call."""

    model_config = {"env_prefix": "GHTOOL_", "validate_default": True}

    dry_run: bool = True
    bucket_name: str = Field(default="", validation_alias=AliasChoices("GHTOOL_BUCKET_NAME", "BUCKET_NAME"))
    file_path: str = ""
    file_type: FileType = Field(default="")  # type: ignore[assignment]
    token_path: str = Field(default="", validation_alias=AliasChoices("GHTOOL_TOKEN_PATH", "TOKEN_PATH"))

    @field_validator("dry_run", mode="before")
    @classmethod
    def _dry_run_fallback(cls, value: Any) -> bool:
        return parse_dry_run(value)

    @field_validator("bucket_name")
    @classmethod
    def _bucket_set(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("bucket name not set")
        return value

    @field_validator("file_path")
    @classmethod
    def _file_path_set(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("file path not set")
        return value

    @field_validator("file_type", mode="before")
    @classmethod
    def _file_type_allowed(cls, value: Any) -> FileType:
        try:
            return FileType(value)
        except ValueError:
            raise ValueError("file type not set to csv or json") from None

    @field_validator("token_path")
    @classmethod
    def _token_path_set(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("token path not set")
        return value


class RunnerConfig(BaseSettings):
    """External report executable configuration."""

    model_config = {"env_prefix": "GHTOOL_RUNNER_"}

    executable: str = "/github-admin-tool"
    subcommand: str = "report"
    max_attempts: int = Field(default=4, ge=1)
    retry_delay: float = Field(default=0.0, ge=0.0)
    timeout: float | None = None  # None defers to the Lambda invocation timeout
    token_env_var: str = "GHTOOL_TOKEN"


class StoreConfig(BaseSettings):
    """Object naming for uploaded reports."""

    model_config = {"env_prefix": "GHTOOL_STORE_"}

    key_prefix: str = ""
    timestamped: bool = True


class AWSConfig(BaseSettings):
    """AWS client configuration shared by SSM and S3."""

    model_config = {"env_prefix": "GHTOOL_AWS_"}

    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class AppSettings(BaseSettings):
    """Root job settings aggregating the sub-configs that have safe defaults.

    ``ReportConfig`` is not nested here; the setup stage loads it per run.
    """

    model_config = {"env_prefix": "GHTOOL_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    aws: AWSConfig = Field(default_factory=AWSConfig)
