"""Pluggable collaborator backends behind Protocol interfaces."""

from __future__ import annotations

from ghreport.backends.s3_backend import S3ArtifactUploader
from ghreport.backends.ssm_backend import SSMSecretResolver
from ghreport.backends.subprocess_executor import SubprocessExecutor
from ghreport.core.config import AppSettings


def create_backends(settings: AppSettings | None = None):
    """Create wired-up collaborators from application settings.

    Returns:
        Tuple of (secret_resolver, executor, uploader).
    """
    if settings is None:
        settings = AppSettings()

    resolver = SSMSecretResolver(
        region=settings.aws.region,
        endpoint_url=settings.aws.endpoint_url,
    )

    executor = SubprocessExecutor()

    uploader = S3ArtifactUploader(
        region=settings.aws.region,
        endpoint_url=settings.aws.endpoint_url,
    )

    return resolver, executor, uploader
