"""S3 backend implementing IArtifactUploader."""

from __future__ import annotations

from typing import BinaryIO

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from ghreport.core.exceptions import UploadError


class S3ArtifactUploader:
    """Production IArtifactUploader backed by S3 managed transfers."""

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def upload(
        self, bucket: str, key: str, body: BinaryIO, content_type: str | None = None
    ) -> str:
        extra = {"ContentType": content_type} if content_type else None
        try:
            self._client.upload_fileobj(body, bucket, key, ExtraArgs=extra)
        except (ClientError, BotoCoreError, S3UploadFailedError) as exc:
            raise UploadError(f"S3 upload failed for s3://{bucket}/{key}: {exc}") from exc
        return f"s3://{bucket}/{key}"
