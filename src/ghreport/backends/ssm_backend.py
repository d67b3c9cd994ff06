"""SSM Parameter Store backend implementing ISecretResolver."""

from __future__ import annotations

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ghreport.core.exceptions import SecretLookupError


class SSMSecretResolver:
    """Production ISecretResolver backed by SSM Parameter Store."""

    def __init__(self, region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("ssm", **kwargs)

    def resolve(self, name: str, decrypt: bool = True) -> str:
        if not name:
            raise SecretLookupError("parameter name is empty")
        try:
            resp = self._client.get_parameter(Name=name, WithDecryption=decrypt)
            return resp["Parameter"]["Value"]
        except (ClientError, BotoCoreError) as exc:
            raise SecretLookupError(f"SSM get_parameter failed for {name!r}: {exc}") from exc
