"""Unit tests for SSMSecretResolver using moto."""

from __future__ import annotations

import boto3
import pytest
from moto import mock_aws

from ghreport.backends.ssm_backend import SSMSecretResolver
from ghreport.core.exceptions import SecretLookupError
from ghreport.core.protocols import ISecretResolver

REGION = "us-east-1"


@pytest.fixture
def ssm():
    with mock_aws():
        client = boto3.client("ssm", region_name=REGION)
        client.put_parameter(Name="/ghtool/token", Value="ghp_s3cr3t", Type="SecureString")
        client.put_parameter(Name="/ghtool/plain", Value="not-secret", Type="String")
        yield SSMSecretResolver(region=REGION)


def test_satisfies_protocol(ssm):
    assert isinstance(ssm, ISecretResolver)


class TestResolve:
    def test_decrypts_secure_string(self, ssm):
        assert ssm.resolve("/ghtool/token", decrypt=True) == "ghp_s3cr3t"

    def test_plain_string(self, ssm):
        assert ssm.resolve("/ghtool/plain") == "not-secret"

    def test_missing_parameter_raises(self, ssm):
        with pytest.raises(SecretLookupError, match="/ghtool/missing"):
            ssm.resolve("/ghtool/missing")

    def test_empty_name_raises_without_calling_ssm(self, ssm):
        with pytest.raises(SecretLookupError, match="empty"):
            ssm.resolve("")
