"""
Tests for the composition root: environment-driven wiring of the adapters.
"""
from unittest.mock import MagicMock

from social_loader.infrastructure import composition
from social_loader.infrastructure.composition import (
    build_load_use_case,
    default_client_factory,
    default_credential_provider,
)
from social_loader.infrastructure.secrets.env_credential_provider import (
    ChainedCredentialProvider,
    EnvironmentCredentialProvider,
)
from social_loader.infrastructure.secrets.secrets_manager_adapter import (
    SecretsManagerCredentialProvider,
)
from social_loader.infrastructure.supadata.http_client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    SupadataHttpClient,
)


class TestDefaultCredentialProvider:
    def test_environment_only_without_secret_arn(self, monkeypatch):
        monkeypatch.delenv("SUPADATA_SECRET_ARN", raising=False)
        assert isinstance(default_credential_provider(), EnvironmentCredentialProvider)

    def test_secret_arn_chains_environment_then_secrets_manager(self, monkeypatch):
        monkeypatch.setenv("SUPADATA_SECRET_ARN", "arn:aws:secretsmanager:secret")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        boto_client = MagicMock()
        boto_client.get_secret_value.return_value = {
            "SecretString": '{"SUPADATA_API_KEY": "sm-key"}'
        }
        monkeypatch.setattr(
            "social_loader.infrastructure.secrets.secrets_manager_adapter.boto3.client",
            lambda service, region_name=None: boto_client,
        )

        provider = default_credential_provider()

        assert isinstance(provider, ChainedCredentialProvider)
        first, second = provider._providers
        assert isinstance(first, EnvironmentCredentialProvider)
        assert isinstance(second, SecretsManagerCredentialProvider)

    def test_environment_wins_over_secret(self, monkeypatch):
        monkeypatch.setenv("SUPADATA_SECRET_ARN", "arn:aws:secretsmanager:secret")
        monkeypatch.setenv("SUPADATA_API_KEY", "env-key")
        boto_client = MagicMock()
        monkeypatch.setattr(
            "social_loader.infrastructure.secrets.secrets_manager_adapter.boto3.client",
            lambda service, region_name=None: boto_client,
        )

        assert default_credential_provider().get("SUPADATA_API_KEY") == "env-key"
        boto_client.get_secret_value.assert_not_called()

    def test_secret_used_when_environment_is_empty(self, monkeypatch):
        monkeypatch.setenv("SUPADATA_SECRET_ARN", "arn:aws:secretsmanager:secret")
        monkeypatch.delenv("SUPADATA_API_KEY", raising=False)
        boto_client = MagicMock()
        boto_client.get_secret_value.return_value = {
            "SecretString": '{"SUPADATA_API_KEY": "sm-key"}'
        }
        monkeypatch.setattr(
            "social_loader.infrastructure.secrets.secrets_manager_adapter.boto3.client",
            lambda service, region_name=None: boto_client,
        )

        assert default_credential_provider().get("SUPADATA_API_KEY") == "sm-key"


class TestDefaultClientFactory:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SUPADATA_BASE_URL", raising=False)
        monkeypatch.delenv("SUPADATA_TIMEOUT_SECONDS", raising=False)

        client = default_client_factory()("k")

        assert isinstance(client, SupadataHttpClient)
        assert client.base_url == DEFAULT_BASE_URL
        assert client.timeout == DEFAULT_TIMEOUT_SECONDS

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SUPADATA_BASE_URL", "https://proxy.example.test/v1/")
        monkeypatch.setenv("SUPADATA_TIMEOUT_SECONDS", "7.5")

        client = default_client_factory()("k")

        assert client.base_url == "https://proxy.example.test/v1"
        assert client.timeout == 7.5


def test_build_load_use_case_uses_defaults(monkeypatch):
    provider = MagicMock()
    factory = MagicMock()
    monkeypatch.setattr(composition, "default_credential_provider", lambda: provider)
    monkeypatch.setattr(composition, "default_client_factory", lambda: factory)

    use_case = build_load_use_case(api_key="k")

    assert use_case._credentials._provider is provider
    assert use_case._client_factory is factory
