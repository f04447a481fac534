"""
Infrastructure adapter: AWS Secrets Manager → ICredentialProvider.

The secret is a JSON object whose keys are credential names, e.g.
``{"SUPADATA_API_KEY": "..."}``. It is fetched on first use and kept for the
lifetime of the provider; build a new provider to pick up a rotated secret.
A secret that cannot be fetched or parsed raises ConfigurationError.
"""

import json
import logging
import os
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from social_loader.domain.errors import ConfigurationError
from social_loader.domain.ports.credential_provider_port import ICredentialProvider

logger = logging.getLogger(__name__)


class SecretsManagerCredentialProvider(ICredentialProvider):
    """Fetches and deserializes a JSON secret from AWS Secrets Manager."""

    def __init__(
        self,
        secret_arn: str,
        region: str | None = None,
        client: Any = None,
    ) -> None:
        self._secret_arn = secret_arn
        self._client = client or boto3.client(
            "secretsmanager",
            region_name=region or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
        )
        self._secrets: dict | None = None

    def get_secret(self) -> dict:
        """Fetch and deserialize the JSON secret. Returns the key-value pairs.

        Raises:
            ConfigurationError: the secret is unreachable, has no SecretString,
                                or is not a JSON object.
        """
        if self._secrets is None:
            logger.info("Fetching credentials from Secrets Manager")
            try:
                response = self._client.get_secret_value(SecretId=self._secret_arn)
                secrets = json.loads(response["SecretString"])
            except (BotoCoreError, ClientError, KeyError, json.JSONDecodeError) as exc:
                raise ConfigurationError(
                    f"Could not read credentials from secret {self._secret_arn!r}: {exc}"
                ) from exc
            if not isinstance(secrets, dict):
                raise ConfigurationError(
                    f"Secret {self._secret_arn!r} must be a JSON object."
                )
            self._secrets = secrets
        return self._secrets

    def get(self, name: str) -> Optional[str]:
        value = self.get_secret().get(name)
        return str(value) if value else None
