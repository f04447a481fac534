"""
Composition Root helpers shared by every entry point.

Wires the environment (and, when SUPADATA_SECRET_ARN is set, AWS Secrets
Manager) credential providers and the Supadata REST adapter into a
LoadSocialDocumentUseCase. Apart from EnvironmentCredentialProvider, environment
variables are read here and nowhere deeper in the stack.
"""

import os
from typing import Optional

from social_loader.application.services.credential_resolver import CredentialResolver
from social_loader.application.use_cases.load_social_document import (
    ClientFactory,
    LoadSocialDocumentUseCase,
)
from social_loader.domain.entities.document_record import LoaderConfig
from social_loader.domain.ports.credential_provider_port import ICredentialProvider
from social_loader.infrastructure.secrets.env_credential_provider import (
    ChainedCredentialProvider,
    EnvironmentCredentialProvider,
)
from social_loader.infrastructure.supadata.http_client import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    SupadataHttpClient,
)


def default_credential_provider() -> ICredentialProvider:
    env = EnvironmentCredentialProvider()
    secret_arn = os.environ.get("SUPADATA_SECRET_ARN")
    if not secret_arn:
        return env

    from social_loader.infrastructure.secrets.secrets_manager_adapter import (
        SecretsManagerCredentialProvider,
    )

    return ChainedCredentialProvider([env, SecretsManagerCredentialProvider(secret_arn)])


def default_client_factory() -> ClientFactory:
    base_url = os.environ.get("SUPADATA_BASE_URL", DEFAULT_BASE_URL)
    timeout = float(os.environ.get("SUPADATA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS))

    def factory(api_key: str) -> SupadataHttpClient:
        return SupadataHttpClient(api_key, base_url=base_url, timeout=timeout)

    return factory


def build_load_use_case(
    api_key: Optional[str] = None,
    credential_provider: Optional[ICredentialProvider] = None,
    client_factory: Optional[ClientFactory] = None,
) -> LoadSocialDocumentUseCase:
    """Build the loader use case, falling back to the default adapters."""
    resolver = CredentialResolver(
        LoaderConfig(api_key=api_key),
        credential_provider or default_credential_provider(),
    )
    return LoadSocialDocumentUseCase(resolver, client_factory or default_client_factory())
