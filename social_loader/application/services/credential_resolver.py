"""
Application service: resolve the extraction service API key.

An explicit key on the LoaderConfig wins; otherwise the injected
ICredentialProvider is asked for SUPADATA_API_KEY. Nothing is cached, so a
key rotated in the provider is picked up on the next call.
"""

from social_loader.domain.entities.document_record import LoaderConfig
from social_loader.domain.errors import ConfigurationError
from social_loader.domain.ports.credential_provider_port import ICredentialProvider

API_KEY_ENV_VAR = "SUPADATA_API_KEY"


class CredentialResolver:
    def __init__(self, config: LoaderConfig, provider: ICredentialProvider) -> None:
        self._config = config
        self._provider = provider

    def resolve(self) -> str:
        """Return the API key to use for the next remote call.

        Raises:
            ConfigurationError: if neither the config nor the provider has a key.
        """
        if self._config.api_key:
            return self._config.api_key

        key = self._provider.get(API_KEY_ENV_VAR)
        if not key:
            raise ConfigurationError(
                "Supadata API key not found. Pass `api_key` to the loader "
                f"or set the {API_KEY_ENV_VAR} environment variable."
            )
        return key
