"""
Infrastructure adapter: process environment → ICredentialProvider.

Entry points call python-dotenv's load_dotenv() before building this
provider, so values from a local .env file are visible here as well.
"""

import os
from typing import Mapping, Optional

from social_loader.domain.ports.credential_provider_port import ICredentialProvider


class EnvironmentCredentialProvider(ICredentialProvider):
    """Reads credentials from environment variables at call time."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get(self, name: str) -> Optional[str]:
        value = self._environ.get(name)
        return value or None


class ChainedCredentialProvider(ICredentialProvider):
    """Returns the first non-empty value among several providers."""

    def __init__(self, providers: list[ICredentialProvider]) -> None:
        self._providers = providers

    def get(self, name: str) -> Optional[str]:
        for provider in self._providers:
            value = provider.get(name)
            if value:
                return value
        return None
