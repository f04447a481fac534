"""
Port (interface) for credential providers.
Infrastructure adapters (e.g. EnvironmentCredentialProvider,
SecretsManagerCredentialProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ICredentialProvider(ABC):
    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Return the value stored under *name*, or None when it is not set."""
        ...
