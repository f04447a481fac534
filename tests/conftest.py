"""
Shared fakes for the loader ports.
"""
from typing import Any, Optional

import pytest

from social_loader.application.services.credential_resolver import CredentialResolver
from social_loader.application.use_cases.load_social_document import (
    LoadSocialDocumentUseCase,
)
from social_loader.domain.entities.document_record import LoaderConfig
from social_loader.domain.ports.credential_provider_port import ICredentialProvider
from social_loader.domain.ports.extraction_client_port import (
    IExtractionClient,
    MetadataCapability,
)


class FakeCredentialProvider(ICredentialProvider):
    def __init__(self, values: Optional[dict] = None):
        self.values = values or {}
        self.requested: list[str] = []

    def get(self, name: str) -> Optional[str]:
        self.requested.append(name)
        return self.values.get(name)


class FakeExtractionClient(IExtractionClient):
    """Records every call; responses are set per test."""

    def __init__(self, capabilities=(MetadataCapability.GENERIC_METADATA,)):
        self._capabilities = frozenset(capabilities)
        self.transcript_response: Any = {"content": "", "lang": "en"}
        self.metadata_response: Any = {}
        self.video_response: Any = {}
        self.calls: list[tuple[str, dict]] = []

    @property
    def capabilities(self):
        return self._capabilities

    def transcript(self, payload):
        self.calls.append(("transcript", payload))
        return self.transcript_response

    def metadata(self, payload):
        if MetadataCapability.GENERIC_METADATA not in self._capabilities:
            return super().metadata(payload)
        self.calls.append(("metadata", payload))
        return self.metadata_response

    def youtube_video(self, payload):
        if MetadataCapability.YOUTUBE_VIDEO not in self._capabilities:
            return super().youtube_video(payload)
        self.calls.append(("youtube_video", payload))
        return self.video_response


@pytest.fixture
def fake_client():
    return FakeExtractionClient()


@pytest.fixture
def client_keys():
    """API keys passed to the client factory, in call order."""
    return []


@pytest.fixture
def make_use_case(fake_client, client_keys):
    def _make(api_key="test-key", provider=None, client=None):
        chosen = client or fake_client

        def factory(key):
            client_keys.append(key)
            return chosen

        resolver = CredentialResolver(
            LoaderConfig(api_key=api_key), provider or FakeCredentialProvider()
        )
        return LoadSocialDocumentUseCase(resolver, factory)

    return _make
