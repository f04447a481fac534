"""
Port (interface) for the transcript/metadata extraction service.
Infrastructure adapters (e.g. SupadataHttpClient) must implement this interface.

Metadata support differs between service versions, so each client advertises
the metadata operations it can serve through ``capabilities`` instead of
callers probing for methods.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from social_loader.domain.errors import UnsupportedOperationError


class MetadataCapability(str, Enum):
    GENERIC_METADATA = "generic_metadata"
    YOUTUBE_VIDEO = "youtube_video"
    NONE = "none"


class IExtractionClient(ABC):
    @property
    @abstractmethod
    def capabilities(self) -> frozenset[MetadataCapability]:
        """Metadata operations this client can serve."""
        ...

    @abstractmethod
    def transcript(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Fetch a transcript.

        Returns either ``{"content": str, "lang": str, ...}`` or, when the
        service queued an asynchronous job, ``{"jobId": str}``.
        """
        ...

    def metadata(self, payload: dict[str, Any]) -> Any:
        """Fetch platform-agnostic metadata. Opaque JSON value."""
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not provide generic metadata."
        )

    def youtube_video(self, payload: dict[str, Any]) -> Any:
        """Fetch YouTube video info. Opaque JSON value."""
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not provide YouTube video info."
        )
