"""
Infrastructure adapter: Supadata REST API (httpx) → IExtractionClient.

All Supadata endpoint paths, auth headers and status-code handling are
confined here. HTTP failures surface as httpx.HTTPStatusError via
raise_for_status() and are not wrapped; the loader passes them through.

Endpoints:
  GET /transcript       200 → {content, lang, availableLangs}, 202 → {jobId}
  GET /metadata         any JSON
  GET /youtube/video    any JSON (the video URL is sent as ``id``)
"""

import logging
from typing import Any, Iterable, Optional

import httpx

from social_loader.domain.ports.extraction_client_port import (
    IExtractionClient,
    MetadataCapability,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.supadata.ai/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0


class SupadataHttpClient(IExtractionClient):
    """Calls the Supadata REST API with a single API key."""

    USER_AGENT = "social-loader/0.1"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        capabilities: Optional[Iterable[MetadataCapability]] = None,
    ) -> None:
        """
        Args:
            api_key:      Supadata API key, sent as the ``x-api-key`` header.
            base_url:     API root, without trailing slash.
            timeout:      Per-request timeout in seconds.
            capabilities: Metadata operations to advertise. Defaults to both
                          generic metadata and YouTube video info.
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._capabilities = frozenset(
            capabilities
            if capabilities is not None
            else (MetadataCapability.GENERIC_METADATA, MetadataCapability.YOUTUBE_VIDEO)
        ) - {MetadataCapability.NONE}

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def capabilities(self) -> frozenset[MetadataCapability]:
        return self._capabilities

    def transcript(self, payload: dict[str, Any]) -> dict[str, Any]:
        response = self._get("/transcript", payload)
        body = response.json()
        if response.status_code == 202:
            logger.info("Supadata queued transcript job %s", body.get("jobId"))
        return body

    def metadata(self, payload: dict[str, Any]) -> Any:
        if MetadataCapability.GENERIC_METADATA not in self._capabilities:
            return super().metadata(payload)
        return self._get("/metadata", payload).json()

    def youtube_video(self, payload: dict[str, Any]) -> Any:
        if MetadataCapability.YOUTUBE_VIDEO not in self._capabilities:
            return super().youtube_video(payload)
        params = dict(payload)
        params["id"] = params.pop("url")
        return self._get("/youtube/video", params).json()

    def _get(self, path: str, params: dict[str, Any]) -> httpx.Response:
        logger.info("GET %s%s url=%s", self._base_url, path, params.get("url") or params.get("id"))
        response = httpx.get(
            f"{self._base_url}{path}",
            params=_to_query_params(params),
            headers={
                "x-api-key": self._api_key,
                "accept": "application/json",
                "user-agent": self.USER_AGENT,
            },
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response


def _to_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Drop unset values and render booleans the way the API expects."""
    query: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        query[key] = value
    return query
