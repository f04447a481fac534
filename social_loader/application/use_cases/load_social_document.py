"""
Use-case: load one social media URL as a DocumentRecord.
Depends only on Domain ports and entities, no infrastructure imports.

Flow for every call:
  validate URL → classify platform → coerce operation → resolve API key
  → build a client for that key → transcript or metadata path → one record.

Any failure aborts the call; errors raised by the extraction client are
propagated unchanged.
"""

import json
import logging
from typing import Any, Callable, Optional

from social_loader.application.services.credential_resolver import CredentialResolver
from social_loader.domain.entities.document_record import (
    DocumentRecord,
    LoadRequest,
    Operation,
    SupadataOperation,
    TranscriptMode,
)
from social_loader.domain.entities.platform import (
    SUPPORTED_PLATFORMS_LABEL,
    Platform,
    classify_url,
)
from social_loader.domain.errors import UnsupportedOperationError, ValidationError
from social_loader.domain.ports.document_loader_port import IDocumentLoader
from social_loader.domain.ports.extraction_client_port import (
    IExtractionClient,
    MetadataCapability,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], IExtractionClient]


class LoadSocialDocumentUseCase(IDocumentLoader):
    def __init__(
        self,
        credentials: CredentialResolver,
        client_factory: ClientFactory,
    ) -> None:
        """
        Args:
            credentials:    Resolves the API key before every remote call.
            client_factory: Builds an IExtractionClient scoped to an API key
                            (e.g. SupadataHttpClient).
        """
        self._credentials = credentials
        self._client_factory = client_factory

    def load(self, request: LoadRequest) -> list[DocumentRecord]:
        """Load *request.url* and return exactly one DocumentRecord.

        Raises:
            ValidationError:           empty URL, unsupported platform,
                                       unknown operation or transcript mode.
            ConfigurationError:        no API key could be resolved.
            UnsupportedOperationError: metadata requested but the client
                                       cannot serve it for this URL.
            Any exception raised by the extraction client, unchanged.
        """
        if not request.url or not request.url.strip():
            raise ValidationError("`url` is required.")

        classification = classify_url(request.url)
        if not classification.supported:
            raise ValidationError(
                "Only social media video/post URLs are supported "
                f"({SUPPORTED_PLATFORMS_LABEL}). Got: {request.url!r}"
            )

        operation = _coerce_operation(request.operation)
        mode = _coerce_mode(request.mode) if operation is Operation.TRANSCRIPT else None

        api_key = self._credentials.resolve()
        client = self._client_factory(api_key)
        logger.debug(
            "Dispatching %s for %s (platform=%s)",
            operation.value,
            request.url,
            classification.platform.value,
        )

        if operation is Operation.TRANSCRIPT:
            return [self._load_transcript(client, request, mode)]
        return [self._load_metadata(client, request, classification.platform)]

    # ------------------------------------------------------------------
    # Transcript path
    # ------------------------------------------------------------------

    def _load_transcript(
        self,
        client: IExtractionClient,
        request: LoadRequest,
        mode: Optional[TranscriptMode],
    ) -> DocumentRecord:
        payload: dict[str, Any] = {
            "url": request.url,
            "text": request.text,
            **request.extra_params,
        }
        if request.lang:
            payload["lang"] = request.lang
        if mode is not None:
            payload["mode"] = mode.value

        result = client.transcript(payload) or {}

        job_id = result.get("jobId")
        if job_id:
            logger.warning(
                "Transcript for %s is still processing (job %s)", request.url, job_id
            )
            return DocumentRecord(
                page_content=f"Transcript processing. Job ID: {job_id}",
                metadata={
                    "source": request.url,
                    "supadataOperation": SupadataOperation.TRANSCRIPT_JOB.value,
                    "jobId": job_id,
                },
            )

        content = result.get("content")
        metadata: dict[str, Any] = {
            "source": request.url,
            "supadataOperation": SupadataOperation.TRANSCRIPT.value,
            "lang": result.get("lang") or request.lang,
        }
        if isinstance(content, list):
            # text=False returns timestamped segments instead of plain text
            metadata["chunks"] = content
            content = " ".join(
                str(segment.get("text", "")).strip()
                for segment in content
                if isinstance(segment, dict) and segment.get("text")
            )

        return DocumentRecord(page_content=content or "", metadata=metadata)

    # ------------------------------------------------------------------
    # Metadata path
    # ------------------------------------------------------------------

    def _load_metadata(
        self,
        client: IExtractionClient,
        request: LoadRequest,
        platform: Platform,
    ) -> DocumentRecord:
        payload: dict[str, Any] = {"url": request.url, **request.extra_params}

        capability = resolve_metadata_capability(client.capabilities, platform)
        logger.debug("Metadata capability for %s: %s", request.url, capability.value)

        if capability is MetadataCapability.GENERIC_METADATA:
            result = client.metadata(payload)
        elif capability is MetadataCapability.YOUTUBE_VIDEO:
            result = client.youtube_video(payload)
        else:
            raise UnsupportedOperationError(
                "The extraction client does not expose a metadata operation "
                f"for {request.url!r}. Upgrade the client or use a YouTube URL."
            )

        return DocumentRecord(
            page_content=json.dumps(result, indent=2, ensure_ascii=False),
            metadata={
                "source": request.url,
                "supadataOperation": SupadataOperation.METADATA.value,
            },
        )


def resolve_metadata_capability(
    capabilities: frozenset[MetadataCapability],
    platform: Optional[Platform],
) -> MetadataCapability:
    """Pick the metadata operation to call, preferring the generic endpoint."""
    if MetadataCapability.GENERIC_METADATA in capabilities:
        return MetadataCapability.GENERIC_METADATA
    if platform is Platform.YOUTUBE and MetadataCapability.YOUTUBE_VIDEO in capabilities:
        return MetadataCapability.YOUTUBE_VIDEO
    return MetadataCapability.NONE


def _coerce_operation(value: Operation | str | None) -> Operation:
    if value is None:
        return Operation.TRANSCRIPT
    try:
        return Operation(value)
    except ValueError as exc:
        raise ValidationError(
            f'Unsupported operation "{value}". Use "metadata" or "transcript".'
        ) from exc


def _coerce_mode(value: TranscriptMode | str | None) -> Optional[TranscriptMode]:
    if not value:
        return None
    try:
        return TranscriptMode(value)
    except ValueError as exc:
        allowed = ", ".join(f'"{m.value}"' for m in TranscriptMode)
        raise ValidationError(
            f'Unsupported transcript mode "{value}". Use one of {allowed}.'
        ) from exc
