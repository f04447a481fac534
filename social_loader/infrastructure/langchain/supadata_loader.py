"""
LangChain surface: SupadataLoader → langchain_core Document.

DocumentRecord ↔ langchain Document conversion happens in this adapter so
the domain and application layers never import langchain_core.

The loader is instantiated once (optionally with an API key) and
request-specific parameters are passed to load()/aload().
"""

import asyncio
from typing import Any, Mapping, Optional

from langchain_core.documents import Document

from social_loader.application.use_cases.load_social_document import ClientFactory
from social_loader.domain.entities.document_record import (
    DocumentRecord,
    LoadRequest,
    Operation,
    TranscriptMode,
)
from social_loader.domain.ports.credential_provider_port import ICredentialProvider
from social_loader.infrastructure.composition import build_load_use_case


class SupadataLoader:
    """Loads transcripts or metadata for social media video/post URLs.

    Supported operations:
      - "transcript": transcript text for the URL (default).
      - "metadata":   structured metadata, serialized as indented JSON.

    Supported URLs are video/post URLs from YouTube, TikTok, Instagram,
    Facebook and Twitter/X. This loader does not scrape generic web pages.

    Not a langchain_core BaseLoader: BaseLoader.load() takes no arguments and
    builds documents from state fixed at construction, while this loader takes
    the URL and operation on every call so one instance can serve any number
    of requests.

    Example:
        loader = SupadataLoader(api_key="...")
        docs = loader.load("https://www.youtube.com/watch?v=dQw4w9WgXcQ", lang="en")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        credential_provider: Optional[ICredentialProvider] = None,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        self._use_case = build_load_use_case(
            api_key=api_key,
            credential_provider=credential_provider,
            client_factory=client_factory,
        )

    def load(
        self,
        url: str,
        operation: Operation | str = Operation.TRANSCRIPT,
        lang: Optional[str] = None,
        text: bool = True,
        mode: Optional[TranscriptMode | str] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> list[Document]:
        request = LoadRequest(
            url=url,
            operation=operation,
            lang=lang,
            text=text,
            mode=mode,
            extra_params=dict(params or {}),
        )
        return [to_langchain_document(r) for r in self._use_case.load(request)]

    async def aload(
        self,
        url: str,
        operation: Operation | str = Operation.TRANSCRIPT,
        lang: Optional[str] = None,
        text: bool = True,
        mode: Optional[TranscriptMode | str] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> list[Document]:
        """Run load() in a worker thread so several URLs can be awaited together."""
        return await asyncio.to_thread(
            self.load, url, operation, lang, text, mode, params
        )


def to_langchain_document(record: DocumentRecord) -> Document:
    return Document(page_content=record.page_content, metadata=dict(record.metadata))
