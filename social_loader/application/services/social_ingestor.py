"""
Application service: load a list of social media URLs in order.

Uses the same all-or-nothing policy as a single load: the first failing
request aborts the run and its exception reaches the caller. No URL is
skipped silently.

The IDocumentLoader is injected; no imports from httpx, langchain or any
other external library appear here.
"""

import logging

from social_loader.domain.entities.document_record import DocumentRecord, LoadRequest
from social_loader.domain.ports.document_loader_port import IDocumentLoader

logger = logging.getLogger(__name__)


class SocialIngestService:
    def __init__(self, loader: IDocumentLoader) -> None:
        self._loader = loader

    def ingest(self, requests: list[LoadRequest]) -> list[DocumentRecord]:
        """Load every request sequentially.

        Args:
            requests: One LoadRequest per URL, processed in order.

        Returns:
            All DocumentRecords, in request order.
        """
        records: list[DocumentRecord] = []
        for request in requests:
            records.extend(self._loader.load(request))
        logger.info("Loaded %d document(s) from %d URL(s)", len(records), len(requests))
        return records
