"""
Port (interface) for document loaders.
Application services (e.g. SocialIngestService) depend on this interface only.
"""

from abc import ABC, abstractmethod

from social_loader.domain.entities.document_record import DocumentRecord, LoadRequest


class IDocumentLoader(ABC):
    @abstractmethod
    def load(self, request: LoadRequest) -> list[DocumentRecord]:
        """Load the document(s) for a single social media URL."""
        ...
