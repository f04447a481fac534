"""
Domain entities for load requests and the documents they produce.
Zero external dependencies, pure Python dataclasses and enums only.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class Operation(str, Enum):
    METADATA = "metadata"
    TRANSCRIPT = "transcript"


class TranscriptMode(str, Enum):
    NATIVE = "native"
    AUTO = "auto"
    GENERATE = "generate"


class SupadataOperation(str, Enum):
    """Tag stored under ``metadata["supadataOperation"]`` on every record."""

    METADATA = "metadata"
    TRANSCRIPT = "transcript"
    TRANSCRIPT_JOB = "transcript_job"


@dataclass(frozen=True)
class LoaderConfig:
    api_key: Optional[str] = None


@dataclass(frozen=True)
class LoadRequest:
    """A single-URL load request.

    ``operation`` and ``mode`` may be given as the enum or its string value;
    they are coerced (and rejected if unknown) by the loader, not here.
    """

    url: str
    operation: Operation | str = Operation.TRANSCRIPT
    lang: Optional[str] = None
    text: bool = True
    mode: Optional[TranscriptMode | str] = None
    extra_params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DocumentRecord:
    page_content: str
    metadata: dict[str, Any]

    @property
    def source(self) -> str:
        return self.metadata["source"]

    @property
    def operation(self) -> SupadataOperation:
        return SupadataOperation(self.metadata["supadataOperation"])
