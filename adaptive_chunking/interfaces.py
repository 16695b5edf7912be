"""
Collaborator interfaces around the chunking core.

Text extraction and indexing live outside this package; ChunkingService only
relies on these two protocols.
"""

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable

from .models import Chunk, DocumentMetadata


@runtime_checkable
class PageTextProvider(Protocol):
    def extract_pages(self, resource: Any) -> Mapping[int, str]:
        """
        Return page number -> text for a document resource.

        Implementations apply their own fallback extraction strategy and
        may return an empty mapping when nothing could be extracted.
        """
        ...


@runtime_checkable
class DocumentSink(Protocol):
    def write(self, chunks: Sequence[Chunk], metadata: DocumentMetadata) -> None:
        """Store or index the chunks of one document, building their identifiers."""
        ...
