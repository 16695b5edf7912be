import logging
from typing import Any, Mapping, Optional

from .chunker import AdaptiveChunker
from .config import ChunkingServiceConfig
from .interfaces import DocumentSink, PageTextProvider
from .logging_config import setup_logging
from .models import ChunkingResult, DocumentMetadata

logger = logging.getLogger(__name__)


class ChunkingService:
    def __init__(
        self,
        provider: PageTextProvider,
        sink: Optional[DocumentSink] = None,
        config: ChunkingServiceConfig | None = None,
    ):
        self.config = config or ChunkingServiceConfig()
        self.provider = provider
        self.sink = sink
        self.chunker = AdaptiveChunker(self.config.chunking)

    @classmethod
    def from_env(
        cls,
        provider: PageTextProvider,
        sink: Optional[DocumentSink] = None,
        env_file: Optional[str] = None,
    ) -> "ChunkingService":
        config = ChunkingServiceConfig.from_env(env_file)
        setup_logging(config.log_level)
        return cls(provider, sink, config)

    def resolve_pages(self, resource: Any) -> dict[int, str]:
        """Extract page text, falling back to a single placeholder page."""
        try:
            pages = dict(self.provider.extract_pages(resource))
        except Exception as exc:
            logger.warning(f"Page text extraction failed for {resource!r}: {exc}")
            pages = {}

        if not pages:
            logger.debug(f"No pages extracted for {resource!r}, using placeholder page")
            pages = {1: self.config.placeholder_page_text}
        return pages

    def chunk_pages(self, page_texts: Mapping[int, Any]) -> ChunkingResult:
        return self.chunker.chunk(page_texts)

    def process(self, resource: Any, metadata: DocumentMetadata) -> ChunkingResult:
        """Extract, chunk and (if a sink is configured) hand off one document."""
        pages = self.resolve_pages(resource)
        result = self.chunk_pages(pages)
        logger.info(
            f"Chunked {metadata.document_id}: {len(pages)} pages -> "
            f"{result.total_chunks} chunks"
        )
        if self.sink is not None:
            self.sink.write(result.chunks, metadata)
        return result
