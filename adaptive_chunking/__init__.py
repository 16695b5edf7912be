"""
Adaptive Chunking - Structure-aware text chunking for RAG

Splits the per-page text of a document into variable-length chunks whose
size follows local structure: heading and list heavy passages get smaller
chunks, long-form prose gets larger ones, and chunk boundaries always fall
between paragraphs.

Quick Start:
    from adaptive_chunking import AdaptiveChunker, ChunkingConfig

    chunker = AdaptiveChunker(ChunkingConfig())
    result = chunker.chunk({1: "Einleitung\\n\\nErster Absatz ...", 2: "..."})
    for chunk in result.chunks:
        print(chunk.chunk_number, chunk.page_start, chunk.page_end)
"""

__version__ = "1.0.0"

from .chunker import AdaptiveChunker, build_chunks
from .config import ChunkingServiceConfig, load_chunking_config
from .exceptions import ChunkingError, ConfigurationError
from .interfaces import DocumentSink, PageTextProvider
from .models import (
    Chunk,
    ChunkingConfig,
    ChunkingResult,
    ChunkingStats,
    DocumentMetadata,
    FlushConfig,
    HeuristicsConfig,
    MergeConfig,
    OverlapConfig,
    OversizedConfig,
    PageStats,
    Paragraph,
    Section,
    TargetsConfig,
)
from .service import ChunkingService

__all__ = [
    "__version__",
    "AdaptiveChunker",
    "build_chunks",
    "ChunkingService",
    "ChunkingServiceConfig",
    "load_chunking_config",
    "ChunkingError",
    "ConfigurationError",
    "DocumentSink",
    "PageTextProvider",
    "Chunk",
    "ChunkingConfig",
    "ChunkingResult",
    "ChunkingStats",
    "DocumentMetadata",
    "FlushConfig",
    "HeuristicsConfig",
    "MergeConfig",
    "OverlapConfig",
    "OversizedConfig",
    "PageStats",
    "Paragraph",
    "Section",
    "TargetsConfig",
]
