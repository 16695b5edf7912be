"""
Adaptive Chunker - Entry point of the chunking pipeline

Takes the per-page text of one document and produces a ChunkingResult with
structure-aware chunks whose size follows local density.

Algorithm:
1. Segment every page into paragraphs, classifying headings and lists.
2. Group paragraphs into sections at page changes and headings.
3. Forward-merge undersized sections into their successor.
4. Split sections above the soft cap at paragraph boundaries.
5. Greedily pack sections into chunks against an adaptive target.

With ``enabled=False`` the whole document becomes one full-text chunk.
A document without any text yields one empty chunk on page 1.

Usage:
    from adaptive_chunking import AdaptiveChunker, ChunkingConfig

    chunker = AdaptiveChunker(ChunkingConfig())
    result = chunker.chunk({1: "Einleitung\\n\\nText ...", 2: "..."})
    for chunk in result.chunks:
        print(chunk.chunk_number, chunk.pages)
"""

import logging
from typing import Any, Mapping, Optional

from .assembler import ChunkAssembler
from .fallback import format_full_text
from .models import Chunk, ChunkingConfig, ChunkingResult, ChunkingStats
from .sections import prepare_sections
from .segmenter import segment_pages

logger = logging.getLogger(__name__)


class AdaptiveChunker:
    """
    Splits page text into variable-length, boundary-respecting chunks.

    Holds only the read-only configuration, so one instance can serve any
    number of documents, including from several threads.
    """

    def __init__(self, config: Optional[ChunkingConfig] = None):
        self.config = config or ChunkingConfig()

    def chunk(self, page_texts: Mapping[int, Any]) -> ChunkingResult:
        """
        Chunk one document.

        Args:
            page_texts: Page number -> extracted text, in page order.
                Non-string values are treated as empty pages.

        Returns:
            ChunkingResult with at least one chunk.
        """
        if not self.config.enabled:
            chunk = format_full_text(page_texts)
            return ChunkingResult(
                config=self.config,
                chunks=[chunk],
                stats=self._compute_stats([chunk], 0, 0, len(chunk.pages)),
            )

        segmentation = segment_pages(page_texts)
        paragraphs = segmentation.paragraphs

        if not paragraphs:
            chunks = [self._empty_chunk()]
            return ChunkingResult(
                config=self.config,
                chunks=chunks,
                stats=self._compute_stats(chunks, 0, 0, len(page_texts)),
                page_stats=segmentation.page_stats,
            )

        sections = prepare_sections(
            paragraphs,
            self.config.merge.small_section_threshold,
            self.config.soft_split_cap,
        )

        assembler = ChunkAssembler(paragraphs, self.config)
        chunks: list[Chunk] = []
        for section in sections:
            chunk = assembler.add(section)
            if chunk is not None:
                chunks.append(chunk)
        last = assembler.finish()
        if last is not None:
            chunks.append(last)

        logger.debug(
            f"Packed {len(paragraphs)} paragraphs in {len(sections)} sections "
            f"into {len(chunks)} chunks"
        )

        return ChunkingResult(
            config=self.config,
            chunks=chunks,
            stats=self._compute_stats(chunks, len(paragraphs), len(sections), len(page_texts)),
            page_stats=segmentation.page_stats,
        )

    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------

    @staticmethod
    def _empty_chunk() -> Chunk:
        return Chunk(
            text="",
            page_start=1,
            page_end=1,
            pages=[1],
            chunk_number=0,
            section_count=0,
            adaptive_target=0,
        )

    @staticmethod
    def _compute_stats(
        chunks: list[Chunk],
        total_paragraphs: int,
        total_sections: int,
        total_pages: int,
    ) -> ChunkingStats:
        """Compute statistics about the chunking result."""
        sizes = [len(c.text) for c in chunks]
        return ChunkingStats(
            total_chunks=len(chunks),
            total_chars=sum(sizes),
            avg_chunk_chars=sum(sizes) / len(sizes) if sizes else 0.0,
            min_chunk_chars=min(sizes, default=0),
            max_chunk_chars=max(sizes, default=0),
            total_paragraphs=total_paragraphs,
            total_sections=total_sections,
            total_pages_processed=total_pages,
        )


def build_chunks(
    page_texts: Mapping[int, Any],
    config: Optional[ChunkingConfig] = None,
) -> list[Chunk]:
    """Chunk one document and return only the ordered chunk list."""
    return AdaptiveChunker(config).chunk(page_texts).chunks
