"""
Data Models for the Adaptive Chunking Pipeline

Defines:
1. ChunkingConfig - Sizing targets, heuristics and flush rules (with groups)
2. Paragraph / PageStats - Output of paragraph segmentation
3. Section - Group of paragraphs packed as a unit
4. Chunk - A single emitted passage with page-span metadata
5. ChunkingResult - All chunks plus statistics and per-page diagnostics

Design Principles:
- Pydantic v2 for validation and serialization
- Configuration is immutable and validated once, at construction
- Config keys accept snake_case names and the camelCase keys used in
  settings files (e.g. ``denseMin``, ``softSplitCap``)

Usage:
    config = ChunkingConfig(targets={"baseline": 2000})
    result = AdaptiveChunker(config).chunk({1: "..."})
    print(result.to_json())
"""

import json
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


_CONFIG_MODEL = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="forbid",
)


# =============================================================================
# CONFIGURATION
# =============================================================================


class TargetsConfig(BaseModel):
    """Chunk size targets in characters."""
    model_config = _CONFIG_MODEL

    baseline: int = Field(2400, description="Target for ordinary content", ge=1)
    dense_min: int = Field(1400, description="Smallest target for dense content", ge=1)
    dense_max: int = Field(1700, description="Largest target for dense content", ge=1)
    narrative_min: int = Field(3200, description="Smallest target for long-form prose", ge=1)
    narrative_max: int = Field(3600, description="Largest target for long-form prose", ge=1)
    absolute_min: int = Field(900, description="Lower clamp for every target", ge=1)
    absolute_max: int = Field(3800, description="Upper clamp for every target", ge=1)

    def model_post_init(self, __context: Any) -> None:
        for low, high in (
            ("absolute_min", "absolute_max"),
            ("dense_min", "dense_max"),
            ("narrative_min", "narrative_max"),
        ):
            if getattr(self, low) > getattr(self, high):
                raise ValueError(
                    f"{low} ({getattr(self, low)}) must not exceed "
                    f"{high} ({getattr(self, high)})"
                )


class HeuristicsConfig(BaseModel):
    """Density thresholds that select the sizing branch."""
    model_config = _CONFIG_MODEL

    heading_density_high: float = Field(
        1.2, description="Headings per 1000 chars above which content is dense", gt=0
    )
    paragraph_density_high: float = Field(
        2.0, description="Paragraphs per 1000 chars above which content is dense", gt=0
    )
    list_density_high: float = Field(
        0.35, description="Share of list lines above which content is dense", gt=0
    )
    long_paragraph_len: int = Field(
        450, description="Average paragraph length that marks narrative prose", ge=1
    )
    long_paragraph_len_max_boost: int = Field(
        400, description="Excess paragraph length that reaches narrative_max", ge=1
    )


class MergeConfig(BaseModel):
    model_config = _CONFIG_MODEL

    small_section_threshold: int = Field(
        200, description="Sections below this size absorb their successor", ge=0
    )


class FlushConfig(BaseModel):
    model_config = _CONFIG_MODEL

    min_fill_factor: float = Field(
        0.3, description="Fraction of the target required before an early flush", ge=0.0, le=1.0
    )


class OversizedConfig(BaseModel):
    model_config = _CONFIG_MODEL

    soft_split_cap: Optional[int] = Field(
        None, description="Sections above this size are split (default: targets.absolute_max)", ge=1
    )


class OverlapConfig(BaseModel):
    """
    Overlap sizing. The value is computed with each target decision but is
    reserved: no text is duplicated between chunks.
    """
    model_config = _CONFIG_MODEL

    enabled: bool = False
    small_target_percent: float = Field(0.08, ge=0.0, le=1.0)
    large_target_percent: float = Field(0.12, ge=0.0, le=1.0)
    min_chars: int = Field(300, ge=0)


class ChunkingConfig(BaseModel):
    """
    Configuration for the adaptive chunking pipeline.

    Defaults reproduce the production settings: ~2400 character chunks,
    shrinking to 1400-1700 for heading/list heavy passages and growing to
    3200-3600 for long-form prose, never leaving 900-3800.
    """
    model_config = _CONFIG_MODEL

    enabled: bool = Field(True, description="False emits one full-text chunk")
    targets: TargetsConfig = Field(default_factory=TargetsConfig)
    heuristics: HeuristicsConfig = Field(default_factory=HeuristicsConfig)
    merge: MergeConfig = Field(default_factory=MergeConfig)
    flush: FlushConfig = Field(default_factory=FlushConfig)
    oversized: OversizedConfig = Field(default_factory=OversizedConfig)
    overlap: OverlapConfig = Field(default_factory=OverlapConfig)

    @property
    def soft_split_cap(self) -> int:
        if self.oversized.soft_split_cap is None:
            return self.targets.absolute_max
        return self.oversized.soft_split_cap


# =============================================================================
# PIPELINE ENTITIES
# =============================================================================


class Paragraph(BaseModel):
    """A blank-line separated text unit of one page."""
    model_config = ConfigDict(frozen=True)

    index: int = Field(..., description="Zero-based position in document order", ge=0)
    text: str
    char_count: int = Field(..., description="Length in code points", ge=0)
    page_number: int
    is_heading: bool = False
    is_list: bool = False
    line_count: int = Field(1, ge=1)
    list_line_count: int = Field(0, ge=0)
    start_offset: int = Field(0, description="Cumulative char offset in the document", ge=0)


class PageStats(BaseModel):
    """Per-page structure statistics, reported as diagnostics."""
    page_number: int
    heading_count: int = 0
    paragraph_count: int = 0
    avg_paragraph_len: float = 0.0
    list_line_count: int = 0
    total_lines: int = 1


class Section(BaseModel):
    """
    Ordered run of paragraphs bounded by a page change or a heading.

    ``paragraph_indices`` stay ascending; ``pages`` is kept sorted and unique.
    """
    paragraph_indices: list[int] = Field(default_factory=list)
    total_chars: int = 0
    headings: list[str] = Field(default_factory=list)
    pages: list[int] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.paragraph_indices

    def add_paragraph(self, paragraph: Paragraph) -> None:
        self.paragraph_indices.append(paragraph.index)
        self.total_chars += paragraph.char_count
        if paragraph.is_heading:
            self.headings.append(paragraph.text)
        if paragraph.page_number not in self.pages:
            self.pages.append(paragraph.page_number)
            self.pages.sort()

    def absorb(self, other: "Section") -> None:
        """Append a following section's paragraphs to this one."""
        self.paragraph_indices.extend(other.paragraph_indices)
        self.total_chars += other.total_chars
        self.headings.extend(other.headings)
        self.pages = sorted(set(self.pages) | set(other.pages))


class Chunk(BaseModel):
    """
    A finished passage ready for indexing.

    ``adaptive_target`` holds the character count the pending group had
    reached when it was flushed, not the target that triggered the flush.
    In the full-text fallback it is the length of the joined text.
    """
    text: str = Field(..., description="Chunk text (empty only for blank documents)")
    page_start: int = Field(..., description="Lowest page contributing to the chunk")
    page_end: int = Field(..., description="Highest page contributing to the chunk")
    pages: list[int] = Field(default_factory=list, description="Sorted unique page numbers")
    chunk_number: int = Field(..., description="Zero-based sequential position", ge=0)
    section_count: int = Field(0, description="Sections packed into this chunk", ge=0)
    adaptive_target: int = Field(0, description="Accumulated characters at flush time", ge=0)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ChunkingStats(BaseModel):
    """Statistics about the chunking process."""
    total_chunks: int = 0
    total_chars: int = 0
    avg_chunk_chars: float = 0.0
    min_chunk_chars: int = 0
    max_chunk_chars: int = 0
    total_paragraphs: int = 0
    total_sections: int = 0
    total_pages_processed: int = 0


class ChunkingResult(BaseModel):
    """
    Complete result of chunking one document.

    Contains the ordered chunks, processing statistics and the per-page
    structure statistics gathered during segmentation.
    """
    config: ChunkingConfig = Field(..., description="Configuration used for chunking")
    chunks: list[Chunk] = Field(default_factory=list)
    stats: ChunkingStats = Field(default_factory=ChunkingStats)
    page_stats: list[PageStats] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def get_chunk(self, chunk_number: int) -> Optional[Chunk]:
        """Find a chunk by its number."""
        for chunk in self.chunks:
            if chunk.chunk_number == chunk_number:
                return chunk
        return None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)


class DocumentMetadata(BaseModel):
    """Caller-supplied metadata handed to a DocumentSink with the chunks."""
    document_id: str = Field(..., description="Stable base identifier of the document")
    title: str = ""
    tags: list[str] = Field(default_factory=list)
