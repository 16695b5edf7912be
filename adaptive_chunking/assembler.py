"""
Greedy Chunk Assembler

Packs sections into chunks in document order. The assembler is either EMPTY
(nothing pending) or ACCUMULATING (one or more sections pending). For every
incoming section a fresh target is computed from the pending group, then:

- EMPTY: the section is taken unconditionally.
- ACCUMULATING: if the section would overflow the target and the pending
  group already fills at least ``min_fill_factor`` of it, the group is
  flushed first and the section starts the next group. Otherwise the section
  is appended, and the group is flushed right away if it now exceeds the
  target and the section itself was substantial.

Flushing restores document order across all pending paragraphs, so split
sub-sections read back exactly as written.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from .models import Chunk, ChunkingConfig, Paragraph, Section
from .sizing import TargetDecision, compute_target

logger = logging.getLogger(__name__)

MARKDOWN_HEADING_PREFIX = "## "


class AssemblerState(str, Enum):
    EMPTY = "empty"
    ACCUMULATING = "accumulating"


class ChunkAssembler:
    """Stateful packer for one document; create a new one per document."""

    def __init__(self, paragraphs: Sequence[Paragraph], config: ChunkingConfig):
        self.paragraphs = paragraphs
        self.config = config
        self.pending: list[Section] = []
        self.pending_chars = 0
        self.next_chunk_number = 0
        self.decisions: list[TargetDecision] = []

    @property
    def state(self) -> AssemblerState:
        return AssemblerState.ACCUMULATING if self.pending else AssemblerState.EMPTY

    def add(self, section: Section) -> Optional[Chunk]:
        """
        Feed the next section.

        Returns:
            The chunk flushed by this step, if any.
        """
        decision = self._decide()
        target = decision.target

        if self.state is AssemblerState.EMPTY:
            self._append(section)
            return None

        min_fill = self.config.flush.min_fill_factor
        if (
            self.pending_chars + section.total_chars > target
            and self.pending_chars > target * min_fill
        ):
            chunk = self.flush()
            self._append(section)
            return chunk

        self._append(section)
        if self.pending_chars > target and section.total_chars > target * min_fill:
            return self.flush()
        return None

    def finish(self) -> Optional[Chunk]:
        """Flush whatever is still pending at the end of the document."""
        if not self.pending:
            return None
        return self.flush()

    def flush(self) -> Optional[Chunk]:
        """Emit the pending group as the next chunk and reset to EMPTY."""
        if not self.pending:
            return None

        indices: list[int] = []
        page_set: set[int] = set()
        for section in self.pending:
            indices.extend(section.paragraph_indices)
            page_set.update(section.pages)
        indices.sort()

        text = "\n\n".join(self._render(self.paragraphs[i]) for i in indices)
        pages = sorted(page_set) or [1]

        chunk = Chunk(
            text=text,
            page_start=pages[0],
            page_end=pages[-1],
            pages=pages,
            chunk_number=self.next_chunk_number,
            section_count=len(self.pending),
            adaptive_target=self.pending_chars,
        )
        target = self.decisions[-1].target if self.decisions else None
        logger.debug(
            f"Chunk {chunk.chunk_number}: {chunk.section_count} sections, "
            f"{chunk.adaptive_target} chars (target {target}), "
            f"pages {chunk.page_start}-{chunk.page_end}"
        )

        self.next_chunk_number += 1
        self.pending = []
        self.pending_chars = 0
        return chunk

    # -------------------------------------------------------------------------
    # Internal methods
    # -------------------------------------------------------------------------

    def _decide(self) -> TargetDecision:
        decision = compute_target(self.pending, self.paragraphs, self.config)
        targets = self.config.targets
        clamped = max(targets.absolute_min, min(targets.absolute_max, decision.target))
        if clamped != decision.target:
            decision = TargetDecision(
                target=clamped,
                overlap=decision.overlap,
                branch=decision.branch,
                intensity=decision.intensity,
            )
        self.decisions.append(decision)
        return decision

    def _append(self, section: Section) -> None:
        self.pending.append(section)
        self.pending_chars += section.total_chars

    @staticmethod
    def _render(paragraph: Paragraph) -> str:
        text = paragraph.text
        if paragraph.is_heading and not text.startswith("#"):
            return MARKDOWN_HEADING_PREFIX + text.lstrip()
        return text
