"""
Section building, forward merging and oversize splitting.

A section opens at the first paragraph, at every page change and at every
heading. Undersized sections absorb their successor in one left-to-right
pass; sections above the soft split cap are broken at paragraph boundaries.
"""

import logging
from typing import Sequence

from .models import Paragraph, Section

logger = logging.getLogger(__name__)


def build_sections(paragraphs: Sequence[Paragraph]) -> list[Section]:
    """Group paragraphs into sections at page and heading boundaries."""
    sections: list[Section] = []
    current = Section()
    last_page = None

    for paragraph in paragraphs:
        page_changed = last_page is not None and paragraph.page_number != last_page
        if (page_changed or paragraph.is_heading) and not current.is_empty:
            sections.append(current)
            current = Section()

        current.add_paragraph(paragraph)
        last_page = paragraph.page_number

    if not current.is_empty:
        sections.append(current)

    return sections


def merge_small_sections(sections: Sequence[Section], threshold: int) -> list[Section]:
    """
    Merge every section smaller than ``threshold`` with its successor.

    Single pass: a merged pair is not re-examined, so a chain of tiny
    sections collapses pairwise only.
    """
    merged: list[Section] = []
    i = 0
    while i < len(sections):
        section = sections[i].model_copy(deep=True)
        if section.total_chars < threshold and i + 1 < len(sections):
            section.absorb(sections[i + 1])
            i += 1
        merged.append(section)
        i += 1

    if len(merged) != len(sections):
        logger.debug(f"Merged {len(sections)} sections into {len(merged)}")
    return merged


def split_oversized(
    section: Section,
    paragraphs: Sequence[Paragraph],
    cap: int,
) -> list[Section]:
    """
    Break a section into paragraph-aligned sub-sections of at most ``cap``
    characters. A single paragraph above the cap stays whole in its own
    sub-section. Sections within the cap are returned unchanged.
    """
    if section.total_chars <= cap:
        return [section]

    result: list[Section] = []
    current = Section()
    for index in section.paragraph_indices:
        paragraph = paragraphs[index]
        if current.total_chars > 0 and current.total_chars + paragraph.char_count > cap:
            result.append(current)
            current = Section()
        current.add_paragraph(paragraph)

    if not current.is_empty:
        result.append(current)

    logger.debug(
        f"Split section of {section.total_chars} chars into {len(result)} parts (cap {cap})"
    )
    return result


def prepare_sections(
    paragraphs: Sequence[Paragraph],
    small_section_threshold: int,
    soft_split_cap: int,
) -> list[Section]:
    """Build, merge and split sections into final packing order."""
    sections = merge_small_sections(build_sections(paragraphs), small_section_threshold)
    packed: list[Section] = []
    for section in sections:
        packed.extend(split_oversized(section, paragraphs, soft_split_cap))
    return packed
