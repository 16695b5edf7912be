"""
Paragraph Segmenter for the Adaptive Chunking Pipeline

Splits per-page text into paragraphs (runs of two or more newlines) and
classifies each one as heading and/or list.

Heading rule (whole paragraph, single line):
- a bare numeric marker such as "3."
- or 4-60 characters starting with an uppercase letter and containing only
  letters, digits, spaces and , ; : / ( ) -

List rule: any line starting with "-", "*", "•", "N." or "N)" followed by
whitespace marks the paragraph as a list.

Character counts are code point counts (len() of a str), never bytes.

Usage:
    from adaptive_chunking.segmenter import segment_pages

    segmentation = segment_pages({1: "Einleitung\\n\\nErster Absatz."})
    segmentation.paragraphs[0].is_heading   # True
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from .models import PageStats, Paragraph

logger = logging.getLogger(__name__)

# Letters and digits of any script, plus the allowed punctuation.
_HEADING_CHAR = r"(?:[^\W_]|[ ,;:/()\-])"
_NUMBERED_HEADING_PATTERN = re.compile(r"\d+\.")
_TITLE_HEADING_PATTERN = re.compile(_HEADING_CHAR + r"{4,60}")
_LIST_LINE_PATTERN = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+")
_PARAGRAPH_BREAK = re.compile(r"\n{2,}")

# ASCII whitespace and NUL only; NBSP and other Unicode spaces are content.
TRIM_CHARS = " \t\n\r\0\x0b"


@dataclass
class Segmentation:
    paragraphs: list[Paragraph] = field(default_factory=list)
    page_stats: list[PageStats] = field(default_factory=list)


def is_heading(text: str) -> bool:
    """Return True if a single trimmed line looks like a heading."""
    if _NUMBERED_HEADING_PATTERN.fullmatch(text):
        return True
    return _TITLE_HEADING_PATTERN.fullmatch(text) is not None and text[0].isupper()


def is_list_line(line: str) -> bool:
    return _LIST_LINE_PATTERN.match(line) is not None


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def coerce_page_text(text: Any) -> str:
    """Non-string page entries (None, bytes, numbers) count as empty pages."""
    return text if isinstance(text, str) else ""


def segment_pages(page_texts: Mapping[int, Any]) -> Segmentation:
    """
    Split every page into classified paragraphs.

    Args:
        page_texts: Page number -> raw page text, in document order.

    Returns:
        Segmentation with paragraphs indexed in document order and one
        PageStats entry per input page.
    """
    segmentation = Segmentation()
    offset = 0

    for page, raw_text in page_texts.items():
        page_number = int(page)
        normalized = normalize_newlines(coerce_page_text(raw_text))

        line_total = 0
        list_lines = 0
        headings = 0
        page_paragraphs = 0
        page_chars = 0

        for raw in _PARAGRAPH_BREAK.split(normalized.strip(TRIM_CHARS)):
            text = raw.strip(TRIM_CHARS)
            if not text:
                continue

            lines = text.split("\n")
            heading = is_heading(text)
            matching = sum(1 for line in lines if is_list_line(line))
            is_list = matching > 0

            line_total += len(lines)
            list_lines += matching
            if heading:
                headings += 1

            paragraph = Paragraph(
                index=len(segmentation.paragraphs),
                text=text,
                char_count=len(text),
                page_number=page_number,
                is_heading=heading,
                is_list=is_list,
                line_count=len(lines),
                # A list paragraph counts all of its lines as list lines
                list_line_count=len(lines) if is_list else 0,
                start_offset=offset,
            )
            segmentation.paragraphs.append(paragraph)

            page_paragraphs += 1
            page_chars += paragraph.char_count
            offset += paragraph.char_count + 2

        if line_total == 0:
            line_total = len(normalized.split("\n"))

        segmentation.page_stats.append(PageStats(
            page_number=page_number,
            heading_count=headings,
            paragraph_count=page_paragraphs,
            avg_paragraph_len=page_chars / page_paragraphs if page_paragraphs else 0.0,
            list_line_count=list_lines,
            total_lines=max(1, line_total),
        ))

    logger.debug(
        f"Segmented {len(page_texts)} pages into {len(segmentation.paragraphs)} paragraphs"
    )
    return segmentation
