"""
Full-text fallback used when adaptive chunking is disabled.

Every standalone heading-like line is promoted to a markdown H2 and all pages
are joined into a single chunk.
"""

import re
from typing import Any, Mapping

from .assembler import MARKDOWN_HEADING_PREFIX
from .models import Chunk
from .segmenter import TRIM_CHARS, coerce_page_text, is_heading

PAGE_SEPARATOR = "\n\n--- page break ---\n\n"

# Any Unicode line break, "\r\n" first so it counts as one break.
_LINE_BREAK = re.compile(r"\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


def mark_headings(text: str) -> str:
    """Prefix heading-like lines with "## "; lines are rejoined with "\\n"."""
    lines = _LINE_BREAK.split(text)
    for i, line in enumerate(lines):
        stripped = line.strip(TRIM_CHARS)
        if stripped and not stripped.startswith("#") and is_heading(stripped):
            lines[i] = MARKDOWN_HEADING_PREFIX + stripped
    return "\n".join(lines)


def format_full_text(page_texts: Mapping[int, Any]) -> Chunk:
    """
    Build the single fallback chunk for a document.

    An empty page map is treated as one blank page.
    """
    if not page_texts:
        page_texts = {1: ""}

    pages = [int(page) for page in page_texts]
    text = PAGE_SEPARATOR.join(
        mark_headings(coerce_page_text(raw)) for raw in page_texts.values()
    )
    return Chunk(
        text=text,
        page_start=1,
        page_end=len(pages),
        pages=pages,
        chunk_number=0,
        section_count=0,
        adaptive_target=len(text),
    )
