"""Tests for adaptive_chunking.fallback."""

from adaptive_chunking.fallback import PAGE_SEPARATOR, format_full_text, mark_headings


class TestMarkHeadings:
    def test_heading_line_prefixed(self):
        text = "Introduction\nthis is body text."
        assert mark_headings(text) == "## Introduction\nthis is body text."

    def test_indented_heading_is_trimmed(self):
        assert mark_headings("   Scope (General)   ") == "## Scope (General)"

    def test_nbsp_padded_line_is_not_a_heading(self):
        text = "\xa0Introduction\xa0\nbody text."
        assert mark_headings(text) == text

    def test_ascii_padding_trimmed_before_heading_check(self):
        assert mark_headings("\tSummary \0") == "## Summary"

    def test_existing_markdown_untouched(self):
        assert mark_headings("# Title\n## Subtitle") == "# Title\n## Subtitle"

    def test_body_lines_untouched(self):
        text = "some lowercase text.\n\n  keep this indentation."
        assert mark_headings(text) == text

    def test_line_breaks_normalized(self):
        assert mark_headings("first.\r\nsecond.\rthird.") == "first.\nsecond.\nthird."

    def test_unicode_line_separator(self):
        assert mark_headings("body text.\u2028Summary") == "body text.\n## Summary"


class TestFormatFullText:
    def test_two_pages_single_chunk(self):
        chunk = format_full_text({1: "First page text.", 2: "Second page text."})

        assert chunk.text == "First page text." + PAGE_SEPARATOR + "Second page text."
        assert chunk.chunk_number == 0
        assert chunk.pages == [1, 2]
        assert chunk.page_start == 1
        assert chunk.page_end == 2
        assert chunk.section_count == 0
        assert chunk.adaptive_target == len(chunk.text)

    def test_separator_marker(self):
        assert PAGE_SEPARATOR == "\n\n--- page break ---\n\n"

    def test_headings_marked_per_page(self):
        chunk = format_full_text({1: "Overview\nbody.", 2: "Details\nmore body."})
        assert chunk.text == (
            "## Overview\nbody." + PAGE_SEPARATOR + "## Details\nmore body."
        )

    def test_page_end_is_page_count(self):
        chunk = format_full_text({3: "a.", 5: "b.", 9: "c."})
        assert chunk.pages == [3, 5, 9]
        assert chunk.page_start == 1
        assert chunk.page_end == 3

    def test_non_string_page(self):
        chunk = format_full_text({1: None, 2: "text."})
        assert chunk.text == PAGE_SEPARATOR + "text."

    def test_empty_map(self):
        chunk = format_full_text({})
        assert chunk.text == ""
        assert chunk.pages == [1]
        assert chunk.page_start == chunk.page_end == 1
        assert chunk.adaptive_target == 0
