from pdf_chunk_extractor.chunking.formatter import (
    format_chunk,
    format_single_chunk,
    structure_content,
)

CHUNK = (
    "--- Page 1 ---\n"
    "\n"
    "BAB 1\n"
    "Ketentuan umum\n"
    "• first item\n"
    "2.third\n"
    "plain text\n"
    "\n"
    "more text"
)


class TestStructureContent:
    def test_structures_chunk(self) -> None:
        """Markers, headings and bullets are rewritten as Markdown."""
        assert structure_content(CHUNK) == (
            "### Page 1\n"
            "\n"
            "\n"
            "\n"
            "### BAB 1\n"
            "\n"
            "\n"
            "### Ketentuan umum\n"
            "\n"
            "- first item\n"
            "2.third\n"
            "plain text\n"
            "\n"
            "more text"
        )

    def test_bullets_are_normalized(self) -> None:
        """Every bullet style is rendered as a dash."""
        assert structure_content("intro\n-item\n*  star\n• dot") == (
            "intro\n- item\n- star\n- dot"
        )

    def test_bare_bullet_has_no_trailing_space(self) -> None:
        """A bullet marker with no text renders as a lone dash."""
        assert structure_content("a\n-\nb") == "a\n-\nb"
        assert structure_content("a\n•\nb") == "a\n-\nb"

    def test_numbered_lines_pass_through(self) -> None:
        """Numbered lines are left as written."""
        assert structure_content("intro\n3.a) detail") == "intro\n3.a) detail"

    def test_isolated_short_line_becomes_heading(self) -> None:
        """A short line after a blank line becomes a heading."""
        assert structure_content("intro\n\nNotes.") == "intro\n\n\n### Notes."

    def test_marker_without_number_passes_through(self) -> None:
        """A page marker without a number is plain text."""
        assert structure_content("intro\n--- Page x") == "intro\n--- Page x"

    def test_outer_blank_lines_are_stripped(self) -> None:
        """Leading and trailing blank lines are dropped."""
        assert structure_content("\n\nabc\n\n") == "abc"

    def test_lines_are_stripped(self) -> None:
        """Each line loses its surrounding whitespace."""
        assert structure_content("intro\n   indented text   ") == "intro\nindented text"


class TestFormatChunk:
    def test_full_layout(self) -> None:
        """A chunk gets the header, metadata block and content."""
        assert format_chunk(CHUNK, 2, 5) == (
            "# Document Chunk\n"
            "\n"
            "## Metadata\n"
            "- **Chunk Number**: 2 of 5\n"
            "- **Page Range**: Page 1\n"
            "- **Document Title**: Ketentuan umum\n"
            "\n"
            "## Content\n"
            "\n" + structure_content(CHUNK)
        )

    def test_page_range_omitted_without_markers(self) -> None:
        """Page Range is left out when the chunk has no page markers."""
        formatted = format_chunk("just some words", 1, 1)

        assert "Page Range" not in formatted
        assert formatted == (
            "# Document Chunk\n"
            "\n"
            "## Metadata\n"
            "- **Chunk Number**: 1 of 1\n"
            "\n"
            "## Content\n"
            "\n"
            "just some words"
        )

    def test_metadata_lines_are_included(self) -> None:
        """Document codes and dates appear in the metadata block."""
        formatted = format_chunk("ref SOP-01 on 5 - Mei - 2021", 1, 3)

        assert "- **Document Code**: SOP-01\n" in formatted
        assert "- **Date**: 5 - Mei - 2021\n" in formatted

    def test_multi_page_range(self) -> None:
        """A chunk spanning pages shows an en dash range."""
        formatted = format_chunk("--- Page 2 ---\na\n--- Page 3 ---\nb", 1, 1)

        assert "- **Page Range**: Page 2–3\n" in formatted

    def test_is_deterministic(self) -> None:
        """Formatting the same chunk twice gives the same output."""
        assert format_chunk(CHUNK, 1, 2) == format_chunk(CHUNK, 1, 2)


class TestFormatSingleChunk:
    def test_formats_as_only_chunk(self) -> None:
        """A single block is formatted as chunk 1 of 1."""
        assert format_single_chunk("\n\nhello world\n") == format_chunk(
            "hello world", 1, 1
        )

    def test_keeps_whole_block(self) -> None:
        """A large block is never split."""
        block = "\n".join(f"line {i} of the block" for i in range(200))

        formatted = format_single_chunk(block)

        assert "- **Chunk Number**: 1 of 1" in formatted
        assert "line 199 of the block" in formatted

    def test_blank_block_is_returned_unchanged(self) -> None:
        """Blank input is returned as-is."""
        assert format_single_chunk("  \n ") == "  \n "
