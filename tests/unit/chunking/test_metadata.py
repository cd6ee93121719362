from pdf_chunk_extractor.chunking.metadata import DocumentMetadata, extract_metadata

SAMPLE = """--- Page 1 ---
Standar Operasional Prosedur
Nomor: SOP/HR-01/2024 dan KEP-12/X
Ditetapkan 12 - Januari - 2024
Diubah 3 – Maret – 2025
isi dokumen biasa.
"""


class TestDocumentCodes:
    def test_finds_all_codes_in_order(self) -> None:
        """Document codes are returned in order of appearance."""
        metadata = extract_metadata(SAMPLE)
        assert metadata.document_codes == ("SOP/HR", "KEP-12/X")

    def test_slash_and_dash_separators(self) -> None:
        """Codes may use slashes or dashes after the prefix."""
        metadata = extract_metadata("UU-11/2020 and PMK/2023")
        assert metadata.document_codes == ("UU-11/2020", "PMK/2023")

    def test_unknown_prefix_is_ignored(self) -> None:
        """Only known code prefixes are matched."""
        assert extract_metadata("ABC-123").document_codes == ()


class TestDates:
    def test_hyphen_and_en_dash_dates(self) -> None:
        """Dates separated by hyphens or en dashes are found."""
        metadata = extract_metadata(SAMPLE)
        assert metadata.dates == ("12 - Januari - 2024", "3 – Maret – 2025")

    def test_date_needs_spaced_separators(self) -> None:
        """Dates without spaces around the separators are ignored."""
        assert extract_metadata("12-Januari-2024").dates == ()


class TestTitle:
    def test_first_title_line(self) -> None:
        """The first title-like line becomes the title."""
        assert extract_metadata(SAMPLE).title == "Standar Operasional Prosedur"

    def test_only_first_title_is_kept(self) -> None:
        """Later title-like lines are ignored."""
        metadata = extract_metadata("First Title Line\nSecond Title Line\n")
        assert metadata.title == "First Title Line"

    def test_titles_mentioning_page_are_skipped(self) -> None:
        """Lines containing "Page" are not titles."""
        metadata = extract_metadata("Page Layout Notes\nReal Title Here")
        assert metadata.title == "Real Title Here"

    def test_short_titles_are_skipped(self) -> None:
        """Titles need more than four characters."""
        assert extract_metadata("Abcd\n").title is None

    def test_title_must_be_whole_line(self) -> None:
        """A title line may contain only letters and spaces."""
        assert extract_metadata("Title with 123 digits").title is None

    def test_crlf_line_endings(self) -> None:
        """A title line ending in CRLF is still found, without the CR."""
        assert extract_metadata("Kebijakan Umum\r\nisi").title == "Kebijakan Umum"


class TestExtractMetadata:
    def test_no_match_is_empty(self) -> None:
        """Plain text yields empty metadata."""
        metadata = extract_metadata("nothing to see here, 42 times.")
        assert metadata == DocumentMetadata()
        assert metadata.is_empty()
        assert metadata.lines() == []

    def test_empty_text(self) -> None:
        """Empty text yields empty metadata."""
        assert extract_metadata("").is_empty()

    def test_is_pure(self) -> None:
        """Extraction depends only on the text."""
        assert extract_metadata(SAMPLE) == extract_metadata(SAMPLE)

    def test_lines_rendering(self) -> None:
        """Metadata renders as Markdown bullet lines."""
        metadata = DocumentMetadata(
            document_codes=("SOP/A", "PP-1"),
            dates=("1 - Mei - 2020",),
            title="Kebijakan Umum",
        )
        assert metadata.lines() == [
            "- **Document Code**: SOP/A, PP-1",
            "- **Date**: 1 - Mei - 2020",
            "- **Document Title**: Kebijakan Umum",
        ]
