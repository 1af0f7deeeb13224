from pathlib import Path

import pytest

from docgenius.extraction.exceptions import ExtractionError, UnsupportedMediaTypeError
from docgenius.extraction.placeholder_extractor import PlaceholderExtractor


@pytest.fixture()
def uploaded(tmp_path: Path) -> Path:
    path = tmp_path / "abc123"
    path.write_bytes(b"%PDF-1.4 binary")
    return path


class TestPlainText:
    def test_reads_utf8_text(self, tmp_path: Path) -> None:
        path = tmp_path / "notes"
        path.write_text("Revenue grew 10% to $5M – up", encoding="utf-8")
        result = PlaceholderExtractor().extract(path, "text/plain")
        assert result.content == "Revenue grew 10% to $5M – up"
        assert result.page_count is None

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "latin"
        path.write_bytes(b"caf\xe9")
        with pytest.raises(ExtractionError, match="UTF-8"):
            PlaceholderExtractor().extract(path, "text/plain")

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError, match="Failed to read"):
            PlaceholderExtractor().extract(tmp_path / "gone", "text/plain")


class TestOfficeFormats:
    def test_pdf_returns_placeholder_with_page_count(self, uploaded: Path) -> None:
        result = PlaceholderExtractor().extract(uploaded, "application/pdf")
        assert result.content == PlaceholderExtractor.PDF_TEXT
        assert result.page_count == 1

    @pytest.mark.parametrize(
        "media_type",
        [
            "application/msword",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        ],
    )
    def test_word_returns_placeholder(self, uploaded: Path, media_type: str) -> None:
        result = PlaceholderExtractor().extract(uploaded, media_type)
        assert result.content == PlaceholderExtractor.WORD_TEXT

    @pytest.mark.parametrize(
        "media_type",
        [
            "application/vnd.ms-powerpoint",
            "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        ],
    )
    def test_powerpoint_returns_placeholder(self, uploaded: Path, media_type: str) -> None:
        result = PlaceholderExtractor().extract(uploaded, media_type)
        assert result.content == PlaceholderExtractor.POWERPOINT_TEXT

    def test_missing_binary_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ExtractionError, match="missing"):
            PlaceholderExtractor().extract(tmp_path / "gone", "application/pdf")


class TestUnsupported:
    def test_unknown_media_type_raises(self, uploaded: Path) -> None:
        with pytest.raises(UnsupportedMediaTypeError, match="image/png"):
            PlaceholderExtractor().extract(uploaded, "image/png")
