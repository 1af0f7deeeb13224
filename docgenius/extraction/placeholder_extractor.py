from pathlib import Path

from docgenius.extraction.base import (
    PDF,
    PLAIN_TEXT,
    POWERPOINT,
    POWERPOINT_XML,
    WORD,
    WORD_XML,
    BaseTextExtractor,
)
from docgenius.extraction.exceptions import ExtractionError, UnsupportedMediaTypeError
from docgenius.extraction.models import ExtractedText


class PlaceholderExtractor(BaseTextExtractor):
    """Reads plain text files and returns fixed text for binary office formats."""

    PDF_TEXT = (
        "This is extracted text from a PDF file. A full parser would return the "
        "actual text content of the document here."
    )
    WORD_TEXT = (
        "This is extracted text from a Word document. A full parser would return "
        "the actual text content of the document here."
    )
    POWERPOINT_TEXT = (
        "This is extracted text from a PowerPoint presentation. A full parser "
        "would return the actual text content of the slides here."
    )

    def extract(self, path: Path, media_type: str) -> ExtractedText:
        if media_type == PLAIN_TEXT:
            return ExtractedText(content=self._read_text(path))
        if not path.exists():
            raise ExtractionError(f"Uploaded file is missing: {path.name}")
        if media_type == PDF:
            return ExtractedText(content=self.PDF_TEXT, page_count=1)
        if media_type in (WORD, WORD_XML):
            return ExtractedText(content=self.WORD_TEXT)
        if media_type in (POWERPOINT, POWERPOINT_XML):
            return ExtractedText(content=self.POWERPOINT_TEXT)
        raise UnsupportedMediaTypeError(f"Unsupported file type: {media_type}")

    @staticmethod
    def _read_text(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(
                "Failed to process file. Text files must be UTF-8 encoded."
            ) from exc
        except OSError as exc:
            raise ExtractionError(f"Failed to read uploaded file: {exc}") from exc
