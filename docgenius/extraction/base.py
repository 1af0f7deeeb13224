from abc import ABC, abstractmethod
from pathlib import Path

from docgenius.extraction.models import ExtractedText

PDF = "application/pdf"
POWERPOINT = "application/vnd.ms-powerpoint"
POWERPOINT_XML = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
WORD = "application/msword"
WORD_XML = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
PLAIN_TEXT = "text/plain"

SUPPORTED_MEDIA_TYPES: frozenset[str] = frozenset(
    {PDF, POWERPOINT, POWERPOINT_XML, WORD, WORD_XML, PLAIN_TEXT}
)


class BaseTextExtractor(ABC):
    """Contract for all uploaded-file text extraction adapters."""

    @abstractmethod
    def extract(self, path: Path, media_type: str) -> ExtractedText:
        """Extract plain text from a file on disk.

        Args:
            path: Location of the uploaded file.
            media_type: Media type declared by the client.

        Returns:
            ExtractedText with the raw text and, when known, the page count.

        Raises:
            UnsupportedMediaTypeError: if the media type is not handled.
            ExtractionError: if the file cannot be read or decoded.
        """
