class ExtractionError(Exception):
    """Raised when text cannot be extracted from an uploaded file."""


class UnsupportedMediaTypeError(ExtractionError):
    """Raised when no extractor handles the file's media type."""
