class ProcessingError(Exception):
    """Base exception for request processing errors."""


class InvalidRequestError(ProcessingError):
    """Raised when a request is malformed or missing required data."""


class FileRecordNotFoundError(ProcessingError):
    """Raised when a file id does not match any stored file."""


class ResultNotFoundError(ProcessingError):
    """Raised when no processed result exists for the requested operation."""
