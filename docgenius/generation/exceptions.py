class GenerationError(Exception):
    """Raised when the AI provider does not produce usable text."""


class GenerationNetworkError(GenerationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
