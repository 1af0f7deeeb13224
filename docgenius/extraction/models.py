from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedText:
    """Text pulled from an uploaded file."""

    content: str
    page_count: int | None = None
