from dataclasses import dataclass


@dataclass(frozen=True)
class CachedResult:
    """Outcome of a cache-aside lookup for one operation on one file."""

    result: str
    cached: bool
    question: str | None = None
    page_reference: str | None = None
