import re

_PAGE_PATTERN = re.compile(r"page\s+(\d+)", re.IGNORECASE)


def extract_page_reference(text: str) -> str | None:
    """Return "Page N" for the first "page N" mentioned in the text, if any.

    Best effort only: the model is asked to cite pages but may not.
    """
    match = _PAGE_PATTERN.search(text)
    if match is None:
        return None
    return f"Page {match.group(1)}"
