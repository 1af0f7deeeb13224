import re
from datetime import date
from urllib.parse import quote

from docgenius.storage.models import OperationType

PRODUCT_NAME = "AI Document Genius"

_TAG_PATTERN = re.compile(r"<[^>]*>")


def render_download(
    result_text: str,
    operation: OperationType,
    today: date | None = None,
) -> str:
    """Convert an HTML result into a plain-text document with a header."""
    day = (today or date.today()).isoformat()
    header = (
        f"{PRODUCT_NAME} - {operation.value.capitalize()} Result\n"
        f"Generated on: {day}\n"
        f"{'=' * 50}\n\n"
    )
    plain_text = _TAG_PATTERN.sub("", result_text).replace("&nbsp;", " ")
    return header + plain_text


def download_filename(
    original_name: str,
    operation: OperationType,
    today: date | None = None,
) -> str:
    day = (today or date.today()).isoformat()
    return f"{original_name}_{operation.value}_{day}.txt"


def content_disposition(filename: str) -> str:
    """Build an attachment Content-Disposition header value for `filename`."""
    if filename.isascii():
        escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
        return f'attachment; filename="{escaped}"'
    return f"attachment; filename*=UTF-8''{quote(filename)}"
