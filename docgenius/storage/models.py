from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class OperationType(str, Enum):
    """AI transformation requested for a file."""

    SUMMARY = "summary"
    QA = "qa"
    MATH = "math"


@dataclass(frozen=True)
class FileDraft:
    """Uploaded file fields supplied by the caller before storage."""

    filename: str
    original_name: str
    file_type: str
    file_size: int
    content: str


@dataclass(frozen=True)
class FileRecord:
    """Stored uploaded document: metadata plus raw extracted text."""

    id: int
    filename: str
    original_name: str
    file_type: str
    file_size: int
    content: str
    uploaded_at: datetime


@dataclass(frozen=True)
class ResultDraft:
    """Output of one AI operation before storage."""

    file_id: int
    type: OperationType
    result: str
    question: str | None = None


@dataclass(frozen=True)
class ProcessedResult:
    """Stored output of one AI operation against one file."""

    id: int
    file_id: int
    type: OperationType
    question: str | None
    result: str
    created_at: datetime


ResultKey = tuple[int, OperationType, str | None]


def result_key(
    file_id: int,
    operation: OperationType,
    question: str | None = None,
) -> ResultKey:
    """Composite lookup key; the question only takes part for Q&A."""
    return (file_id, operation, question if operation is OperationType.QA else None)
