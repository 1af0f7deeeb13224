from docgenius.storage.base import BaseRecordStore
from docgenius.storage.memory import MemoryRecordStore
from docgenius.storage.models import (
    FileDraft,
    FileRecord,
    OperationType,
    ProcessedResult,
    ResultDraft,
)

__all__ = [
    "BaseRecordStore",
    "FileDraft",
    "FileRecord",
    "MemoryRecordStore",
    "OperationType",
    "ProcessedResult",
    "ResultDraft",
]
