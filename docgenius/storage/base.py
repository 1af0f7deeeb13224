from abc import ABC, abstractmethod

from docgenius.storage.models import (
    FileDraft,
    FileRecord,
    OperationType,
    ProcessedResult,
    ResultDraft,
)


class BaseRecordStore(ABC):
    """Contract for file and processed-result storage.

    Methods are coroutines so handlers can await them the same way they await
    extraction and generation, even when the backing store is in memory.
    """

    @abstractmethod
    async def create_file(self, draft: FileDraft) -> FileRecord:
        """Assign the next file id, stamp the upload time and store the record."""

    @abstractmethod
    async def get_file(self, file_id: int) -> FileRecord | None:
        """Return the file record, or None if unknown. Never raises."""

    @abstractmethod
    async def get_recent_files(self, limit: int) -> list[FileRecord]:
        """Return up to `limit` records, most recently uploaded first."""

    @abstractmethod
    async def create_processed_result(self, draft: ResultDraft) -> ProcessedResult:
        """Assign the next result id, stamp the creation time and store the record."""

    @abstractmethod
    async def get_processed_results_by_file_id(
        self, file_id: int
    ) -> list[ProcessedResult]:
        """Return every result for a file, newest first."""

    @abstractmethod
    async def get_processed_result(
        self,
        file_id: int,
        operation: OperationType,
        question: str | None = None,
    ) -> ProcessedResult | None:
        """Return the stored result for (file, operation, question-if-qa) or None."""
