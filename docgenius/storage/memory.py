from dataclasses import asdict
from datetime import datetime, timezone

from docgenius.logging.logger import Log
from docgenius.storage.base import BaseRecordStore
from docgenius.storage.models import (
    FileDraft,
    FileRecord,
    OperationType,
    ProcessedResult,
    ResultDraft,
    result_key,
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemoryRecordStore(BaseRecordStore):
    """Process-lifetime storage backed by plain dicts.

    Every write is a single dict insertion with no await in between, so it is
    atomic with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._files: dict[int, FileRecord] = {}
        self._results: dict[int, ProcessedResult] = {}
        self._next_file_id = 1
        self._next_result_id = 1

    async def create_file(self, draft: FileDraft) -> FileRecord:
        record = FileRecord(
            id=self._next_file_id,
            uploaded_at=_utcnow(),
            **asdict(draft),
        )
        self._next_file_id += 1
        self._files[record.id] = record
        Log.debug(f"Stored file {record.id} ({record.original_name})")
        return record

    async def get_file(self, file_id: int) -> FileRecord | None:
        return self._files.get(file_id)

    async def get_recent_files(self, limit: int) -> list[FileRecord]:
        # sorted() is stable, so equal timestamps keep insertion order.
        ordered = sorted(
            self._files.values(), key=lambda f: f.uploaded_at, reverse=True
        )
        return ordered[: max(limit, 0)]

    async def create_processed_result(self, draft: ResultDraft) -> ProcessedResult:
        """Insert a result unless one already exists for its composite key.

        The first write for (file_id, type, question-if-qa) wins; later writes
        return the existing record unchanged.
        """
        existing = self._find_result(draft.file_id, draft.type, draft.question)
        if existing is not None:
            Log.debug(
                f"Result for file {draft.file_id} ({draft.type.value}) already "
                f"stored as {existing.id}"
            )
            return existing

        record = ProcessedResult(
            id=self._next_result_id,
            file_id=draft.file_id,
            type=draft.type,
            question=draft.question if draft.type is OperationType.QA else None,
            result=draft.result,
            created_at=_utcnow(),
        )
        self._next_result_id += 1
        self._results[record.id] = record
        return record

    async def get_processed_results_by_file_id(
        self, file_id: int
    ) -> list[ProcessedResult]:
        matches = [r for r in self._results.values() if r.file_id == file_id]
        return sorted(matches, key=lambda r: (r.created_at, r.id), reverse=True)

    async def get_processed_result(
        self,
        file_id: int,
        operation: OperationType,
        question: str | None = None,
    ) -> ProcessedResult | None:
        return self._find_result(file_id, operation, question)

    def _find_result(
        self,
        file_id: int,
        operation: OperationType,
        question: str | None,
    ) -> ProcessedResult | None:
        wanted = result_key(file_id, operation, question)
        for record in self._results.values():
            if result_key(record.file_id, record.type, record.question) == wanted:
                return record
        return None
