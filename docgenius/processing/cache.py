"""Cache-aside access to AI results stored in the record store."""

import asyncio

from starlette.concurrency import run_in_threadpool

from docgenius.generation.base import BaseTextGenerator
from docgenius.logging.logger import Log
from docgenius.processing.exceptions import FileRecordNotFoundError, InvalidRequestError
from docgenius.processing.models import CachedResult
from docgenius.processing.page_reference import extract_page_reference
from docgenius.storage.base import BaseRecordStore
from docgenius.storage.models import (
    OperationType,
    ProcessedResult,
    ResultDraft,
    ResultKey,
    result_key,
)


class ResultCache:
    """Returns a stored result for (file, operation, question) or generates one.

    Concurrent misses on the same key are serialised so the generator is
    called once per key; other keys proceed independently.
    """

    def __init__(self, store: BaseRecordStore, generator: BaseTextGenerator) -> None:
        self._store = store
        self._generator = generator
        self._locks: dict[ResultKey, asyncio.Lock] = {}
        self._waiters: dict[ResultKey, int] = {}

    async def get_or_create(
        self,
        file_id: int,
        operation: OperationType,
        question: str | None = None,
    ) -> CachedResult:
        """Return the cached result or compute, store and return a new one.

        Raises:
            InvalidRequestError: if a Q&A request has no question.
            FileRecordNotFoundError: if the file does not exist.
            GenerationError: if the AI provider fails.
        """
        if operation is OperationType.QA and not (question and question.strip()):
            raise InvalidRequestError("Question must not be empty")
        key = result_key(file_id, operation, question)

        existing = await self._store.get_processed_result(*key)
        if existing is not None:
            Log.info(f"Cache hit for file {file_id} ({operation.value})")
            return self._to_cached(existing, cached=True)

        lock = self._locks.setdefault(key, asyncio.Lock())
        self._waiters[key] = self._waiters.get(key, 0) + 1
        try:
            async with lock:
                # Another request may have stored the result while we waited.
                existing = await self._store.get_processed_result(*key)
                if existing is not None:
                    Log.info(f"Cache hit after wait for file {file_id} ({operation.value})")
                    return self._to_cached(existing, cached=True)
                return await self._compute(*key)
        finally:
            # Entry lives while any request holds or waits on the lock.
            self._waiters[key] -= 1
            if self._waiters[key] == 0:
                del self._waiters[key]
                del self._locks[key]

    async def _compute(
        self,
        file_id: int,
        operation: OperationType,
        question: str | None,
    ) -> CachedResult:
        file = await self._store.get_file(file_id)
        if file is None:
            raise FileRecordNotFoundError("File not found")

        Log.info(f"Cache miss for file {file_id} ({operation.value}), calling AI provider")
        text = await run_in_threadpool(
            self._generator.generate,
            operation,
            file.content,
            file.original_name,
            question,
        )
        stored = await self._store.create_processed_result(
            ResultDraft(file_id=file_id, type=operation, result=text, question=question)
        )
        return self._to_cached(stored, cached=False)

    @staticmethod
    def _to_cached(record: ProcessedResult, *, cached: bool) -> CachedResult:
        if record.type is not OperationType.QA:
            return CachedResult(result=record.result, cached=cached)
        return CachedResult(
            result=record.result,
            cached=cached,
            question=record.question,
            page_reference=extract_page_reference(record.result),
        )
