import uuid
from pathlib import Path

from starlette.concurrency import run_in_threadpool

from docgenius.extraction.base import SUPPORTED_MEDIA_TYPES, BaseTextExtractor
from docgenius.extraction.exceptions import ExtractionError
from docgenius.logging.logger import Log
from docgenius.processing.exceptions import InvalidRequestError
from docgenius.storage.base import BaseRecordStore
from docgenius.storage.models import FileDraft, FileRecord


class UploadIntake:
    """Validates an uploaded payload, saves it, extracts its text and stores it."""

    def __init__(
        self,
        store: BaseRecordStore,
        extractor: BaseTextExtractor,
        upload_dir: Path,
        max_upload_bytes: int,
    ) -> None:
        self._store = store
        self._extractor = extractor
        self._upload_dir = upload_dir
        self._max_upload_bytes = max_upload_bytes

    @property
    def max_upload_bytes(self) -> int:
        return self._max_upload_bytes

    def validate(self, media_type: str, size: int | None) -> None:
        """Reject a payload by declared type and size before it is read.

        Raises:
            InvalidRequestError: on unsupported media type or oversized payload.
        """
        if media_type not in SUPPORTED_MEDIA_TYPES:
            raise InvalidRequestError("Unsupported file type")
        if size is not None and size > self._max_upload_bytes:
            raise InvalidRequestError("File too large")

    async def accept(self, original_name: str, media_type: str, data: bytes) -> FileRecord:
        """Store an uploaded file and its extracted text.

        Raises:
            InvalidRequestError: on unsupported media type or oversized payload.
            ExtractionError: if text extraction fails.
        """
        self.validate(media_type, len(data))

        stored_name = uuid.uuid4().hex
        path = self._save(stored_name, data)
        Log.info(f"Received {original_name} ({media_type}, {len(data)} bytes) as {stored_name}")

        try:
            extracted = await run_in_threadpool(self._extractor.extract, path, media_type)
        except ExtractionError:
            path.unlink(missing_ok=True)
            raise
        Log.info(
            f"Extracted {len(extracted.content)} chars from {original_name}"
            + (f" ({extracted.page_count} pages)" if extracted.page_count else "")
        )

        return await self._store.create_file(
            FileDraft(
                filename=stored_name,
                original_name=original_name,
                file_type=media_type,
                file_size=len(data),
                content=extracted.content,
            )
        )

    def _save(self, stored_name: str, data: bytes) -> Path:
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        path = self._upload_dir / stored_name
        path.write_bytes(data)
        return path
