from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from docgenius.storage.models import FileRecord, OperationType, ProcessedResult


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProcessDocumentRequest(CamelModel):
    file_id: int


class QARequest(CamelModel):
    file_id: int
    question: str

    @field_validator("question")
    @classmethod
    def _question_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("question must not be empty")
        return value


class FileOut(CamelModel):
    id: int
    original_name: str
    file_type: str
    file_size: int
    uploaded_at: datetime

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileOut":
        return cls(
            id=record.id,
            original_name=record.original_name,
            file_type=record.file_type,
            file_size=record.file_size,
            uploaded_at=record.uploaded_at,
        )


class ResultOut(CamelModel):
    result: str


class QAResultOut(CamelModel):
    result: str
    question: str
    page_reference: str | None = None


class ProcessedResultOut(CamelModel):
    id: int
    file_id: int
    type: OperationType
    question: str | None
    result: str
    created_at: datetime

    @classmethod
    def from_record(cls, record: ProcessedResult) -> "ProcessedResultOut":
        return cls(
            id=record.id,
            file_id=record.file_id,
            type=record.type,
            question=record.question,
            result=record.result,
            created_at=record.created_at,
        )


class DeleteOut(CamelModel):
    success: bool
    message: str


class HealthOut(CamelModel):
    status: str
    version: str
