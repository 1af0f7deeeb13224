from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import PlainTextResponse

from docgenius.api.dependencies import Services, get_services
from docgenius.api.schemas import (
    DeleteOut,
    FileOut,
    ProcessDocumentRequest,
    ProcessedResultOut,
    QARequest,
    QAResultOut,
    ResultOut,
)
from docgenius.logging.logger import Log
from docgenius.processing.download import (
    content_disposition,
    download_filename,
    render_download,
)
from docgenius.processing.exceptions import (
    FileRecordNotFoundError,
    InvalidRequestError,
    ResultNotFoundError,
)
from docgenius.storage.models import OperationType, ProcessedResult

router = APIRouter(prefix="/api")

ServicesDep = Annotated[Services, Depends(get_services)]


@router.post("/upload", response_model=FileOut)
async def upload_file(
    services: ServicesDep,
    file: Annotated[UploadFile | None, File()] = None,
) -> FileOut:
    if file is None or not file.filename:
        raise InvalidRequestError("No file uploaded")
    media_type = file.content_type or ""
    intake = services.intake
    intake.validate(media_type, file.size)
    # At most one byte past the ceiling is buffered.
    data = await file.read(intake.max_upload_bytes + 1)
    record = await intake.accept(
        original_name=file.filename,
        media_type=media_type,
        data=data,
    )
    return FileOut.from_record(record)


@router.get("/files/recent", response_model=list[FileOut])
async def recent_files(services: ServicesDep) -> list[FileOut]:
    records = await services.store.get_recent_files(services.settings.recent_files_limit)
    return [FileOut.from_record(r) for r in records]


@router.post("/summarize", response_model=ResultOut)
async def summarize(body: ProcessDocumentRequest, services: ServicesDep) -> ResultOut:
    outcome = await services.cache.get_or_create(body.file_id, OperationType.SUMMARY)
    return ResultOut(result=outcome.result)


@router.post("/qa", response_model=QAResultOut, response_model_exclude_none=True)
async def answer_question(body: QARequest, services: ServicesDep) -> QAResultOut:
    outcome = await services.cache.get_or_create(
        body.file_id, OperationType.QA, body.question
    )
    return QAResultOut(
        result=outcome.result,
        question=outcome.question or body.question,
        page_reference=outcome.page_reference,
    )


@router.post("/math", response_model=ResultOut)
async def solve_math(body: ProcessDocumentRequest, services: ServicesDep) -> ResultOut:
    outcome = await services.cache.get_or_create(body.file_id, OperationType.MATH)
    return ResultOut(result=outcome.result)


@router.get("/download/{operation}/{file_id}", response_class=PlainTextResponse)
async def download_result(
    operation: str,
    file_id: int,
    services: ServicesDep,
    question: str | None = None,
) -> PlainTextResponse:
    file = await services.store.get_file(file_id)
    if file is None:
        raise FileRecordNotFoundError("File not found")

    try:
        op = OperationType(operation)
    except ValueError:
        raise ResultNotFoundError("Result not found") from None
    result = await _find_download_result(services, file_id, op, question)
    if result is None:
        raise ResultNotFoundError("Result not found")

    today = date.today()
    filename = download_filename(file.original_name, op, today)
    Log.info(f"Serving {op.value} download for file {file_id}")
    return PlainTextResponse(
        render_download(result.result, op, today),
        headers={"Content-Disposition": content_disposition(filename)},
    )


async def _find_download_result(
    services: Services,
    file_id: int,
    operation: OperationType,
    question: str | None,
) -> ProcessedResult | None:
    if operation is not OperationType.QA or question:
        return await services.store.get_processed_result(file_id, operation, question)
    # Without a question, a Q&A download serves the latest answer.
    results = await services.store.get_processed_results_by_file_id(file_id)
    return next((r for r in results if r.type is OperationType.QA), None)


@router.get("/files/{file_id}/results", response_model=list[ProcessedResultOut])
async def file_results(file_id: int, services: ServicesDep) -> list[ProcessedResultOut]:
    records = await services.store.get_processed_results_by_file_id(file_id)
    return [ProcessedResultOut.from_record(r) for r in records]


@router.delete("/files/{file_id}", response_model=DeleteOut)
async def delete_file(file_id: int) -> DeleteOut:
    # Files live in memory for the process lifetime; the client clears its own copy.
    Log.debug(f"Delete requested for file {file_id}; server state unchanged")
    return DeleteOut(success=True, message="File deleted successfully")
