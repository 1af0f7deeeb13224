from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from docgenius.extraction.exceptions import ExtractionError, UnsupportedMediaTypeError
from docgenius.generation.exceptions import GenerationError
from docgenius.logging.logger import Log
from docgenius.processing.exceptions import (
    FileRecordNotFoundError,
    InvalidRequestError,
    ResultNotFoundError,
)

GENERIC_MESSAGES: dict[str, str] = {
    "upload_file": "Failed to upload file",
    "recent_files": "Failed to get recent files",
    "summarize": "Failed to generate summary",
    "answer_question": "Failed to generate answer",
    "solve_math": "Failed to solve mathematical problems",
    "download_result": "Failed to download file",
    "file_results": "Failed to get results",
    "delete_file": "Failed to delete file",
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _endpoint_name(request: Request) -> str:
    endpoint = request.scope.get("endpoint")
    return getattr(endpoint, "__name__", "")


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    Log.warning(f"Invalid request data for {request.url.path}: {exc.errors()}")
    return _error(400, "Invalid request data")


async def handle_invalid_request(request: Request, exc: Exception) -> JSONResponse:
    Log.warning(f"Rejected request to {request.url.path}: {exc}")
    return _error(400, str(exc))


async def handle_not_found(request: Request, exc: Exception) -> JSONResponse:
    return _error(404, str(exc))


async def handle_upstream(request: Request, exc: Exception) -> JSONResponse:
    Log.error(f"{_endpoint_name(request) or request.url.path} failed: {exc}")
    return _error(500, str(exc) or GENERIC_MESSAGES.get(_endpoint_name(request), "Internal server error"))


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unexpected error in {request.url.path}: {exc}")
    return _error(500, GENERIC_MESSAGES.get(_endpoint_name(request), "Internal server error"))


def register_error_handlers(app: FastAPI) -> None:
    """Map domain exceptions onto JSON error responses."""
    app.add_exception_handler(RequestValidationError, handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(InvalidRequestError, handle_invalid_request)
    app.add_exception_handler(UnsupportedMediaTypeError, handle_invalid_request)
    app.add_exception_handler(FileRecordNotFoundError, handle_not_found)
    app.add_exception_handler(ResultNotFoundError, handle_not_found)
    app.add_exception_handler(ExtractionError, handle_upstream)
    app.add_exception_handler(GenerationError, handle_upstream)
    app.add_exception_handler(Exception, handle_unexpected)
