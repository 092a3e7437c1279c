"""Maps pipeline errors to HTTP responses."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from audio_translator.exceptions import (
    ConfigurationError,
    ConversionError,
    PipelineError,
    SubmissionError,
    TranscriptionFailedError,
    TranscriptionTimeoutError,
    TranslationError,
    UnsupportedFormatError,
    UploadError,
)
from audio_translator.logging import setup_logging

logger = setup_logging()

STATUS_CODES: dict[type[PipelineError], int] = {
    UnsupportedFormatError: 400,
    ConversionError: 422,
    ConfigurationError: 500,
    UploadError: 502,
    SubmissionError: 502,
    TranscriptionFailedError: 502,
    TranslationError: 502,
    TranscriptionTimeoutError: 504,
}


def status_code_for(error: PipelineError) -> int:
    for error_type, status_code in STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return 500


async def pipeline_error_handler(request: Request, exc: PipelineError) -> JSONResponse:
    status_code = status_code_for(exc)
    logger.error(
        "Request failed",
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "status_code": status_code,
        },
    )
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{field}: {error['msg']}" if field else error["msg"])
    message = "; ".join(problems) or "Invalid request"
    logger.warning("Request rejected", extra={"path": request.url.path, "error": message})
    return JSONResponse(status_code=422, content={"error": message})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unexpected error while handling request",
        exc_info=exc,
        extra={"path": request.url.path, "error_type": type(exc).__name__},
    )
    return JSONResponse(status_code=500, content={"error": "Failed to process the audio"})
