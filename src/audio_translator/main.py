"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from audio_translator.dependencies import get_config
from audio_translator.exceptions import PipelineError
from audio_translator.logging import setup_logging
from audio_translator.routes import (
    audio_router,
    pipeline_error_handler,
    unexpected_error_handler,
    validation_error_handler,
)

patch_all()

logger = setup_logging()

_config = get_config()

app = FastAPI(title="Audio Translator Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_config.server.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(PipelineError, pipeline_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)
app.include_router(audio_router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info(
        "Request handled",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
        },
    )
    return response


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


def main():
    """Starts the HTTP server."""
    uvicorn.run(app, host=_config.server.host, port=_config.server.port)


if __name__ == "__main__":
    main()
