"""API route exports."""

from .audio import router as audio_router
from .errors import pipeline_error_handler, unexpected_error_handler, validation_error_handler

__all__ = [
    "audio_router",
    "pipeline_error_handler",
    "unexpected_error_handler",
    "validation_error_handler",
]
