"""Domain layer exports."""

from .artifacts import discard_file
from .audio_converter import AudioConverter
from .models import (
    AudioAsset,
    JobStatus,
    NormalizedAudio,
    PipelineResult,
    TranscriptionJob,
    TranscriptStatusResponse,
    TranslationResult,
)

__all__ = [
    "AudioAsset",
    "AudioConverter",
    "JobStatus",
    "NormalizedAudio",
    "PipelineResult",
    "TranscriptionJob",
    "TranscriptStatusResponse",
    "TranslationResult",
    "discard_file",
]
