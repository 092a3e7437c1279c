"""Audio upload, transcription and translation service."""

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

__all__ = [
    "PipelineError",
    "ConfigurationError",
    "UnsupportedFormatError",
    "ConversionError",
    "UploadError",
    "SubmissionError",
    "TranscriptionFailedError",
    "TranscriptionTimeoutError",
    "TranslationError",
]
