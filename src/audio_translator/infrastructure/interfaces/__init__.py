"""Infrastructure interface exports."""

from .transcription_service import TranscriptionService
from .translation_service import TranslationService

__all__ = ["TranscriptionService", "TranslationService"]
