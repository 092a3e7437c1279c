"""Infrastructure layer exports."""

from .assemblyai_transcriber import AssemblyAITranscriber
from .libretranslate_translator import LibreTranslateTranslator
from .local_storage import LocalUploadStorage

__all__ = ["AssemblyAITranscriber", "LibreTranslateTranslator", "LocalUploadStorage"]
