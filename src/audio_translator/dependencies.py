"""Dependency injection configuration for the audio-translator service."""

from audio_translator.config import AppConfig, load_config
from audio_translator.domain import AudioConverter
from audio_translator.handlers import AudioPipelineHandler
from audio_translator.infrastructure import (
    AssemblyAITranscriber,
    LibreTranslateTranslator,
    LocalUploadStorage,
)
from audio_translator.infrastructure.interfaces import (
    TranscriptionService,
    TranslationService,
)
from audio_translator.logging import setup_logging

logger = setup_logging()

_config = load_config()

if not _config.assemblyai.api_key:
    logger.warning("ASSEMBLYAI_API_KEY is not set; transcription requests will fail")

_storage = LocalUploadStorage(_config.storage.upload_dir)

_converter = AudioConverter(
    sample_rate=_config.audio.sample_rate,
    channels=_config.audio.channels,
)

_transcription_service = AssemblyAITranscriber(_config.assemblyai)

_translation_service = LibreTranslateTranslator(_config.translation)


def get_config() -> AppConfig:
    """Returns the loaded application configuration."""
    return _config


def get_storage() -> LocalUploadStorage:
    """Returns the configured upload storage."""
    return _storage


def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service."""
    return _transcription_service


def get_translation_service() -> TranslationService:
    """Returns the configured translation service."""
    return _translation_service


def get_handler() -> AudioPipelineHandler:
    """Returns the configured audio pipeline handler."""
    return AudioPipelineHandler(
        _converter,
        _transcription_service,
        _translation_service,
        default_target_language=_config.translation.target_language,
        allowed_extensions=_config.audio.allowed_extensions,
    )
