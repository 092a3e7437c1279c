"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class AssemblyAIConfig(BaseModel, frozen=True):
    """AssemblyAI API configuration."""

    api_key: str
    base_url: str = "https://api.assemblyai.com/v2"
    poll_interval_seconds: float = 3.0
    poll_timeout_seconds: float = 30.0
    request_timeout_seconds: float = 60.0


class TranslationConfig(BaseModel, frozen=True):
    """LibreTranslate API configuration."""

    base_url: str = "https://libretranslate.de"
    api_key: str | None = None
    source_language: str = "en"
    target_language: str = "es"
    request_timeout_seconds: float = 30.0


class AudioConfig(BaseModel, frozen=True):
    """Target PCM encoding for normalized audio."""

    sample_rate: int = 16000
    channels: int = 1
    allowed_extensions: tuple[str, ...] = (".wav", ".mp3", ".m4a")


class StorageConfig(BaseModel, frozen=True):
    """Local storage for uploaded and derived audio files."""

    upload_dir: str = "uploads"


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 5000
    cors_allow_origins: tuple[str, ...] = ("*",)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    assemblyai: AssemblyAIConfig
    translation: TranslationConfig
    audio: AudioConfig = AudioConfig()
    storage: StorageConfig = StorageConfig()
    server: ServerConfig = ServerConfig()


def _split_csv(value: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        assemblyai=AssemblyAIConfig(
            api_key=os.getenv("ASSEMBLYAI_API_KEY", ""),
            base_url=os.getenv("ASSEMBLYAI_BASE_URL", "https://api.assemblyai.com/v2"),
            poll_interval_seconds=float(
                os.getenv("TRANSCRIPTION_POLL_INTERVAL_SECONDS", "3")
            ),
            poll_timeout_seconds=float(
                os.getenv("TRANSCRIPTION_POLL_TIMEOUT_SECONDS", "30")
            ),
        ),
        translation=TranslationConfig(
            base_url=os.getenv("TRANSLATION_BASE_URL", "https://libretranslate.de"),
            api_key=os.getenv("TRANSLATION_API_KEY") or None,
            source_language=os.getenv("TRANSLATION_SOURCE_LANGUAGE", "en"),
            target_language=os.getenv("TRANSLATION_TARGET_LANGUAGE", "es"),
        ),
        storage=StorageConfig(
            upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "5000")),
            cors_allow_origins=_split_csv(os.getenv("CORS_ALLOW_ORIGINS", "*")),
        ),
    )
