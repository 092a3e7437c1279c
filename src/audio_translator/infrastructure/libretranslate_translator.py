"""LibreTranslate implementation of the TranslationService interface."""

import httpx

from audio_translator.config import TranslationConfig
from audio_translator.domain.models import TranslationResult
from audio_translator.exceptions import TranslationError
from audio_translator.logging import setup_logging

from .http_errors import remote_error_detail
from .interfaces import TranslationService

logger = setup_logging()


class LibreTranslateTranslator(TranslationService):
    """Handles text translation using a LibreTranslate server."""

    def __init__(
        self,
        config: TranslationConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    async def translate(self, text: str, target_language: str) -> TranslationResult:
        if not text or not text.strip():
            raise TranslationError(target_language, "text to translate is empty")

        payload = {
            "q": text,
            "source": self._config.source_language,
            "target": target_language,
            "format": "text",
        }
        if self._config.api_key:
            payload["api_key"] = self._config.api_key

        try:
            async with httpx.AsyncClient(
                base_url=self._config.base_url,
                timeout=self._config.request_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post("/translate", json=payload)
                response.raise_for_status()
                translated_text = response.json()["translatedText"]
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.exception(
                "Translation failed",
                extra={
                    "source_language": self._config.source_language,
                    "target_language": target_language,
                },
            )
            raise TranslationError(target_language, remote_error_detail(e), e) from e

        logger.info(
            "Text translated",
            extra={
                "source_language": self._config.source_language,
                "target_language": target_language,
                "characters": len(text),
            },
        )
        return TranslationResult(
            source_text=text,
            target_language=target_language,
            translated_text=translated_text,
        )
