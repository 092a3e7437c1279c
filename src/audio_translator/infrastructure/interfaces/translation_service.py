"""Abstract interface for translation service operations."""

from abc import ABC, abstractmethod

from audio_translator.domain.models import TranslationResult


class TranslationService(ABC):
    """Abstract base class for text translation backends."""

    @abstractmethod
    async def translate(self, text: str, target_language: str) -> TranslationResult:
        """
        Translates text into the target language.

        Args:
            text: Non-empty source text.
            target_language: Language code such as "es".

        Returns:
            TranslationResult holding the remote translation unchanged.

        Raises:
            TranslationError: If the text is empty or the remote call fails.
        """
        pass
