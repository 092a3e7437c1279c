"""Handler for processing uploaded audio files."""

from contextlib import ExitStack

from audio_translator.domain import (
    AudioAsset,
    AudioConverter,
    PipelineResult,
    discard_file,
)
from audio_translator.exceptions import UnsupportedFormatError
from audio_translator.infrastructure.interfaces import (
    TranscriptionService,
    TranslationService,
)
from audio_translator.logging import setup_logging

logger = setup_logging()

DEFAULT_ALLOWED_EXTENSIONS = (".wav", ".mp3", ".m4a")


class AudioPipelineHandler:
    """Orchestrates audio-to-translation operations."""

    def __init__(
        self,
        converter: AudioConverter,
        transcription_service: TranscriptionService,
        translation_service: TranslationService,
        default_target_language: str = "es",
        allowed_extensions: tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS,
    ):
        self._converter = converter
        self._transcription_service = transcription_service
        self._translation_service = translation_service
        self._default_target_language = default_target_language
        self._allowed_extensions = tuple(ext.lower() for ext in allowed_extensions)

    async def process(
        self, asset: AudioAsset, target_language: str | None = None
    ) -> PipelineResult:
        """
        Converts, transcribes and translates an uploaded audio file.

        The uploaded file and the normalized file are deleted before this
        method returns, whether it succeeds or raises.

        Args:
            asset: The stored upload. Ownership passes to this handler.
            target_language: Overrides the configured translation target.

        Returns:
            PipelineResult with the transcript and its translation.

        Raises:
            UnsupportedFormatError: If the extension is not allowed.
            ConversionError: If audio normalization fails.
            ConfigurationError: If the transcription credential is missing.
            UploadError: If the audio upload fails.
            SubmissionError: If the transcription job cannot be created.
            TranscriptionFailedError: If the transcription job fails.
            TranscriptionTimeoutError: If the transcription job does not finish in time.
            TranslationError: If translation fails.
        """
        target_language = target_language or self._default_target_language

        logger.info(
            "Processing audio",
            extra={
                "file_name": asset.original_filename,
                "path": asset.path,
                "target_language": target_language,
            },
        )

        with ExitStack() as artifacts:
            artifacts.callback(discard_file, asset.path)

            extension = asset.extension.lower()
            if extension not in self._allowed_extensions:
                logger.warning(
                    "Rejected unsupported audio format",
                    extra={"file_name": asset.original_filename, "extension": extension},
                )
                raise UnsupportedFormatError(asset.original_filename, extension)

            artifacts.callback(discard_file, self._converter.output_path_for(asset))
            normalized = await self._converter.convert(asset)

            transcript_text = await self._transcription_service.transcribe(
                normalized.path
            )

            if transcript_text.strip():
                translation = await self._translation_service.translate(
                    transcript_text, target_language
                )
                translated_text = translation.translated_text
            else:
                logger.info(
                    "Empty transcript, skipping translation",
                    extra={"file_name": asset.original_filename},
                )
                translated_text = ""

        logger.info(
            "Audio processed",
            extra={
                "file_name": asset.original_filename,
                "target_language": target_language,
            },
        )

        return PipelineResult(
            transcript_text=transcript_text,
            translated_text=translated_text,
            target_language=target_language,
        )
