"""Abstract interface for transcription service operations."""

from abc import ABC, abstractmethod


class TranscriptionService(ABC):
    """Abstract base class for speech transcription backends."""

    @abstractmethod
    async def transcribe(self, audio_path: str) -> str:
        """
        Transcribes a normalized audio file.

        Args:
            audio_path: Path to a PCM WAV file on local storage.

        Returns:
            The transcript text of a completed job.

        Raises:
            ConfigurationError: If the API credential is missing.
            UploadError: If the audio upload fails.
            SubmissionError: If the job cannot be created.
            TranscriptionFailedError: If the job fails or cannot be polled.
            TranscriptionTimeoutError: If the job is not terminal in time.
        """
        pass
