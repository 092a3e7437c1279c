"""Domain models for the audio translation pipeline."""

from enum import StrEnum

from pydantic import BaseModel

from audio_translator.exceptions import InvalidJobTransition


class AudioAsset(BaseModel, frozen=True):
    """An uploaded audio file on local ephemeral storage."""

    path: str
    original_filename: str
    extension: str


class NormalizedAudio(BaseModel, frozen=True):
    """PCM WAV derivative of an AudioAsset."""

    path: str
    source: AudioAsset
    sample_rate: int
    channels: int


class JobStatus(StrEnum):
    """Lifecycle states of a remote transcription job."""

    SUBMITTED = "submitted"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"

    @property
    def is_terminal(self) -> bool:
        return self in _TERMINAL


_TERMINAL = frozenset({JobStatus.COMPLETED, JobStatus.FAILED, JobStatus.TIMED_OUT})

_ALLOWED_TRANSITIONS = {
    JobStatus.SUBMITTED: frozenset(
        {JobStatus.PROCESSING, JobStatus.COMPLETED, JobStatus.FAILED, JobStatus.TIMED_OUT}
    ),
    JobStatus.PROCESSING: frozenset(
        {JobStatus.PROCESSING, JobStatus.COMPLETED, JobStatus.FAILED, JobStatus.TIMED_OUT}
    ),
    JobStatus.COMPLETED: frozenset(),
    JobStatus.FAILED: frozenset(),
    JobStatus.TIMED_OUT: frozenset(),
}


class TranscriptionJob(BaseModel, frozen=True):
    """Snapshot of a remote transcription job."""

    job_id: str
    status: JobStatus = JobStatus.SUBMITTED
    text: str | None = None
    error: str | None = None

    def advance(
        self, status: JobStatus, text: str | None = None, error: str | None = None
    ) -> "TranscriptionJob":
        """
        Returns the job in its next state.

        Text is kept only for a completed job and error only for a failed one.

        Raises:
            InvalidJobTransition: If the move is not forward from the current status.
        """
        if status not in _ALLOWED_TRANSITIONS[self.status]:
            raise InvalidJobTransition(self.job_id, self.status, status)
        return self.model_copy(
            update={
                "status": status,
                "text": text if status == JobStatus.COMPLETED else None,
                "error": error if status == JobStatus.FAILED else None,
            }
        )


class TranscriptStatusResponse(BaseModel, frozen=True):
    """Body of a transcription status query."""

    status: str
    text: str | None = None
    error: str | None = None


class TranslationResult(BaseModel, frozen=True):
    """Result of a single translation call."""

    source_text: str
    target_language: str
    translated_text: str


class PipelineResult(BaseModel, frozen=True):
    """Outcome of a full convert, transcribe and translate run."""

    transcript_text: str
    translated_text: str
    target_language: str
