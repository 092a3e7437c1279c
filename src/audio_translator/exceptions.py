"""Custom exceptions for the audio-translator service."""


class PipelineError(Exception):
    """Base class for every failure the audio pipeline reports to its caller."""


class ConfigurationError(PipelineError):
    """Raised when a required setting such as an API credential is missing."""

    def __init__(self, setting_name: str):
        self.setting_name = setting_name
        super().__init__(f"Missing required configuration '{setting_name}'")


class UnsupportedFormatError(PipelineError):
    """Raised when an uploaded file has an extension outside the allow-list."""

    def __init__(self, file_name: str, extension: str):
        self.file_name = file_name
        self.extension = extension
        super().__init__(f"Unsupported audio format '{extension}' for '{file_name}'")


class ConversionError(PipelineError):
    """Raised when audio normalization fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        self.cause = cause
        message = f"Failed to convert audio file '{file_name}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class UploadError(PipelineError):
    """Raised when uploading audio to the transcription service fails."""

    def __init__(self, file_name: str, detail: str, cause: Exception | None = None):
        self.file_name = file_name
        self.detail = detail
        self.cause = cause
        super().__init__(f"Failed to upload '{file_name}' for transcription: {detail}")


class SubmissionError(PipelineError):
    """Raised when a transcription job cannot be created."""

    def __init__(self, upload_url: str, detail: str, cause: Exception | None = None):
        self.upload_url = upload_url
        self.detail = detail
        self.cause = cause
        super().__init__(f"Failed to submit transcription job: {detail}")


class TranscriptionFailedError(PipelineError):
    """Raised when a transcription job ends in the failed state."""

    def __init__(self, job_id: str, detail: str, cause: Exception | None = None):
        self.job_id = job_id
        self.detail = detail
        self.cause = cause
        super().__init__(f"Transcription job '{job_id}' failed: {detail}")


class TranscriptionTimeoutError(PipelineError):
    """Raised when a transcription job is not terminal within the polling window."""

    def __init__(self, job_id: str, timeout_seconds: float):
        self.job_id = job_id
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Transcription job '{job_id}' did not finish within {timeout_seconds:g}s"
        )


class TranslationError(PipelineError):
    """Raised when the translation service rejects or fails a request."""

    def __init__(
        self, target_language: str, detail: str, cause: Exception | None = None
    ):
        self.target_language = target_language
        self.detail = detail
        self.cause = cause
        super().__init__(f"Failed to translate text to '{target_language}': {detail}")


class InvalidJobTransition(Exception):
    """Raised when a transcription job would move backwards or leave a terminal state."""

    def __init__(self, job_id: str, current: str, requested: str):
        self.job_id = job_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Job '{job_id}' cannot move from '{current}' to '{requested}'"
        )
