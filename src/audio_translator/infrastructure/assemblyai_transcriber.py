"""AssemblyAI implementation of the TranscriptionService interface."""

import asyncio
import time
from collections.abc import AsyncIterator, Awaitable, Callable

import aiofiles
import httpx

from audio_translator.config import AssemblyAIConfig
from audio_translator.domain.models import (
    JobStatus,
    TranscriptionJob,
    TranscriptStatusResponse,
)
from audio_translator.exceptions import (
    ConfigurationError,
    SubmissionError,
    TranscriptionFailedError,
    TranscriptionTimeoutError,
    UploadError,
)
from audio_translator.logging import setup_logging

from .http_errors import remote_error_detail
from .interfaces import TranscriptionService

logger = setup_logging()

_UPLOAD_CHUNK_SIZE = 5 * 1024 * 1024
_FINAL_QUERY_GRACE_SECONDS = 0.5

# Remote status strings mapped onto the job lifecycle.
_REMOTE_STATUSES = {
    "queued": JobStatus.PROCESSING,
    "processing": JobStatus.PROCESSING,
    "completed": JobStatus.COMPLETED,
    "failed": JobStatus.FAILED,
    "error": JobStatus.FAILED,
}


async def _read_chunks(path: str) -> AsyncIterator[bytes]:
    async with aiofiles.open(path, "rb") as f:
        while chunk := await f.read(_UPLOAD_CHUNK_SIZE):
            yield chunk


class AssemblyAITranscriber(TranscriptionService):
    """Handles audio transcription against the AssemblyAI REST API."""

    def __init__(
        self,
        config: AssemblyAIConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._config = config
        self._transport = transport
        self._clock = clock
        self._sleep = sleep

    async def transcribe(self, audio_path: str) -> str:
        """
        Uploads audio, submits a transcription job and waits for it to finish.

        Only the text of a job observed as completed is returned; every other
        outcome raises one of the pipeline errors.
        """
        if not self._config.api_key:
            raise ConfigurationError("ASSEMBLYAI_API_KEY")

        async with self._client() as client:
            upload_url = await self.upload(client, audio_path)
            submitted_at = self._clock()
            job = await self.submit(client, upload_url)
            job = await self.poll(client, job, started=submitted_at)

        logger.info(
            "Audio transcription successful",
            extra={"job_id": job.job_id, "characters": len(job.text or "")},
        )
        return job.text

    async def upload(self, client: httpx.AsyncClient, audio_path: str) -> str:
        """Streams the file to remote storage and returns its upload URL."""
        try:
            response = await client.post(
                "/upload",
                content=_read_chunks(audio_path),
                headers={"Content-Type": "application/octet-stream"},
            )
            response.raise_for_status()
            upload_url = response.json()["upload_url"]
        except (httpx.HTTPError, OSError, ValueError, KeyError) as e:
            logger.exception("AssemblyAI upload failed", extra={"path": audio_path})
            raise UploadError(audio_path, remote_error_detail(e), e) from e

        logger.info("Audio uploaded", extra={"path": audio_path})
        return upload_url

    async def submit(self, client: httpx.AsyncClient, upload_url: str) -> TranscriptionJob:
        """Creates a transcription job for an uploaded file."""
        try:
            response = await client.post("/transcript", json={"audio_url": upload_url})
            response.raise_for_status()
            job_id = response.json()["id"]
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.exception("AssemblyAI job submission failed")
            raise SubmissionError(upload_url, remote_error_detail(e), e) from e

        logger.info("Transcription job submitted", extra={"job_id": job_id})
        return TranscriptionJob(job_id=str(job_id))

    async def poll(
        self,
        client: httpx.AsyncClient,
        job: TranscriptionJob,
        started: float | None = None,
    ) -> TranscriptionJob:
        """
        Queries job status until the job is terminal or the deadline passes.

        The first query is sent immediately. While the job is processing, the
        loop suspends for the poll interval between queries. The deadline is
        measured from ``started`` (the submission time, or now when omitted).
        A query in flight is cut off at the deadline; a query sent at or after
        it gets a short grace period so a job finishing on the boundary is
        still observed.

        Returns:
            The job in the completed state, with its text.

        Raises:
            TranscriptionFailedError: If the job fails or a status query fails.
            TranscriptionTimeoutError: If the job is still processing at the deadline.
        """
        interval = self._config.poll_interval_seconds
        timeout = self._config.poll_timeout_seconds
        if started is None:
            started = self._clock()
        deadline = started + timeout

        while True:
            budget = max(deadline - self._clock(), _FINAL_QUERY_GRACE_SECONDS)
            try:
                async with asyncio.timeout(budget):
                    body = await self._fetch_status(client, job.job_id)
            except TimeoutError:
                raise self._timed_out(job, timeout)

            status = self._map_status(job.job_id, body.status)

            logger.info(
                "Transcription status",
                extra={"job_id": job.job_id, "status": body.status},
            )

            if status == JobStatus.COMPLETED:
                if body.text is None:
                    job = job.advance(JobStatus.FAILED, error="completed without text")
                    raise TranscriptionFailedError(job.job_id, job.error)
                return job.advance(JobStatus.COMPLETED, text=body.text)

            if status == JobStatus.FAILED:
                job = job.advance(JobStatus.FAILED, error=body.error or "unknown error")
                logger.error(
                    "Transcription job failed",
                    extra={"job_id": job.job_id, "error": job.error},
                )
                raise TranscriptionFailedError(job.job_id, job.error)

            job = job.advance(JobStatus.PROCESSING)

            if self._clock() >= deadline:
                raise self._timed_out(job, timeout)

            await self._sleep(interval)

    def _timed_out(
        self, job: TranscriptionJob, timeout: float
    ) -> TranscriptionTimeoutError:
        job = job.advance(JobStatus.TIMED_OUT)
        logger.error(
            "Transcription polling timed out",
            extra={"job_id": job.job_id, "timeout_seconds": timeout},
        )
        return TranscriptionTimeoutError(job.job_id, timeout)

    async def _fetch_status(
        self, client: httpx.AsyncClient, job_id: str
    ) -> TranscriptStatusResponse:
        try:
            response = await client.get(f"/transcript/{job_id}")
            response.raise_for_status()
            return TranscriptStatusResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.exception("AssemblyAI status query failed", extra={"job_id": job_id})
            raise TranscriptionFailedError(job_id, remote_error_detail(e), e) from e

    def _map_status(self, job_id: str, remote_status: str) -> JobStatus:
        status = _REMOTE_STATUSES.get(remote_status)
        if status is None:
            logger.warning(
                "Unknown transcription status, still waiting",
                extra={"job_id": job_id, "status": remote_status},
            )
            return JobStatus.PROCESSING
        return status

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.base_url,
            headers={"authorization": self._config.api_key},
            timeout=self._config.request_timeout_seconds,
            transport=self._transport,
        )
