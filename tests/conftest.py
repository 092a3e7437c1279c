import os

os.environ.setdefault("DD_TRACE_ENABLED", "false")

import httpx
import pytest

from audio_translator.config import AssemblyAIConfig
from audio_translator.domain import AudioAsset, AudioConverter, NormalizedAudio, TranslationResult
from audio_translator.infrastructure import AssemblyAITranscriber
from audio_translator.infrastructure.interfaces import TranscriptionService, TranslationService


class FakeClock:
    """Monotonic clock that only moves when the code under test sleeps."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    async def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class ScriptedAssemblyAI:
    """Stands in for the transcription API, replaying a list of status bodies."""

    def __init__(self, clock, statuses, upload_response=None, submit_response=None, submit_delay=0.0):
        self.clock = clock
        self.submit_delay = submit_delay
        self.statuses = list(statuses)
        self.upload_response = upload_response or httpx.Response(
            200, json={"upload_url": "https://cdn.example.com/upload/abc"}
        )
        self.submit_response = submit_response or httpx.Response(200, json={"id": "job-1"})
        self.requests = []
        self.poll_times = []

    def __call__(self, request):
        self.requests.append(request)
        if request.method == "POST" and request.url.path.endswith("/upload"):
            return self.upload_response
        if request.method == "POST" and request.url.path.endswith("/transcript"):
            self.clock.now += self.submit_delay
            return self.submit_response
        if request.method == "GET" and "/transcript/" in request.url.path:
            self.poll_times.append(self.clock.now)
            body = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
            if isinstance(body, httpx.Response):
                return body
            return httpx.Response(200, json=body)
        return httpx.Response(404, json={"error": "not found"})

    @property
    def poll_count(self):
        return len(self.poll_times)


class FakeConverter(AudioConverter):
    """Writes a placeholder WAV next to the input instead of running ffmpeg."""

    def __init__(self, error=None, leave_partial=False):
        super().__init__()
        self.error = error
        self.leave_partial = leave_partial
        self.calls = []

    async def convert(self, asset):
        self.calls.append(asset)
        output_path = self.output_path_for(asset)
        if self.leave_partial:
            with open(output_path, "wb") as f:
                f.write(b"RIFF")
        if self.error is not None:
            raise self.error
        with open(output_path, "wb") as f:
            f.write(b"RIFF....WAVE")
        return NormalizedAudio(path=output_path, source=asset, sample_rate=16000, channels=1)


class FakeTranscriber(TranscriptionService):
    def __init__(self, text="hello world", error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def transcribe(self, audio_path):
        self.calls.append(audio_path)
        if self.error is not None:
            raise self.error
        return self.text


class FakeTranslator(TranslationService):
    def __init__(self, translated="hola mundo", error=None):
        self.translated = translated
        self.error = error
        self.calls = []

    async def translate(self, text, target_language):
        self.calls.append((text, target_language))
        if self.error is not None:
            raise self.error
        return TranslationResult(
            source_text=text, target_language=target_language, translated_text=self.translated
        )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def audio_file(tmp_path):
    path = tmp_path / "recording.wav"
    path.write_bytes(b"RIFF\x00\x00\x00\x00WAVEfmt fake audio")
    return path


@pytest.fixture
def make_asset(tmp_path):
    def _make(name="clip.mp3", content=b"ID3 fake mp3 data"):
        extension = os.path.splitext(name)[1].lower()
        path = tmp_path / f"stored{extension}"
        path.write_bytes(content)
        return AudioAsset(path=str(path), original_filename=name, extension=extension)

    return _make


@pytest.fixture
def make_transcriber(clock):
    def _make(server, **overrides):
        settings = {
            "api_key": "test-key",
            "base_url": "https://api.assemblyai.test/v2",
            "poll_interval_seconds": 3.0,
            "poll_timeout_seconds": 30.0,
        }
        settings.update(overrides)
        return AssemblyAITranscriber(
            AssemblyAIConfig(**settings),
            transport=httpx.MockTransport(server),
            clock=clock,
            sleep=clock.sleep,
        )

    return _make
