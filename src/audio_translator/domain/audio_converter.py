"""Core business logic for audio normalization."""

import asyncio
import os

import moviepy

from audio_translator.exceptions import ConversionError
from audio_translator.logging import setup_logging

from .models import AudioAsset, NormalizedAudio

logger = setup_logging()


class AudioConverter:
    """Converts uploaded audio to single-channel 16-bit PCM WAV."""

    def __init__(self, sample_rate: int = 16000, channels: int = 1):
        self._sample_rate = sample_rate
        self._channels = channels

    def output_path_for(self, asset: AudioAsset) -> str:
        """Derives the normalized file path (e.g., uploads/abc.mp3 -> uploads/abc.mp3.wav)."""
        return f"{asset.path}.wav"

    async def convert(self, asset: AudioAsset) -> NormalizedAudio:
        """
        Normalizes an uploaded audio file.

        Args:
            asset: The uploaded file to convert. It is never modified.

        Returns:
            NormalizedAudio pointing at the derived WAV file.

        Raises:
            ConversionError: If the input is missing or unreadable, or ffmpeg fails.
        """
        output_path = self.output_path_for(asset)

        if not os.path.isfile(asset.path):
            raise ConversionError(
                asset.original_filename, FileNotFoundError(asset.path)
            )

        try:
            await asyncio.to_thread(self._transcode, asset.path, output_path)
        except Exception as e:
            logger.exception(
                "Audio conversion failed",
                extra={"file_name": asset.original_filename, "path": asset.path},
            )
            raise ConversionError(asset.original_filename, e) from e

        logger.info(
            "Audio converted successfully",
            extra={
                "file_name": asset.original_filename,
                "output_path": output_path,
                "sample_rate": self._sample_rate,
                "channels": self._channels,
            },
        )
        return NormalizedAudio(
            path=output_path,
            source=asset,
            sample_rate=self._sample_rate,
            channels=self._channels,
        )

    def _transcode(self, input_path: str, output_path: str) -> None:
        """Performs the actual transcode using moviepy's ffmpeg writer."""
        clip = moviepy.AudioFileClip(input_path, fps=self._sample_rate)
        try:
            clip.write_audiofile(
                output_path,
                fps=self._sample_rate,
                nbytes=2,
                codec="pcm_s16le",
                ffmpeg_params=["-ac", str(self._channels)],
                logger=None,
            )
        finally:
            clip.close()
