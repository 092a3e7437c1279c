"""Handler exports."""

from .audio_pipeline_handler import AudioPipelineHandler

__all__ = ["AudioPipelineHandler"]
