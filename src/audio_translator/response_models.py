"""Response models for the audio-translator API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProcessAudioResponse(BaseModel):
    """Response returned after an audio file is transcribed and translated."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    transcript_text: str
    translated_text: str
    target_language: str


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str
