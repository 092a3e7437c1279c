"""Audio upload endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from audio_translator.dependencies import get_handler, get_storage
from audio_translator.handlers import AudioPipelineHandler
from audio_translator.infrastructure import LocalUploadStorage
from audio_translator.logging import setup_logging
from audio_translator.response_models import ErrorResponse, ProcessAudioResponse

logger = setup_logging()

router = APIRouter(tags=["audio"])

HandlerDep = Annotated[AudioPipelineHandler, Depends(get_handler)]
StorageDep = Annotated[LocalUploadStorage, Depends(get_storage)]


@router.post(
    "/upload-audio",
    response_model=ProcessAudioResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def upload_audio(
    handler: HandlerDep,
    storage: StorageDep,
    audio: UploadFile | None = File(None),
    target_language: str | None = Form(None, min_length=2, max_length=10),
):
    """
    Transcribes and translates an uploaded audio file.

    The upload is stored under a unique name and handed to the pipeline,
    which deletes it once processing ends.
    """
    if audio is None:
        return JSONResponse(status_code=400, content={"error": "No audio file uploaded"})

    logger.info(
        "Received audio upload",
        extra={"file_name": audio.filename, "content_type": audio.content_type},
    )

    asset = await storage.save(audio, audio.filename or "")
    result = await handler.process(asset, target_language)

    return ProcessAudioResponse(
        transcript_text=result.transcript_text,
        translated_text=result.translated_text,
        target_language=result.target_language,
    )
