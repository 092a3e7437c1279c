"""Local filesystem storage for uploaded audio."""

import os
import uuid
from typing import Protocol

import aiofiles

from audio_translator.domain import AudioAsset, discard_file
from audio_translator.logging import setup_logging

logger = setup_logging()

_CHUNK_SIZE = 1024 * 1024


class AsyncReadable(Protocol):
    async def read(self, size: int = -1) -> bytes: ...


class LocalUploadStorage:
    """Stores uploads under unique names so concurrent requests never share a path."""

    def __init__(self, upload_dir: str):
        self._upload_dir = upload_dir

    async def save(self, data: AsyncReadable, original_filename: str) -> AudioAsset:
        """
        Writes an uploaded file to the upload directory.

        Args:
            data: Async readable source, such as a FastAPI UploadFile.
            original_filename: Client-supplied file name; only its extension is kept.

        Returns:
            AudioAsset describing the stored file.
        """
        extension = os.path.splitext(original_filename)[1].lower()
        os.makedirs(self._upload_dir, exist_ok=True)
        path = os.path.join(self._upload_dir, f"{uuid.uuid4().hex}{extension}")

        size = 0
        try:
            async with aiofiles.open(path, "wb") as f:
                while chunk := await data.read(_CHUNK_SIZE):
                    size += len(chunk)
                    await f.write(chunk)
        except BaseException:
            logger.exception("Storing upload failed", extra={"file_name": original_filename})
            discard_file(path)
            raise

        logger.info(
            "Upload stored",
            extra={"file_name": original_filename, "path": path, "size": size},
        )
        return AudioAsset(
            path=path, original_filename=original_filename, extension=extension
        )
