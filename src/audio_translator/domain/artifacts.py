"""Deletion of temporary audio artifacts."""

import os

from audio_translator.logging import setup_logging

logger = setup_logging()


def discard_file(path: str | None) -> None:
    """
    Removes a temporary file if it exists.

    Deleting a path that is already gone is a no-op. Other OS errors are
    logged, not raised, so they never mask the error that ended a pipeline run.
    """
    if not path:
        return
    try:
        os.remove(path)
    except FileNotFoundError:
        return
    except OSError:
        logger.exception("Failed to delete temporary file", extra={"path": path})
        return
    logger.info("Temporary file deleted", extra={"path": path})
