import logging
import os
import sys

from pythonjsonlogger import jsonlogger

HANDLER_NAME = "audio_translator"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")
QUIET_LOGGERS = ("httpx", "httpcore", "ddtrace")


def _log_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _json_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        jsonlogger.JsonFormatter(LOG_FORMAT, static_fields={"service": "audio-translator"})
    )
    return handler


def _find_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def setup_logging() -> logging.Logger:
    """
    Installs the service's JSON log handler on the root logger and returns it.

    Every module calls this at import time, so repeated calls reuse the
    handler installed by the first one. Handlers added by someone else (pytest's
    capture, an embedding application) are left in place. The level comes from
    ``LOG_LEVEL`` and defaults to INFO.

    Uvicorn's loggers write through the same handler and stop propagating, so
    server lines are not printed twice.
    """
    level = _log_level()
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handler = _find_handler(root_logger)
    if handler is None:
        handler = _json_handler()
        root_logger.addHandler(handler)

    for logger_name in SERVER_LOGGERS:
        server_logger = logging.getLogger(logger_name)
        server_logger.setLevel(level)
        if _find_handler(server_logger) is None:
            server_logger.addHandler(handler)
        server_logger.propagate = False

    # per-request lines from the HTTP client and tracer stay out of INFO output
    for logger_name in QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(max(level, logging.WARNING))

    return root_logger
