"""Helpers for turning httpx failures into readable diagnostics."""

import httpx

_MAX_BODY_CHARS = 500


def remote_error_detail(error: Exception) -> str:
    """Returns the remote service's own message when there is one."""
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return f"HTTP {response.status_code}: {body['error']}"
        text = response.text.strip()[:_MAX_BODY_CHARS]
        return f"HTTP {response.status_code}: {text or response.reason_phrase}"
    if isinstance(error, KeyError):
        return f"response is missing field {error.args[0]!r}"
    return str(error) or type(error).__name__
