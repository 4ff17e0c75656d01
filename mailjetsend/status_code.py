"""HTTP status codes documented by the API."""

from __future__ import annotations

from enum import IntEnum


class StatusCode(IntEnum):
    """Status codes the API documents, with their documented meaning."""

    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    NOT_MODIFIED = 304
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500


def classify_status(code: int) -> StatusCode | int:
    """Return the documented status for ``code``, or the plain number if unknown."""
    try:
        return StatusCode(int(code))
    except ValueError:
        return int(code)