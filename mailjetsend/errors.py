"""Errors reported by the API."""

from __future__ import annotations

from .status_code import StatusCode, classify_status


class MailjetError(Exception):
    """An error response from the API: its status and its body."""

    def __init__(self, status_code: StatusCode | int, message: str) -> None:
        super().__init__(f"{int(status_code)}: {message}")
        self.status_code = status_code
        self.message = message

    @classmethod
    def from_api_response(cls, status_code: int, body: bytes | str) -> MailjetError:
        """Build an error from a response status and body.

        Raises ``UnicodeDecodeError`` if the body is not valid UTF-8.
        """
        text = body.decode("utf-8") if isinstance(body, (bytes, bytearray)) else body
        return cls(classify_status(status_code), text)