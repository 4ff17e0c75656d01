"""Successful Send API responses."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

_INVALID = "invalid response from mailjet api"


@dataclass(frozen=True)
class Sent:
    """Details of one message the API accepted."""

    email: str
    message_id: int
    message_uuid: str


@dataclass(frozen=True)
class SendResponse:
    """The body returned by the Send API on success."""

    sent: list[Sent]

    @classmethod
    def from_json(cls, body: bytes | str) -> SendResponse:
        """Parse a response body; raise ``ValueError`` if it is malformed."""
        text = body.decode("utf-8") if isinstance(body, (bytes, bytearray)) else body
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(_INVALID) from exc
        if not isinstance(data, dict) or not isinstance(data.get("Sent"), list):
            raise ValueError(_INVALID)
        return cls([_parse_sent(item) for item in data["Sent"]])


def _parse_sent(item: Any) -> Sent:
    if not isinstance(item, dict):
        raise ValueError(_INVALID)
    email = item.get("Email")
    message_id = item.get("MessageID")
    message_uuid = item.get("MessageUUID")
    if not isinstance(email, str) or not isinstance(message_uuid, str):
        raise ValueError(_INVALID)
    if isinstance(message_id, bool) or not isinstance(message_id, int) or message_id < 0:
        raise ValueError(_INVALID)
    return Sent(email, message_id, message_uuid)