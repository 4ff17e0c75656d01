"""File attachments for Send API v3 messages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Attachment:
    """A base64 encoded file, sent either attached or inline."""

    content_type: str
    filename: str
    content: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object the API expects for an attachment."""
        return {
            "Content-type": self.content_type,
            "Filename": self.filename,
            "content": self.content,
        }