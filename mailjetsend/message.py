"""Send API v3 messages."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .addresses import join_addresses
from .attachment import Attachment
from .payload import Payload
from .recipient import Recipient

PUSHING_RECIPIENTS_WITH_RECEIVERS_ERROR_MESSAGE = (
    "Attempt to define `Recipients` fields with any of `To`, `Cc` and `Bcc` "
    "already defined. You must either define one or the other"
)

SETTING_RECEIVERS_WITH_RECIPIENTS_ERROR_MESSAGE = (
    "Attempt to define `To`, `Cc` and `Bcc` fields with `Recipients` "
    "already defined. You must either define one or the other"
)


class ReceiverConflictError(ValueError):
    """Raised when `Recipients` and `To`/`Cc`/`Bcc` are mixed on one message."""


@dataclass
class Message(Payload):
    """A Send API v3 message.

    Recipients are given either through ``recipients`` or through
    ``to``, ``cc`` and ``bcc``, never both.
    """

    from_email: str
    from_name: str
    subject: str | None = None
    text_part: str | None = None
    to: list[Recipient] | None = None
    cc: list[Recipient] | None = None
    bcc: list[Recipient] | None = None
    html_part: str | None = None
    recipients: list[Recipient] | None = None
    attachments: list[Attachment] | None = None
    inline_attachments: list[Attachment] | None = None
    vars: dict[str, Any] | None = None
    mj_template_id: int | None = None
    use_mj_template_language: bool | None = None
    mj_custom_id: str | None = None
    mj_event_payload: str | None = None
    headers: dict[str, str] | None = None

    def push_recipient(self, recipient: Recipient) -> None:
        """Add one recipient to the ``Recipients`` list."""
        if self.has_receivers():
            raise ReceiverConflictError(PUSHING_RECIPIENTS_WITH_RECEIVERS_ERROR_MESSAGE)
        if self.recipients is None:
            self.recipients = []
        self.recipients.append(recipient)

    def push_many_recipients(self, recipients: Iterable[Recipient]) -> None:
        """Add every given recipient to the ``Recipients`` list."""
        if self.has_receivers():
            raise ReceiverConflictError(PUSHING_RECIPIENTS_WITH_RECEIVERS_ERROR_MESSAGE)
        for recipient in recipients:
            if self.recipients is None:
                self.recipients = []
            self.recipients.append(recipient)

    def set_receivers(
        self,
        to: Iterable[Recipient],
        cc: Iterable[Recipient] | None = None,
        bcc: Iterable[Recipient] | None = None,
    ) -> None:
        """Replace the ``To``, ``Cc`` and ``Bcc`` fields."""
        if self.recipients is not None:
            raise ReceiverConflictError(SETTING_RECEIVERS_WITH_RECIPIENTS_ERROR_MESSAGE)
        self.to = list(to)
        self.cc = None if cc is None else list(cc)
        self.bcc = None if bcc is None else list(bcc)

    def attach(self, attachment: Attachment) -> None:
        """Add a regular attachment; content must be base64 encoded."""
        if self.attachments is None:
            self.attachments = []
        self.attachments.append(attachment)

    def attach_inline(self, attachment: Attachment) -> None:
        """Add an inline attachment, usable in HTML as ``cid:FILENAME``."""
        if self.inline_attachments is None:
            self.inline_attachments = []
        self.inline_attachments.append(attachment)

    def set_template_id(self, template_id: int) -> None:
        """Use a stored template and turn on the template language."""
        self.mj_template_id = template_id
        self.use_mj_template_language = True

    def set_custom_id(self, custom_id: str) -> None:
        """Tag the message with a custom identifier."""
        self.mj_custom_id = custom_id

    def set_event_payload(self, payload: str) -> None:
        """Attach an event payload to the message.

        The value is stored in the custom ID field, as the API client always has.
        """
        self.mj_custom_id = payload

    def set_headers(self, headers: Mapping[str, str]) -> None:
        """Set custom e-mail headers such as ``Reply-To``."""
        self.headers = dict(headers)

    def has_receivers(self) -> bool:
        """Tell whether any of ``To``, ``Cc`` or ``Bcc`` is set."""
        return self.to is not None or self.cc is not None or self.bcc is not None

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object the API expects for this message."""
        data: dict[str, Any] = {}
        for key, group in (("To", self.to), ("Cc", self.cc), ("Bcc", self.bcc)):
            if group is not None:
                data[key] = join_addresses(group)
        data["FromEmail"] = self.from_email
        data["FromName"] = self.from_name
        data["Subject"] = self.subject

        optional: list[tuple[str, Any]] = [
            ("Text-part", self.text_part),
            ("Html-part", self.html_part),
            ("Recipients", _dicts(self.recipients)),
            ("Attachments", _dicts(self.attachments)),
            ("Inline_attachments", _dicts(self.inline_attachments)),
            ("Vars", None if self.vars is None else dict(self.vars)),
            ("Mj-TemplateID", self.mj_template_id),
            ("Mj-TemplateLanguage", self.use_mj_template_language),
            ("Mj-CustomID", self.mj_custom_id),
            ("Mj-EventPayload", self.mj_event_payload),
            ("Headers", None if self.headers is None else dict(self.headers)),
        ]
        data.update((key, value) for key, value in optional if value is not None)
        return data

    def to_json(self) -> str:
        """Return the compact JSON body sent to the API."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


def _dicts(items: list[Recipient] | list[Attachment] | None) -> list[dict[str, str]] | None:
    if items is None:
        return None
    return [item.to_dict() for item in items]