"""Rendering of recipient lists into address header values."""

from __future__ import annotations

from collections.abc import Iterable

from .recipient import Recipient


def join_addresses(recipients: Iterable[Recipient]) -> str:
    """Join recipients into one comma separated address string."""
    return ",".join(recipient.as_comma_separated() for recipient in recipients)