"""E-mail recipients shared between API versions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Recipient:
    """An e-mail address with an optional display name."""

    email: str
    name: str = ""

    @classmethod
    def from_comma_separated(cls, recipients: str) -> list[Recipient]:
        """Build recipients from a comma separated list of addresses.

        Names are not recognised; every item becomes an address as is.
        """
        return [cls(email) for email in recipients.split(",")]

    def as_comma_separated(self) -> str:
        """Render as ``"Name" <email>``, or ``<email>`` when there is no name."""
        address = f"<{self.email}>"
        if self.name:
            return f'"{self.name}" {address}'
        return address

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object the API expects for a recipient."""
        return {"Email": self.email, "Name": self.name}