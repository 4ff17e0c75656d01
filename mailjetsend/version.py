"""Send API versions and the base URLs they are served from."""

from __future__ import annotations

from enum import Enum

_API_ROOT = "https://api.mailjet.com"


class SendAPIVersion(Enum):
    """The Send API version a client talks to."""

    V3 = "v3"
    V3_1 = "v3.1"

    def api_url(self) -> str:
        """Return the base URL for requests made with this version."""
        return f"{_API_ROOT}/{self.value}"