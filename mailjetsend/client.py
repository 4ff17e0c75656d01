"""The API client: authentication and sending of payloads."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass

import httpx

from .errors import MailjetError
from .payload import Payload
from .response import SendResponse
from .version import SendAPIVersion

INVALID_KEYS_MESSAGE = "Invalid `public_key` or `private_key` provided"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """HTTP basic authentication credentials: public key and private key."""

    user_id: str
    password: str

    def as_http_header(self) -> str:
        """Return the value of the ``Authorization`` header for these credentials."""
        raw = f"{self.user_id}:{self.password}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


class Client:
    """An authenticated client for one Send API version.

    The public key acts as the user and the private key as the password
    of HTTP basic authentication.
    """

    def __init__(
        self,
        send_api_version: SendAPIVersion,
        public_key: str,
        private_key: str,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not public_key or not private_key:
            raise ValueError(INVALID_KEYS_MESSAGE)
        self.keys = Credentials(public_key, private_key)
        self.encoded_credentials = self.keys.as_http_header()
        self.api_base = send_api_version.api_url()
        self._http_client = http_client

    async def send(self, payload: Payload) -> SendResponse:
        """Send ``payload`` and return the parsed response.

        Raises ``MailjetError`` when the API answers with a client or
        server error status.
        """
        body = payload.to_json()
        logger.debug("sending payload: %s", body)

        response = await self._post("/send", body)
        if 400 <= response.status_code < 600:
            raise MailjetError.from_api_response(response.status_code, response.content)
        return SendResponse.from_json(response.content)

    async def _post(self, path: str, body: str) -> httpx.Response:
        url = f"{self.api_base}{path}"
        headers = {
            "Content-Type": "application/json",
            "Authorization": self.encoded_credentials,
        }
        content = body.encode("utf-8")
        if self._http_client is not None:
            return await self._http_client.post(url, content=content, headers=headers)
        async with httpx.AsyncClient() as http_client:
            return await http_client.post(url, content=content, headers=headers)