"""A complete Send API v3 message, built and sent from the command line."""

from __future__ import annotations

import argparse
import asyncio
import base64
from collections.abc import Sequence

from .attachment import Attachment
from .client import Client
from .errors import MailjetError
from .message import Message
from .recipient import Recipient
from .response import SendResponse
from .version import SendAPIVersion

SENDER_EMAIL = "sender@example.com"
SENDER_NAME = "Mailjet Python"
RECIPIENT_EMAIL = "recipient@example.com"
REPLY_TO_EMAIL = "reply@example.com"

# A 1x1 transparent PNG, used as the inline logo.
LOGO_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

TEXT_FILE_CONTENT = b"This is your attached file!!!\n"

HTML_PART = (
    "<h3>Dear [[var:name]] [[var:last]], welcome to "
    '<img src="cid:logo.png"> Mailjet!<br />'
    "May the delivery force be with you!"
)

_DEFAULT_PUBLIC_KEY = "placeholder"
_DEFAULT_PRIVATE_KEY = "secret"


def build_example_message() -> Message:
    """Build a message using an inline image, a file attachment, template
    variables and a custom ``Reply-To`` header."""
    message = Message(
        SENDER_EMAIL,
        SENDER_NAME,
        subject="Your email flight plan!",
        text_part=(
            "Dear passenger, welcome to Mailjet! "
            "May the delivery force be with you!"
        ),
    )
    message.push_recipient(Recipient(RECIPIENT_EMAIL))
    message.html_part = HTML_PART

    # The inline attachment's filename is what ``cid:logo.png`` refers to.
    message.attach_inline(Attachment("image/png", "logo.png", LOGO_BASE64))
    message.attach(
        Attachment(
            "text/plain",
            "test.txt",
            base64.b64encode(TEXT_FILE_CONTENT).decode("ascii"),
        )
    )

    message.vars = {"name": "Foo", "last": "Bar"}
    message.set_headers({"Reply-To": REPLY_TO_EMAIL})
    return message


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mailjetsend-example",
        description="Send an example message through the Send API.",
    )
    parser.add_argument("--public-key", default=_DEFAULT_PUBLIC_KEY)
    parser.add_argument("--private-key", default=_DEFAULT_PRIVATE_KEY)
    parser.add_argument(
        "--api-version",
        choices=[version.value for version in SendAPIVersion],
        default=SendAPIVersion.V3.value,
    )
    return parser.parse_args(argv)


async def _send(client: Client, message: Message) -> SendResponse:
    return await client.send(message)


def main(argv: Sequence[str] | None = None) -> int:
    """Send the example message and print what the API answered."""
    args = _parse_args(argv)
    client = Client(SendAPIVersion(args.api_version), args.public_key, args.private_key)
    message = build_example_message()
    try:
        response = asyncio.run(_send(client, message))
    except MailjetError as exc:
        print(f"error: {exc}")
    else:
        print(response)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())