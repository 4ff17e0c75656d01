import base64
import json

import httpx
import pytest
import respx

from mailjetsend.client import Credentials
from mailjetsend.example import (
    LOGO_BASE64,
    RECIPIENT_EMAIL,
    REPLY_TO_EMAIL,
    SENDER_EMAIL,
    TEXT_FILE_CONTENT,
    build_example_message,
    main,
)

SEND_URL_V3 = "https://api.mailjet.com/v3/send"
SEND_URL_V3_1 = "https://api.mailjet.com/v3.1/send"

OK_BODY = {
    "Sent": [
        {
            "Email": "recipient@example.com",
            "MessageID": 7,
            "MessageUUID": "message-uuid",
        }
    ]
}


def test_message_has_sender_and_single_recipient():
    message = build_example_message()
    assert message.from_email == SENDER_EMAIL
    assert [r.email for r in message.recipients] == [RECIPIENT_EMAIL]
    assert message.has_receivers() is False


def test_inline_logo_is_png_referenced_by_html():
    message = build_example_message()
    (logo,) = message.inline_attachments
    assert logo.content_type == "image/png"
    assert logo.content == LOGO_BASE64
    assert base64.b64decode(logo.content)[:8] == b"\x89PNG\r\n\x1a\n"
    assert f"cid:{logo.filename}" in message.html_part


def test_text_attachment_decodes_to_file_content():
    message = build_example_message()
    (attachment,) = message.attachments
    assert attachment.content_type == "text/plain"
    assert attachment.filename == "test.txt"
    assert base64.b64decode(attachment.content) == TEXT_FILE_CONTENT


def test_vars_and_headers():
    message = build_example_message()
    assert message.vars == {"name": "Foo", "last": "Bar"}
    assert message.headers == {"Reply-To": REPLY_TO_EMAIL}
    assert "[[var:name]]" in message.html_part
    assert "[[var:last]]" in message.html_part


def test_json_round_trip():
    message = build_example_message()
    data = json.loads(message.to_json())
    assert data == message.to_dict()
    assert data["Recipients"] == [{"Email": RECIPIENT_EMAIL, "Name": ""}]
    assert data["Inline_attachments"][0]["Filename"] == "logo.png"
    assert "To" not in data


def test_main_sends_message_and_prints_response(capsys):
    with respx.mock:
        route = respx.post(SEND_URL_V3).mock(
            return_value=httpx.Response(200, json=OK_BODY)
        )
        assert main([]) == 0
        assert route.call_count == 1
        request = route.calls.last.request
    assert json.loads(request.content) == build_example_message().to_dict()
    assert request.headers["Content-Type"] == "application/json"
    out = capsys.readouterr().out
    assert "recipient@example.com" in out
    assert "message-uuid" in out


def test_main_uses_given_keys_and_version():
    with respx.mock:
        route = respx.post(SEND_URL_V3_1).mock(
            return_value=httpx.Response(200, json=OK_BODY)
        )
        main(["--public-key", "token", "--private-key", "secret", "--api-version", "v3.1"])
        request = route.calls.last.request
    assert request.headers["Authorization"] == Credentials("token", "secret").as_http_header()


def test_main_prints_api_error(capsys):
    with respx.mock:
        respx.post(SEND_URL_V3).mock(
            return_value=httpx.Response(401, text="unauthorized")
        )
        assert main([]) == 0
    out = capsys.readouterr().out
    assert "401" in out
    assert "unauthorized" in out


def test_main_rejects_empty_key():
    with pytest.raises(ValueError, match="Invalid `public_key` or `private_key` provided"):
        main(["--public-key", ""])