import json

import pytest

from mailjetsend.message import Message
from mailjetsend.payload import Payload


def test_payload_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Payload()


def test_message_is_a_payload_and_serialises():
    message = Message("sender@example.com", "Company", "Subject")
    assert isinstance(message, Payload)
    assert json.loads(message.to_json()) == {
        "FromEmail": "sender@example.com",
        "FromName": "Company",
        "Subject": "Subject",
    }