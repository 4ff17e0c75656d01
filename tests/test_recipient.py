import json

from mailjetsend.recipient import Recipient


def test_creates_recipient_from_comma_separated():
    have = "one@example.com,two@example.com,three@example.com"
    want = [
        Recipient("one@example.com"),
        Recipient("two@example.com"),
        Recipient("three@example.com"),
    ]
    assert Recipient.from_comma_separated(have) == want


def test_from_comma_separated_leaves_names_empty():
    recipients = Recipient.from_comma_separated("one@example.com,two@example.com")
    assert [r.name for r in recipients] == ["", ""]


def test_from_comma_separated_single_address():
    assert Recipient.from_comma_separated("solo@example.com") == [
        Recipient("solo@example.com")
    ]


def test_creates_comma_separated_from_recipient():
    have = [
        Recipient("rust@example.com", "The Rust Programming Language"),
        Recipient("rust@example.com"),
    ]
    want = [
        '"The Rust Programming Language" <rust@example.com>',
        "<rust@example.com>",
    ]
    assert [r.as_comma_separated() for r in have] == want


def test_default_name_is_empty():
    assert Recipient("someone@example.com").name == ""


def test_to_dict_keys_and_values():
    recipient = Recipient("jane@example.com", "Jane")
    assert recipient.to_dict() == {"Email": "jane@example.com", "Name": "Jane"}


def test_to_dict_json_round_trip():
    recipient = Recipient("jane@example.com", "Jane")
    data = json.loads(json.dumps(recipient.to_dict()))
    assert Recipient(data["Email"], data["Name"]) == recipient