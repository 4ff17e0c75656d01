# mailjetsend

An asynchronous Python client for the Mailjet Send API (v3). It builds a
message with recipients, attachments, template variables and headers,
serialises it to the JSON body the API expects, and posts it with your
account's API key pair.

## Installation

```bash
pip install mailjetsend
```

The only runtime dependency is `httpx`.

## The client

`mailjetsend.client.Client` is created with the Send API version to use and
your public and private API keys. Both keys must be non-empty; an empty key
raises `ValueError` right away.

```python
from mailjetsend.client import Client
from mailjetsend.version import SendAPIVersion

client = Client(SendAPIVersion.V3, "placeholder", "placeholder")
```

The keys are used for HTTP basic authentication, the public key as the user
and the private key as the password. They are kept in `client.keys`, a
`Credentials` object whose `as_http_header()` returns the `Authorization`
header value (`client.encoded_credentials` holds the same string).

`SendAPIVersion` has two members, `V3` and `V3_1`; `api_url()` gives the base
URL requests are posted to (`client.api_base`). Messages are sent to
`<api_base>/send`.

By default each `send` opens and closes its own `httpx.AsyncClient`. To reuse
a connection pool, pass one in:

```python
import httpx

async with httpx.AsyncClient() as http:
    client = Client(SendAPIVersion.V3, "placeholder", "placeholder", http_client=http)
```

The JSON body of every request is logged at `DEBUG` level on the
`mailjetsend.client` logger.

## Sending a basic message

```python
import asyncio

from mailjetsend.client import Client
from mailjetsend.message import Message
from mailjetsend.recipient import Recipient
from mailjetsend.version import SendAPIVersion


async def run():
    client = Client(SendAPIVersion.V3, "placeholder", "placeholder")

    message = Message(
        "sender@example.com",
        "Example Sender",
        "Your email flight plan!",
        "Dear passenger, welcome aboard!",
    )
    message.push_recipient(Recipient("passenger@example.com"))

    response = await client.send(message)
    for sent in response.sent:
        print(sent.email, sent.message_id, sent.message_uuid)


asyncio.run(run())
```

`send` accepts any `mailjetsend.payload.Payload` (an abstract class with a
single `to_json()` method; `Message` is one). It returns a
`mailjetsend.response.SendResponse` whose `sent` list holds one `Sent` entry
(`email`, `message_id`, `message_uuid`) per delivered address. A body that is
not a valid response raises `ValueError`.

When the API answers with a 4xx or 5xx status, `mailjetsend.errors.MailjetError`
is raised. It carries `status_code` and the response body as `message`.
`status_code` is a `mailjetsend.status_code.StatusCode` member for the codes
the API documents (`OK`, `CREATED`, `NO_CONTENT`, `NOT_MODIFIED`,
`BAD_REQUEST`, `UNAUTHORIZED`, `FORBIDDEN`, `NOT_FOUND`, `METHOD_NOT_ALLOWED`,
`TOO_MANY_REQUESTS`, `INTERNAL_SERVER_ERROR`) and the plain integer otherwise;
`classify_status(code)` does that mapping.

## Recipients

There are two mutually exclusive ways to address a message:

* `Recipients`, filled with `push_recipient` or `push_many_recipients`;
* `To`, `Cc` and `Bcc`, replaced together with `set_receivers(to, cc, bcc)`.

Mixing them raises `mailjetsend.message.ReceiverConflictError` (a
`ValueError`). `has_receivers()` tells whether any of `To`, `Cc` or `Bcc` is
set.

```python
message.push_many_recipients([
    Recipient("alice@example.com"),
    Recipient("bob@example.com", "Bob"),
])
```

```python
message.set_receivers(
    [Recipient("alice@example.com")],
    [Recipient("carol@example.com")],
    None,
)
```

`To`, `Cc` and `Bcc` are sent as comma separated strings such as
`"Bob" <bob@example.com>,<alice@example.com>`; `Recipient.as_comma_separated()`
renders one recipient and `mailjetsend.addresses.join_addresses()` a list.
`Recipient.from_comma_separated("a@example.com,b@example.com")` builds a list
of recipients from a comma separated string of bare addresses; names are not
recognised.

## Attachments, templates and headers

```python
from mailjetsend.attachment import Attachment

message.html_part = '<h3>Hello [[var:name]]</h3><img src="cid:logo.png">'
message.attach_inline(Attachment("image/png", "logo.png", "<base64 data>"))
message.attach(Attachment("text/plain", "test.txt", "VGhpcyBpcyB5b3VyIGF0dGFjaGVkIGZpbGUhISEK"))
message.vars = {"name": "Foo"}
message.set_headers({"Reply-To": "replies@example.com"})
message.set_template_id(1)          # also sets Mj-TemplateLanguage to true
message.set_custom_id("order-42")
```

Attachment content must already be Base64 encoded. Inline attachments can be
referenced from the HTML part as `cid:<filename>`.

Note that `set_event_payload(payload)` stores its value in the custom ID
field (`Mj-CustomID`), replacing any custom ID; to send `Mj-EventPayload`,
assign `message.mj_event_payload` directly.

`message.to_dict()` returns the request body as a dictionary and
`message.to_json()` the exact compact JSON that is posted. Fields left as
`None` are omitted, except `Subject`, which is always present.

## Example command

The package ships an example that builds a full-featured message (inline
image, file attachment, template variables and a `Reply-To` header, see
`mailjetsend.example.build_example_message`) and sends it:

```bash
mailjetsend-example --public-key placeholder --private-key placeholder --api-version v3
```

All three options are optional; the keys default to placeholders, so the API
will answer with an authorisation error unless you give your own. The command
prints the parsed response, or `error: ...` when the API reports an error.

## What it does not do

* Only the v3 message format is provided. Choosing `SendAPIVersion.V3_1`
  changes the URL requests are posted to, but there is no v3.1 message class.
* Only sending is covered; other API resources (contacts, statistics,
  templates, SMS) are not.