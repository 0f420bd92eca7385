import base64
import json

import pytest
import requests
from requests.auth import HTTPBasicAuth

from mailjet_send.api.recipient import Recipient
from mailjet_send.api.v3 import Message
from mailjet_send.api.v3_1 import Message as MessageV31
from mailjet_send.api.v3_1 import Messages
from mailjet_send.client import Client, Response, SendAPIVersion, StatusCode
from mailjet_send.errors import (
    ApiError,
    ConfigurationError,
    InvalidBaseUrl,
    InvalidRequest,
    MalformedResponse,
    MissingPrivateKey,
    MissingPublicKey,
    MissingSendApiVersion,
    ServerCommunicationError,
)

SENT_BODY = (
    b'{"Sent": [{"Email": "c@d.com", "MessageID": 111111111111111, '
    b'"MessageUUID": "1ab23cd4-e567-8901-2345-6789f0gh1i2j"}]}'
)


def make_message() -> Message:
    message = Message("a@b.com", "Sender", text_part="hi")
    message.push_recipient(Recipient.new("c@d.com"))
    return message


def test_version_base_urls() -> None:
    assert Client(SendAPIVersion.V3, "pk", "sk").base_url == "https://api.mailjet.com/v3"
    assert Client(SendAPIVersion.V3_1, "pk", "sk").base_url == "https://api.mailjet.com/v3.1"


def test_custom_base_url() -> None:
    client = Client("http://localhost:8080/mailjet/", "pk", "sk")
    assert client.base_url == "http://localhost:8080/mailjet"
    assert client.send_url == "http://localhost:8080/mailjet/send"


@pytest.mark.parametrize(
    "url",
    [
        "not a url",
        "/v3",
        "ftp://api.mailjet.com/v3",
        "https://",
        "http://exa mple.com/v3",
        "https://api.mailjet.com:notaport/v3",
        "http://[::1/v3",
    ],
)
def test_invalid_custom_base_url(url: str) -> None:
    with pytest.raises(InvalidBaseUrl):
        Client(url, "pk", "sk")


def test_missing_version() -> None:
    with pytest.raises(MissingSendApiVersion):
        Client(None, "pk", "sk")


def test_empty_keys_are_rejected() -> None:
    with pytest.raises(MissingPublicKey):
        Client(SendAPIVersion.V3, "", "sk")
    with pytest.raises(MissingPrivateKey):
        Client(SendAPIVersion.V3, "pk", "")
    with pytest.raises(ValueError):
        Client(SendAPIVersion.V3_1, "", "")
    assert issubclass(MissingPublicKey, ConfigurationError)


def test_send_v3_posts_authenticated_json(make_session) -> None:
    session = make_session(content=SENT_BODY)
    client = Client(SendAPIVersion.V3, "pk", "sk", session=session)

    response = client.send(make_message())

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == "https://api.mailjet.com/v3/send"
    assert call["headers"]["Content-Type"] == "application/json"
    assert "Authorization" not in call["headers"]
    assert isinstance(call["auth"], HTTPBasicAuth)
    assert (call["auth"].username, call["auth"].password) == ("pk", "sk")
    prepared = requests.Request("POST", call["url"], auth=call["auth"]).prepare()
    scheme, token = prepared.headers["Authorization"].split(" ")
    assert scheme == "Basic"
    assert base64.b64decode(token).decode("utf-8") == "pk:sk"
    assert call["timeout"] == 10.0

    body = json.loads(call["data"])
    assert body["FromEmail"] == "a@b.com"
    assert body["Recipients"] == [{"Email": "c@d.com", "Name": ""}]
    assert body["Text-part"] == "hi"

    assert isinstance(response, Response)
    assert response.sent[0].email == "c@d.com"
    assert response.sent[0].message_id == 111111111111111
    assert response.sent[0].message_uuid == "1ab23cd4-e567-8901-2345-6789f0gh1i2j"


def test_send_v3_1_posts_envelope(make_session) -> None:
    session = make_session(content=b'{"Sent": [{"Email": "c@d.com", "MessageID": 7}]}')
    client = Client(SendAPIVersion.V3_1, "pk", "sk", session=session)
    message = MessageV31(Recipient.new("a@b.com"), [Recipient.new("c@d.com")], text_part="hi")

    response = client.send(Messages(message))

    call = session.calls[0]
    assert call["url"] == "https://api.mailjet.com/v3.1/send"
    body = json.loads(call["data"])
    assert body["Messages"][0]["TextPart"] == "hi"
    assert response.sent[0].message_uuid == ""


def test_api_error_keeps_status_and_raw_body(make_session) -> None:
    session = make_session(status_code=401, content=b'{"ErrorMessage":"bad key"}')
    client = Client(SendAPIVersion.V3, "pk", "sk", session=session)

    with pytest.raises(ApiError) as excinfo:
        client.send(make_message())

    assert excinfo.value.status_code == 401
    assert excinfo.value.message == '{"ErrorMessage":"bad key"}'
    assert StatusCode.lookup(excinfo.value.status_code) is StatusCode.UNAUTHORIZED


def test_server_error_with_plain_text_body(make_session) -> None:
    session = make_session(status_code=503, content=b"Service Unavailable")
    client = Client(SendAPIVersion.V3, "pk", "sk", session=session)

    with pytest.raises(ApiError) as excinfo:
        client.send(make_message())

    assert excinfo.value.status_code == 503
    assert excinfo.value.message == "Service Unavailable"
    assert StatusCode.lookup(503) is None


def test_transport_failure_is_wrapped(make_session, connection_error) -> None:
    session = make_session(error=connection_error)
    client = Client(SendAPIVersion.V3, "pk", "sk", session=session)

    with pytest.raises(ServerCommunicationError) as excinfo:
        client.send(make_message())

    assert excinfo.value.url == "https://api.mailjet.com/v3/send"
    assert excinfo.value.cause is connection_error
    assert excinfo.value.__cause__ is connection_error


def test_timeout_is_a_transport_failure(make_session) -> None:
    session = make_session(error=requests.Timeout("read timed out"))
    client = Client(SendAPIVersion.V3, "pk", "sk", session=session, timeout=0.5)

    with pytest.raises(ServerCommunicationError):
        client.send(make_message())
    assert session.calls[0]["timeout"] == 0.5


def test_invalid_url_is_an_invalid_request(make_session) -> None:
    session = make_session(error=requests.exceptions.InvalidURL("bad host"))
    client = Client(SendAPIVersion.V3, "pk", "sk", session=session)

    with pytest.raises(InvalidRequest):
        client.send(make_message())


@pytest.mark.parametrize(
    "content",
    [b"not json", b'{"Sent": [{"Email": "c@d.com"}]}', b"\xff\xfe", b""],
)
def test_malformed_success_body(make_session, content: bytes) -> None:
    session = make_session(status_code=200, content=content)
    client = Client(SendAPIVersion.V3, "pk", "sk", session=session)

    with pytest.raises(MalformedResponse) as excinfo:
        client.send(make_message())

    assert excinfo.value.body == content


def test_close_only_releases_owned_session(make_session) -> None:
    shared = make_session()
    with Client(SendAPIVersion.V3, "pk", "sk", session=shared):
        pass
    assert shared.closed is False


def test_status_code_descriptions() -> None:
    assert StatusCode.TOO_MANY_REQUESTS == 429
    assert "maximum number of calls" in StatusCode.TOO_MANY_REQUESTS.description
    assert StatusCode.BAD_REQUEST.is_error
    assert not StatusCode.CREATED.is_error


@pytest.mark.parametrize(
    "value, expected",
    [("v3", "https://api.mailjet.com/v3"), ("v3.1", "https://api.mailjet.com/v3.1")],
)
def test_version_strings_resolve_like_the_enum(value: str, expected: str) -> None:
    assert Client(value, "pk", "sk").base_url == expected


def test_blank_keys_are_rejected() -> None:
    with pytest.raises(MissingPublicKey):
        Client(SendAPIVersion.V3, "   ", "sk")
    with pytest.raises(MissingPrivateKey):
        Client(SendAPIVersion.V3, "pk", "\t")


def test_authorization_header_comes_from_requests_auth() -> None:
    client = Client(SendAPIVersion.V3, "pk", "sk")
    scheme, token = client.authorization_header.split(" ")
    assert scheme == "Basic"
    assert base64.b64decode(token).decode("utf-8") == "pk:sk"
