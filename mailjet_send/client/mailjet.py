"""HTTP client for the Mailjet Send API.

``Client`` authenticates with the account's API key pair using HTTP Basic
authentication (public key as user, private key as password), POSTs a
:class:`~mailjet_send.api.Payload` to ``{base_url}/send`` and turns the
HTTP response into either a parsed :class:`Response` or an exception.

Nothing is retried: each :meth:`Client.send` call issues exactly one POST.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

import requests
from pydantic import AnyHttpUrl, TypeAdapter, ValidationError
from requests.auth import HTTPBasicAuth

from mailjet_send.api import Payload
from mailjet_send.client.response import Response
from mailjet_send.client.version import SendAPIVersion
from mailjet_send.config import DEFAULT_TIMEOUT, load_credentials
from mailjet_send.errors import (
    ApiError,
    InvalidBaseUrl,
    InvalidRequest,
    MalformedResponse,
    MissingPrivateKey,
    MissingPublicKey,
    MissingSendApiVersion,
    ServerCommunicationError,
)

LOGGER = logging.getLogger(__name__)

SEND_PATH = "/send"

# Raised by requests before anything is sent over the wire
_REQUEST_BUILD_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)

_HTTP_URL = TypeAdapter(AnyHttpUrl)


def resolve_base_url(version_or_base_url: Union[SendAPIVersion, str, None]) -> str:
    """Return the base URL for a Send API version or validate a custom one.

    Strings naming a version (``"v3"``, ``"v3.1"``) resolve like the enum.

    Raises:
        MissingSendApiVersion: If nothing was provided.
        InvalidBaseUrl: If a custom URL is not a well-formed absolute
            ``http(s)`` URL.
    """
    if version_or_base_url is None:
        raise MissingSendApiVersion()
    if isinstance(version_or_base_url, SendAPIVersion):
        return version_or_base_url.api_url

    url = str(version_or_base_url).strip()
    try:
        return SendAPIVersion(url).api_url
    except ValueError:
        pass
    try:
        _HTTP_URL.validate_python(url)
    except ValidationError as exc:
        raise InvalidBaseUrl(url) from exc
    return url.rstrip("/")


class Client:
    """Authenticated client for Mailjet's Send API.

    Example::

        client = Client(SendAPIVersion.V3, "public_key", "private_key")
        response = client.send(message)

    Args:
        version_or_base_url: A :class:`SendAPIVersion` or a custom absolute
            base URL (``/send`` is appended to it).
        public_key: Mailjet public API key.
        private_key: Mailjet private API key.
        timeout: Seconds to wait for the server on each request.
        session: Optional ``requests.Session`` to reuse.  A private session
            is created otherwise and released by :meth:`close`.

    Raises:
        MissingPublicKey: If ``public_key`` is empty or blank.
        MissingPrivateKey: If ``private_key`` is empty or blank.
        MissingSendApiVersion: If ``version_or_base_url`` is ``None``.
        InvalidBaseUrl: If a custom base URL is malformed.
    """

    def __init__(
        self,
        version_or_base_url: Union[SendAPIVersion, str, None],
        public_key: str,
        private_key: str,
        *,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not (public_key or "").strip():
            raise MissingPublicKey()
        if not (private_key or "").strip():
            raise MissingPrivateKey()

        self._base_url = resolve_base_url(version_or_base_url)
        self._public_key = public_key
        self._private_key = private_key
        self._auth = HTTPBasicAuth(public_key, private_key)
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @classmethod
    def from_env(
        cls,
        version: SendAPIVersion = SendAPIVersion.V3,
        environ: Optional[Mapping[str, str]] = None,
        **kwargs,
    ) -> "Client":
        """Create a client from ``MJ_APIKEY_PUBLIC``/``MJ_APIKEY_PRIVATE``.

        ``MJ_BASE_URL`` takes precedence over ``version`` when set.
        """
        credentials = load_credentials(environ)
        target = credentials.base_url or version
        return cls(target, credentials.public_key, credentials.private_key, **kwargs)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def send_url(self) -> str:
        return f"{self._base_url}{SEND_PATH}"

    @property
    def public_key(self) -> str:
        return self._public_key

    @property
    def private_key(self) -> str:
        return self._private_key

    @property
    def auth(self) -> HTTPBasicAuth:
        return self._auth

    @property
    def authorization_header(self) -> str:
        """The ``Authorization`` value requests sends for this key pair."""
        prepared = requests.Request("POST", self.send_url, auth=self._auth).prepare()
        return prepared.headers["Authorization"]

    def __repr__(self) -> str:
        return f"Client(base_url={self._base_url!r}, public_key={self._public_key!r})"

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying session if this client created it."""
        if self._owns_session:
            self._session.close()

    def send(self, payload: Payload) -> Response:
        """Send ``payload`` to Mailjet and return the parsed response.

        Raises:
            InvalidRequest: If the HTTP request could not be built.
            ServerCommunicationError: On connection, TLS, DNS or timeout
                failures.
            ApiError: If Mailjet answered with a 4xx or 5xx status.  The raw
                body is kept verbatim in ``ApiError.message``.
            MalformedResponse: If a success body is not a valid ``Response``.
        """
        body = payload.to_json().encode("utf-8")
        http_response = self._post(body)
        status = http_response.status_code
        content = http_response.content

        if 400 <= status < 600:
            LOGGER.debug("Mailjet rejected request to %s with HTTP %s", self.send_url, status)
            raise ApiError(status, content.decode("utf-8", errors="replace"))

        LOGGER.debug("Mailjet accepted request to %s with HTTP %s", self.send_url, status)
        try:
            return Response.model_validate_json(content.decode("utf-8"))
        except (UnicodeDecodeError, ValidationError) as exc:
            raise MalformedResponse(content, exc) from exc

    def _post(self, body: bytes) -> requests.Response:
        url = self.send_url
        headers = {"Content-Type": "application/json"}
        LOGGER.debug("POST %s (%d bytes)", url, len(body))
        try:
            return self._session.post(
                url, data=body, headers=headers, auth=self._auth, timeout=self._timeout
            )
        except _REQUEST_BUILD_ERRORS as exc:
            raise InvalidRequest(exc) from exc
        except requests.RequestException as exc:
            raise ServerCommunicationError(url, exc) from exc


__all__ = ["Client", "resolve_base_url"]
