"""Exception hierarchy for the Mailjet Send API client.

Every failure the package can produce derives from :class:`MailjetError` so
callers can catch the whole family with a single ``except`` clause.  The
subclasses are grouped the way failures occur:

* configuration problems detected while building a :class:`Client`;
* misuse of a v3 ``Message`` (mixing both addressing modes);
* transport, HTTP status and response parsing failures raised by
  :meth:`Client.send`.
"""

from __future__ import annotations

from typing import Iterable, Optional


class MailjetError(Exception):
    """Base class for every error raised by ``mailjet_send``."""


class ConfigurationError(MailjetError, ValueError):
    """The client was configured with missing or invalid values."""


class MissingPublicKey(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Missing Public Key for Mailjet API Client")


class MissingPrivateKey(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Missing Private Key for Mailjet API Client")


class MissingSendApiVersion(ConfigurationError):
    def __init__(self) -> None:
        super().__init__("Missing API Version for Send API Client")


class MissingKeyEnvironmentVariables(ConfigurationError):
    """One or more credential environment variables are not set."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        joined = ", ".join(f'"{name}"' for name in self.names)
        super().__init__(f"Missing {joined} environment variables")


class InvalidBaseUrl(ConfigurationError):
    """A custom base URL is not an absolute ``http(s)`` URL."""

    def __init__(self, url: Optional[str]) -> None:
        self.url = url
        super().__init__(
            f"Invalid base URL provided for Mailjet Client: {url!r}. You must "
            "provide either an API version or an absolute custom base URL"
        )


class ConflictingAddressingMode(MailjetError):
    """A v3 message cannot mix ``Recipients`` with ``To``/``Cc``/``Bcc``."""

    def __init__(self, active: str, requested: str) -> None:
        self.active = active
        self.requested = requested
        super().__init__(
            f"Message already addressed using {active}; cannot switch to {requested}"
        )


class ClientError(MailjetError):
    """Base class for failures raised while sending a payload."""


class ServerCommunicationError(ClientError):
    """The HTTP exchange with Mailjet could not be completed."""

    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(
            f"An error occurred communicating with Mailjet API servers at: {url}. {cause}"
        )


class InvalidRequest(ClientError):
    """The HTTP request could not be built from the provided values."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(
            "Invalid value(s) were provided to the HTTP request. Unable to "
            f"build a valid HTTP request with the provided values: {cause}"
        )


class ApiError(ClientError):
    """Mailjet answered with a 4xx or 5xx status.

    ``message`` holds the raw response body exactly as received.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Mailjet API returned HTTP {status_code}: {message}")


class MalformedResponse(ClientError):
    """A success response body could not be decoded into a ``Response``."""

    def __init__(self, body: bytes, cause: BaseException) -> None:
        self.body = body
        self.cause = cause
        super().__init__(f"Invalid response from Mailjet API: {cause}")


__all__ = [
    "ApiError",
    "ClientError",
    "ConfigurationError",
    "ConflictingAddressingMode",
    "InvalidBaseUrl",
    "InvalidRequest",
    "MailjetError",
    "MalformedResponse",
    "MissingKeyEnvironmentVariables",
    "MissingPrivateKey",
    "MissingPublicKey",
    "MissingSendApiVersion",
    "ServerCommunicationError",
]
