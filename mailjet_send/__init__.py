"""Top-level package for the Mailjet Send API client.

This package models the request payloads of Mailjet's transactional email
Send API (wire versions ``v3`` and ``v3.1``), serializes them to the JSON
documents the service expects and sends them with an authenticated HTTP
POST.  Subpackages:

* ``api``: recipients, attachments, messages and the ``Payload`` contract;
* ``client``: the HTTP client, API versions and typed responses.

The most common names are re-exported here for convenience.
"""

from __future__ import annotations

from mailjet_send.api import Payload
from mailjet_send.api.recipient import Recipient
from mailjet_send.client import Client, Response, SendAPIVersion, Sent, StatusCode
from mailjet_send.errors import (
    ApiError,
    ClientError,
    ConfigurationError,
    ConflictingAddressingMode,
    MailjetError,
    MalformedResponse,
    ServerCommunicationError,
)

__all__ = [
    "ApiError",
    "Client",
    "ClientError",
    "ConfigurationError",
    "ConflictingAddressingMode",
    "MailjetError",
    "MalformedResponse",
    "Payload",
    "Recipient",
    "Response",
    "SendAPIVersion",
    "Sent",
    "ServerCommunicationError",
    "StatusCode",
    "api",
    "client",
    "errors",
    "util",
]

# SemVer version of the package
__version__: str = "0.1.0"
