"""HTTP client, API versions and response types for the Send API."""

from __future__ import annotations

from mailjet_send.client.mailjet import Client
from mailjet_send.client.response import Response, Sent
from mailjet_send.client.status_code import StatusCode
from mailjet_send.client.version import SendAPIVersion

__all__ = ["Client", "Response", "SendAPIVersion", "Sent", "StatusCode"]
