"""Send API versions and their base URLs."""

from __future__ import annotations

from enum import Enum


class SendAPIVersion(str, Enum):
    """Wire version of the Send API to consume.

    * ``V3``: https://dev.mailjet.com/email/guides/send-api-V3/
    * ``V3_1``: https://dev.mailjet.com/email/guides/send-api-v31/
    """

    V3 = "v3"
    V3_1 = "v3.1"

    @property
    def api_url(self) -> str:
        """Base URL of the version; ``/send`` is appended by the client."""
        return f"https://api.mailjet.com/{self.value}"


__all__ = ["SendAPIVersion"]
