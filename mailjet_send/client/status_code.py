"""HTTP status codes documented by the Mailjet API.

Descriptions are taken from https://dev.mailjet.com/email/reference/overview/errors/
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class StatusCode(IntEnum):
    """Statuses Mailjet documents for its API.

    Each member carries the documented meaning in ``description``.
    """

    description: str

    def __new__(cls, value: int, description: str) -> "StatusCode":
        member = int.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member

    OK = (200, "All went well. Congrats!")
    CREATED = (201, "The POST request was successfully executed.")
    NO_CONTENT = (
        204,
        "No content found or expected to return. Returned when a DELETE request was successful.",
    )
    NOT_MODIFIED = (304, "The PUT request didn't affect any record.")
    BAD_REQUEST = (
        400,
        "One or more parameters are missing or maybe misspelled (unknown resource or action).",
    )
    UNAUTHORIZED = (
        401,
        "You have specified an incorrect API Key / API Secret Key pair. You may be "
        "unauthorized to access the API or your API key may be inactive.",
    )
    FORBIDDEN = (403, "You are not authorized to access this resource.")
    NOT_FOUND = (
        404,
        "The resource with the specified ID you are trying to reach does not exist.",
    )
    METHOD_NOT_ALLOWED = (405, "The method requested on the resource does not exist.")
    TOO_MANY_REQUESTS = (
        429,
        "You have reached the maximum number of calls allowed per minute by the API.",
    )
    INTERNAL_SERVER_ERROR = (
        500,
        "Something went wrong on Mailjet's side. The description contains an "
        "error identifier to share with Mailjet support.",
    )

    @classmethod
    def lookup(cls, code: int) -> Optional["StatusCode"]:
        """Return the documented member for ``code`` or ``None``."""
        try:
            return cls(code)
        except ValueError:
            return None

    @property
    def is_error(self) -> bool:
        return self.value >= 400


__all__ = ["StatusCode"]
