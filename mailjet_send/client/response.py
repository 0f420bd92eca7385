"""Typed view of a successful Send API response.

Mailjet answers a successful ``/send`` call with::

    {
      "Sent": [
        {"Email": "passenger@mailjet.com", "MessageID": 111111111111111,
         "MessageUUID": "..."}
      ]
    }
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Sent(BaseModel):
    """Delivery details for one recipient of a sent message."""

    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(alias="Email")
    message_id: int = Field(alias="MessageID")
    message_uuid: str = Field(default="", alias="MessageUUID")


class Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    sent: List[Sent] = Field(alias="Sent")


__all__ = ["Response", "Sent"]
