"""Email recipients shared by both Send API versions."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Recipient(BaseModel):
    """An email address and the (optional) display name of its owner.

    Serializes as ``{"Email": ..., "Name": ...}``; the name is always
    present on the wire and defaults to an empty string.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    email: str = Field(alias="Email")
    name: str = Field(default="", alias="Name")

    @classmethod
    def new(cls, email: str) -> "Recipient":
        """Create a recipient with no name."""
        return cls(email=email)

    @classmethod
    def with_name(cls, email: str, name: str) -> "Recipient":
        return cls(email=email, name=name)

    @classmethod
    def from_comma_separated(cls, recipients: str) -> List["Recipient"]:
        """Build one nameless recipient per comma separated segment.

        Segments are taken verbatim, so ``"Name" <email>`` strings produced
        by :meth:`as_comma_separated` are not parsed back into a name and an
        address.
        """
        return [cls.new(segment) for segment in recipients.split(",")]

    def as_comma_separated(self) -> str:
        """Render the recipient in SMTP header form.

        ``"John Doe" <john@example.com>`` when a name is set, otherwise
        ``<john@example.com>``.
        """
        if self.name:
            return f'"{self.name}" <{self.email}>'
        return f"<{self.email}>"

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


__all__ = ["Recipient"]
