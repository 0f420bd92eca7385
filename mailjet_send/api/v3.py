"""Send API v3 message and attachment models.

A v3 request body carries exactly one message.  Recipients can be addressed
in two mutually exclusive ways:

* ``Recipients``: every recipient gets a separate, private copy.  Rendered
  as a JSON array of ``{"Email", "Name"}`` objects.
* ``To``/``Cc``/``Bcc``: every recipient sees the others, SMTP header style.
  Each field is rendered as a single comma separated string.

A :class:`Message` tracks which mode it is in and refuses to mix them.
Optional fields that were never set are left out of the JSON document
entirely, because Mailjet treats the presence of a key as meaningful.
"""

from __future__ import annotations

import json
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from mailjet_send.api import Payload
from mailjet_send.api.recipient import Recipient
from mailjet_send.errors import ConflictingAddressingMode
from mailjet_send.util import PathLike, file_to_base64


class Attachment(BaseModel):
    """A base64 encoded file attached to a message.

    The same type is used for regular attachments and inline attachments;
    the role depends on whether it is passed to :meth:`Message.attach` or
    :meth:`Message.attach_inline`.  An inline attachment is referenced from
    the HTML part as ``cid:<filename>``.  The content is not validated.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content_type: str = Field(alias="Content-type")
    filename: str = Field(alias="Filename")
    content: str

    @classmethod
    def new(cls, content_type: str, filename: str, content: str) -> "Attachment":
        return cls(content_type=content_type, filename=filename, content=content)

    @classmethod
    def from_file(
        cls,
        file_path: PathLike,
        content_type: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> "Attachment":
        """Build an attachment from a file on disk.

        The content type is guessed from the file extension when not given,
        falling back to ``application/octet-stream``.
        """
        path = Path(file_path)
        if content_type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            content_type = guessed or "application/octet-stream"
        return cls.new(content_type, filename or path.name, file_to_base64(path))

    def to_wire(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


@dataclass(frozen=True)
class RecipientsMode:
    """Each recipient receives a separate copy of the message."""

    recipients: Tuple[Recipient, ...]


@dataclass(frozen=True)
class ToCcBccMode:
    """Recipients share one message and can see each other."""

    to: Tuple[Recipient, ...]
    cc: Optional[Tuple[Recipient, ...]] = None
    bcc: Optional[Tuple[Recipient, ...]] = None


AddressingMode = Union[RecipientsMode, ToCcBccMode]

_RECIPIENTS = "Recipients"
_TO_CC_BCC = "To/Cc/Bcc"


def _join_header(recipients: Iterable[Recipient]) -> str:
    return ", ".join(r.as_comma_separated() for r in recipients)


class Message(Payload):
    """Mailjet Send API v3 message.

    Example::

        message = Message("sender@company.com", "Company", "Hello", "Hi there")
        message.push_recipient(Recipient.new("receiver@company.com"))
        client.send(message)

    Content fields (``subject``, ``text_part``, ``html_part``, ``vars``,
    ``custom_id``, ``event_payload``, ``headers``) are plain attributes.
    Addressing, attachments and the template settings are only changed
    through their methods so the invariants between them hold.
    """

    def __init__(
        self,
        from_email: str,
        from_name: str,
        subject: Optional[str] = None,
        text_part: Optional[str] = None,
        html_part: Optional[str] = None,
    ) -> None:
        self.from_email = from_email
        self.from_name = from_name
        self.subject = subject
        self.text_part = text_part
        self.html_part = html_part
        self.vars: Optional[Dict[str, Any]] = None
        self.custom_id: Optional[str] = None
        self.event_payload: Optional[str] = None
        self.headers: Optional[Dict[str, str]] = None
        self._addressing: Optional[AddressingMode] = None
        self._attachments: List[Attachment] = []
        self._inline_attachments: List[Attachment] = []
        self._template_id: Optional[int] = None
        self._use_template_language: Optional[bool] = None

    def __repr__(self) -> str:
        return (
            f"Message(from_email={self.from_email!r}, subject={self.subject!r}, "
            f"addressing={self._addressing!r})"
        )

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------
    @property
    def addressing(self) -> Optional[AddressingMode]:
        """The active addressing mode, or ``None`` while unaddressed."""
        return self._addressing

    @property
    def recipients(self) -> Tuple[Recipient, ...]:
        if isinstance(self._addressing, RecipientsMode):
            return self._addressing.recipients
        return ()

    @property
    def to(self) -> Tuple[Recipient, ...]:
        if isinstance(self._addressing, ToCcBccMode):
            return self._addressing.to
        return ()

    @property
    def cc(self) -> Optional[Tuple[Recipient, ...]]:
        if isinstance(self._addressing, ToCcBccMode):
            return self._addressing.cc
        return None

    @property
    def bcc(self) -> Optional[Tuple[Recipient, ...]]:
        if isinstance(self._addressing, ToCcBccMode):
            return self._addressing.bcc
        return None

    def push_recipient(self, recipient: Recipient) -> None:
        """Append a recipient using ``Recipients`` addressing.

        Raises:
            ConflictingAddressingMode: If ``To``/``Cc``/``Bcc`` are already set.
        """
        self.push_many_recipients([recipient])

    def push_many_recipients(self, recipients: Iterable[Recipient]) -> None:
        """Append several recipients using ``Recipients`` addressing.

        Raises:
            ConflictingAddressingMode: If ``To``/``Cc``/``Bcc`` are already set.
        """
        if isinstance(self._addressing, ToCcBccMode):
            raise ConflictingAddressingMode(_TO_CC_BCC, _RECIPIENTS)
        added = tuple(recipients)
        if added:
            self._addressing = RecipientsMode(self.recipients + added)

    def set_receivers(
        self,
        to: Iterable[Recipient],
        cc: Optional[Iterable[Recipient]] = None,
        bcc: Optional[Iterable[Recipient]] = None,
    ) -> None:
        """Address the message using ``To``, ``Cc`` and ``Bcc``.

        Replaces any receivers set by a previous call.  Passing no receivers
        at all leaves the message unaddressed.

        Raises:
            ConflictingAddressingMode: If ``Recipients`` are already set.
        """
        if isinstance(self._addressing, RecipientsMode):
            raise ConflictingAddressingMode(_RECIPIENTS, _TO_CC_BCC)
        mode = ToCcBccMode(
            to=tuple(to),
            cc=tuple(cc) if cc is not None else None,
            bcc=tuple(bcc) if bcc is not None else None,
        )
        if not (mode.to or mode.cc or mode.bcc):
            self._addressing = None
            return
        self._addressing = mode

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------
    @property
    def attachments(self) -> Tuple[Attachment, ...]:
        return tuple(self._attachments)

    @property
    def inline_attachments(self) -> Tuple[Attachment, ...]:
        return tuple(self._inline_attachments)

    def attach(self, attachment: Attachment) -> None:
        self._attachments.append(attachment)

    def attach_inline(self, attachment: Attachment) -> None:
        """Attach a file that the HTML part references as ``cid:<filename>``."""
        self._inline_attachments.append(attachment)

    # ------------------------------------------------------------------
    # Template and tracking
    # ------------------------------------------------------------------
    @property
    def template_id(self) -> Optional[int]:
        return self._template_id

    @property
    def use_template_language(self) -> Optional[bool]:
        return self._use_template_language

    def set_template_id(self, template_id: int) -> None:
        """Use a Mailjet template; also enables the template language."""
        self._template_id = template_id
        self._use_template_language = True

    def set_vars(self, variables: Dict[str, Any]) -> None:
        self.vars = dict(variables)

    def set_custom_id(self, custom_id: str) -> None:
        self.custom_id = custom_id

    def set_event_payload(self, event_payload: str) -> None:
        self.event_payload = event_payload

    def set_headers(self, headers: Dict[str, str]) -> None:
        self.headers = dict(headers)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_wire(self) -> Dict[str, Any]:
        """Return the request body as a dictionary, unset fields omitted."""
        data: Dict[str, Any] = {
            "FromEmail": self.from_email,
            "FromName": self.from_name,
        }
        if self.subject is not None:
            data["Subject"] = self.subject
        if self.text_part is not None:
            data["Text-part"] = self.text_part
        if self.html_part is not None:
            data["Html-part"] = self.html_part

        mode = self._addressing
        if isinstance(mode, RecipientsMode):
            data["Recipients"] = [r.to_wire() for r in mode.recipients]
        elif isinstance(mode, ToCcBccMode):
            data["To"] = _join_header(mode.to)
            if mode.cc:
                data["Cc"] = _join_header(mode.cc)
            if mode.bcc:
                data["Bcc"] = _join_header(mode.bcc)

        if self._attachments:
            data["Attachments"] = [a.to_wire() for a in self._attachments]
        if self._inline_attachments:
            data["Inline_attachments"] = [a.to_wire() for a in self._inline_attachments]
        if self.vars is not None:
            data["Vars"] = self.vars
        if self._template_id is not None:
            data["Mj-TemplateID"] = self._template_id
            data["Mj-TemplateLanguage"] = self._use_template_language
        if self.custom_id is not None:
            data["Mj-CustomID"] = self.custom_id
        if self.event_payload is not None:
            data["Mj-EventPayLoad"] = self.event_payload
        if self.headers is not None:
            data["Headers"] = self.headers
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), separators=(",", ":"), ensure_ascii=False)


__all__ = [
    "AddressingMode",
    "Attachment",
    "Message",
    "RecipientsMode",
    "ToCcBccMode",
]
