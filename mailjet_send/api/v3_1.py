"""Send API v3.1 message models.

From the Mailjet v3.1 documentation: recipients listed in ``To`` receive a
common message showing every other recipient.  To keep recipients from
seeing each other, send several messages in the ``Messages`` array.

The request root is always the :class:`Messages` envelope, even for a
single message.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional

from mailjet_send.api import Payload
from mailjet_send.api.recipient import Recipient


class Message:
    """A single v3.1 message.  Wrap it in :class:`Messages` to send it."""

    def __init__(
        self,
        from_: Recipient,
        to: Iterable[Recipient],
        subject: Optional[str] = None,
        text_part: str = "",
        html_part: Optional[str] = None,
    ) -> None:
        self.from_ = from_
        self.to: List[Recipient] = list(to)
        # Mailjet expects the key even without a subject
        self.subject: str = subject or ""
        self.text_part = text_part
        self.html_part = html_part

    def __repr__(self) -> str:
        return f"Message(from_={self.from_!r}, to={self.to!r}, subject={self.subject!r})"

    def to_wire(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "From": self.from_.to_wire(),
            "To": [r.to_wire() for r in self.to],
            "Subject": self.subject,
            "TextPart": self.text_part,
        }
        if self.html_part is not None:
            data["HTMLPart"] = self.html_part
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), separators=(",", ":"), ensure_ascii=False)


class Messages(Payload):
    """Batch of v3.1 messages; the root object of a v3.1 request body."""

    def __init__(self, message: Message) -> None:
        self._messages: List[Message] = [message]

    @property
    def messages(self) -> List[Message]:
        return list(self._messages)

    def push(self, message: Message) -> None:
        """Add another independent message to the batch."""
        self._messages.append(message)

    def __len__(self) -> int:
        return len(self._messages)

    def to_wire(self) -> Dict[str, Any]:
        return {"Messages": [m.to_wire() for m in self._messages]}

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), separators=(",", ":"), ensure_ascii=False)


__all__ = ["Message", "Messages"]
