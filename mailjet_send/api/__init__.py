"""Request payload models for the Mailjet Send API.

This subpackage defines the common ``Payload`` interface along with the
message shapes for both wire versions: :mod:`mailjet_send.api.v3` (single
message per request, ``Recipients`` or ``To``/``Cc``/``Bcc`` addressing) and
:mod:`mailjet_send.api.v3_1` (a ``Messages`` batch envelope).  The client
only depends on ``Payload``, so new message shapes can be added without
touching it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Payload(ABC):
    """Abstract base class for request bodies accepted by ``Client.send``.

    Implementations own their serialization: ``to_json`` must return the
    exact JSON document Mailjet expects for the request body of the wire
    version the payload targets.
    """

    @abstractmethod
    def to_json(self) -> str:
        """Return the JSON representation consumed by Mailjet's API."""
        raise NotImplementedError


__all__ = ["Payload"]
