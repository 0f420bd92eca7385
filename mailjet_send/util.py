"""File helpers for preparing attachments.

Mailjet expects attachment content as base64 text and rejects attachments
larger than 15 MB.  These helpers are independent from the message models:
``validate_file_size`` is informational and is never called implicitly.
"""

from __future__ import annotations

import base64
import logging
import os
from pathlib import Path
from typing import Tuple, Union

LOGGER = logging.getLogger(__name__)

# Maximum size of a single attachment accepted by Mailjet, in bytes (15 MB)
MAX_ATTACHMENT_SIZE_BYTES: int = 15 * 1024 * 1024

BYTES_PER_MEGABYTE: int = 1024 * 1024

PathLike = Union[str, os.PathLike]


def file_to_base64(file_path: PathLike) -> str:
    """Read ``file_path`` and return its content as standard base64 text.

    Raises:
        OSError: If the file cannot be read.
    """
    data = Path(file_path).read_bytes()
    return base64.b64encode(data).decode("ascii")


def validate_file_size(file_path: PathLike) -> Tuple[bool, float]:
    """Check whether a file is too heavy to be sent as an attachment.

    Returns:
        A tuple ``(too_heavy, size_in_mb)``.  ``too_heavy`` is ``True`` when
        the file exceeds :data:`MAX_ATTACHMENT_SIZE_BYTES`.  When the file
        metadata cannot be read the result is ``(False, 0.0)``.
    """
    try:
        size = os.stat(file_path).st_size
    except OSError as exc:
        LOGGER.debug("Unable to stat %s: %s", file_path, exc)
        return False, 0.0
    size_in_mb = size / BYTES_PER_MEGABYTE
    return size > MAX_ATTACHMENT_SIZE_BYTES, size_in_mb


__all__ = [
    "MAX_ATTACHMENT_SIZE_BYTES",
    "file_to_base64",
    "validate_file_size",
]
