"""Environment configuration for the Mailjet client.

Environment variables used:

* ``MJ_APIKEY_PUBLIC`` – public API key (Basic auth user)
* ``MJ_APIKEY_PRIVATE`` – private API key (Basic auth password)
* ``MJ_BASE_URL`` – optional base URL overriding the Send API version
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from mailjet_send.errors import MissingKeyEnvironmentVariables

PUBLIC_API_KEY_ENV_VAR = "MJ_APIKEY_PUBLIC"
PRIVATE_API_KEY_ENV_VAR = "MJ_APIKEY_PRIVATE"
BASE_URL_ENV_VAR = "MJ_BASE_URL"

# Seconds to wait for Mailjet before giving up on a request
DEFAULT_TIMEOUT: float = 10.0


@dataclass(frozen=True)
class Credentials:
    public_key: str
    private_key: str
    base_url: Optional[str] = None


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> Credentials:
    """Read the API key pair (and optional base URL) from the environment.

    Raises:
        MissingKeyEnvironmentVariables: If either key is unset or empty.
    """
    env = os.environ if environ is None else environ
    public_key = env.get(PUBLIC_API_KEY_ENV_VAR, "").strip()
    private_key = env.get(PRIVATE_API_KEY_ENV_VAR, "").strip()

    missing = []
    if not public_key:
        missing.append(PUBLIC_API_KEY_ENV_VAR)
    if not private_key:
        missing.append(PRIVATE_API_KEY_ENV_VAR)
    if missing:
        raise MissingKeyEnvironmentVariables(missing)

    base_url = env.get(BASE_URL_ENV_VAR, "").strip() or None
    return Credentials(public_key, private_key, base_url)


__all__ = [
    "BASE_URL_ENV_VAR",
    "Credentials",
    "DEFAULT_TIMEOUT",
    "PRIVATE_API_KEY_ENV_VAR",
    "PUBLIC_API_KEY_ENV_VAR",
    "load_credentials",
]
