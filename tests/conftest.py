import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import requests

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeHTTPResponse:
    def __init__(self, status_code: int, content: bytes) -> None:
        self.status_code = status_code
        self.content = content


class FakeSession:
    """Stand-in for ``requests.Session`` recording every POST."""

    def __init__(
        self,
        status_code: int = 200,
        content: bytes = b'{"Sent": []}',
        error: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.content = content
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> FakeHTTPResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return FakeHTTPResponse(self.status_code, self.content)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("Name or service not known")
