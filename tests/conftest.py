from typing import Any, List, Optional, Tuple

import pytest

from member_api.transport import TransportResponse


class RecordingTransport:
    """In-memory HttpTransport that records every call it receives."""

    def __init__(self, data: Any = None, error: Optional[BaseException] = None):
        self.data = data
        self.error = error
        self.calls: List[Tuple[str, str, Any]] = []

    async def get(self, path):
        self.calls.append(("GET", path, None))
        if self.error is not None:
            raise self.error
        return TransportResponse(data=self.data)

    async def post(self, path, body=None):
        self.calls.append(("POST", path, body))
        if self.error is not None:
            raise self.error
        return TransportResponse(data=self.data)


@pytest.fixture
def recording_transport():
    return RecordingTransport(data={"status": "OK", "message": "done"})


MEMBER_API_ENV = ("MEMBER_API_BASE_URL", "MEMBER_API_TIMEOUT", "MEMBER_API_WITH_CREDENTIALS")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv then delenv so values loaded from a .env file are undone too
    for name in MEMBER_API_ENV:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
