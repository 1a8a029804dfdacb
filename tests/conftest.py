"""
Pytest configuration and shared fixtures for articut tests
"""
import json
import sys
from pathlib import Path

import httpx
import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from articut import Articut  # noqa: E402


SUCCESS_BODY = {
    "version": "v259",
    "level": "lv2",
    "msg": "Success!",
    "exec_time": 0.06,
    "result_pos": [
        "<FUNC_inner>我</FUNC_inner><ACTION_verb>想</ACTION_verb>",
        "。",
    ],
    "result_obj": [
        [
            {"pos": "FUNC_inner", "text": "我"},
            {"pos": "ACTION_verb", "text": "想"},
        ],
        [
            {"pos": "PUNCTUATION", "text": "。"},
        ],
    ],
    "result_segmentation": "我/想/。",
    "word_count_balance": 1995,
}


class RecordingTransport:
    """Serves canned responses and remembers every request it saw."""

    def __init__(self, body=None, status_code=200, raw=None, error=None):
        self.body = SUCCESS_BODY if body is None else body
        self.status_code = status_code
        self.raw = raw
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def make_articut():
    """Build an Articut client that talks to the given RecordingTransport."""

    def _make(transport: RecordingTransport) -> Articut:
        client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        return Articut("tester@example.com", "secret-key", client=client)

    return _make
