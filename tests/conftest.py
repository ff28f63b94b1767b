"""ABOUTME: Pytest configuration and shared fixtures for A-Parser client tests.

Provides a recording transport that stands in for the HTTP layer so client
behaviour can be asserted against the exact bytes that would go on the wire.
"""

import json

import pytest

from aparser_client import AparserClient


class RecordingTransport:
    """Transport double that records requests and replays a canned reply."""

    def __init__(self, reply=b'{"success":true,"data":"pong"}'):
        self.reply = reply
        self.calls = []

    def send(self, url, body):
        self.calls.append((url, body))
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply

    @property
    def last_request(self):
        """Last request body decoded back to a dict."""
        return json.loads(self.calls[-1][1].decode("utf-8"))

    def reply_with(self, payload):
        """Set the next reply from a JSON-serializable payload."""
        self.reply = json.dumps(payload).encode("utf-8")


@pytest.fixture
def transport():
    """Fixture providing a RecordingTransport answering ``pong``."""
    return RecordingTransport()


@pytest.fixture
def client(transport):
    """Fixture providing a client bound to http://h/ with password ``p``."""
    return AparserClient("http://h/", "p", transport=transport)


@pytest.fixture
def mock_info_data():
    """Fixture providing a sample ``info`` payload.

    Returns:
        Dictionary shaped like the service's info reply
    """
    return {
        "pid": 4242,
        "version": "1.2.1234",
        "tasksInQueue": 2,
        "workingTasks": 1,
    }
