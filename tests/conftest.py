"""Shared fixtures for the wire command tests."""

from concurrent.futures import Future

import pytest

from webdriver_wire import Protocol, Transport


class RecordingTransport(Transport):
    """Transport that records descriptors instead of sending them."""

    def __init__(self, session_id="abc123"):
        self._session_id = session_id
        self.requests = []

    @property
    def session_id(self):
        return self._session_id

    def set_session(self, session_id):
        self._session_id = session_id

    def issue_request(self, descriptor, on_complete):
        self.requests.append((descriptor, on_complete))
        future = Future()
        future.set_result({"value": None})
        return future

    @property
    def last(self):
        return self.requests[-1][0]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def protocol(transport):
    return Protocol(transport)
