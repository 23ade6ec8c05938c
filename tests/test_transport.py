"""Tests for the HTTP transport, with requests mocked out."""

import logging
import threading
from concurrent.futures import Future
from unittest.mock import MagicMock

import pytest
import requests
from selenium.common.exceptions import NoSuchElementException, WebDriverException

from webdriver_wire import HttpTransport, Protocol, TransportError, WireConfig
from webdriver_wire.dispatcher import RequestDescriptor, Verb


def make_response(status_code=200, json_data=None, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("not json")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def http():
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def http_transport(http):
    config = WireConfig(server_url="http://grid:4444/wd/hub/", request_timeout=5, max_workers=2)
    transport = HttpTransport(config, session_id="s-1", session=http)
    yield transport
    transport.close()


class TestHttpTransport:

    def test_get_request(self, http, http_transport):
        http.request.return_value = make_response(json_data={"value": "Example"})
        future = http_transport.issue_request(RequestDescriptor("/session/s-1/title", Verb.GET), lambda r: None)

        assert future.result(timeout=5) == {"value": "Example"}
        http.request.assert_called_once_with("GET", "http://grid:4444/wd/hub/session/s-1/title", timeout=5.0)

    def test_post_json_body(self, http, http_transport):
        http.request.return_value = make_response(json_data={"value": None})
        body = {"using": "id", "value": "main"}
        future = http_transport.issue_request(RequestDescriptor("/session/s-1/element", Verb.POST, body), lambda r: None)
        future.result(timeout=5)

        args, kwargs = http.request.call_args
        assert args == ("POST", "http://grid:4444/wd/hub/session/s-1/element")
        assert kwargs["json"] == body

    def test_post_empty_body(self, http, http_transport):
        http.request.return_value = make_response(json_data={"value": None})
        http_transport.issue_request(RequestDescriptor("/session/s-1/refresh", Verb.POST, ""), lambda r: None).result(timeout=5)

        _, kwargs = http.request.call_args
        assert kwargs["data"] == b""
        assert "json" not in kwargs

    def test_on_complete_receives_response(self, http, http_transport):
        http.request.return_value = make_response(json_data={"value": ["w1", "w2"]})
        received = []
        done = threading.Event()

        def on_complete(result):
            received.append(result)
            done.set()

        http_transport.issue_request(RequestDescriptor("/session/s-1/window_handles", Verb.GET), on_complete)
        assert done.wait(timeout=5)
        assert received == [{"value": ["w1", "w2"]}]

    def test_failing_callback_is_logged(self, http, caplog):
        """A callback that raises leaves the response in the future and is logged."""
        def run_now(fn, *args):
            future = Future()
            future.set_result(fn(*args))
            return future

        executor = MagicMock()
        executor.submit.side_effect = run_now
        transport = HttpTransport(WireConfig(), session_id="s-1", session=http, executor=executor)
        http.request.return_value = make_response(json_data={"value": "Example"})

        def on_complete(result):
            raise RuntimeError("callback blew up")

        with caplog.at_level(logging.ERROR, logger="webdriver_wire.core"):
            future = transport.issue_request(RequestDescriptor("/session/s-1/title", Verb.GET), on_complete)

        assert future.result() == {"value": "Example"}
        assert "Completion callback for GET /session/s-1/title raised" in caplog.text
        assert "callback blew up" in caplog.text

    def test_non_json_body(self, http, http_transport):
        http.request.return_value = make_response(text="OK")
        future = http_transport.issue_request(RequestDescriptor("/status", Verb.GET), lambda r: None)
        assert future.result(timeout=5) == {"value": "OK"}

    def test_network_error(self, http, http_transport):
        http.request.side_effect = requests.ConnectionError("connection refused")
        on_complete = MagicMock()
        future = http_transport.issue_request(RequestDescriptor("/status", Verb.GET), on_complete)

        with pytest.raises(TransportError, match="connection refused"):
            future.result(timeout=5)
        assert isinstance(future.exception().__cause__, requests.ConnectionError)
        on_complete.assert_not_called()

    def test_w3c_error_response(self, http, http_transport):
        http.request.return_value = make_response(
            status_code=404,
            text='{"value": {"error": "no such element", "message": "Unable to locate #x", "stacktrace": ""}}',
        )
        future = http_transport.issue_request(RequestDescriptor("/session/s-1/element", Verb.POST, {}), lambda r: None)
        with pytest.raises(NoSuchElementException, match="Unable to locate"):
            future.result(timeout=5)

    def test_legacy_status_error(self, http, http_transport):
        http.request.return_value = make_response(json_data={"status": 7, "value": {"message": "gone"}})
        future = http_transport.issue_request(RequestDescriptor("/session/s-1/element", Verb.POST, {}), lambda r: None)
        with pytest.raises(WebDriverException):
            future.result(timeout=5)

    def test_session_id(self, http_transport):
        assert http_transport.session_id == "s-1"
        http_transport.set_session("s-2")
        assert http_transport.session_id == "s-2"

    def test_headers(self, http, http_transport):
        assert http.headers["Accept"] == "application/json"

    def test_close(self, http):
        transport = HttpTransport(WireConfig(max_workers=1), session=http)
        with transport:
            pass
        http.close.assert_called_once()


class TestProtocolOverHttp:

    def test_end_to_end(self, http, http_transport):
        http.request.return_value = make_response(json_data={"value": {"ELEMENT": "el-9"}})
        protocol = Protocol(http_transport)

        future = protocol.element("CSS Selector", "#login")

        assert future.result(timeout=5)["value"] == {"ELEMENT": "el-9"}
        args, kwargs = http.request.call_args
        assert args == ("POST", "http://grid:4444/wd/hub/session/s-1/element")
        assert kwargs["json"] == {"using": "css selector", "value": "#login"}

    def test_cookie_name_survives_url_preparation(self, http, http_transport):
        """Reserved characters in a path value reach the server instead of being cut off."""
        http.request.return_value = make_response(json_data={"value": None})
        protocol = Protocol(http_transport)

        protocol.cookie("DELETE", "a#b/c?d").result(timeout=5)

        args, _ = http.request.call_args
        prepared = requests.Request(args[0], args[1]).prepare()
        assert prepared.path_url == "/wd/hub/session/s-1/cookie/a%23b%2Fc%3Fd"
