"""
Wire Core - Transport
Sends request descriptors to the remote end and owns the current session id.
"""
import logging
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Optional

import requests
from selenium.webdriver.remote.errorhandler import ErrorHandler

from .config import WireConfig
from .dispatcher import RequestDescriptor, Verb
from .errors import TransportError

logger = logging.getLogger(__name__)


class Transport(ABC):
    """What the command layer needs from a transport."""

    @property
    @abstractmethod
    def session_id(self) -> Optional[str]:
        """Current session id, read on every session-scoped call."""

    @abstractmethod
    def issue_request(self, descriptor: RequestDescriptor, on_complete: Callable[[Any], Any]):
        """Send one request and return a handle for its eventual completion."""


class HttpTransport(Transport):
    """
    Transport over HTTP using requests, run on a small thread pool.

    issue_request() returns a concurrent.futures.Future that resolves to the
    decoded response. Successful responses are also passed to `on_complete`.
    An exception raised by `on_complete` is logged and does not change the
    future, which still holds the response.
    Failures are stored in the future: TransportError for network problems,
    the matching selenium exception for error responses from the remote end.
    """

    def __init__(self, config: Optional[WireConfig] = None, session_id: Optional[str] = None,
                 session: Optional[requests.Session] = None,
                 executor: Optional[ThreadPoolExecutor] = None):
        self._config = config or WireConfig()
        self._session_id = session_id
        self._http = session or requests.Session()
        self._http.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json;charset=UTF-8",
        })
        self._executor = executor or ThreadPoolExecutor(
            max_workers=int(self._config.MAX_WORKERS), thread_name_prefix="webdriver-wire"
        )
        self._error_handler = ErrorHandler()

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    def set_session(self, session_id: Optional[str]) -> None:
        """Called by whoever allocates sessions."""
        self._session_id = session_id

    def url_for(self, path: str) -> str:
        return self._config.SERVER_URL.rstrip("/") + path

    def issue_request(self, descriptor: RequestDescriptor, on_complete: Callable[[Any], Any]) -> Future:
        future = self._executor.submit(self._exchange, descriptor)

        def _done(f: Future):
            if f.cancelled():
                return
            error = f.exception()
            if error is not None:
                logger.warning("%s %s failed: %s", descriptor.method.value, descriptor.path, error)
                return
            try:
                on_complete(f.result())
            except Exception:
                logger.exception("Completion callback for %s %s raised",
                                 descriptor.method.value, descriptor.path)

        future.add_done_callback(_done)
        return future

    def _exchange(self, descriptor: RequestDescriptor) -> dict:
        url = self.url_for(descriptor.path)
        kwargs = {"timeout": float(self._config.REQUEST_TIMEOUT)}
        if descriptor.method is Verb.POST:
            if descriptor.body == "":
                kwargs["data"] = b""
            else:
                kwargs["json"] = descriptor.body

        try:
            response = self._http.request(descriptor.method.value, url, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{descriptor.method.value} {url} failed: {e}") from e

        return self._decode(response)

    def _decode(self, response: requests.Response) -> dict:
        if response.status_code >= 400:
            # ErrorHandler maps the W3C/JSON wire error payload to a selenium exception
            self._error_handler.check_response({"status": response.status_code, "value": response.text})
            raise TransportError(f"HTTP {response.status_code}: {response.text[:200]}")

        try:
            data = response.json()
        except ValueError:
            return {"value": response.text}

        if not isinstance(data, dict):
            return {"value": data}
        if data.get("status") not in (None, 0):
            # Legacy JSON wire servers report errors with HTTP 200 and a status code
            self._error_handler.check_response(data)
        return data

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
