"""
Request Builder & Dispatcher
Builds session-scoped request descriptors and forwards them to a transport.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from .errors import ProgrammerMisuse

logger = logging.getLogger(__name__)


class Verb(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, token, allowed=None) -> "Verb":
        """
        Case-insensitive verb lookup.
        Raises ProgrammerMisuse for unknown tokens or tokens outside `allowed`.
        """
        allowed = tuple(allowed or cls)
        names = ", ".join(v.value for v in allowed)
        if isinstance(token, cls):
            verb = token
        elif isinstance(token, str) and token.upper() in cls.__members__:
            verb = cls[token.upper()]
        else:
            raise ProgrammerMisuse(f"Expected the HTTP method to be one of {names}, got {token!r}.")
        if verb not in allowed:
            raise ProgrammerMisuse(f"Expected the HTTP method to be one of {names}, got {verb.value}.")
        return verb


@dataclass(frozen=True)
class RequestDescriptor:
    """A single wire request. Built per call and handed straight to the transport."""

    path: str
    method: Verb
    body: Any = None
    callback: Optional[Callable] = field(default=None, compare=False, repr=False)

    def to_dict(self) -> dict:
        data = {"path": self.path, "method": self.method.value}
        if self.body is not None:
            data["body"] = self.body
        return data


def _noop(*args, **kwargs):
    pass


class Dispatcher:
    """
    Prefixes session-scoped paths, picks the body convention for the verb and
    forwards the result to the transport.

    The dispatcher never retries, never parses responses and never catches
    transport errors. Whatever the transport returns is handed back unchanged.
    """

    def __init__(self, transport):
        self._transport = transport

    @property
    def transport(self):
        return self._transport

    def session_path(self, path: str) -> str:
        # Read on every call, the transport owns the session id
        return f"/session/{self._transport.session_id}{path}"

    def build(self, path: str, method=Verb.GET, body: Any = None,
              callback: Optional[Callable] = None, scoped: bool = True) -> RequestDescriptor:
        method = Verb.parse(method)
        if scoped:
            path = self.session_path(path)

        if method is Verb.POST:
            if body is None:
                body = ""
        else:
            body = None

        return RequestDescriptor(path, method, body, callback)

    def send(self, descriptor: RequestDescriptor):
        logger.debug("%s %s", descriptor.method.value, descriptor.path)
        return self._transport.issue_request(descriptor, descriptor.callback or _noop)

    def dispatch(self, path: str, method=Verb.GET, body: Any = None,
                 callback: Optional[Callable] = None, scoped: bool = True):
        return self.send(self.build(path, method, body, callback, scoped))
