"""
Wire Errors
Exceptions raised by the command layer before a request reaches the transport.
"""
from selenium.common.exceptions import InvalidArgumentException, WebDriverException


class InvalidArgument(InvalidArgumentException):
    """Structurally invalid call arguments. Raised before any request is built."""


class ProgrammerMisuse(InvalidArgument):
    """Unrecognised verb token or command name."""


class TransportError(WebDriverException):
    """Network-level failure reported by a transport."""
