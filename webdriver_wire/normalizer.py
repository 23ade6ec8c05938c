"""
Argument Normalizer
Resolves variable-arity command calls into domain parameters plus an optional
completion callback.
"""
import math
from typing import Any, Callable, Optional, Tuple

from .errors import InvalidArgument


class _Missing:
    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


# Marks a parameter the caller did not supply
MISSING = _Missing()


class Call:
    """Canonical view of one command invocation."""

    __slots__ = ("params", "callback")

    def __init__(self, params: Tuple[Any, ...], callback: Optional[Callable] = None):
        self.params = params
        self.callback = callback

    @property
    def arity(self) -> int:
        return len(self.params)

    def get(self, index: int, default: Any = MISSING) -> Any:
        if index < len(self.params):
            return self.params[index]
        return default

    def has(self, index: int) -> bool:
        return index < len(self.params)

    def __repr__(self):
        return f"Call(params={self.params!r}, callback={self.callback!r})"


def is_callback(value: Any) -> bool:
    # Classes are callable too, but nobody passes a class as a completion handler
    return callable(value) and not isinstance(value, type)


def resolve_call(args, callback: Optional[Callable] = None) -> Call:
    """
    Split positional arguments at the first callable.

    Everything before the callable is a domain parameter. The callable is the
    completion callback and must be the last positional argument. A keyword
    callback may be given instead of a positional one, not in addition to it.
    """
    args = tuple(args)
    for index, value in enumerate(args):
        if not is_callback(value):
            continue
        if index != len(args) - 1:
            raise InvalidArgument(
                f"The callback must be the last argument, got {len(args) - index - 1} argument(s) after it."
            )
        if callback is not None:
            raise InvalidArgument("Got a callback both positionally and as a keyword argument.")
        return Call(args[:index], value)

    if callback is not None and not is_callback(callback):
        raise InvalidArgument(f"callback must be callable, got {type(callback).__name__}.")
    return Call(args, callback)


def expect_params(call: Call, name: str, maximum: int) -> None:
    """Reject calls that carry more domain parameters than the command takes."""
    if call.arity > maximum:
        raise InvalidArgument(
            f"{name}() takes at most {maximum} argument(s) before the callback, got {call.arity}."
        )


def require(call: Call, index: int, name: str, label: str) -> Any:
    """Return a required parameter or fail with InvalidArgument."""
    value = call.get(index)
    if value is MISSING:
        raise InvalidArgument(f"{name}() requires the {label} argument.")
    return value


def to_number(value: Any, label: str):
    """
    Coerce a value to a number the way the wire protocol expects it.

    Numeric strings are accepted. NaN, infinity, booleans and anything else
    that is not a number raise InvalidArgument. Integral values come back as
    int; ints are passed through untouched so large values keep their precision.
    """
    if isinstance(value, bool) or value is None or value is MISSING:
        raise InvalidArgument(f"{label} must be passed as a number, got {value!r}.")
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidArgument(f"{label} must be passed as a number, got {value!r}.") from None
    if math.isnan(number):
        raise InvalidArgument(f"{label} must be passed as a number, got NaN.")
    if math.isinf(number):
        raise InvalidArgument(f"{label} must be a finite number, got {value!r}.")
    if number.is_integer():
        return int(number)
    return number
