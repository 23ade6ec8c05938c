"""
Script Execution Commands
Inject JavaScript into the currently selected frame, synchronously or
asynchronously.
"""
import re

from ..catalog import command
from ..dispatcher import Verb
from ..errors import InvalidArgument
from ..normalizer import MISSING, expect_params, require

_FUNCTION_START = re.compile(r"^(async\s+)?function\b")
_ARROW = re.compile(r"=>")


class JsFunction:
    """
    A JavaScript function passed in place of a script body.

    The source is embedded as-is and invoked against `window` with the
    command's argument list:

        JsFunction("function (a, b) { return a + b; }")
        JsFunction("(el) => el.scrollIntoView()")
    """

    __slots__ = ("source",)

    def __init__(self, source: str):
        if not isinstance(source, str):
            raise InvalidArgument(f"JsFunction source must be a string, got {type(source).__name__}.")
        source = source.strip()
        if not source:
            raise InvalidArgument("JsFunction source is empty.")
        if not (_FUNCTION_START.match(source) or _ARROW.search(source)):
            raise InvalidArgument("JsFunction source must be a function or arrow function expression.")
        self.source = source

    def to_script(self) -> str:
        # Parenthesised so function declarations and arrows both parse as expressions
        return (
            "var passedArgs = Array.prototype.slice.call(arguments,0); "
            f"return ({self.source}).apply(window, passedArgs);"
        )

    def __eq__(self, other):
        return isinstance(other, JsFunction) and other.source == self.source

    def __hash__(self):
        return hash(self.source)

    def __repr__(self):
        return f"JsFunction({self.source!r})"


def to_script(script) -> str:
    if isinstance(script, JsFunction):
        return script.to_script()
    if isinstance(script, str):
        return script
    raise InvalidArgument(
        f"The script must be a string or a JsFunction, got {type(script).__name__}."
    )


def to_args(args) -> list:
    if args is MISSING:
        return []
    if isinstance(args, (list, tuple)):
        return list(args)
    raise InvalidArgument(f"Script arguments must be passed as a list, got {type(args).__name__}.")


def _execute(ctx, call):
    expect_params(call, ctx.name, 2)
    script = to_script(require(call, 0, ctx.name, "script"))
    return ctx.send(call, body={"script": script, "args": to_args(call.get(1))})


@command("execute", "/execute", Verb.POST)
def execute(ctx, call):
    """
    Run a script synchronously in the current frame. The script is a function
    body (string) or a JsFunction; `args` are available to it through
    `arguments`, in order. The value it returns is the command's result.
    """
    return _execute(ctx, call)


@command("execute_async", "/execute_async", Verb.POST, aliases=("executeAsync",))
def execute_async(ctx, call):
    """
    Run an asynchronous script in the current frame. The script signals
    completion through the callback the server appends to `arguments`.
    Asynchronous scripts may not span page loads.
    """
    return _execute(ctx, call)


COMMANDS = (
    execute,
    execute_async,
)
