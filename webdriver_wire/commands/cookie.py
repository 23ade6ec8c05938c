"""
Cookie Commands
"""
from collections.abc import Mapping

from ..catalog import command
from ..dispatcher import Verb
from ..errors import InvalidArgument
from ..normalizer import MISSING, expect_params, require


@command("cookie", "/cookie", Verb.GET)
def cookie(ctx, call):
    """
    Retrieve or delete all cookies visible to the current page, set a cookie,
    or delete a single cookie by name.

        cookie("GET")
        cookie("POST", {"name": "sid", "value": "42"})
        cookie("DELETE")           # all cookies
        cookie("DELETE", "sid")    # one cookie
    """
    expect_params(call, ctx.name, 2)
    verb = Verb.parse(require(call, 0, ctx.name, "HTTP method"))
    payload = call.get(1)

    if verb is Verb.GET:
        return ctx.send(call)

    if verb is Verb.POST:
        if payload is MISSING:
            raise InvalidArgument("POST requests to /cookie must include a cookie object parameter also.")
        if not isinstance(payload, Mapping):
            raise InvalidArgument(f"The cookie must be a mapping, got {type(payload).__name__}.")
        return ctx.send(call, method=Verb.POST, body={"cookie": dict(payload)})

    if payload is MISSING:
        return ctx.send(call, method=Verb.DELETE)
    return ctx.send(call, method=Verb.DELETE, path="/cookie/{name}", name=payload)


COMMANDS = (cookie,)
