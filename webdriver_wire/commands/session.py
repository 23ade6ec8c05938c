"""
Session Commands
Session info/teardown, server status and timeout configuration.
"""
from ..catalog import command
from ..dispatcher import Verb
from ..errors import ProgrammerMisuse
from ..normalizer import MISSING, expect_params, to_number


@command("session", "/session", Verb.GET, scoped=False)
def session(ctx, call):
    """
    Get info about or delete the current session.
    action: "get" (default) or "delete".
    """
    expect_params(call, ctx.name, 1)
    action = call.get(0, "get")
    if not isinstance(action, str):
        raise ProgrammerMisuse(f"session() expects 'get' or 'delete', got {action!r}.")

    verb = Verb.parse(action, allowed=(Verb.GET, Verb.DELETE))
    if verb is Verb.DELETE:
        return ctx.send(call, method=Verb.DELETE,
                        path=ctx.dispatcher.session_path(""))
    return ctx.send(call)


@command("sessions", "/session", Verb.GET, scoped=False)
def sessions(ctx, call):
    """List the currently active sessions."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("status", "/status", Verb.GET, scoped=False)
def status(ctx, call):
    """Query the server's current status."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("timeouts", "/timeouts", Verb.POST)
def timeouts(ctx, call):
    """
    Configure how long a type of operation may run before it is aborted.
    type: "script", "implicit", "page load" ...
    ms: milliseconds
    """
    expect_params(call, ctx.name, 2)
    kind = call.get(0)
    ms = call.get(1)
    if kind is MISSING and ms is MISSING:
        return ctx.send(call)
    return ctx.send(call, body={"type": kind if kind is not MISSING else None,
                                "ms": to_number(ms, "ms")})


def _ms_body(call):
    ms = call.get(0)
    if ms is MISSING:
        return None
    return {"ms": to_number(ms, "ms")}


@command("timeouts_async_script", "/timeouts/async_script", Verb.POST,
         aliases=("timeoutsAsyncScript",))
def timeouts_async_script(ctx, call):
    """Set how long scripts run through execute_async may run."""
    expect_params(call, ctx.name, 1)
    return ctx.send(call, body=_ms_body(call))


@command("timeouts_implicit_wait", "/timeouts/implicit_wait", Verb.POST,
         aliases=("timeoutsImplicitWait",))
def timeouts_implicit_wait(ctx, call):
    """Set how long the server waits when searching for elements."""
    expect_params(call, ctx.name, 1)
    return ctx.send(call, body=_ms_body(call))


COMMANDS = (
    session,
    sessions,
    status,
    timeouts,
    timeouts_async_script,
    timeouts_implicit_wait,
)
