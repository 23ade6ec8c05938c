"""
Window & Navigation Commands
Frames, windows, window size, url, title, history, page source and screenshots.
"""
from ..catalog import command
from ..dispatcher import Verb
from ..errors import InvalidArgument
from ..normalizer import expect_params, require, to_number


@command("frame", "/frame", Verb.POST)
def frame(ctx, call):
    """
    Change focus to another frame on the page. With no frame id (only a
    callback) an empty body is sent; a None id switches to the default content.
    """
    expect_params(call, ctx.name, 1)
    if not call.has(0):
        return ctx.send(call)
    return ctx.send(call, body={"id": call.get(0)})


@command("window", "/window", Verb.POST)
def window(ctx, call):
    """
    Change focus to another window (POST, with a window name) or close the
    current window (DELETE).
    """
    expect_params(call, ctx.name, 2)
    verb = Verb.parse(require(call, 0, ctx.name, "HTTP method"), allowed=(Verb.POST, Verb.DELETE))

    if verb is Verb.POST:
        if not call.has(1):
            raise InvalidArgument("POST requests to /window must include a name parameter also.")
        return ctx.send(call, body={"name": call.get(1)})
    return ctx.send(call, method=Verb.DELETE)


@command("window_handle", "/window_handle", Verb.GET, aliases=("windowHandle",))
def window_handle(ctx, call):
    """Retrieve the current window handle."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("window_handles", "/window_handles", Verb.GET, aliases=("windowHandles",))
def window_handles(ctx, call):
    """Retrieve the list of all window handles available to the session."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("window_size", "/window/{handle}/size", Verb.POST, aliases=("windowSize",))
def window_size(ctx, call):
    """
    Change or get the size of the specified window. If nothing but a callback
    follows the handle, the current size is read with a GET.
    """
    expect_params(call, ctx.name, 3)
    handle = call.get(0)
    if not isinstance(handle, str):
        raise InvalidArgument("First argument must be a window handle string.")

    if call.arity == 1:
        return ctx.send(call, method=Verb.GET, handle=handle)

    width = to_number(call.get(1), "width")
    height = to_number(call.get(2), "height")
    return ctx.send(call, body={"width": width, "height": height}, handle=handle)


@command("url", "/url", Verb.GET)
def url(ctx, call):
    """Navigate to a new URL when one is given, otherwise retrieve the current one."""
    expect_params(call, ctx.name, 1)
    target = call.get(0)
    if isinstance(target, str):
        return ctx.send(call, method=Verb.POST, body={"url": target})
    return ctx.send(call)


@command("title", "/title", Verb.GET)
def title(ctx, call):
    """Get the current page title."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("source", "/source", Verb.GET)
def source(ctx, call):
    """Get the current page source."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("refresh", "/refresh", Verb.POST)
def refresh(ctx, call):
    """Refresh the current page."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("back", "/back", Verb.POST)
def back(ctx, call):
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("forward", "/forward", Verb.POST)
def forward(ctx, call):
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("screenshot", "/screenshot", Verb.GET)
def screenshot(ctx, call):
    """Take a screenshot of the current page (base64 PNG in the response)."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


COMMANDS = (
    frame,
    window,
    window_handle,
    window_handles,
    window_size,
    url,
    title,
    source,
    refresh,
    back,
    forward,
    screenshot,
)
