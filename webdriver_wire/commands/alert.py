"""
Alert Commands
"""
from ..catalog import command
from ..dispatcher import Verb
from ..normalizer import expect_params


@command("accept_alert", "/accept_alert", Verb.POST, aliases=("acceptAlert",))
def accept_alert(ctx, call):
    """
    Accept the currently displayed alert dialog. Usually equivalent to
    clicking the 'OK' button.
    """
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("dismiss_alert", "/dismiss_alert", Verb.POST, aliases=("dismissAlert",))
def dismiss_alert(ctx, call):
    """
    Dismiss the currently displayed alert dialog. 'Cancel' for confirm() and
    prompt(), 'OK' for alert().
    """
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


@command("alert_text", "/alert_text", Verb.GET, aliases=("alertText",))
def alert_text(ctx, call):
    """Read the text of the current dialog, or type into a prompt() when text is given."""
    expect_params(call, ctx.name, 1)
    text = call.get(0)
    if isinstance(text, str):
        return ctx.send(call, method=Verb.POST, body={"text": text})
    return ctx.send(call)


COMMANDS = (
    accept_alert,
    dismiss_alert,
    alert_text,
)
