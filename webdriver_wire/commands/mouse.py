"""
Mouse Commands
Pointer movement, double click and button down/up for drag and drop.
"""
from numbers import Number

from selenium.webdriver.common.actions.mouse_button import MouseButton

from ..catalog import command
from ..dispatcher import Verb
from ..normalizer import MISSING, expect_params

BUTTONS = {
    "left": MouseButton.LEFT,
    "middle": MouseButton.MIDDLE,
    "right": MouseButton.RIGHT,
}


def resolve_button(button):
    """Map left/middle/right to 0/1/2. Unknown names go to the server unchanged."""
    if button is MISSING:
        return MouseButton.LEFT
    if isinstance(button, str):
        return BUTTONS.get(button.lower(), button)
    return button


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


@command("move_to", "/moveto", Verb.POST, aliases=("moveTo",))
def move_to(ctx, call):
    """
    Move the mouse by an offset of the given element, or relative to the
    current cursor when no element is given. With an element but no offset the
    mouse moves to the centre of the element.
    """
    expect_params(call, ctx.name, 3)
    element, xoffset, yoffset = call.get(0), call.get(1), call.get(2)

    data = {}
    if isinstance(element, str):
        data["element"] = element
    if _is_number(xoffset):
        data["xoffset"] = xoffset
    if _is_number(yoffset):
        data["yoffset"] = yoffset
    return ctx.send(call, body=data)


@command("double_click", "/doubleclick", Verb.POST, aliases=("doubleClick",))
def double_click(ctx, call):
    """Double-click at the current mouse coordinates (set by move_to)."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call)


def _button_command(name, direction, alias, doc):
    def handler(ctx, call):
        expect_params(call, ctx.name, 1)
        return ctx.send(call, body={"button": resolve_button(call.get(0))})
    handler.__doc__ = doc
    return command(name, "/button" + direction, Verb.POST, aliases=(alias,))(handler)


mouse_button_down = _button_command(
    "mouse_button_down", "down", "mouseButtonDown",
    "Click and hold a mouse button at the coordinates set by the last move_to. "
    "Must be followed by mouse_button_up.",
)
mouse_button_up = _button_command(
    "mouse_button_up", "up", "mouseButtonUp",
    "Release the mouse button previously held.",
)


COMMANDS = (
    move_to,
    double_click,
    mouse_button_down,
    mouse_button_up,
)
