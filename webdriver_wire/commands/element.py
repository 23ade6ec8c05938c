"""
Element Commands
Element lookup, state queries and interaction (click, clear, submit, value).
"""
from selenium.webdriver.common.by import By
from selenium.webdriver.common.utils import keys_to_typing

from ..catalog import command
from ..dispatcher import Verb
from ..errors import InvalidArgument
from ..normalizer import MISSING, expect_params, require

LOCATOR_STRATEGIES = (
    By.CLASS_NAME,
    By.CSS_SELECTOR,
    By.ID,
    By.NAME,
    By.LINK_TEXT,
    By.PARTIAL_LINK_TEXT,
    By.TAG_NAME,
    By.XPATH,
)


def normalize_strategy(using) -> str:
    """Lower-case a locator strategy and check it against the supported set."""
    strategy = using.lower() if isinstance(using, str) else None
    if strategy not in LOCATOR_STRATEGIES:
        raise InvalidArgument(
            f"Provided locating strategy is not supported: {using!r}. "
            f"It must be one of the following: {', '.join(LOCATOR_STRATEGIES)}"
        )
    return strategy


def to_keystrokes(value) -> list:
    """
    Convert a value into the wire protocol's keystroke sequence.
    Strings become one token per character, lists/tuples of strings and Keys are
    flattened in order, anything else goes through str() first.
    """
    if isinstance(value, (list, tuple)):
        return keys_to_typing(value)
    return keys_to_typing(str(value))


def _locate(ctx, call):
    expect_params(call, ctx.name, 2)
    using = normalize_strategy(require(call, 0, ctx.name, "using"))
    value = require(call, 1, ctx.name, "value")
    return ctx.send(call, body={"using": using, "value": value})


@command("element", "/element", Verb.POST)
def element(ctx, call):
    """Search for an element on the page, starting from the document root."""
    return _locate(ctx, call)


@command("elements", "/elements", Verb.POST)
def elements(ctx, call):
    """Search for multiple elements on the page, starting from the document root."""
    return _locate(ctx, call)


@command("element_active", "/element/active", Verb.POST, aliases=("elementActive",))
def element_active(ctx, call):
    """Get the element on the page that currently has focus."""
    expect_params(call, ctx.name, 0)
    return ctx.send(call, body={})


def _element_id(ctx, call):
    return require(call, 0, ctx.name, "element id")


def _element_query(name, suffix, alias):
    """Commands of the shape GET /element/{id}/<suffix>."""
    def handler(ctx, call):
        expect_params(call, ctx.name, 1)
        return ctx.send(call, id=_element_id(ctx, call))
    handler.__doc__ = f"GET /element/{{id}}/{suffix}"
    return command(name, "/element/{id}/" + suffix, Verb.GET, aliases=(alias,))(handler)


def _element_action(name, suffix, alias):
    """Commands of the shape POST /element/{id}/<suffix> with an empty body."""
    def handler(ctx, call):
        expect_params(call, ctx.name, 1)
        return ctx.send(call, id=_element_id(ctx, call))
    handler.__doc__ = f"POST /element/{{id}}/{suffix}"
    return command(name, "/element/{id}/" + suffix, Verb.POST, aliases=(alias,))(handler)


element_id_displayed = _element_query("element_id_displayed", "displayed", "elementIdDisplayed")
element_id_enabled = _element_query("element_id_enabled", "enabled", "elementIdEnabled")
element_id_selected = _element_query("element_id_selected", "selected", "elementIdSelected")
element_id_location = _element_query("element_id_location", "location", "elementIdLocation")
element_id_location_in_view = _element_query(
    "element_id_location_in_view", "location_in_view", "elementIdLocationInView")
element_id_name = _element_query("element_id_name", "name", "elementIdName")
element_id_size = _element_query("element_id_size", "size", "elementIdSize")
element_id_text = _element_query("element_id_text", "text", "elementIdText")

element_id_click = _element_action("element_id_click", "click", "elementIdClick")
element_id_clear = _element_action("element_id_clear", "clear", "elementIdClear")
submit = _element_action("submit", "submit", "elementIdSubmit")


@command("element_id_attribute", "/element/{id}/attribute/{name}", Verb.GET,
         aliases=("elementIdAttribute",))
def element_id_attribute(ctx, call):
    """Get the value of an element's attribute."""
    expect_params(call, ctx.name, 2)
    return ctx.send(call, id=_element_id(ctx, call),
                    name=require(call, 1, ctx.name, "attribute name"))


@command("element_id_css_property", "/element/{id}/css/{name}", Verb.GET,
         aliases=("elementIdCssProperty",))
def element_id_css_property(ctx, call):
    """
    Query the value of an element's computed CSS property.
    Use the CSS property name (background-color), not the JavaScript one.
    """
    expect_params(call, ctx.name, 2)
    return ctx.send(call, id=_element_id(ctx, call),
                    name=require(call, 1, ctx.name, "CSS property name"))


@command("element_id_equals", "/element/{id}/equals/{other}", Verb.GET,
         aliases=("elementIdEquals",))
def element_id_equals(ctx, call):
    """Test if two element ids refer to the same DOM element."""
    expect_params(call, ctx.name, 2)
    return ctx.send(call, id=_element_id(ctx, call),
                    other=require(call, 1, ctx.name, "other element id"))


@command("element_id_value", "/element/{id}/value", Verb.POST, aliases=("elementIdValue",))
def element_id_value(ctx, call):
    """
    Send a sequence of key strokes to an element, or read its current value
    when nothing but the element id (and a callback) is given.
    """
    expect_params(call, ctx.name, 2)
    element_id = _element_id(ctx, call)
    value = call.get(1)
    if value is MISSING:
        return ctx.send(call, method=Verb.GET, id=element_id)
    return ctx.send(call, body={"value": to_keystrokes(value)}, id=element_id)


COMMANDS = (
    element,
    elements,
    element_active,
    element_id_attribute,
    element_id_css_property,
    element_id_displayed,
    element_id_enabled,
    element_id_selected,
    element_id_location,
    element_id_location_in_view,
    element_id_name,
    element_id_size,
    element_id_text,
    element_id_equals,
    element_id_click,
    element_id_clear,
    submit,
    element_id_value,
)
