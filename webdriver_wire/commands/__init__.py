"""
Command Catalog entries, grouped by what they act on.
"""
from . import alert, cookie, element, mouse, script, session, window
from .script import JsFunction

ALL_COMMANDS = (
    session.COMMANDS
    + element.COMMANDS
    + mouse.COMMANDS
    + script.COMMANDS
    + window.COMMANDS
    + cookie.COMMANDS
    + alert.COMMANDS
)
