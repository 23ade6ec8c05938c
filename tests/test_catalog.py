"""Tests for the command catalog and the Protocol facade."""

import pytest

from webdriver_wire import Catalog, Protocol, ProgrammerMisuse, Verb, build_catalog
from webdriver_wire.catalog import command


def cb(result):
    pass


EXPECTED_COMMANDS = {
    "session", "sessions", "status", "timeouts", "timeouts_async_script",
    "timeouts_implicit_wait", "element", "elements", "element_active",
    "element_id_attribute", "element_id_css_property", "element_id_displayed",
    "element_id_enabled", "element_id_selected", "element_id_location",
    "element_id_location_in_view", "element_id_name", "element_id_size",
    "element_id_text", "element_id_equals", "element_id_click",
    "element_id_clear", "submit", "element_id_value", "move_to",
    "double_click", "mouse_button_down", "mouse_button_up", "execute",
    "execute_async", "frame", "window", "window_handle", "window_handles",
    "window_size", "url", "title", "source", "refresh", "back", "forward",
    "screenshot", "cookie", "accept_alert", "dismiss_alert", "alert_text",
}


class TestCatalog:

    def test_all_commands_present(self):
        assert set(build_catalog().names) == EXPECTED_COMMANDS

    def test_built_once(self):
        assert build_catalog() is build_catalog()

    @pytest.mark.parametrize("alias,name", [
        ("elementIdText", "element_id_text"),
        ("executeAsync", "execute_async"),
        ("windowHandles", "window_handles"),
        ("acceptAlert", "accept_alert"),
        ("mouseButtonDown", "mouse_button_down"),
        ("timeoutsImplicitWait", "timeouts_implicit_wait"),
    ])
    def test_aliases_resolve(self, alias, name):
        catalog = build_catalog()
        assert catalog.get(alias) is catalog.get(name)
        assert alias in catalog.aliases

    def test_descriptors(self):
        catalog = build_catalog()
        assert catalog.get("element").descriptor.method is Verb.POST
        assert catalog.get("status").descriptor.scoped is False
        assert catalog.get("window_size").descriptor.path == "/window/{handle}/size"

    def test_duplicate_names_rejected(self):
        first = command("a", "/a")(lambda ctx, call: None)
        second = command("b", "/b", aliases=("a",))(lambda ctx, call: None)
        with pytest.raises(ValueError, match="Duplicate"):
            Catalog([first, second])

    def test_len_and_iter(self):
        catalog = build_catalog()
        assert len(catalog) == len(EXPECTED_COMMANDS)
        assert [c.name for c in catalog] == catalog.names

    def test_entries_have_docs(self):
        for cmd in build_catalog():
            if cmd.name in ("back", "forward"):
                continue
            assert cmd.__doc__, cmd.name


class TestProtocol:

    def test_perform_by_name(self, protocol, transport):
        protocol.perform("window_size", "w1", 800, 600, cb)
        assert transport.last.path == "/session/abc123/window/w1/size"
        assert transport.last.body == {"width": 800, "height": 600}

    def test_perform_by_alias(self, protocol, transport):
        protocol.perform("elementIdValue", "el-1", "ok")
        assert transport.last.body == {"value": ["o", "k"]}

    def test_perform_keyword_callback(self, protocol, transport):
        protocol.perform("title", callback=cb)
        assert transport.last.callback is cb

    def test_perform_unknown(self, protocol):
        with pytest.raises(ProgrammerMisuse, match="Unknown command"):
            protocol.perform("teleport")

    def test_attribute_access_unknown(self, protocol):
        with pytest.raises(AttributeError):
            protocol.teleport

    def test_alias_attribute(self, protocol, transport):
        protocol.elementIdText("el-1")
        assert transport.last.path == "/session/abc123/element/el-1/text"

    def test_returns_transport_handle(self, protocol, transport):
        handle = protocol.title()
        assert handle.result() == {"value": None}

    def test_session_id_reads_through(self, protocol, transport):
        assert protocol.session_id == "abc123"
        transport.set_session("next")
        assert protocol.session_id == "next"

    def test_dir_lists_commands(self, protocol):
        listing = dir(protocol)
        assert "element" in listing
        assert "perform" in listing

    def test_shared_catalog(self, transport):
        assert Protocol(transport).catalog is Protocol(transport).catalog
