"""
Protocol
One entry point per wire command, bound to a single transport.
"""
from functools import partial

from .catalog import Catalog, build_catalog
from .dispatcher import Dispatcher
from .errors import ProgrammerMisuse


class Protocol:
    """
    Exposes every catalog command as a method.

        protocol = Protocol(HttpTransport(session_id="abc"))
        protocol.element("css selector", "#login")
        protocol.element_id_value("el-1", "secret", on_done)
        protocol.perform("windowSize", "current", 640, 480)

    Each call returns whatever the transport returns for the request
    (a Future for HttpTransport).
    """

    def __init__(self, transport, catalog: Catalog = None):
        self._dispatcher = Dispatcher(transport)
        self._catalog = catalog or build_catalog()

    @property
    def transport(self):
        return self._dispatcher.transport

    @property
    def session_id(self):
        return self._dispatcher.transport.session_id

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def perform(self, action: str, *args, **kwargs):
        """Run a command by name. Aliases (camelCase names) are accepted."""
        cmd = self._catalog.get(action)
        if cmd is None:
            raise ProgrammerMisuse(f"Unknown command: {action}")
        return cmd(self._dispatcher, *args, **kwargs)

    def __getattr__(self, name):
        # Only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        cmd = self._catalog.get(name)
        if cmd is None:
            raise AttributeError(f"{type(self).__name__!r} has no command {name!r}")
        bound = partial(cmd, self._dispatcher)
        bound.__doc__ = cmd.__doc__
        return bound

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(self._catalog.names))
