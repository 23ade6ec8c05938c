"""
Command Catalog
Static command descriptors and the registry that maps command names to
their handlers.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, List, Optional, Tuple
from urllib.parse import quote

from .dispatcher import Verb
from .normalizer import Call, resolve_call

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandDescriptor:
    name: str
    path: str
    method: Verb = Verb.GET
    scoped: bool = True
    aliases: Tuple[str, ...] = ()


class CommandContext:
    """What a handler sees of the outside world for a single call."""

    __slots__ = ("descriptor", "dispatcher")

    def __init__(self, descriptor: CommandDescriptor, dispatcher):
        self.descriptor = descriptor
        self.dispatcher = dispatcher

    @property
    def name(self) -> str:
        return self.descriptor.name

    def send(self, call: Call, body=None, method: Optional[Verb] = None,
             path: Optional[str] = None, **path_params):
        """
        Issue the request for this command.

        `path` and `method` default to the descriptor's. Placeholders in the
        path template are filled from `path_params`, each percent-encoded so
        that a value holding `/`, `?` or `#` stays one path segment.
        """
        template = path if path is not None else self.descriptor.path
        if path_params:
            template = template.format(**{
                key: quote(str(value), safe="") for key, value in path_params.items()
            })
        return self.dispatcher.dispatch(
            template,
            method or self.descriptor.method,
            body,
            call.callback,
            self.descriptor.scoped,
        )


class Command:
    """A catalog entry: a descriptor bound to the handler that knows its argument shape."""

    def __init__(self, descriptor: CommandDescriptor, handler: Callable):
        self.descriptor = descriptor
        self.handler = handler
        self.__doc__ = handler.__doc__

    @property
    def name(self) -> str:
        return self.descriptor.name

    def __call__(self, dispatcher, *args, callback: Optional[Callable] = None):
        call = resolve_call(args, callback)
        return self.handler(CommandContext(self.descriptor, dispatcher), call)

    def __repr__(self):
        d = self.descriptor
        return f"<Command {d.name}: {d.method.value} {d.path}>"


def command(name: str, path: str, method: Verb = Verb.GET, scoped: bool = True,
            aliases: Iterable[str] = ()):
    """Decorator turning a handler `(ctx, call)` into a Command."""
    def decorate(handler):
        return Command(CommandDescriptor(name, path, method, scoped, tuple(aliases)), handler)
    return decorate


class Catalog:
    """
    Read-only registry of commands.

    Usage:
        catalog = Catalog([element, elements, ...])
        catalog.get("elementIdText")   # aliases resolve to the canonical command
        catalog.names                  # canonical names, in registration order
    """

    def __init__(self, commands: Iterable[Command]):
        entries = {}
        names = []
        for cmd in commands:
            for key in (cmd.name,) + cmd.descriptor.aliases:
                if key in entries:
                    raise ValueError(f"Duplicate command name or alias: {key}")
                entries[key] = cmd
            names.append(cmd.name)
        self._entries = MappingProxyType(entries)
        self._names = tuple(names)

    def get(self, name: str) -> Optional[Command]:
        return self._entries.get(name)

    def has(self, name: str) -> bool:
        return name in self._entries

    @property
    def names(self) -> List[str]:
        return list(self._names)

    @property
    def aliases(self) -> List[str]:
        return [key for key in self._entries if key not in self._names]

    def __contains__(self, name) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[Command]:
        return (self._entries[name] for name in self._names)

    def __len__(self) -> int:
        return len(self._names)


@lru_cache(maxsize=None)
def build_catalog() -> Catalog:
    """Build the full command catalog. Built once and shared, it never changes afterwards."""
    from .commands import ALL_COMMANDS

    catalog = Catalog(ALL_COMMANDS)
    logger.debug("Command catalog built: %d commands, %d aliases", len(catalog), len(catalog.aliases))
    return catalog
