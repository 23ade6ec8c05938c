"""
WebDriver wire command layer
"""
from .catalog import Catalog, Command, CommandDescriptor, build_catalog
from .commands import JsFunction
from .config import WireConfig
from .core import HttpTransport, Transport
from .dispatcher import Dispatcher, RequestDescriptor, Verb
from .errors import InvalidArgument, ProgrammerMisuse, TransportError
from .logging_setup import setup_logging
from .protocol import Protocol
