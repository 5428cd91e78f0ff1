"""
tinyini: a small, lenient INI reader.

Example:
    from tinyini import parse, GLOBAL_SECTION

    doc = parse("network=wireless\n[database]\nport=143\n")
    doc.value(GLOBAL_SECTION, "network")                     # "wireless"
    doc.value_as_int(doc.find_section("database"), "port")   # 143
"""

from .const import APP_VERSION, GLOBAL_SECTION, NOT_FOUND
from .document import (
    IniDocument,
    IniError,
    Property,
    PropertyNotFoundError,
    Section,
    ValueConversionError,
)
from .loader import IniLoader, IniLoadError, load
from .parser import IniParser, ParserState, parse

__version__ = APP_VERSION

__all__ = [
    "GLOBAL_SECTION",
    "NOT_FOUND",
    "IniDocument",
    "Section",
    "Property",
    "IniError",
    "PropertyNotFoundError",
    "ValueConversionError",
    "IniParser",
    "ParserState",
    "parse",
    "IniLoader",
    "IniLoadError",
    "load",
]
