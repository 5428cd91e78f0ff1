"""
Parsed INI document: section and property tables with lookups.

The parser appends to two ordered tables, one of sections and one of
properties, and freezes them into an IniDocument. Lookups scan the tables
linearly and the first match wins, so duplicate sections and duplicate keys
are kept but only the earliest one is visible through the lookup API.
"""

from dataclasses import dataclass
from typing import Any

from .const import GLOBAL_SECTION, NOT_FOUND
from .utils.numeric import (
    parse_float_prefix,
    parse_float_strict,
    parse_int_prefix,
    parse_int_strict,
)


class IniError(Exception):
    """Base class for tinyini errors."""

    pass


class PropertyNotFoundError(IniError, KeyError):
    """Raised by typed accessors when the property does not exist."""

    def __init__(self, section: int, key: str):
        self.section = section
        self.key = key
        super().__init__(f"No property {key!r} in section {section}")

    def __str__(self) -> str:
        return self.args[0]


class ValueConversionError(IniError, ValueError):
    """Raised by strict typed accessors when a value does not convert."""

    def __init__(self, section: int, key: str, value: str, type_name: str):
        self.section = section
        self.key = key
        self.value = value
        super().__init__(
            f"Value {value!r} of {key!r} in section {section} is not a valid {type_name}"
        )


# Marks an omitted default so that None stays usable as a default
_MISSING: Any = object()


@dataclass(frozen=True)
class Section:
    """
    A named section declared by a [name] header.

    Indices start at 1 in declaration order; 0 is the global section,
    which has no entry in the section table.
    """
    index: int
    name: str
    line: int = 0

    def __repr__(self) -> str:
        return f"Section({self.index}, {self.name!r})"


@dataclass(frozen=True)
class Property:
    """
    A key/value pair owned by one section.

    Examples:
        network=wireless      -> Property(section=0, key="network", value="wireless")
        name = John Doe       -> Property(section=1, key="name", value="John Doe")
    """
    section: int
    key: str
    value: str
    line: int = 0

    def __repr__(self) -> str:
        return f"Property({self.section}, {self.key!r}, {self.value!r})"


@dataclass(frozen=True)
class IniDocument:
    """
    Root document holding the section and property tables.

    Documents are immutable once parsed and may be shared between threads
    for concurrent lookups.
    """
    sections: tuple[Section, ...] = ()
    properties: tuple[Property, ...] = ()
    filename: str = "<string>"

    def __len__(self) -> int:
        return len(self.properties)

    def find_section(self, name: str) -> int:
        """
        Get the index of the first section with the given name.

        Returns:
            Section index (1 or greater), or NOT_FOUND
        """
        _require_str(name, "name")
        for section in self.sections:
            if section.name == name:
                return section.index
        return NOT_FOUND

    def section_exists(self, name: str) -> bool:
        """Check if a section with the given name was declared."""
        return self.find_section(name) != NOT_FOUND

    def get_section(self, index: int) -> Section | None:
        """Get section by index; None for the global section and unknown indices."""
        if 1 <= index <= len(self.sections):
            return self.sections[index - 1]
        return None

    def section_name(self, index: int) -> str | None:
        """Get name of the section at index."""
        section = self.get_section(index)
        return section.name if section else None

    def _find_property(self, section: int, key: str) -> Property | None:
        _require_str(key, "key")
        for prop in self.properties:
            if prop.section == section and prop.key == key:
                return prop
        return None

    def property_exists(self, section: int, key: str) -> bool:
        """Check if a property exists in a given section."""
        return self._find_property(section, key) is not None

    def value(self, section: int, key: str) -> str | None:
        """
        Get the raw value of a property.

        Args:
            section: Section index (GLOBAL_SECTION for global properties)
            key: Property key, compared exactly

        Returns:
            The first matching value, or None if the key doesn't exist
        """
        prop = self._find_property(section, key)
        return prop.value if prop else None

    def _require_value(self, section: int, key: str, default: Any) -> tuple[bool, Any]:
        """Return (True, stored value), or (False, default) for a missing key."""
        value = self.value(section, key)
        if value is None:
            if default is _MISSING:
                raise PropertyNotFoundError(section, key)
            return False, default
        return True, value

    def value_as_int(
        self,
        section: int,
        key: str,
        default: Any = _MISSING,
        *,
        strict: bool = False,
    ) -> int:
        """
        Get value of a property as an int.

        The leading integer run of the value is converted, so "12.34"
        yields 12 and a non-numeric value yields 0. With strict=True the
        whole value must be an integer.

        Raises:
            PropertyNotFoundError: If the property is missing and no default is given
            ValueConversionError: If strict and the value is not an integer
        """
        found, value = self._require_value(section, key, default)
        if not found:
            return value
        if not strict:
            return parse_int_prefix(value)
        try:
            return parse_int_strict(value)
        except ValueError as e:
            raise ValueConversionError(section, key, value, "integer") from e

    def value_as_float(
        self,
        section: int,
        key: str,
        default: Any = _MISSING,
        *,
        strict: bool = False,
    ) -> float:
        """
        Get value of a property as a float.

        Lenient conversion reads the leading numeric run and yields 0.0
        when there is none.

        Raises:
            PropertyNotFoundError: If the property is missing and no default is given
            ValueConversionError: If strict and the value is not a number
        """
        found, value = self._require_value(section, key, default)
        if not found:
            return value
        if not strict:
            return parse_float_prefix(value)
        try:
            return parse_float_strict(value)
        except ValueError as e:
            raise ValueConversionError(section, key, value, "float") from e

    def value_as_bool(self, section: int, key: str, default: Any = _MISSING) -> bool:
        """Get value of a property as a bool; only the exact string "true" is true."""
        found, value = self._require_value(section, key, default)
        if not found:
            return value
        return value == "true"

    def get_properties(self, section: int) -> list[Property]:
        """Get all properties of a section in insertion order."""
        return [p for p in self.properties if p.section == section]

    def items(self, section: int) -> list[tuple[str, str]]:
        """Get (key, value) pairs of a section, duplicates included."""
        return [(p.key, p.value) for p in self.get_properties(section)]

    def to_dict(self) -> dict[str, Any]:
        """Build a JSON-friendly representation of the document."""
        return {
            "filename": self.filename,
            "global": [list(pair) for pair in self.items(GLOBAL_SECTION)],
            "sections": [
                {
                    "index": s.index,
                    "name": s.name,
                    "properties": [list(pair) for pair in self.items(s.index)],
                }
                for s in self.sections
            ],
        }


def _require_str(arg: object, name: str) -> None:
    if not isinstance(arg, str):
        raise TypeError(f"{name} must be str, not {type(arg).__name__}")
