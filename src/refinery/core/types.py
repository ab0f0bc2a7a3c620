"""Type definitions for the refinery configuration system."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from .errors import StructureError


class ValueKind(Enum):
    """The closed set of value shapes a configuration document can hold."""

    UNDEFINED = "undefined"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    MAPPING = "mapping"


# Parsers hand these back for TOML/YAML timestamps; they render like strings.
_STRING_LIKE = (str, datetime.date, datetime.time)


def classify(value: Any) -> ValueKind:
    """Return the kind of a parsed configuration value.

    ``bool`` is checked before numbers since it subclasses ``int``.

    Args:
        value: Any value produced by a document parser.

    Returns:
        The matching ValueKind.

    Raises:
        StructureError: If the value is not one of the supported shapes.
    """
    if value is None:
        return ValueKind.UNDEFINED
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, _STRING_LIKE):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.MAPPING
    raise StructureError(f"Unsupported configuration value of type {type(value).__name__}")


def is_mapping(value: Any) -> bool:
    """Check if a value is a nested configuration level."""
    return isinstance(value, dict)


@dataclass(frozen=True)
class LoadOptions:
    """Options controlling how a configuration file is found and loaded.

    Attributes:
        name: Base file name to search for (e.g. ``mongod.toml``).
        path: Explicit path, checked after every search location.
        locations: Extra directories searched after the home directory.
        merge: Load every file found and deep-merge them instead of
            stopping at the first one.
        die_on_empty: Raise EmptyConfigError when the result has no entries.
    """

    name: str
    path: Optional[Union[str, Path]] = None
    locations: Tuple[Union[str, Path], ...] = ()
    merge: bool = False
    die_on_empty: bool = True
