"""Configuration source implementations.

One read-only source per document format. ``create_source`` picks the
source from the file suffix; unknown suffixes are read as TOML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Type, Union

from ..core.source import Source
from .json_file import JsonFileSource
from .toml_file import TomlFileSource
from .yaml_file import YamlFileSource

SOURCE_TYPES: Dict[str, Type[Source]] = {
    "toml": TomlFileSource,
    "json": JsonFileSource,
    "yaml": YamlFileSource,
    "yml": YamlFileSource,
}

DEFAULT_FORMAT = "toml"


def source_type(fmt: str) -> Type[Source]:
    """Get the source class for a format name or file suffix.

    Args:
        fmt: Format name such as ``toml`` or a suffix such as ``.json``.

    Raises:
        ValueError: If the format is not supported.
    """
    key = fmt.lower().lstrip(".")
    try:
        return SOURCE_TYPES[key]
    except KeyError:
        raise ValueError(
            f"Unsupported configuration format: {fmt} "
            f"(expected one of: {', '.join(sorted(SOURCE_TYPES))})"
        ) from None


def create_source(path: Union[str, Path], name: Optional[str] = None) -> Source:
    """Create a source instance for a file based on its suffix.

    Args:
        path: Path to the configuration file.
        name: Optional custom name for the source.

    Returns:
        Source instance.
    """
    p = Path(path)
    suffix = p.suffix.lower().lstrip(".")
    cls = SOURCE_TYPES.get(suffix, SOURCE_TYPES[DEFAULT_FORMAT])
    return cls(p, name=name)


__all__ = [
    "DEFAULT_FORMAT",
    "JsonFileSource",
    "SOURCE_TYPES",
    "TomlFileSource",
    "YamlFileSource",
    "create_source",
    "source_type",
]
