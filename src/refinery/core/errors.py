"""Error types raised while loading configuration."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union


class ConfigError(Exception):
    """Base class for fatal configuration errors."""


class NotFoundError(ConfigError):
    """No candidate configuration file exists.

    Attributes:
        candidates: Every path that was checked, in search order.
    """

    def __init__(self, name: str, candidates: Sequence[Path]):
        self.name = name
        self.candidates: List[Path] = list(candidates)
        searched = ", ".join(str(p) for p in self.candidates) or "<nothing>"
        super().__init__(f"No configuration file '{name}' found (searched: {searched})")


class ParseError(ConfigError):
    """The document text could not be parsed.

    Attributes:
        path: File that failed to parse, if the text came from a file.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        prefix = f"{self.path}: " if self.path is not None else ""
        super().__init__(f"{prefix}{message}")


class StructureError(ConfigError):
    """The document is well formed but not shaped like a configuration."""


class EmptyConfigError(ConfigError):
    """The configuration holds no entries after loading and merging."""
