"""Source protocol for configuration documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from .errors import StructureError


class Source(Protocol):
    """Protocol defining the interface for configuration sources.

    A source reads one document and hands back its top-level mapping.
    Sources are read-only.
    """

    id: str
    name: str
    extension: Optional[str]

    def load(self) -> Dict[str, Any]:
        """Read and parse the document.

        Returns:
            The document's top-level mapping.

        Raises:
            ParseError: If the text is malformed.
            StructureError: If the top level is not a mapping.
        """
        ...

    def reload(self) -> None:
        """Drop cached values and read the document again."""
        ...

    def keys(self) -> List[str]:
        """Get the top-level keys of the last loaded document."""
        ...

    def size(self) -> int:
        """Get the number of top-level entries of the last loaded document."""
        ...


def ensure_mapping(data: Any, origin: Optional[Path] = None) -> Dict[str, Any]:
    """Check that a parsed document is a mapping with string keys.

    Args:
        data: Parser output.
        origin: Where the document came from, for error messages.

    Returns:
        ``data`` itself.

    Raises:
        StructureError: If ``data`` is not a dict or a key is not a string.
    """
    where = f"{origin}: " if origin is not None else ""
    if not isinstance(data, dict):
        raise StructureError(
            f"{where}top level must be a mapping, got {type(data).__name__}"
        )
    bad = [k for k in data if not isinstance(k, str)]
    if bad:
        raise StructureError(f"{where}non-string keys at top level: {bad!r}")
    return data
