"""JSON configuration source."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.errors import NotFoundError, ParseError
from ..core.source import Source, ensure_mapping


class JsonFileSource(Source):
    """Configuration source for JSON files.

    Objects keep their key order, so refinement output follows the file.
    """

    def __init__(self, path: Path, name: Optional[str] = None):
        """Initialize JsonFileSource.

        Args:
            path: Path to the JSON file.
            name: Optional custom name for this source.
        """
        self.path = Path(path)
        self.name = name or f"json:{self.path.name}"
        self.id = str(self.path.resolve())
        self.extension = ".json"
        self._cache: Dict[str, Any] = {}

    @staticmethod
    def parse(text: str, origin: Optional[Path] = None) -> Dict[str, Any]:
        """Parse JSON text into a top-level mapping.

        Args:
            text: Document text.
            origin: File the text was read from, if any.

        Returns:
            The parsed object.

        Raises:
            ParseError: If the text is not valid JSON.
            StructureError: If the top level is not an object.
        """
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(f"invalid JSON: {e}", origin) from e
        return ensure_mapping(data, origin)

    def _read(self) -> Dict[str, Any]:
        if not self.path.is_file():
            raise NotFoundError(self.path.name, [self.path])
        return self.parse(self.path.read_text(encoding="utf-8"), self.path)

    def load(self) -> Dict[str, Any]:
        """Load configuration from the JSON file.

        Returns:
            Dictionary of top-level entries.
        """
        self._cache = self._read()
        return dict(self._cache)

    def reload(self) -> None:
        """Reload configuration from the JSON file."""
        self.load()

    def keys(self) -> List[str]:
        """Get all top-level keys.

        Returns:
            List of keys from the last load.
        """
        return list(self._cache.keys())

    def size(self) -> int:
        """Get the number of top-level entries.

        Returns:
            Number of entries from the last load.
        """
        return len(self._cache)
