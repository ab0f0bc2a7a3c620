from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.errors import NotFoundError, ParseError
from ..core.source import Source, ensure_mapping


class TomlFileSource(Source):
    """Configuration source for TOML files."""

    def __init__(self, path: Path, name: Optional[str] = None):
        self.path = Path(path)
        self.name = name or f"toml:{self.path.name}"
        self.id = str(self.path.resolve())
        self.extension = ".toml"
        self._cache: Dict[str, Any] = {}

    @staticmethod
    def parse(text: str, origin: Optional[Path] = None) -> Dict[str, Any]:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ParseError(f"invalid TOML: {e}", origin) from e
        return ensure_mapping(data, origin)

    def _read(self) -> Dict[str, Any]:
        if not self.path.is_file():
            raise NotFoundError(self.path.name, [self.path])
        return self.parse(self.path.read_text(encoding="utf-8"), self.path)

    def load(self) -> Dict[str, Any]:
        self._cache = self._read()
        return dict(self._cache)

    def reload(self) -> None:
        self.load()

    def keys(self) -> List[str]:
        return list(self._cache.keys())

    def size(self) -> int:
        return len(self._cache)
