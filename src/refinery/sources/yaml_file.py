from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..core.errors import NotFoundError, ParseError
from ..core.source import Source, ensure_mapping


class YamlFileSource(Source):
    def __init__(self, path: Path, name: Optional[str] = None):
        self.path = Path(path)
        self.name = name or f"yaml:{self.path.name}"
        self.id = str(self.path.resolve())
        self.extension = ".yaml"
        self._cache: Dict[str, Any] = {}

    @staticmethod
    def parse(text: str, origin: Optional[Path] = None) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParseError(f"invalid YAML: {e}", origin) from e
        # an empty document is an empty mapping
        return ensure_mapping({} if data is None else data, origin)

    def _read(self) -> Dict[str, Any]:
        if not self.path.is_file():
            raise NotFoundError(self.path.name, [self.path])
        with open(self.path, "r", encoding="utf-8") as f:
            return self.parse(f.read(), self.path)

    def load(self) -> Dict[str, Any]:
        self._cache = self._read()
        return dict(self._cache)

    def reload(self) -> None:
        self.load()

    def keys(self) -> List[str]:
        return list(self._cache.keys())

    def size(self) -> int:
        return len(self._cache)
