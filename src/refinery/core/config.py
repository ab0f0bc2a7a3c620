"""The configuration object handed to callers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Union

import yaml

from .filters import filter_flat
from .formatting import OutputMode, format_flat
from .merge import merge_hash
from .refine import refine
from .source import ensure_mapping
from .types import is_mapping

KeyPath = Sequence[str]


@dataclass
class Config:
    """Owns the root mapping of a loaded configuration.

    A Config is not synchronized: one writer (``merge_hash``) and one
    call at a time.

    Attributes:
        root: Root mapping of the configuration document.
        origins: Files the root was loaded from, in merge order.
    """

    root: Dict[str, Any] = field(default_factory=dict)
    origins: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        ensure_mapping(self.root)

    @classmethod
    def from_string(cls, text: str, fmt: str = "toml") -> "Config":
        """Build a Config from document text.

        Args:
            text: Document text.
            fmt: ``toml``, ``json`` or ``yaml``.

        Raises:
            ParseError: If the text is malformed.
            StructureError: If the top level is not a mapping.
        """
        # Lazy import, sources depend on core
        from ..sources import source_type

        return cls(source_type(fmt).parse(text))

    def refine(self, key_path: KeyPath = (), filter: bool = False) -> Dict[str, Any]:
        """Refine the sub-tree at ``key_path`` into a flat mapping.

        Args:
            key_path: Ordered keys, outermost first.
            filter: Drop false booleans and undefined values.

        Returns:
            Flat mapping of every non-mapping value on the path.
        """
        flat = refine(self.root, key_path)
        return filter_flat(flat) if filter else flat

    def refine_str(
        self,
        key_path_or_flat: Union[KeyPath, Mapping[str, Any]] = (),
        mode: Union[OutputMode, str] = OutputMode.URI_T1,
        glue: str = ",",
        filter: bool = False,
    ) -> List[str]:
        """Refine and format as arguments or query parameters.

        Args:
            key_path_or_flat: A key path to refine, or an already flat mapping.
            mode: Output convention.
            glue: Separator for array elements.
            filter: Drop false booleans and undefined values.

        Returns:
            One formatted string per entry.
        """
        if is_mapping(key_path_or_flat):
            flat = key_path_or_flat
        else:
            flat = refine(self.root, key_path_or_flat)
        return format_flat(flat, mode=mode, glue=glue, filter=filter)

    def get_in(self, key_path: KeyPath, default: Optional[Any] = None) -> Any:
        node: Any = self.root
        for key in key_path:
            if not is_mapping(node) or key not in node:
                return default
            node = node[key]
        return node

    def merge_hash(
        self, a: Mapping[str, Any], b: Optional[Mapping[str, Any]] = None
    ) -> Dict[str, Any]:
        """Deep-merge mappings.

        With one argument, merge it over this config's root and replace the
        root with the result. With two, return ``merge_hash(a, b)`` and leave
        the root alone.

        Returns:
            The merged mapping.
        """
        if b is None:
            self.root = merge_hash(self.root, a)
            return self.root
        return merge_hash(a, b)

    def dumps(self, fmt: str = "json") -> str:
        """Serialize the root mapping for display.

        Args:
            fmt: ``json`` or ``yaml``.

        Raises:
            ValueError: If the format is not supported.
        """
        fmt = fmt.lower()
        if fmt == "json":
            return json.dumps(self.root, indent=2, default=str)
        if fmt in {"yaml", "yml"}:
            return yaml.safe_dump(self.root, sort_keys=False)
        raise ValueError(f"Unsupported display format: {fmt}")

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __getitem__(self, key: str) -> Any:
        return self.root[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.root)
