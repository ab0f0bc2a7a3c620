"""Key-path refinement of nested configuration into a flat mapping."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Mapping, Sequence, Tuple

from .types import ValueKind, classify

logger = logging.getLogger(__name__)


def iter_scalars(node: Mapping[str, Any]) -> Iterator[Tuple[str, Any]]:
    """Yield the entries of one level that are not nested mappings.

    Args:
        node: A single configuration level.

    Yields:
        Tuples of (key, value) in insertion order.
    """
    for key, value in node.items():
        if classify(value) is not ValueKind.MAPPING:
            yield key, value


def refine(root: Mapping[str, Any], key_path: Sequence[str] = ()) -> Dict[str, Any]:
    """Descend ``root`` along ``key_path`` collecting terminal values.

    Every level visited contributes its non-mapping entries; deeper levels
    overwrite outer ones on key collisions. The descent stops quietly at the
    first segment that is missing or is not a mapping, returning what was
    collected so far.

    Args:
        root: Root configuration mapping.
        key_path: Ordered keys naming the sub-tree to refine.

    Returns:
        Flat mapping with no mapping-typed values.
    """
    if isinstance(key_path, str):
        key_path = (key_path,)
    key_path = tuple(key_path)

    flat: Dict[str, Any] = {}
    node: Mapping[str, Any] = root
    for depth, key in enumerate(key_path):
        flat.update(iter_scalars(node))
        child = node.get(key)
        if child is None or classify(child) is not ValueKind.MAPPING:
            logger.debug(
                "refine stopped at %r (depth %d of %d)",
                key,
                depth,
                len(key_path),
            )
            return flat
        node = child

    flat.update(iter_scalars(node))
    return flat
