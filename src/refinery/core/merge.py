"""Deep merging of configuration mappings."""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterable, Mapping

from .types import is_mapping

logger = logging.getLogger(__name__)


def merge_hash(a: Mapping[str, Any], b: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-merge two mappings.

    Keys present on one side only are taken as they are. When both sides
    hold a mapping under the same key the two are merged recursively;
    otherwise the value from ``b`` wins.

    Args:
        a: Base mapping.
        b: Overriding mapping.

    Returns:
        A new dictionary. Neither input is modified.
    """
    merged: Dict[str, Any] = copy.deepcopy(dict(a))
    for key, value in b.items():
        if key in merged and is_mapping(merged[key]) and is_mapping(value):
            merged[key] = merge_hash(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def merge_all(mappings: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """Fold ``merge_hash`` over ``mappings`` from left to right.

    Later mappings win key conflicts.
    """
    effective: Dict[str, Any] = {}
    for index, mapping in enumerate(mappings):
        logger.debug("merging layer %d (%d top-level keys)", index, len(mapping))
        effective = merge_hash(effective, mapping)
    return effective
