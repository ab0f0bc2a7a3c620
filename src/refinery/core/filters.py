"""Filtering of flat mappings before formatting."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .types import ValueKind, classify


def is_filtered_out(value: Any, keep_false: bool = False) -> bool:
    """Check if a value should be dropped by the filter pass.

    Args:
        value: Value of a flat-mapping entry.
        keep_false: Keep ``False`` and only drop undefined values.

    Returns:
        True for ``None``, and for ``False`` unless ``keep_false`` is set.
    """
    kind = classify(value)
    if kind is ValueKind.UNDEFINED:
        return True
    if kind is ValueKind.BOOLEAN and value is False:
        return not keep_false
    return False


def filter_flat(flat: Mapping[str, Any], keep_false: bool = False) -> Dict[str, Any]:
    """Return a copy of ``flat`` without false and undefined entries.

    Empty strings, empty arrays and zero are kept.

    Args:
        flat: Flat mapping produced by ``refine``.
        keep_false: Keep false booleans.

    Returns:
        New dictionary; ``flat`` is not modified.
    """
    return {k: v for k, v in flat.items() if not is_filtered_out(v, keep_false)}
