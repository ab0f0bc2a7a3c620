"""Rendering flat mappings as command-line arguments or query parameters.

Each output mode is one row of ``MODE_RULES``; ``format_flat`` has a single
code path and reads all mode-specific behaviour from that row.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from .filters import filter_flat
from .types import ValueKind, classify

_WHITESPACE = re.compile(r"\s")
_BACKTICK_SPAN = re.compile(r"`[^`]*`")


class OutputMode(Enum):
    """Output conventions understood by ``format_flat``."""

    URI_T1 = "uri-t1"
    URI_T2 = "uri-t2"
    UNIX_T1 = "unix-t1"
    UNIX_T3 = "unix-t3"

    @classmethod
    def parse(cls, value: Union[str, "OutputMode"]) -> "OutputMode":
        """Parse a mode name such as ``unix-t1``, ``UNIX_T1`` or ``:unix-t1``.

        Raises:
            ValueError: If the name matches no mode.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lstrip(":").lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            names = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown output mode {value!r} (expected one of: {names})") from None


class Quoting(Enum):
    """When string values are wrapped in single quotes."""

    NEVER = "never"
    WHITESPACE = "whitespace"
    # whitespace outside balanced backtick spans
    SHELL = "shell"


@dataclass(frozen=True)
class ModeRules:
    """Formatting rules for one output mode.

    Attributes:
        flags: Emit ``--key=value`` flags instead of ``key=value`` pairs.
        quoting: When string values are wrapped in single quotes.
        negation: Template for the flag name of a false boolean, or None to
            render false as ``key=False``.
        short_negation: Single-character keys keep one dash when negated.
        keep_false: False booleans survive the filter pass.
    """

    flags: bool
    quoting: Quoting
    negation: Optional[str] = None
    short_negation: bool = False
    keep_false: bool = False


MODE_RULES: Dict[OutputMode, ModeRules] = {
    OutputMode.URI_T1: ModeRules(flags=False, quoting=Quoting.WHITESPACE),
    OutputMode.URI_T2: ModeRules(flags=False, quoting=Quoting.NEVER),
    OutputMode.UNIX_T1: ModeRules(flags=True, quoting=Quoting.SHELL, negation="no{key}"),
    OutputMode.UNIX_T3: ModeRules(
        flags=True,
        quoting=Quoting.SHELL,
        negation="/{key}",
        short_negation=True,
        keep_false=True,
    ),
}


@dataclass(frozen=True)
class FormatOptions:
    """Options for ``format_flat``.

    Attributes:
        mode: Output convention.
        glue: Separator used to join array elements.
        filter: Drop false booleans and undefined values first.
    """

    mode: OutputMode = OutputMode.URI_T1
    glue: str = ","
    filter: bool = False


def render_value(value: Any, glue: str = ",") -> str:
    """Render one value without any quoting.

    Args:
        value: Scalar or array value.
        glue: Separator for array elements.

    Returns:
        The value as a string; arrays are joined with ``glue``.
    """
    kind = classify(value)
    if kind is ValueKind.UNDEFINED:
        return ""
    if kind is ValueKind.ARRAY:
        return glue.join(render_value(item, glue) for item in value)
    if kind is ValueKind.MAPPING:
        # tables nested inside arrays
        return json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def needs_quoting(text: str, quoting: Quoting) -> bool:
    """Check if a string value must be wrapped in single quotes.

    With ``Quoting.SHELL`` an odd number of backticks means the caller
    handles quoting and the value passes through unquoted.
    """
    if quoting is Quoting.NEVER:
        return False
    if quoting is Quoting.SHELL:
        if text.count("`") % 2:
            return False
        text = _BACKTICK_SPAN.sub("", text)
    return bool(_WHITESPACE.search(text))


def _dashes(key: str) -> str:
    return "-" if len(key) == 1 else "--"


def format_entry(key: str, value: Any, rules: ModeRules, glue: str = ",") -> str:
    """Format a single flat-mapping entry under ``rules``."""
    kind = classify(value)

    if rules.flags and kind is ValueKind.BOOLEAN:
        if value:
            return f"{_dashes(key)}{key}"
        name = rules.negation.format(key=key)
        dashes = _dashes(key) if rules.short_negation else "--"
        return f"{dashes}{name}"

    text = render_value(value, glue)
    if kind is ValueKind.STRING and needs_quoting(text, rules.quoting):
        text = f"'{text}'"

    if rules.flags:
        return f"{_dashes(key)}{key}={text}"
    return f"{key}={text}"


def format_flat(
    flat: Mapping[str, Any],
    mode: Union[OutputMode, str] = OutputMode.URI_T1,
    glue: str = ",",
    filter: bool = False,
) -> List[str]:
    """Format a flat mapping as an ordered list of strings.

    Args:
        flat: Flat mapping, usually the result of ``refine``.
        mode: Output convention.
        glue: Separator for array elements.
        filter: Drop false booleans and undefined values first. UNIX-T3
            renders false booleans as ``--/key`` and keeps them.

    Returns:
        One string per surviving entry, in the order of ``flat``.
    """
    rules = MODE_RULES[OutputMode.parse(mode)]
    if filter:
        flat = filter_flat(flat, keep_false=rules.keep_false)
    return [format_entry(k, v, rules, glue) for k, v in flat.items()]


def format_with(flat: Mapping[str, Any], options: FormatOptions) -> List[str]:
    """Format a flat mapping using a FormatOptions bundle."""
    return format_flat(flat, mode=options.mode, glue=options.glue, filter=options.filter)
