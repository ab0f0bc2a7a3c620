from .config import Config
from .errors import (
    ConfigError,
    EmptyConfigError,
    NotFoundError,
    ParseError,
    StructureError,
)
from .filters import filter_flat, is_filtered_out
from .formatting import MODE_RULES, FormatOptions, ModeRules, OutputMode, format_flat, render_value
from .merge import merge_all, merge_hash
from .refine import refine
from .source import Source
from .types import LoadOptions, ValueKind, classify

__all__ = [
    "Config",
    "ConfigError",
    "EmptyConfigError",
    "FormatOptions",
    "LoadOptions",
    "MODE_RULES",
    "ModeRules",
    "NotFoundError",
    "OutputMode",
    "ParseError",
    "Source",
    "StructureError",
    "ValueKind",
    "classify",
    "filter_flat",
    "format_flat",
    "is_filtered_out",
    "merge_all",
    "merge_hash",
    "refine",
    "render_value",
]
