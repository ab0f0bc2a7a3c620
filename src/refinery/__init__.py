"""Refinery - layered configuration to command-line arguments.

Load a nested TOML, JSON or YAML configuration document and refine a
chosen sub-tree into a flat mapping or into formatted argument strings.
"""

from .core.config import Config
from .core.errors import (
    ConfigError,
    EmptyConfigError,
    NotFoundError,
    ParseError,
    StructureError,
)
from .core.filters import filter_flat
from .core.formatting import FormatOptions, OutputMode, format_flat
from .core.merge import merge_hash
from .core.refine import refine
from .core.types import LoadOptions
from .loader import LoadResult, candidate_paths, load_config, locate, try_load

__all__ = [
    "Config",
    "ConfigError",
    "EmptyConfigError",
    "FormatOptions",
    "LoadOptions",
    "LoadResult",
    "NotFoundError",
    "OutputMode",
    "ParseError",
    "StructureError",
    "candidate_paths",
    "filter_flat",
    "format_flat",
    "load_config",
    "locate",
    "merge_hash",
    "refine",
    "try_load",
]
