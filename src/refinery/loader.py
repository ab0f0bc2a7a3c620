"""Locating and loading configuration files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .core.config import Config
from .core.errors import ConfigError, EmptyConfigError, NotFoundError
from .core.merge import merge_all
from .core.types import LoadOptions
from .sources import create_source

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def candidate_paths(
    name: str,
    path: Optional[PathLike] = None,
    locations: Iterable[PathLike] = (),
    cwd: Optional[Path] = None,
    home: Optional[Path] = None,
) -> List[Path]:
    """List the places a configuration file is looked for, in order.

    Order: ``./name``, ``./.name``, ``~/.name``, ``<location>/name`` for each
    extra location, then the explicit ``path``.

    Args:
        name: Base file name.
        path: Explicit file path, checked last.
        locations: Extra directories.
        cwd: Directory standing in for the current directory.
        home: Directory standing in for the home directory.

    Returns:
        Candidate paths, duplicates removed.
    """
    cwd = Path.cwd() if cwd is None else Path(cwd)
    home = Path.home() if home is None else Path(home)
    dotname = name if name.startswith(".") else f".{name}"

    candidates = [cwd / name, cwd / dotname, home / dotname]
    candidates.extend(Path(loc).expanduser() / name for loc in locations)
    if path is not None:
        candidates.append(Path(path).expanduser())

    unique: List[Path] = []
    seen = set()
    for candidate in candidates:
        key = candidate.resolve()
        if key in seen:
            continue
        seen.add(key)
        unique.append(candidate)
    return unique


def locate(
    name: str,
    path: Optional[PathLike] = None,
    locations: Iterable[PathLike] = (),
    merge: bool = False,
    cwd: Optional[Path] = None,
    home: Optional[Path] = None,
) -> List[Path]:
    """Find configuration files.

    Without ``merge`` the first existing candidate is returned. With
    ``merge`` every existing candidate is returned, lowest precedence first,
    so that folding them left lets the first-match file win conflicts.

    Returns:
        Existing files to load, in merge order.

    Raises:
        NotFoundError: If no candidate exists.
    """
    candidates = candidate_paths(name, path, locations, cwd=cwd, home=home)
    found = [c for c in candidates if c.is_file()]
    logger.debug("searched %s, found %s", [str(c) for c in candidates], [str(f) for f in found])
    if not found:
        raise NotFoundError(name, candidates)
    if not merge:
        return found[:1]
    return list(reversed(found))


def load_config(
    options: LoadOptions,
    cwd: Optional[Path] = None,
    home: Optional[Path] = None,
) -> Config:
    """Locate, load and merge configuration files.

    Args:
        options: What to look for and how.
        cwd: Directory standing in for the current directory.
        home: Directory standing in for the home directory.

    Returns:
        Config holding the merged root mapping.

    Raises:
        NotFoundError: If no file exists.
        ParseError: If a file is malformed.
        StructureError: If a file's top level is not a mapping.
        EmptyConfigError: If the result has no entries and
            ``options.die_on_empty`` is set.
    """
    paths = locate(
        options.name,
        options.path,
        options.locations,
        merge=options.merge,
        cwd=cwd,
        home=home,
    )
    documents = []
    for p in paths:
        source = create_source(p)
        documents.append(source.load())
        logger.debug("loaded %s (%d top-level keys)", source.name, source.size())

    cfg = Config(merge_all(documents), origins=[str(p) for p in paths])
    if not cfg.root and options.die_on_empty:
        raise EmptyConfigError(f"Configuration is empty: {', '.join(cfg.origins)}")
    return cfg


@dataclass(frozen=True)
class LoadResult:
    """Outcome of ``try_load``: either a Config or the error that stopped it."""

    config: Optional[Config] = None
    error: Optional[ConfigError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Config:
        """Return the config, raising the stored error if loading failed."""
        if self.error is not None:
            raise self.error
        if self.config is None:
            raise ConfigError("LoadResult holds neither a config nor an error")
        return self.config


def try_load(
    options: LoadOptions,
    cwd: Optional[Path] = None,
    home: Optional[Path] = None,
) -> LoadResult:
    """Like ``load_config`` but return failures instead of raising them."""
    try:
        return LoadResult(config=load_config(options, cwd=cwd, home=home))
    except ConfigError as e:
        logger.debug("load failed: %s", e)
        return LoadResult(error=e)
