import os
from pathlib import Path
from typing import Iterator, Optional

from loguru import logger

from envscan.config import DEFAULT_CONFIG, LoaderConfig
from envscan.errors import TooManyEntriesError
from envscan.paths import PathLike, ensure_no_parent_traversal


ENV_FILENAME = ".env"


def _open_listing(path: str) -> Optional[Iterator[os.DirEntry]]:
    # A symlinked root is not followed; os.scandir would resolve it.
    if os.path.islink(path):
        logger.debug(f"Not following symlinked directory: {path}")
        return None
    try:
        return os.scandir(path)
    except OSError as exc:
        logger.debug(f"Failed to open directory {path!r}: {exc}")
        return None


def _capped(entries: Iterator[os.DirEntry], path: str, limit: int) -> Iterator[os.DirEntry]:
    for count, entry in enumerate(entries):
        if count >= limit:
            raise TooManyEntriesError(path, limit)
        yield entry


def find_env_file(root: PathLike, max_depth: int, *, config: Optional[LoaderConfig] = None) -> Optional[Path]:
    """
    Search `root` for a regular file named `.env`:
      1) files directly in `root` (filesystem order)
      2) if max_depth > 0, each subdirectory in turn with max_depth - 1

    Symlinks (files and directories) are never followed. An unopenable `root`
    yields None; InvalidPathError and TooManyEntriesError propagate.
    """
    cfg = config or DEFAULT_CONFIG
    path = ensure_no_parent_traversal(root)
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")

    listing = _open_listing(path)
    if listing is None:
        return None
    with listing:
        for entry in _capped(listing, path, cfg.max_entries):
            if entry.name == ENV_FILENAME and entry.is_file(follow_symlinks=False):
                found = Path(path) / entry.name
                logger.debug(f"Found .env: {found}")
                return found

    if max_depth == 0:
        return None

    listing = _open_listing(path)
    if listing is None:
        return None
    with listing:
        for entry in _capped(listing, path, cfg.max_entries):
            if not entry.is_dir(follow_symlinks=False):
                continue
            found = find_env_file(Path(path) / entry.name, max_depth - 1, config=cfg)
            if found is not None:
                return found

    return None
