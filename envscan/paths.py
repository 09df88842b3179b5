import os
from typing import Union

from envscan.errors import InvalidPathError


PathLike = Union[str, os.PathLike]


def ensure_no_parent_traversal(path: PathLike) -> str:
    """Return `path` as a string, rejecting any occurrence of `..` up front (no filesystem access)."""
    raw = os.fspath(path)
    if ".." in raw:
        raise InvalidPathError(raw)
    return raw
