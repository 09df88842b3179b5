"""
Public entry points: locate-then-parse, direct-path loading and lookups.

    env = load_auto()
    port = get_with_default(env, "DB_PORT", IntegerValue(8080))
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, MutableMapping, Optional

from loguru import logger

from envscan.config import DEFAULT_CONFIG, LoaderConfig
from envscan.errors import NoEnvFileFoundError
from envscan.locator import find_env_file
from envscan.parser import parse_env_file
from envscan.values import EnvMap, Value


SEARCH_ROOT = "."


@dataclass(frozen=True)
class LoadOptions:
    path: Optional[str] = None


def load(options: Optional[LoadOptions] = None, *, config: Optional[LoaderConfig] = None) -> EnvMap:
    """
    Load a .env file into an EnvMap.

    With `options.path` the file is resolved to its canonical absolute path and
    parsed directly. Otherwise the working directory is scanned up to
    `config.max_depth` levels deep.
    """
    cfg = config or DEFAULT_CONFIG
    opts = options or LoadOptions()

    if opts.path is not None:
        env_path = Path(opts.path).resolve(strict=True)
    else:
        env_path = find_env_file(SEARCH_ROOT, cfg.max_depth, config=cfg)
        if env_path is None:
            raise NoEnvFileFoundError(f"No .env file within {cfg.max_depth} levels of {Path.cwd()}")

    env_map = parse_env_file(env_path, config=cfg)
    logger.info(f"Loaded .env: {env_path} ({len(env_map)} keys)")
    return env_map


def load_auto(*, config: Optional[LoaderConfig] = None) -> EnvMap:
    return load(LoadOptions(), config=config)


def get(env_map: EnvMap, key: str) -> Optional[Value]:
    return env_map.get(key)


def get_with_default(env_map: EnvMap, key: str, default: Value) -> Value:
    value = env_map.get(key)
    return default if value is None else value


def deinit(env_map: EnvMap) -> None:
    """Release every entry; the map is empty afterwards."""
    env_map.clear()


def apply_to_environ(
    env_map: EnvMap,
    *,
    override: bool = False,
    environ: Optional[MutableMapping[str, str]] = None,
) -> List[str]:
    """
    Export entries as strings. By default does NOT override existing variables.
    Returns the keys that were written.
    """
    target = os.environ if environ is None else environ
    written: List[str] = []
    for key, value in env_map.items():
        if override or key not in target:
            target[key] = str(value)
            written.append(key)
    return written
