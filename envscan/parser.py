import os
import re
from typing import Optional, Union

from loguru import logger

from envscan.config import DEFAULT_CONFIG, LoaderConfig
from envscan.errors import (
    EmptyFileError,
    FileReadError,
    FileTooLargeError,
    InvalidEncodingError,
    NumberOutOfRangeError,
)
from envscan.paths import PathLike, ensure_no_parent_traversal
from envscan.values import INT64_MAX, INT64_MIN, BooleanValue, EnvMap, IntegerValue, StringValue, Value


_LINE_SPLIT = re.compile(rb"[\r\n]")
_INTEGER = re.compile(rb"[+-]?[0-9](?:_?[0-9])*")
_TRIM = b" \t"


def _file_size(f) -> int:
    return os.fstat(f.fileno()).st_size


def _integer(key: str, raw: bytes, number: int) -> IntegerValue:
    if number < INT64_MIN or number > INT64_MAX:
        raise NumberOutOfRangeError(key, raw.decode("ascii"))
    return IntegerValue(number)


def _classify(key: str, raw: bytes) -> Value:
    lowered = raw.lower()  # ASCII-only for bytes
    if lowered == b"true":
        return BooleanValue(True)
    if lowered == b"false":
        return BooleanValue(False)

    if _INTEGER.fullmatch(raw):
        number = int(raw.replace(b"_", b""))
        # Too wide for a signed 64-bit integer: not a number, keep the text.
        if INT64_MIN <= number <= INT64_MAX:
            return _integer(key, raw, number)

    return StringValue(raw.decode("utf-8"))


def parse_dotenv(data: Union[bytes, str], *, config: Optional[LoaderConfig] = None) -> EnvMap:
    """
    Strict .env parser:
      - KEY=VALUE, split on the first '='
      - '\\r' and '\\n' each end a line
      - skips empty lines, lines starting with '#', lines without '=',
        and lines/keys/values over the configured byte limits
      - trims spaces and tabs (only) around key and value
      - values become Boolean, Integer or String, in that order
      - no quoting, escapes or expansion
    """
    cfg = config or DEFAULT_CONFIG
    if isinstance(data, str):
        try:
            data = data.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidEncodingError(f"Input is not valid UTF-8: {exc}") from exc
    else:
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError(f"Input is not valid UTF-8: {exc}") from exc

    out: EnvMap = {}
    for lineno, line in enumerate(_LINE_SPLIT.split(data), 1):
        if len(line) > cfg.max_line_length:
            logger.debug(f"Skipping line {lineno}: longer than {cfg.max_line_length} bytes")
            continue
        if not line or line.startswith(b"#"):
            continue
        key_part, sep, value_part = line.partition(b"=")
        if not sep:
            logger.debug(f"Skipping line {lineno}: no '='")
            continue

        key = key_part.strip(_TRIM)
        value = value_part.strip(_TRIM)
        if not key or len(key) > cfg.max_key_length:
            logger.debug(f"Skipping line {lineno}: key length {len(key)}")
            continue
        if len(value) > cfg.max_value_length:
            logger.debug(f"Skipping line {lineno}: value longer than {cfg.max_value_length} bytes")
            continue

        name = key.decode("utf-8")
        out[name] = _classify(name, value)
    return out


def parse_env_file(path: PathLike, *, config: Optional[LoaderConfig] = None) -> EnvMap:
    """Read and parse one .env file. Open failures propagate as OSError subclasses."""
    cfg = config or DEFAULT_CONFIG
    raw_path = ensure_no_parent_traversal(path)

    with open(raw_path, "rb") as f:
        size = _file_size(f)
        if size == 0:
            raise EmptyFileError(f"{raw_path} is empty")
        if size > cfg.max_file_size:
            raise FileTooLargeError(raw_path, size, cfg.max_file_size)
        data = f.read(size)

    if len(data) != size:
        raise FileReadError(f"Read {len(data)} of {size} bytes from {raw_path}")

    return parse_dotenv(data, config=cfg)
