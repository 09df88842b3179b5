"""Error kinds raised while locating and parsing .env files.

File-open failures are not wrapped: they surface as the builtin OSError
subclasses (FileNotFoundError, PermissionError, ...).
"""


class EnvScanError(Exception):
    """Base exception for all envscan errors."""

    kind = "EnvScanError"


class InvalidPathError(EnvScanError):
    """A supplied path contains a parent-directory segment."""

    kind = "InvalidPath"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Parent-directory traversal not allowed: {path}")


class TooManyEntriesError(EnvScanError):
    """A directory listing exceeded the per-level entry cap."""

    kind = "TooManyEntries"

    def __init__(self, path: str, limit: int):
        self.path = path
        self.limit = limit
        super().__init__(f"More than {limit} entries in {path}")


class NoEnvFileFoundError(EnvScanError):
    """The scan finished within its bounds without finding a .env file."""

    kind = "NoEnvFileFound"


class EmptyFileError(EnvScanError):
    kind = "EmptyFile"


class FileTooLargeError(EnvScanError):
    kind = "FileTooLarge"

    def __init__(self, path: str, size: int, limit: int):
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(f"{path} is {size} bytes (limit {limit})")


class FileReadError(EnvScanError):
    """Fewer bytes were read than the file reported."""

    kind = "FileReadError"


class InvalidEncodingError(EnvScanError):
    kind = "InvalidEncoding"


class NumberOutOfRangeError(EnvScanError):
    """A numeric value does not fit in a signed 64-bit integer."""

    kind = "NumberOutOfRange"

    def __init__(self, key: str, raw: str):
        self.key = key
        self.raw = raw
        super().__init__(f"Value for {key!r} out of 64-bit range: {raw}")
