"""Exceptions raised by cedict-lite."""

from typing import Optional


class CedictError(Exception):
    """Base class for all cedict-lite errors."""
    pass


class ParseError(CedictError):
    """Raised when CC-CEDICT text cannot be parsed. No partial result is kept."""

    def __init__(self, message: str, line: Optional[str] = None):
        if line is not None:
            message = f"{message}: {line!r}"
        super().__init__(message)
        self.line = line


class MetadataError(ParseError):
    """Raised for a `#!` header value of the wrong type."""

    def __init__(self, key: str, message: str, line: Optional[str] = None):
        super().__init__(f"{key}: {message}", line)
        self.key = key


class EntryFormatError(ParseError):
    """Raised for an entry line that does not follow the entry grammar."""

    def __init__(self, message: str, line: Optional[str] = None):
        super().__init__(f"unmarshal: {message}", line)


class EntryCountError(ParseError):
    """Raised when the parsed entry count differs from the header."""

    def __init__(self, loaded: int, declared: int):
        super().__init__(f"loaded entries ({loaded}) != header entries ({declared})")
        self.loaded = loaded
        self.declared = declared


class LoadError(CedictError):
    """Raised when a dictionary file cannot be read or written."""
    pass


class DownloadError(CedictError):
    """Raised when the canonical archive cannot be fetched or decompressed."""
    pass


class DictionaryNotReadyError(CedictError):
    """Raised by reads on a dictionary whose population failed."""
    pass


class LookupTimeoutError(CedictError):
    """Raised when an async call times out before the dictionary is ready."""
    pass
