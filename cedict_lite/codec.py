"""
CC-CEDICT text codec.

Parses and serializes the format described at
https://cc-cedict.org/wiki/format:syntax

    # comment lines, kept verbatim
    #! key=value metadata lines
    TRADITIONAL SIMPLIFIED [PINYIN] /MEANING1/MEANING2/.../

Serializing the result of a parse reproduces a well-formed source file
byte for byte (header lines first, CRLF between lines, no trailing
line ending).
"""

import io
import re
from datetime import datetime, timedelta, timezone
from typing import Iterable, Iterator, List, NamedTuple, Optional, TextIO, Union

from cedict_lite.constants import LINE_ENDING
from cedict_lite.errors import (
    EntryCountError,
    EntryFormatError,
    MetadataError,
)
from cedict_lite.raw_types import Entry, Metadata


# ============================================================================
# Constants
# ============================================================================

COMMENT_PREFIX = "#"
METADATA_PREFIX = "#!"

INT_KEYS = frozenset(['version', 'subversion', 'entries'])
STR_KEYS = frozenset(['format', 'charset', 'publisher', 'license'])

_INT_RE = re.compile(r"[+-]?[0-9]+")

# 2020-02-14T06:15:46Z, 2020-02-14T06:15:46.5+08:00
_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:(Z)|([+-])(\d{2}):(\d{2}))"
)


class ParseResult(NamedTuple):
    """Everything a parse produces, in source order."""
    header: List[str]
    metadata: Metadata
    entries: List[Entry]


# ============================================================================
# Entries
# ============================================================================

def marshal(entry: Entry) -> str:
    """Format an entry as a single CC-CEDICT line."""
    meanings = "/" + "/".join(entry.meanings) + "/"
    return f"{entry.traditional} {entry.simplified} [{entry.pinyin}] {meanings}"


def unmarshal(line: str) -> Entry:
    """
    Parse a single CC-CEDICT entry line.

    Example:
        >>> unmarshal("龍豆 龙豆 [long2 dou4] /dragon bean/long bean/")
        Entry(traditional='龍豆', simplified='龙豆', pinyin='long2 dou4', meanings=('dragon bean', 'long bean'))

    Raises:
        EntryFormatError: If the pinyin brackets are missing or the hanzi
            part does not hold exactly two fields
    """
    fields = line.split("/")
    head = fields[0]

    start = head.find("[")
    end = head.find("]", start + 1) if start >= 0 else -1
    if start < 0 or end < 0:
        raise EntryFormatError("expected '[pinyin]' format", line)

    hanzi = head[:start].split()
    if len(hanzi) != 2:
        raise EntryFormatError("expected two hanzi fields i.e. '龍豆 龙豆 '", line)

    return Entry(
        traditional=hanzi[0],
        simplified=hanzi[1],
        pinyin=head[start + 1:end],
        meanings=tuple(fields[1:-1]),
    )


# ============================================================================
# Metadata
# ============================================================================

def parse_timestamp(value: str) -> datetime:
    """
    Parse a strict RFC3339 timestamp.

    Raises:
        ValueError: If the value is not RFC3339
    """
    match = _RFC3339_RE.fullmatch(value)
    if match is None:
        raise ValueError(f"not an RFC3339 timestamp: {value!r}")

    year, month, day, hour, minute, second, frac, zulu, sign, tz_h, tz_m = match.groups()

    if zulu:
        tz = timezone.utc
    else:
        offset = timedelta(hours=int(tz_h), minutes=int(tz_m))
        tz = timezone(-offset if sign == "-" else offset)

    micro = int((frac or "0")[:6].ljust(6, "0"))
    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), int(second), micro,
        tzinfo=tz,
    )


def format_timestamp(ts: datetime) -> str:
    """Format a timestamp the way CC-CEDICT headers write it."""
    text = ts.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def apply_metadata_line(line: str, metadata: Metadata) -> None:
    """
    Update metadata from a `#! key=value` header line.

    Unknown keys and lines without `=` are left alone.

    Raises:
        MetadataError: If a numeric or date value is malformed
    """
    sep = line.find("=")
    if sep < 0:
        return

    key = line[len(METADATA_PREFIX):sep].strip()
    value = line[sep + 1:]

    if key in INT_KEYS:
        if not _INT_RE.fullmatch(value):
            raise MetadataError(key, "expected number", line)
        setattr(metadata, key, int(value))
    elif key in STR_KEYS:
        setattr(metadata, key, value)
    elif key == "date":
        try:
            metadata.timestamp = parse_timestamp(value)
        except ValueError as e:
            raise MetadataError(key, "expected RFC3339 format", line) from e


# ============================================================================
# Parsing
# ============================================================================

def iter_lines(source: Union[str, Iterable[str]]) -> Iterator[str]:
    """Yield lines without their CR/LF terminators."""
    if isinstance(source, str):
        source = io.StringIO(source, newline="\n")
    for line in source:
        yield line.rstrip("\n").rstrip("\r")


def parse(source: Union[str, Iterable[str], TextIO]) -> ParseResult:
    """
    Parse CC-CEDICT text.

    Args:
        source: The whole text, or any iterable of lines (e.g. an open
            text file)

    Returns:
        ParseResult with header lines, metadata and entries

    Raises:
        MetadataError: Malformed `#!` value
        EntryFormatError: Malformed entry line
        EntryCountError: Entry count differs from the `entries` header
    """
    header: List[str] = []
    metadata = Metadata()
    entries: List[Entry] = []

    for line in iter_lines(source):
        if line.startswith(COMMENT_PREFIX):
            header.append(line)
            if line.startswith(METADATA_PREFIX):
                apply_metadata_line(line, metadata)
            continue

        entries.append(unmarshal(line))

    if len(entries) != metadata.entries:
        raise EntryCountError(len(entries), metadata.entries)

    return ParseResult(header, metadata, entries)


# ============================================================================
# Serialization
# ============================================================================

def iter_serialized(header: Iterable[str], entries: Iterable[Entry]) -> Iterator[str]:
    """Yield output chunks: every line but the first is prefixed by the line ending."""
    first = True
    for line in header:
        yield line if first else LINE_ENDING + line
        first = False
    for entry in entries:
        line = marshal(entry)
        yield line if first else LINE_ENDING + line
        first = False


def serialize(header: Iterable[str], entries: Iterable[Entry]) -> str:
    """Serialize header lines and entries to CC-CEDICT text."""
    return "".join(iter_serialized(header, entries))


def dump(header: Iterable[str], entries: Iterable[Entry], fp: TextIO) -> None:
    """Write serialized CC-CEDICT text to an open text stream."""
    for chunk in iter_serialized(header, entries):
        fp.write(chunk)


def dumps(result: ParseResult) -> str:
    """Serialize a ParseResult."""
    return serialize(result.header, result.entries)


def describe(metadata: Metadata) -> str:
    """One-line summary of header metadata, used in logs."""
    ts: Optional[str] = format_timestamp(metadata.timestamp) if metadata.timestamp else None
    return (
        f"CC-CEDICT v{metadata.version}.{metadata.subversion} "
        f"({metadata.publisher or 'unknown'}, {metadata.entries:,} entries, {ts or 'undated'})"
    )
