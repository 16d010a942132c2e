"""
Byte sources and sinks for dictionary data.

Covers downloading the canonical archive and opening local files. Files
whose name ends in ``.gz`` are transparently (de)compressed; downloaded
bodies are decompressed when they start with the gzip magic bytes.
"""

import gzip
import logging
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO, Union

import requests

from cedict_lite.constants import DOWNLOAD_TIMEOUT, GZIP_SUFFIX, URL
from cedict_lite.errors import DownloadError, LoadError

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"

PathLike = Union[str, Path]


def is_gzip_path(path: PathLike) -> bool:
    """True if the filename selects gzip compression."""
    return Path(path).suffix == GZIP_SUFFIX


def decode_body(body: bytes) -> str:
    """Gunzip (when compressed) and decode a downloaded body."""
    if body.startswith(GZIP_MAGIC):
        body = gzip.decompress(body)
    return body.decode("utf-8")


def download(url: str = URL, timeout: float = DOWNLOAD_TIMEOUT) -> str:
    """
    Fetch the CC-CEDICT archive and return its text.

    Raises:
        DownloadError: On transport errors, a non-2xx status, or a body
            that cannot be decompressed or decoded
    """
    logger.info(f"Downloading CC-CEDICT from {url}")
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise DownloadError(f"download failed: {e}") from e

    logger.debug(f"Downloaded {len(resp.content):,} bytes")

    try:
        return decode_body(resp.content)
    except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
        raise DownloadError(f"bad archive from {url}: {e}") from e


@contextmanager
def open_text(path: PathLike, mode: str = "r") -> Iterator[TextIO]:
    """
    Open a dictionary file as UTF-8 text, through gzip for ``.gz`` names.

    Line endings are left untouched in both directions.

    Raises:
        LoadError: If the file cannot be opened, read or written
    """
    if mode not in ("r", "w"):
        raise ValueError(f"unsupported mode: {mode!r}")

    try:
        if is_gzip_path(path):
            fp = gzip.open(path, mode + "t", encoding="utf-8", newline="")
        else:
            fp = open(path, mode, encoding="utf-8", newline="")
    except OSError as e:
        raise LoadError(f"cannot open {path}: {e}") from e

    try:
        with fp:
            yield fp
    except (OSError, EOFError, zlib.error, UnicodeDecodeError) as e:
        raise LoadError(f"cannot {'read' if mode == 'r' else 'write'} {path}: {e}") from e
