"""
cedict-lite: Chinese-English dictionary built on CC-CEDICT

Look up words by hanzi, pinyin or English meaning, and transliterate
hanzi to pinyin. The latest CC-CEDICT is downloaded in the background
on first use; a local copy can be loaded instead.

Basic Usage:
    import cedict_lite

    d = cedict_lite.new()
    print(d.get_by_hanzi("中文"))
    print(cedict_lite.pinyin_tones(d.hanzi_to_pinyin("我的大王！")))
"""

import threading
import time
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional, Tuple, Union

from cedict_lite.characters import convert_symbols, fix_symbol_spaces, is_hanzi
from cedict_lite.codec import marshal, unmarshal
from cedict_lite.dictionary import Dictionary, new
from cedict_lite.errors import (
    CedictError,
    DictionaryNotReadyError,
    DownloadError,
    EntryCountError,
    EntryFormatError,
    LoadError,
    LookupTimeoutError,
    MetadataError,
    ParseError,
)
from cedict_lite.raw_types import Entry, Metadata
from cedict_lite.search import levenshtein
from cedict_lite.tones import pinyin_plaintext, pinyin_tone_nums, pinyin_tones

__version__ = "0.1.0"


# =============================================================================
# Main API
# =============================================================================

def parse(text: str) -> Dictionary:
    """
    Parse CC-CEDICT text into a ready dictionary.

    Raises:
        ParseError: If the text is malformed
    """
    return Dictionary.parse(text)


def load(path: Union[str, Path]) -> Dictionary:
    """
    Load a CC-CEDICT file (``.gz`` files are decompressed).

    Raises:
        LoadError: If the file cannot be read
        ParseError: If the file is malformed
    """
    return Dictionary.load(path)


def lookup(text: str, dictionary: Optional[Dictionary] = None) -> Union[str, List[str]]:
    """
    Look up text the way the command line does.

    Hanzi input (Han characters and CJK punctuation only) is transliterated
    to pinyin with tone marks. Anything else is searched by meaning.

    Args:
        text: Hanzi or English text
        dictionary: Dictionary to use; the shared one by default

    Returns:
        The pinyin string for hanzi input, otherwise a list of matching
        entries formatted as CC-CEDICT lines

    Example:
        >>> cedict_lite.lookup("我的大王！")
        'Wǒ de dà wáng!'
        >>> cedict_lite.lookup("Chinese language")[0]
        '中文 中文 [Zhong1 wen2] /Chinese language/'
    """
    if dictionary is None:
        dictionary = new()

    if is_hanzi(text):
        return pinyin_tones(dictionary.hanzi_to_pinyin(text))

    return [marshal(e) for e in dictionary.get_by_meaning(text)]


def warm_up(verbose: bool = False, timeout: Optional[float] = None) -> Tuple[float, dict]:
    """
    Start the shared dictionary and wait until it is ready.

    Args:
        verbose: If True, print timing information
        timeout: Seconds to wait at most

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)

    Raises:
        LookupTimeoutError: If the dictionary is not ready within timeout
        DictionaryNotReadyError: If loading failed
    """
    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Loading CC-CEDICT...")

    t0 = time.perf_counter()
    d = new()
    if not d.wait(timeout):
        raise LookupTimeoutError(f"Dictionary not ready after {timeout}s")
    entry_count = len(d)
    timings['dictionary'] = (time.perf_counter() - t0) * 1000

    if verbose:
        print(f"  Dictionary:     {timings['dictionary']:>7.1f}ms ({entry_count:,} entries)")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {timings['total']:>7.1f}ms")

    return total_time, timings


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Async API
# =============================================================================

# Thread pool for async operations
_executor = None
_executor_lock = threading.Lock()

def _get_executor():
    """Get or create the thread pool executor."""
    global _executor
    from concurrent.futures import ThreadPoolExecutor

    with _executor_lock:
        if _executor is None:
            _executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="cedict")

    return _executor


async def lookup_async(
    text: str,
    timeout: float = 30.0,
    dictionary: Optional[Dictionary] = None,
) -> Union[str, List[str]]:
    """
    Run lookup() without blocking the event loop.

    Args:
        text: Hanzi or English text
        timeout: Maximum time in seconds (default 30s)
        dictionary: Dictionary to use; the shared one by default

    Raises:
        LookupTimeoutError: If the dictionary is not ready in time. This
            is not a load failure; a later call may succeed.
        DictionaryNotReadyError: If loading failed

    Example:
        >>> import asyncio
        >>> asyncio.run(cedict_lite.lookup_async("中文"))
        'Zhōng wén'
    """
    import asyncio

    loop = asyncio.get_running_loop()
    executor = _get_executor()

    try:
        future = loop.run_in_executor(executor, lambda: lookup(text, dictionary))
        return await asyncio.wait_for(future, timeout=timeout)
    except asyncio.TimeoutError:
        raise LookupTimeoutError(f"Lookup timed out after {timeout}s")


async def wait_async(
    timeout: float = 30.0,
    dictionary: Optional[Dictionary] = None,
) -> Dictionary:
    """
    Wait for a dictionary to finish loading without blocking the event loop.

    Raises:
        LookupTimeoutError: If it is still loading after timeout
        DictionaryNotReadyError: If loading failed
    """
    import asyncio

    if dictionary is None:
        dictionary = new()

    loop = asyncio.get_running_loop()
    executor = _get_executor()

    done = await loop.run_in_executor(executor, dictionary.wait, timeout)
    if not done:
        raise LookupTimeoutError(f"Dictionary not ready after {timeout}s")

    error = dictionary.err()
    if error is not None:
        raise DictionaryNotReadyError(f"dictionary failed to load: {error}") from error
    return dictionary


def shutdown():
    """
    Shutdown the thread pool executor.

    Call this when your application is shutting down to cleanly
    release resources.
    """
    global _executor
    if _executor is not None:
        _executor.shutdown(wait=True)
        _executor = None


# =============================================================================
# Session Context (for batch processing)
# =============================================================================

@contextmanager
def session_context(path: Optional[Union[str, Path]] = None):
    """
    Context manager for batch lookups.

    Yields a ready dictionary: the file at path if given, otherwise the
    shared downloaded one.

    Example:
        >>> with cedict_lite.session_context("cedict.txt.gz") as d:
        ...     for word in words:
        ...         print(d.get_by_hanzi(word))
    """
    d = load(path) if path is not None else new()
    error = d.err()
    if error is not None:
        raise DictionaryNotReadyError(f"dictionary failed to load: {error}") from error

    yield d


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "Entry",
    "Metadata",
    "Dictionary",
    # Sync API
    "new",
    "parse",
    "load",
    "lookup",
    "warm_up",
    "get_version",
    # Text helpers
    "marshal",
    "unmarshal",
    "is_hanzi",
    "convert_symbols",
    "fix_symbol_spaces",
    "pinyin_tones",
    "pinyin_tone_nums",
    "pinyin_plaintext",
    "levenshtein",
    # Async API
    "lookup_async",
    "wait_async",
    "shutdown",
    # Batch processing
    "session_context",
    # Exceptions
    "CedictError",
    "ParseError",
    "MetadataError",
    "EntryFormatError",
    "EntryCountError",
    "LoadError",
    "DownloadError",
    "DictionaryNotReadyError",
    "LookupTimeoutError",
    # Version
    "__version__",
]
