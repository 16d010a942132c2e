"""
In-memory CC-CEDICT dictionary.

A Dictionary is populated exactly once, either synchronously (parse, load)
or by a background thread (new). Every read waits for that to finish. If
population fails, the failure is kept and every read raises it; there is
no retry.

    d = new()                      # returns at once, downloads in background
    d.get_by_hanzi("中文")          # blocks until ready
"""

import dataclasses
import logging
import threading
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, TextIO, Union

from cedict_lite import codec, search, sources
from cedict_lite.constants import DOWNLOAD_TIMEOUT, URL
from cedict_lite.errors import DictionaryNotReadyError
from cedict_lite.raw_types import Entry, Metadata
from cedict_lite.transliterate import hanzi_to_pinyin
from cedict_lite.trie import HanziTrie

logger = logging.getLogger(__name__)


class Dictionary:
    """
    CC-CEDICT entries, header and metadata, read-only once ready.

    Construct with Dictionary.parse(), Dictionary.load() or new(). A bare
    Dictionary() is empty and blocks all reads until populated.
    """

    def __init__(self):
        self._entries: List[Entry] = []
        self._header: List[str] = []
        self._metadata = Metadata()
        self._trie: Optional[HanziTrie] = None
        self._error: Optional[BaseException] = None
        self._done = threading.Event()
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, source: Union[str, Iterable[str], TextIO]) -> "Dictionary":
        """
        Build a ready dictionary from CC-CEDICT text or lines.

        Raises:
            ParseError: If the text is malformed
        """
        d = cls()
        d._populate(codec.parse(source))
        return d

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Dictionary":
        """
        Build a ready dictionary from a file, gunzipping ``.gz`` files.

        Raises:
            LoadError: If the file cannot be read
            ParseError: If its content is malformed
        """
        with sources.open_text(path) as fp:
            d = cls.parse(fp)
        logger.debug(f"Loaded {path}")
        return d

    @classmethod
    def download(cls, url: str = URL, timeout: float = DOWNLOAD_TIMEOUT) -> "Dictionary":
        """
        Download and parse the canonical archive, blocking until done.

        Raises:
            DownloadError: If the fetch fails
            ParseError: If the archive is malformed
        """
        return cls.parse(sources.download(url, timeout))

    def populate_in_background(self, fetch: Callable[[], str]) -> threading.Thread:
        """
        Fetch and parse on a daemon thread.

        Args:
            fetch: Returns CC-CEDICT text; any exception it raises becomes
                the dictionary's permanent error
        """
        def run():
            try:
                self._populate(codec.parse(fetch()))
            except Exception as e:
                logger.error(f"Dictionary population failed: {e}")
                self._fail(e)

        thread = threading.Thread(target=run, name="cedict-populate", daemon=True)
        thread.start()
        return thread

    def _populate(self, result: codec.ParseResult) -> None:
        trie = HanziTrie(result.entries)
        with self._lock:
            if self._done.is_set():
                raise RuntimeError("dictionary is already populated")
            self._entries = result.entries
            self._header = result.header
            self._metadata = result.metadata
            self._trie = trie
            self._done.set()
        logger.info(f"Loaded {codec.describe(result.metadata)}")

    def _fail(self, error: BaseException) -> None:
        with self._lock:
            if self._done.is_set():
                raise RuntimeError("dictionary is already populated")
            self._error = error
            self._done.set()

    # ------------------------------------------------------------------
    # Readiness
    # ------------------------------------------------------------------

    @property
    def ready(self) -> bool:
        """True once populated successfully. Never blocks."""
        return self._done.is_set() and self._error is None

    @property
    def failed(self) -> bool:
        """True once population has failed. Never blocks."""
        return self._done.is_set() and self._error is not None

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until population has finished, successfully or not.

        Returns:
            False if timeout expired first (not ready yet), True otherwise
        """
        return self._done.wait(timeout)

    def err(self) -> Optional[BaseException]:
        """Block until populated, then return the population error, if any."""
        self._done.wait()
        return self._error

    def _wait_ready(self) -> None:
        self._done.wait()
        if self._error is not None:
            raise DictionaryNotReadyError(
                f"dictionary failed to load: {self._error}"
            ) from self._error

    # ------------------------------------------------------------------
    # Contents
    # ------------------------------------------------------------------

    def metadata(self) -> Metadata:
        """Header metadata (a copy)."""
        self._wait_ready()
        return dataclasses.replace(self._metadata)

    def header(self) -> List[str]:
        """Verbatim header comment lines."""
        self._wait_ready()
        return list(self._header)

    def entries(self) -> List[Entry]:
        """All entries in dictionary order."""
        self._wait_ready()
        return list(self._entries)

    def __len__(self) -> int:
        self._wait_ready()
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        self._wait_ready()
        return iter(self._entries)

    def default_filename(self) -> str:
        """CC-CEDICT style filename built from the header metadata."""
        md = self.metadata()
        return (
            f"cedict_{md.version}_{md.subversion}_{md.format.lower()}_"
            f"{md.charset.lower()}_{md.publisher.lower()}.txt.gz"
        )

    def save(self, path: Union[str, Path]) -> None:
        """
        Write the dictionary in CC-CEDICT format, gzipped for ``.gz`` names.

        The output is identical to the parsed source for well-formed input.

        Raises:
            LoadError: If the file cannot be written
        """
        self._wait_ready()
        with sources.open_text(path, "w") as fp:
            codec.dump(self._header, self._entries, fp)
        logger.info(f"Saved {len(self._entries):,} entries to {path}")

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_by_hanzi(self, text: str) -> Optional[Entry]:
        """First entry matching traditional or simplified hanzi, or None."""
        self._wait_ready()
        return search.find_by_hanzi(self._entries, text)

    def get_all_by_hanzi(self, text: str) -> List[Entry]:
        """All entries matching traditional or simplified hanzi."""
        self._wait_ready()
        return search.find_all_by_hanzi(self._entries, text)

    def get_by_pinyin(self, text: str) -> List[Entry]:
        """
        Entries matching pinyin in plaintext, tone numbers or tone marks.

        Plaintext input matches all tones.
        """
        self._wait_ready()
        return search.find_by_pinyin(self._entries, text)

    def get_by_meaning(self, text: str) -> List[Entry]:
        """Entries whose meaning appears in text, closest match first."""
        self._wait_ready()
        return search.find_by_meaning(self._entries, text)

    def hanzi_to_pinyin(self, text: str) -> str:
        """Transliterate hanzi to numbered pinyin by longest match."""
        self._wait_ready()
        return hanzi_to_pinyin(text, self._trie)


# ============================================================================
# Shared Instance
# ============================================================================

# Module-level singleton
_DICTIONARY: Optional[Dictionary] = None
_DICTIONARY_LOCK = threading.Lock()


def new(url: str = URL) -> Dictionary:
    """
    Return the shared dictionary, starting its download on first call.

    Returns immediately. Reads on the returned dictionary block until the
    download has been parsed. Concurrent first calls all get the same
    instance and only one download starts.
    """
    global _DICTIONARY

    d = _DICTIONARY
    if d is not None:
        return d

    with _DICTIONARY_LOCK:
        if _DICTIONARY is None:
            d = Dictionary()
            d.populate_in_background(lambda: sources.download(url))
            _DICTIONARY = d
        return _DICTIONARY


def _reset_singleton():
    """Drop the shared instance. Test hook only."""
    global _DICTIONARY
    with _DICTIONARY_LOCK:
        _DICTIONARY = None
