"""
Lightweight data structures for dictionary entries and header metadata.

These dataclasses are populated by the codec and shared read-only between
every lookup once the dictionary is ready.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Entry:
    """
    A single CC-CEDICT entry.

    Attributes:
        traditional: Headword in traditional characters
        simplified: Headword in simplified characters
        pinyin: Numbered-tone pinyin, space separated (e.g. "Zhong1 wen2")
        meanings: English meanings in source order
    """
    traditional: str
    simplified: str
    pinyin: str
    meanings: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.meanings, tuple):
            object.__setattr__(self, "meanings", tuple(self.meanings))

    def matches_hanzi(self, text: str) -> bool:
        """True if text equals the traditional or simplified headword."""
        return self.traditional == text or self.simplified == text

    def __str__(self) -> str:
        from cedict_lite.codec import marshal
        return marshal(self)


@dataclass(slots=True)
class Metadata:
    """Information embedded in the `#!` lines of the CC-CEDICT header."""
    version: int = 0
    subversion: int = 0
    format: str = ""
    charset: str = ""
    entries: int = 0
    publisher: str = ""
    license: str = ""
    timestamp: Optional[datetime] = field(default=None)
