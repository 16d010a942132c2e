"""
Hanzi trie for longest-match lookups.

The traditional and simplified headwords of every entry are stored in a
marisa_trie.Trie. Each key id maps to the position of the first entry
with that headword, so the trie agrees with exact hanzi lookup.
"""

from typing import List, Optional, Sequence, Tuple

import marisa_trie

from cedict_lite.raw_types import Entry


class HanziTrie:
    """Prefix trie over dictionary headwords."""

    def __init__(self, entries: Sequence[Entry]):
        self._entries = entries
        self._trie = marisa_trie.Trie(
            key for e in entries for key in (e.traditional, e.simplified)
        )

        # key id -> index of first entry with that headword
        self._first: List[Optional[int]] = [None] * len(self._trie)
        for index, entry in enumerate(entries):
            for key in (entry.traditional, entry.simplified):
                key_id = self._trie[key]
                if self._first[key_id] is None:
                    self._first[key_id] = index

        self.max_key_length = max((len(key) for key in self._trie.keys()), default=0)

    def __len__(self) -> int:
        return len(self._trie)

    def __contains__(self, key: str) -> bool:
        return key in self._trie

    def get(self, key: str) -> Optional[Entry]:
        """First entry whose headword equals key, or None."""
        if key not in self._trie:
            return None
        return self._entries[self._first[self._trie[key]]]

    def longest_match(self, text: str, start: int = 0) -> Optional[Tuple[int, Entry]]:
        """
        Find the longest headword starting at text[start].

        Only the next max_key_length characters are probed, so the cost
        does not grow with the rest of the text.

        Returns:
            (end, entry) for the longest match, or None
        """
        window = text[start:start + self.max_key_length]
        if not window:
            return None

        prefixes = self._trie.prefixes(window)
        if not prefixes:
            return None

        key = max(prefixes, key=len)
        return start + len(key), self.get(key)
