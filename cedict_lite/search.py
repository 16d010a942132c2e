"""
Exact and fuzzy entry matching.

These functions scan a sequence of entries in dictionary order. They hold no
state, so Dictionary can call them without locking once it is ready.
"""

from typing import Dict, List, Optional, Sequence

from cedict_lite.constants import MAX_DISTANCE, MAX_RESULTS
from cedict_lite.raw_types import Entry
from cedict_lite.tones import has_tone_number, pinyin_tone_nums, strip_digits


# ============================================================================
# Edit Distance
# ============================================================================

def levenshtein(src: str, dst: str) -> int:
    """
    Levenshtein distance between two strings, counted in code points.

    Uses a single row of the dynamic programming table. No case or
    whitespace normalization is applied.

    Example:
        >>> levenshtein("中文", "中國")
        1
    """
    if src == dst:
        return 0

    # keep the row as short as possible
    if len(src) > len(dst):
        src, dst = dst, src

    row = list(range(len(src) + 1))
    for i, d in enumerate(dst, 1):
        prev = i
        for j, s in enumerate(src, 1):
            if s == d:
                curr = row[j - 1]
            else:
                curr = min(row[j - 1] + 1, prev + 1, row[j] + 1)
            row[j - 1] = prev
            prev = curr
        row[len(src)] = prev

    return row[len(src)]


# ============================================================================
# Hanzi
# ============================================================================

def find_by_hanzi(entries: Sequence[Entry], text: str) -> Optional[Entry]:
    """First entry whose traditional or simplified form equals text."""
    text = text.strip()
    for entry in entries:
        if entry.matches_hanzi(text):
            return entry
    return None


def find_all_by_hanzi(entries: Sequence[Entry], text: str) -> List[Entry]:
    """Every entry whose traditional or simplified form equals text."""
    text = text.strip()
    return [entry for entry in entries if entry.matches_hanzi(text)]


# ============================================================================
# Pinyin
# ============================================================================

def normalize_pinyin(text: str) -> str:
    """Lowercase and drop spaces, so "Zhong1 wen2" compares as "zhong1wen2"."""
    return text.lower().replace(" ", "")


def find_by_pinyin(entries: Sequence[Entry], text: str) -> List[Entry]:
    """
    Entries whose pinyin matches text.

    Tone marks are converted to numbers first. A query without any digit
    matches every tone; a query with digits must match them exactly, so an
    out-of-range tone like "zhong6" matches nothing.

    Results are sorted by their stored pinyin.
    """
    query = pinyin_tone_nums(text)
    plaintext = not has_tone_number(query)
    query = normalize_pinyin(query)

    results = []
    for entry in entries:
        candidate = normalize_pinyin(entry.pinyin)
        if plaintext:
            candidate = strip_digits(candidate)
        if candidate == query:
            results.append(entry)

    # sorted() is stable, ties keep dictionary order
    return sorted(results, key=lambda e: e.pinyin)


# ============================================================================
# Meaning
# ============================================================================

def find_by_meaning(
    entries: Sequence[Entry],
    text: str,
    max_distance: int = MAX_DISTANCE,
    max_results: int = MAX_RESULTS,
) -> List[Entry]:
    """
    Entries with a meaning contained in text, closest first.

    Matching is case-insensitive. For each entry only its first meaning
    found inside the query is scored; the entry is dropped if that meaning
    is more than max_distance edits away from the query.
    """
    query = text.lower()

    results: List[Entry] = []
    distances: Dict[int, int] = {}
    for entry in entries:
        for meaning in entry.meanings:
            meaning = meaning.lower()
            if meaning not in query:
                continue
            distance = levenshtein(query, meaning)
            if distance <= max_distance:
                distances[len(results)] = distance
                results.append(entry)
            break

    order = sorted(range(len(results)), key=lambda i: distances[i])
    return [results[i] for i in order[:max_results]]
