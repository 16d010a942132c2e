"""
Pinyin tone notation conversion.

CC-CEDICT stores pinyin with tone numbers (``Zhong1 wen2``). This module
converts between that and diacritic notation (``Zhōng wén``).

Conversion never fails: anything it cannot interpret is returned as-is.
"""

import unicodedata
from typing import Optional

from cedict_lite.constants import (
    TONE_DIGITS,
    TONE_MARKS,
    TONE_TO_NUMBER,
    TONE_VOWELS,
)


# ============================================================================
# Syllables
# ============================================================================

def guess_tone_index(token: str) -> Optional[int]:
    """
    Index of the vowel that carries the tone mark, or None.

    Vowels are tried in the order a > e > i > o > u > ü > r, which follows
    the usual placement rules closely enough for dictionary pinyin.
    """
    for vowel in TONE_VOWELS:
        index = token.find(vowel)
        if index >= 0:
            return index
    return None


def find_tone_digit(token: str) -> Optional[int]:
    """Index of the first tone digit (1-5) in token, or None."""
    for i, ch in enumerate(token):
        if ch in TONE_DIGITS:
            return i
    return None


def to_diacritic(token: str) -> str:
    """
    Convert one numbered syllable to diacritic notation.

    The digit may follow the syllable (``hao3``) or the vowel (``ha3o``).
    Tone 5 drops the digit and leaves the vowel plain.

    Example:
        >>> to_diacritic("lu:4")
        'lǜ'
        >>> to_diacritic("ma5")
        'ma'
    """
    token = token.replace("u:", "ü")

    digit_index = find_tone_digit(token)
    if digit_index is None:
        return token

    tone = int(token[digit_index]) - 1
    bare = token[:digit_index] + token[digit_index + 1:]

    vowel_index = guess_tone_index(bare)
    if vowel_index is None:
        return token

    marked = TONE_MARKS[bare[vowel_index]][tone]
    return bare[:vowel_index] + marked + bare[vowel_index + 1:]


def to_numbered(token: str) -> str:
    """
    Convert one diacritic syllable to numbered notation.

    Example:
        >>> to_numbered("lǜ")
        'lu:4'
        >>> to_numbered("nü")
        'nu:'
    """
    chars = []
    tone = ""
    for ch in token:
        mapped = TONE_TO_NUMBER.get(ch)
        if mapped is None:
            chars.append(ch)
            continue
        base, digit = mapped
        chars.append(base)
        if digit:
            tone = digit
    return "".join(chars) + tone


# ============================================================================
# Phrases
# ============================================================================

def pinyin_tones(text: str) -> str:
    """
    Convert space separated numbered pinyin to diacritics.

    Example:
        >>> pinyin_tones("Zhong1 wen2")
        'Zhōng wén'
    """
    return " ".join(to_diacritic(token) for token in text.split(" ")).strip()


def pinyin_tone_nums(text: str) -> str:
    """
    Convert space separated diacritic pinyin to tone numbers.

    Example:
        >>> pinyin_tone_nums("Měi guó rén")
        'Mei3 guo2 ren2'
    """
    return " ".join(to_numbered(token) for token in text.split(" ")).strip()


def strip_digits(text: str) -> str:
    """Remove every Unicode decimal digit."""
    return "".join(ch for ch in text if unicodedata.category(ch) != "Nd")


def strip_tones(text: str) -> str:
    """Remove combining marks (tone diacritics and the umlaut)."""
    decomposed = unicodedata.normalize("NFD", text)
    kept = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", kept)


def pinyin_plaintext(text: str) -> str:
    """Pinyin without tone numbers or tone marks."""
    return strip_tones(strip_digits(text))


def has_tone_number(text: str) -> bool:
    """True if text carries any ASCII digit, valid tone or not."""
    return any("0" <= ch <= "9" for ch in text)
