"""
Character classification and punctuation handling for hanzi text.
"""

import regex

from cedict_lite.constants import CLOSING_SYMBOLS, OPENING_SYMBOLS, SYMBOLS

# Unicode Han script (CJK ideographs in every block, plus 〆〇 etc.)
HAN_RE = regex.compile(r"\p{Han}")

_SPACE_BEFORE_RE = regex.compile(" ([" + regex.escape(CLOSING_SYMBOLS) + "])")
_SPACE_AFTER_RE = regex.compile("([" + regex.escape(OPENING_SYMBOLS) + "]) ")
_MULTI_SPACE_RE = regex.compile(" {2,}")


def is_han(ch: str) -> bool:
    """True if ch is a single character of the Han script."""
    return HAN_RE.fullmatch(ch) is not None


def is_symbol(ch: str) -> bool:
    """True if ch is full-width punctuation with a latin equivalent."""
    return ch in SYMBOLS


def is_hanzi(text: str) -> bool:
    """
    True if every character is Han or known CJK punctuation.

    Used to pick between transliteration and meaning lookup.

    Example:
        >>> is_hanzi("我的大王！")
        True
        >>> is_hanzi("big king")
        False
    """
    return all(is_han(ch) or is_symbol(ch) for ch in text)


def convert_symbols(text: str) -> str:
    """Replace full-width CJK punctuation with latin punctuation."""
    return "".join(SYMBOLS.get(ch, ch) for ch in text)


def collapse_spaces(text: str) -> str:
    """Replace runs of spaces with a single space."""
    return _MULTI_SPACE_RE.sub(" ", text)


def fix_symbol_spaces(text: str) -> str:
    """
    Remove the spaces transliteration leaves around punctuation.

    Example:
        >>> fix_symbol_spaces("wo3 ( ni3 ) ?")
        'wo3 (ni3)?'
    """
    text = _SPACE_BEFORE_RE.sub(r"\1", text)
    return _SPACE_AFTER_RE.sub(r"\1", text)
