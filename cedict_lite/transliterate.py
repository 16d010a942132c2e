"""
Hanzi to pinyin transliteration.

Text is segmented greedily: at each Han character the longest headword
in the dictionary is taken and replaced by its pinyin. Anything else
(latin text, digits, punctuation, unknown characters) passes through.

    我的大王！ -> Wo3 de5 da4 wang2!  (pinyin_tones() -> Wǒ de dà wáng!)
"""

from typing import List

from cedict_lite.characters import (
    collapse_spaces,
    convert_symbols,
    fix_symbol_spaces,
    is_han,
)
from cedict_lite.trie import HanziTrie


def segment(text: str, trie: HanziTrie) -> List[str]:
    """
    Split text into output pieces, each carrying its own trailing space.

    Matched headwords and non-Han runs are followed by a space. Han
    characters with no match are copied as they are, without one.

    Example:
        >>> segment("中文abc", trie)
        ['Zhong1 wen2 ', 'abc ']
    """
    parts: List[str] = []
    i = 0
    while i < len(text):
        if not is_han(text[i]):
            j = i
            while j < len(text) and not is_han(text[j]):
                j += 1
            parts.append(text[i:j] + " ")
            i = j
            continue

        match = trie.longest_match(text, i)
        if match is None:
            parts.append(text[i])
            i += 1
            continue

        end, entry = match
        parts.append(entry.pinyin + " ")
        i = end

    return parts


def format_sentence(text: str) -> str:
    """Capitalize the first character, lowercase the rest."""
    return text[:1].upper() + text[1:].lower()


def hanzi_to_pinyin(text: str, trie: HanziTrie) -> str:
    """
    Convert hanzi to numbered pinyin.

    Full-width punctuation becomes latin punctuation, and the result is
    formatted as a sentence with natural spacing around punctuation.

    Args:
        text: Any text; non-Han characters are copied through
        trie: Headword trie of a ready dictionary

    Returns:
        Numbered pinyin, e.g. "Ni3 hao3!"
    """
    text = text.strip()
    if not text:
        return ""

    text = convert_symbols(text)
    result = collapse_spaces("".join(segment(text, trie)).strip())
    return fix_symbol_spaces(format_sentence(result))
