# tests/test_transliterate.py
"""Tests for hanzi to pinyin transliteration."""

import pytest

from cedict_lite.characters import (
    convert_symbols,
    fix_symbol_spaces,
    is_han,
    is_hanzi,
)
from cedict_lite.tones import pinyin_plaintext, pinyin_tones
from cedict_lite.transliterate import segment
from cedict_lite.trie import HanziTrie


# =============================================================================
# Characters
# =============================================================================

def test_is_hanzi():
    assert is_hanzi("我的大王！")
    assert is_hanzi("【路牌】，")
    assert not is_hanzi("我的 大王")
    assert not is_hanzi("big king")
    assert not is_hanzi("中文abc")


def test_is_han():
    assert is_han("中")
    assert is_han("〇")
    assert not is_han("。")
    assert not is_han("a")


def test_convert_symbols():
    assert convert_symbols("地址：重庆？【路】（一）。") == "地址:重庆?[路](一)."


def test_fix_symbol_spaces():
    assert fix_symbol_spaces("wo3 ( ni3 ) ?") == "wo3 (ni3)?"
    assert fix_symbol_spaces("a , b . c ! d : e ; [ f ]") == "a, b. c! d: e; [f]"


# =============================================================================
# Trie
# =============================================================================

def test_trie_longest_match(dictionary):
    trie = HanziTrie(dictionary.entries())

    end, entry = trie.longest_match("美国人好", 0)
    assert end == 3
    assert entry.traditional == "美國人"

    assert trie.longest_match("龘", 0) is None
    assert trie.max_key_length == 3


def test_trie_first_entry_wins(dictionary):
    trie = HanziTrie(dictionary.entries())

    assert trie.get("的").pinyin == "de5"
    assert trie.get("钟").traditional == "鐘"
    assert "中國" in trie
    assert trie.get("龘") is None


def test_trie_empty():
    trie = HanziTrie([])

    assert len(trie) == 0
    assert trie.longest_match("中", 0) is None


def test_segment(dictionary):
    trie = HanziTrie(dictionary.entries())

    assert segment("中文abc", trie) == ["Zhong1 wen2 ", "abc "]
    assert segment("龘中", trie) == ["龘", "Zhong1 "]


# =============================================================================
# Hanzi to Pinyin
# =============================================================================

@pytest.mark.parametrize("text, expected", [
    ("", ""),
    ("  ", ""),
    ("我的大王！", "Wǒ de dà wáng!"),
    ("你好。", "Nǐ hǎo."),
    ("中文abc中国", "Zhōng wén abc zhōng guó"),
    ("你好  abc", "Nǐ hǎo abc"),
    ("你好龘", "Nǐ hǎo 龘"),
    ("美国人（中文）？", "Měi guó rén (zhōng wén)?"),
])
def test_hanzi_to_pinyin(dictionary, text, expected):
    assert pinyin_tones(dictionary.hanzi_to_pinyin(text)) == expected


def test_hanzi_to_pinyin_numbered(dictionary):
    assert dictionary.hanzi_to_pinyin("我的大王！") == "Wo3 de5 da4 wang2!"
    assert pinyin_plaintext(dictionary.hanzi_to_pinyin("你好")) == "Ni hao"


def test_hanzi_to_pinyin_leading_punctuation(dictionary):
    # capitalization applies to the first character even when it is punctuation
    assert pinyin_tones(dictionary.hanzi_to_pinyin("【你好】，我")) == "[nǐ hǎo], wǒ"


def test_hanzi_to_pinyin_prefers_longest(dictionary):
    assert dictionary.hanzi_to_pinyin("大王") == "Da4 wang2"
    assert dictionary.hanzi_to_pinyin("大") == "Da4"
