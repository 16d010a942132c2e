# tests/conftest.py
"""Shared fixtures: a small CC-CEDICT sample, no network."""

import pytest

from cedict_lite import dictionary as dictionary_module
from cedict_lite.dictionary import Dictionary

HEADER_LINES = [
    "# CC-CEDICT",
    "# Community maintained free Chinese-English dictionary.",
    "#",
    "# Published by MDBG",
    "#",
    "#! version=1",
    "#! subversion=0",
    "#! format=ts",
    "#! charset=UTF-8",
    "#! entries={entries}",
    "#! publisher=MDBG",
    "#! license=https://creativecommons.org/licenses/by-sa/4.0/",
    "#! date=2020-02-14T06:15:46Z",
    "#! time=1581660946",
]

ENTRY_LINES = [
    "中 中 [Zhong1] /China/Chinese/surname Zhong/",
    "中國 中国 [Zhong1 guo2] /China/",
    "中心 中心 [zhong1 xin1] /center/heart/core/",
    "中文 中文 [Zhong1 wen2] /Chinese language/",
    "人 人 [ren2] /person/people/CL:個|个[ge4],位[wei4]/",
    "大 大 [da4] /big/large/great/",
    "大王 大王 [da4 wang2] /king/magnate/",
    "好 好 [hao3] /good/",
    "平 平 [ping2] /flat/level/",
    "我 我 [wo3] /I/me/my/",
    "王 王 [Wang2] /surname Wang/",
    "王 王 [wang2] /king or monarch/",
    "的 的 [de5] /of/~'s (possessive particle)/",
    "的 的 [di2] /really and truly/",
    "美國 美国 [Mei3 guo2] /United States/USA/",
    "美國人 美国人 [Mei3 guo2 ren2] /American/American person/American people/CL:個|个[ge4]/",
    "重 重 [chong2] /to repeat/again/",
    "重 重 [zhong4] /heavy/serious/",
    "鐘 钟 [zhong1] /clock/",
    "你 你 [ni3] /you (informal)/",
    "你好 你好 [ni3 hao3] /hello/hi/",
]


def build_sample(entry_lines=ENTRY_LINES, line_ending="\r\n") -> str:
    header = [line.format(entries=len(entry_lines)) for line in HEADER_LINES]
    return line_ending.join(header + list(entry_lines))


SAMPLE_TEXT = build_sample()


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def dictionary():
    return Dictionary.parse(SAMPLE_TEXT)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "cedict_sample.txt"
    path.write_bytes(SAMPLE_TEXT.encode("utf-8"))
    return path


@pytest.fixture
def fresh_singleton():
    dictionary_module._reset_singleton()
    yield
    dictionary_module._reset_singleton()
