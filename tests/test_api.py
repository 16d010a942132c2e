# tests/test_api.py
"""Tests for the package-level API."""

import asyncio
import threading

import pytest

import cedict_lite
from cedict_lite import sources
from cedict_lite.dictionary import Dictionary

from conftest import SAMPLE_TEXT


def test_lookup_hanzi(dictionary):
    assert cedict_lite.lookup("我的大王！", dictionary) == "Wǒ de dà wáng!"


def test_lookup_english(dictionary):
    lines = cedict_lite.lookup("king", dictionary)

    assert lines[0] == "大王 大王 [da4 wang2] /king/magnate/"


def test_lookup_english_not_found(dictionary):
    assert cedict_lite.lookup("xylophone", dictionary) == []


def test_parse_and_load(sample_file):
    assert cedict_lite.parse(SAMPLE_TEXT).metadata().publisher == "MDBG"
    assert len(cedict_lite.load(sample_file)) == 21


def test_session_context(sample_file):
    with cedict_lite.session_context(sample_file) as d:
        assert d.get_by_hanzi("你好").meanings == ("hello", "hi")


def test_lookup_async(dictionary):
    result = asyncio.run(cedict_lite.lookup_async("中文", dictionary=dictionary))

    assert result == "Zhōng wén"


def test_lookup_async_timeout():
    d = Dictionary()
    try:
        with pytest.raises(cedict_lite.LookupTimeoutError):
            asyncio.run(cedict_lite.lookup_async("中文", timeout=0.05, dictionary=d))
        with pytest.raises(cedict_lite.LookupTimeoutError):
            asyncio.run(cedict_lite.wait_async(timeout=0.05, dictionary=d))
    finally:
        # release the worker threads still waiting on d
        d.populate_in_background(lambda: SAMPLE_TEXT).join(timeout=5)
        cedict_lite.shutdown()

    assert asyncio.run(cedict_lite.wait_async(dictionary=d)) is d


def test_wait_async_timeout_frees_workers(dictionary):
    pending = Dictionary()
    try:
        for _ in range(6):
            with pytest.raises(cedict_lite.LookupTimeoutError):
                asyncio.run(cedict_lite.wait_async(timeout=0.05, dictionary=pending))

        result = asyncio.run(
            cedict_lite.lookup_async("你好", timeout=5, dictionary=dictionary)
        )
        assert result == "Nǐ hǎo"
    finally:
        cedict_lite.shutdown()


def test_executor_created_once():
    barrier = threading.Barrier(8)
    executors = []

    def worker():
        barrier.wait()
        executors.append(cedict_lite._get_executor())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    try:
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert len(executors) == 8
        assert all(e is executors[0] for e in executors)
    finally:
        cedict_lite.shutdown()


def test_wait_async_failure():
    d = Dictionary()
    d.populate_in_background(lambda: "#! entries=x").join(timeout=5)

    with pytest.raises(cedict_lite.DictionaryNotReadyError):
        asyncio.run(cedict_lite.wait_async(timeout=1, dictionary=d))


def test_warm_up(fresh_singleton, monkeypatch):
    monkeypatch.setattr(sources, "download", lambda url, timeout=None: SAMPLE_TEXT)

    total, timings = cedict_lite.warm_up(timeout=5)

    assert total >= 0
    assert "dictionary" in timings
    assert cedict_lite.new().ready
    assert cedict_lite.lookup("你好") == "Nǐ hǎo"
