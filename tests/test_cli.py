# tests/test_cli.py
"""Tests for the command line interface."""

import json

import pytest

from cedict_lite.cli import main


def test_hanzi_input(sample_file, capsys):
    main(["--file", str(sample_file), "我的大王！"])

    assert capsys.readouterr().out == "Wǒ de dà wáng!\n"


def test_hanzi_tone_numbers(sample_file, capsys):
    main(["--file", str(sample_file), "--tone-numbers", "你好"])

    assert capsys.readouterr().out == "Ni3 hao3\n"


def test_hanzi_plain(sample_file, capsys):
    main(["--file", str(sample_file), "--plain", "你好"])

    assert capsys.readouterr().out == "Ni hao\n"


def test_english_input(sample_file, capsys):
    main(["--file", str(sample_file), "Chinese", "Language"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "中文 中文 [Zhong1 wen2] /Chinese language/"
    assert len(lines) == 2


def test_pinyin_json(sample_file, capsys):
    main(["--file", str(sample_file), "--pinyin", "--json", "mei guo ren"])

    data = json.loads(capsys.readouterr().out)
    assert len(data) == 1
    assert data[0]["traditional"] == "美國人"
    assert data[0]["pinyin_tones"] == "Měi guó rén"
    assert data[0]["meanings"][0] == "American"


def test_hanzi_lookup(sample_file, capsys):
    main(["--file", str(sample_file), "--hanzi", "王"])

    assert capsys.readouterr().out.splitlines() == [
        "王 王 [Wang2] /surname Wang/",
        "王 王 [wang2] /king or monarch/",
    ]


def test_info_and_save(sample_file, tmp_path, capsys):
    out = tmp_path / "copy.txt.gz"
    main(["--file", str(sample_file), "--info", "--save", str(out)])

    output = capsys.readouterr().out
    assert "publisher:  MDBG" in output
    assert "date:       2020-02-14T06:15:46Z" in output
    assert out.exists()


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--file", str(tmp_path / "missing.txt"), "中文"])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-v"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("cedict-lite ")


def test_verbose_flag(sample_file, capsys):
    main(["--file", str(sample_file), "--verbose", "你好"])

    assert capsys.readouterr().out == "Nǐ hǎo\n"
