from __future__ import annotations

import logging
from pathlib import Path

import pytest

from albumcheck.adapters.ignore_list import load_ignored_urls, parse_ignore_list


def test_parse_ignore_list_trims_and_skips_blank_lines() -> None:
    text = "https://last.fm/a\n\n   https://last.fm/b  \r\n\t\nhttps://last.fm/a\n"

    assert parse_ignore_list(text) == frozenset({"https://last.fm/a", "https://last.fm/b"})


def test_load_ignored_urls_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "ignore.txt"
    path.write_text("https://last.fm/a\nhttps://last.fm/b\n", encoding="utf-8")

    assert load_ignored_urls(path) == frozenset({"https://last.fm/a", "https://last.fm/b"})


def test_load_ignored_urls_without_file_is_empty() -> None:
    assert load_ignored_urls(None) == frozenset()


def test_missing_ignore_file_degrades_to_empty_set(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.WARNING)

    result = load_ignored_urls(tmp_path / "absent.txt")

    assert result == frozenset()
    assert "Could not read ignore file" in caplog.text


def test_directory_as_ignore_file_degrades_to_empty_set(tmp_path: Path) -> None:
    assert load_ignored_urls(tmp_path) == frozenset()
