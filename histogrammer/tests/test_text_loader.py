#!/usr/bin/env python3
"""Tests for text_loader module."""

import pytest

from histogrammer.core.text_loader import load_text


def test_reads_whole_file_as_bytes(text_file):
    path = text_file("Hello,\nWorld!\n")
    assert load_text(path) == b"Hello,\nWorld!\n"


def test_reads_non_utf8_bytes(text_file):
    path = text_file(b"ab\xff\xfe")
    assert load_text(path) == b"ab\xff\xfe"


def test_empty_file(text_file):
    assert load_text(text_file("")) == b""


def test_missing_file(tmp_path):
    path = str(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError) as excinfo:
        load_text(path)
    assert str(excinfo.value) == f'File "{path}" not found'


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_text(str(tmp_path))
