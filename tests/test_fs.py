"""Tests for directory listing helpers."""

import os

import pytest

from local_dev_lib.utils.fs import (
    FileData,
    StatType,
    flatten_and_remove_symlinks,
    get_file_info,
    read,
    walk,
)


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.txt").write_text("b")
    (tmp_path / "sub" / "deeper").mkdir()
    (tmp_path / "sub" / "deeper" / "c.txt").write_text("c")
    os.symlink(tmp_path / "a.txt", tmp_path / "link.txt")
    return tmp_path


def test_get_file_info(tree):
    assert get_file_info(tree, "a.txt").type == StatType.FILE
    assert get_file_info(tree, "sub").type == StatType.DIRECTORY
    assert get_file_info(tree, "link.txt").type == StatType.SYMBOLIC_LINK


def test_flatten_and_remove_symlinks():
    files = flatten_and_remove_symlinks(
        [
            FileData("x/a", StatType.FILE),
            FileData("x/link", StatType.SYMBOLIC_LINK),
            FileData("x/dir", StatType.DIRECTORY, files=["x/dir/b", "x/dir/c"]),
        ]
    )
    assert files == ["x/a", "x/dir/b", "x/dir/c"]


def test_read_lists_top_level_files(tree):
    assert read(tree) == [str(tree / "a.txt")]


def test_walk_recurses(tree):
    assert walk(tree) == [
        str(tree / "a.txt"),
        str(tree / "sub" / "b.txt"),
        str(tree / "sub" / "deeper" / "c.txt"),
    ]


def test_missing_directory(tmp_path):
    assert read(tmp_path / "missing") == []
    assert walk(tmp_path / "missing") == []
