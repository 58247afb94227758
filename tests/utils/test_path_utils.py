#!/usr/bin/env python3
"""
Unit tests for path_utils.py
"""

import pytest

from file_manager_mcp.errors import InvalidPathError
from file_manager_mcp.utils.path_utils import (
    format_path,
    is_ancestor_or_self,
    resolve_path,
    split_absolute_path,
)


class TestResolvePath:
    """Tests for resolve_path"""

    @pytest.mark.parametrize(
        "cwd, path, expected",
        [
            ("/", "/", ()),
            ("/a/b", "/x/y", ("x", "y")),
            ("/a/b", "..", ("a",)),
            ("/a/b", "../..", ()),
            ("/", "..", ()),
            ("/", "../..", ()),
            ("/a", "./b/./c/", ("a", "b", "c")),
            ("/a", "b/../c", ("a", "c")),
            ("/a", ".", ("a",)),
            ("/a", "/x/../y", ("y",)),
            ("/a", "b//c", ("a", "b", "c")),
        ],
    )
    def test_resolution(self, cwd, path, expected):
        assert resolve_path(cwd, path) == expected

    def test_empty_path(self):
        with pytest.raises(InvalidPathError):
            resolve_path("/a", "")


class TestSplitAbsolutePath:
    """Tests for split_absolute_path"""

    def test_strings(self):
        assert split_absolute_path("/") == ()
        assert split_absolute_path("/a/b") == ("a", "b")
        assert split_absolute_path("/a/b/") == ("a", "b")

    def test_sequences(self):
        assert split_absolute_path([]) == ()
        assert split_absolute_path(["a", "b"]) == ("a", "b")

    @pytest.mark.parametrize("path", ["a/b", "", "/a/./b", "/a/..", ("a", ".."), ("a/b",), ("",)])
    def test_rejects(self, path):
        with pytest.raises(InvalidPathError):
            split_absolute_path(path)


def test_format_path():
    assert format_path(()) == "/"
    assert format_path(("usr", "local")) == "/usr/local"


def test_is_ancestor_or_self():
    assert is_ancestor_or_self((), ("a",))
    assert is_ancestor_or_self(("a",), ("a",))
    assert is_ancestor_or_self(("a",), ("a", "b"))
    assert not is_ancestor_or_self(("a", "b"), ("a",))
    assert not is_ancestor_or_self(("ab",), ("a", "b"))
    assert not is_ancestor_or_self(("a",), ("ab",))
