#!/usr/bin/env python3
"""
Unit tests for namespace_store.py
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from file_manager_mcp.errors import AlreadyExistsError, InvalidPathError
from file_manager_mcp.models.node import NodeKind
from file_manager_mcp.storage.namespace_store import NamespaceStore


class TestPathExists:
    """Tests for path_exists"""

    def test_root_is_a_directory(self, store: NamespaceStore):
        store.path_exists("/", NodeKind.DIRECTORY)
        store.path_exists((), NodeKind.DIRECTORY)
        with pytest.raises(InvalidPathError):
            store.path_exists("/", NodeKind.FILE)

    def test_kind_must_match(self, store: NamespaceStore):
        store.make_directory("/foo")
        store.create_file("/foo/bar")

        store.path_exists("/foo", NodeKind.DIRECTORY)
        store.path_exists(("foo", "bar"), NodeKind.FILE)
        with pytest.raises(InvalidPathError):
            store.path_exists("/foo", NodeKind.FILE)
        with pytest.raises(InvalidPathError):
            store.path_exists("/foo/bar", NodeKind.DIRECTORY)

    def test_missing_and_through_file(self, store: NamespaceStore):
        store.create_file("/foo")
        with pytest.raises(InvalidPathError):
            store.path_exists("/bix")
        with pytest.raises(InvalidPathError):
            store.path_exists("/foo/bar", NodeKind.FILE)

    def test_rejects_non_normalized_paths(self, store: NamespaceStore):
        with pytest.raises(InvalidPathError):
            store.path_exists("foo")
        with pytest.raises(InvalidPathError):
            store.path_exists("/foo/../bar")
        with pytest.raises(InvalidPathError):
            store.path_exists(("foo", "."))


class TestMakeDirectory:
    """Tests for make_directory"""

    def test_creates_intermediate_directories(self, store: NamespaceStore):
        store.make_directory("/usr/local/bin")

        assert store.list_directory("/") == ["usr"]
        assert store.list_directory("/usr") == ["local"]
        assert store.list_directory("/usr/local") == ["bin"]
        assert store.list_directory("/usr/local/bin") == []

    def test_existing_terminal(self, store: NamespaceStore):
        store.make_directory("/usr/local/bin")
        with pytest.raises(AlreadyExistsError):
            store.make_directory("/usr/local")

    def test_existing_file_terminal(self, store: NamespaceStore):
        store.create_file("/etc/passwd")
        with pytest.raises(AlreadyExistsError):
            store.make_directory("/etc/passwd")

    def test_file_as_intermediate(self, store: NamespaceStore):
        store.create_file("/etc/passwd")
        with pytest.raises(InvalidPathError):
            store.make_directory("/etc/passwd/nested")
        assert store.list_directory("/etc") == ["passwd"]

    def test_root(self, store: NamespaceStore):
        with pytest.raises(InvalidPathError):
            store.make_directory("/")
        with pytest.raises(InvalidPathError):
            store.make_directory(())


class TestListDirectory:
    """Tests for list_directory"""

    def test_sorted_names_of_both_kinds(self, store: NamespaceStore):
        store.make_directory("/b")
        store.create_file("/a")
        store.make_directory("/c/d")
        assert store.list_directory("/") == ["a", "b", "c"]

    def test_not_a_directory(self, store: NamespaceStore):
        store.create_file("/a")
        with pytest.raises(InvalidPathError):
            store.list_directory("/a")
        with pytest.raises(InvalidPathError):
            store.list_directory("/missing")


class TestDeleteDirectory:
    """Tests for delete_directory"""

    def test_removes_subtree(self, store: NamespaceStore):
        store.make_directory("/a/b/c")
        store.create_file("/a/b/file")
        store.make_directory("/a/other")

        store.delete_directory("/a/b")

        assert store.list_directory("/a") == ["other"]
        with pytest.raises(InvalidPathError):
            store.read_file("/a/b/file")

    def test_root_is_protected(self, store: NamespaceStore):
        with pytest.raises(InvalidPathError):
            store.delete_directory("/")
        store.path_exists("/", NodeKind.DIRECTORY)

    def test_missing_or_file(self, store: NamespaceStore):
        store.create_file("/a")
        with pytest.raises(InvalidPathError):
            store.delete_directory("/a")
        with pytest.raises(InvalidPathError):
            store.delete_directory("/b")
        with pytest.raises(InvalidPathError):
            store.delete_directory("/b/c")
        assert store.list_directory("/") == ["a"]


class TestFiles:
    """Tests for create_file, write_file and read_file"""

    def test_create_write_read(self, store: NamespaceStore):
        store.create_file("/etc/passwd")
        store.write_file("/etc/passwd", "root")
        assert store.read_file("/etc/passwd") == b"root"

    def test_new_file_is_empty(self, store: NamespaceStore):
        store.create_file("/empty")
        assert store.read_file("/empty") == b""

    def test_write_appends(self, store: NamespaceStore):
        store.create_file("/log")
        store.write_file("/log", "a")
        store.write_file("/log", b"b")
        store.write_file("/log", "c")
        assert store.read_file("/log") == b"abc"

    def test_write_rejects_non_text_contents(self, store: NamespaceStore):
        store.create_file("/blob")
        store.write_file("/blob", bytearray(b"ok"))
        with pytest.raises(TypeError):
            store.write_file("/blob", 3)
        with pytest.raises(TypeError):
            store.write_file("/blob", None)
        assert store.read_file("/blob") == b"ok"

    def test_create_existing(self, store: NamespaceStore):
        store.make_directory("/dir")
        store.create_file("/file")
        with pytest.raises(AlreadyExistsError):
            store.create_file("/dir")
        with pytest.raises(AlreadyExistsError):
            store.create_file("/file")

    def test_create_invalid(self, store: NamespaceStore):
        store.create_file("/file")
        with pytest.raises(InvalidPathError):
            store.create_file("/")
        with pytest.raises(InvalidPathError):
            store.create_file("/file/child")

    def test_write_and_read_require_a_file(self, store: NamespaceStore):
        store.make_directory("/dir")
        with pytest.raises(InvalidPathError):
            store.write_file("/dir", "x")
        with pytest.raises(InvalidPathError):
            store.write_file("/missing", "x")
        with pytest.raises(InvalidPathError):
            store.read_file("/dir")
        with pytest.raises(InvalidPathError):
            store.read_file("/missing")


class TestMove:
    """Tests for move"""

    def test_moves_subtree_with_contents(self, store: NamespaceStore):
        store.make_directory("/src/pkg")
        store.create_file("/src/pkg/module")
        store.write_file("/src/pkg/module", "print()")

        store.move("/src", "/dst/nested/src")

        assert store.list_directory("/") == ["dst"]
        assert store.list_directory("/dst/nested/src") == ["pkg"]
        assert store.read_file("/dst/nested/src/pkg/module") == b"print()"

    def test_rename_file(self, store: NamespaceStore):
        store.create_file("/a")
        store.write_file("/a", "data")
        store.move("/a", "/b")
        assert store.list_directory("/") == ["b"]
        assert store.read_file("/b") == b"data"

    def test_existing_destination_leaves_tree_unchanged(self, store: NamespaceStore):
        store.create_file("/from")
        store.write_file("/from", "one")
        store.make_directory("/to/inner")

        with pytest.raises(InvalidPathError):
            store.move("/from", "/to")

        assert store.read_file("/from") == b"one"
        assert store.list_directory("/to") == ["inner"]

    def test_missing_source(self, store: NamespaceStore):
        with pytest.raises(InvalidPathError):
            store.move("/missing", "/new/place")
        assert store.list_directory("/") == []

    def test_destination_through_file(self, store: NamespaceStore):
        store.make_directory("/a")
        store.create_file("/file")
        with pytest.raises(InvalidPathError):
            store.move("/a", "/file/a")
        assert store.list_directory("/") == ["a", "file"]

    def test_into_own_descendant(self, store: NamespaceStore):
        store.make_directory("/a/b")
        with pytest.raises(InvalidPathError):
            store.move("/a", "/a/b/c")
        with pytest.raises(InvalidPathError):
            store.move("/a", "/a")
        assert store.list_directory("/a") == ["b"]

    def test_root_cannot_move(self, store: NamespaceStore):
        store.make_directory("/a")
        with pytest.raises(InvalidPathError):
            store.move("/", "/b")
        with pytest.raises(InvalidPathError):
            store.move("/a", "/")


class TestReset:
    """Tests for reset"""

    def test_reset_empties_tree(self, store: NamespaceStore):
        store.make_directory("/a/b")
        store.create_file("/c")
        store.reset()
        assert store.list_directory("/") == []


class TestConcurrency:
    """Serialized access from many threads"""

    def test_concurrent_creates_of_one_name(self, store: NamespaceStore):
        def create(_):
            try:
                store.make_directory("/shared/dir")
                return True
            except AlreadyExistsError:
                return False

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(create, range(32)))

        assert results.count(True) == 1
        assert store.list_directory("/shared") == ["dir"]

    def test_concurrent_appends(self, store: NamespaceStore):
        store.create_file("/counter")

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(lambda _: store.write_file("/counter", "x"), range(200)))

        assert store.read_file("/counter") == b"x" * 200
