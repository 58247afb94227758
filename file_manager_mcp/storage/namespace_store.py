"""In-memory namespace of directories and files."""

import logging
from collections.abc import Sequence
from threading import Lock

from file_manager_mcp.errors import AlreadyExistsError, InvalidPathError
from file_manager_mcp.models.node import Directory, File, Node, NodeKind
from file_manager_mcp.utils.path_utils import (
    AbsolutePath,
    format_path,
    is_ancestor_or_self,
    split_absolute_path,
)

logger = logging.getLogger(__name__)

PathArg = str | Sequence[str]


class NamespaceStore:
    """
    Owns the single tree of the namespace.

    Every public method runs under one lock, so each operation is atomic with
    respect to all others. Mutations validate all their preconditions before
    touching the tree; a raised error always leaves the tree as it was.

    Paths are absolute and normalized, given either as "/a/b" or as a segment
    sequence such as ("a", "b"). The empty sequence (or "/") is the root.
    """

    _root: Directory
    _lock: Lock

    def __init__(self) -> None:
        self._root = Directory()
        self._lock = Lock()

    # -- queries --

    def path_exists(self, path: PathArg, kind: NodeKind = NodeKind.DIRECTORY) -> None:
        """
        Checks that ``path`` exists and is of the given kind.

        Raises:
            InvalidPathError: If any segment is missing or the kind differs.
        """
        segments = split_absolute_path(path)
        kind = NodeKind(kind)
        with self._lock:
            node = self._lookup(segments)
            if node is None or node.kind != kind:
                raise InvalidPathError(f"No {kind.value} at '{format_path(segments)}'.")

    def list_directory(self, path: PathArg) -> list[str]:
        """Returns the sorted names of the immediate children of a directory."""
        segments = split_absolute_path(path)
        with self._lock:
            directory = self._get_directory(segments)
            return sorted(directory.children)

    def read_file(self, path: PathArg) -> bytes:
        """Returns the full accumulated contents of a file."""
        segments = split_absolute_path(path)
        with self._lock:
            return self._get_file(segments).contents

    # -- mutations --

    def make_directory(self, path: PathArg) -> None:
        """
        Creates a directory, along with any missing intermediate directories.

        Raises:
            AlreadyExistsError: If the terminal path already exists.
            InvalidPathError: If the path is the root or an intermediate is a file.
        """
        segments = split_absolute_path(path)
        with self._lock:
            parent, missing = self._plan_create(segments)
            self._attach(parent, missing, Directory())
        logger.debug(f"Created directory {format_path(segments)}")

    def create_file(self, path: PathArg) -> None:
        """Creates an empty file, along with any missing intermediate directories."""
        segments = split_absolute_path(path)
        with self._lock:
            parent, missing = self._plan_create(segments)
            self._attach(parent, missing, File())
        logger.debug(f"Created file {format_path(segments)}")

    def delete_directory(self, path: PathArg) -> None:
        """
        Removes the directory at ``path`` together with its whole subtree.

        Raises:
            InvalidPathError: If the path is the root, is missing, or is a file.
        """
        segments = split_absolute_path(path)
        if not segments:
            raise InvalidPathError("The root directory cannot be deleted.")
        with self._lock:
            parent = self._get_directory(segments[:-1])
            if not isinstance(parent.children.get(segments[-1]), Directory):
                raise InvalidPathError(f"No directory at '{format_path(segments)}'.")
            del parent.children[segments[-1]]
        logger.debug(f"Deleted directory {format_path(segments)}")

    def write_file(self, path: PathArg, contents: bytes | str) -> None:
        """Appends ``contents`` to an existing file. Strings are stored as UTF-8."""
        segments = split_absolute_path(path)
        if isinstance(contents, str):
            data = contents.encode("utf-8")
        elif isinstance(contents, (bytes, bytearray)):
            data = bytes(contents)
        else:
            raise TypeError(f"File contents must be str or bytes, not {type(contents).__name__}.")
        with self._lock:
            file = self._get_file(segments)
            file.contents += data
        logger.debug(f"Appended {len(data)} bytes to {format_path(segments)}")

    def move(self, source: PathArg, destination: PathArg) -> None:
        """
        Moves the node at ``source`` (with its subtree) to ``destination``.

        Intermediate directories of ``destination`` are created as needed. Both
        endpoints are validated before anything is detached.

        Raises:
            InvalidPathError: If ``source`` is missing or the root, if
                ``destination`` is the root, already exists, crosses a file,
                or lies inside ``source``.
        """
        source_segments = split_absolute_path(source)
        destination_segments = split_absolute_path(destination)
        if not source_segments or not destination_segments:
            raise InvalidPathError("The root directory cannot be moved.")
        if is_ancestor_or_self(source_segments, destination_segments):
            raise InvalidPathError(
                f"Cannot move '{format_path(source_segments)}' into itself "
                f"('{format_path(destination_segments)}')."
            )

        with self._lock:
            source_parent = self._get_directory(source_segments[:-1])
            if source_segments[-1] not in source_parent.children:
                raise InvalidPathError(f"Nothing to move at '{format_path(source_segments)}'.")
            try:
                destination_parent, missing = self._plan_create(destination_segments)
            except AlreadyExistsError as e:
                raise InvalidPathError(e.message) from None

            node = source_parent.children.pop(source_segments[-1])
            self._attach(destination_parent, missing, node)
        logger.debug(
            f"Moved {format_path(source_segments)} to {format_path(destination_segments)}"
        )

    def reset(self) -> None:
        """Replaces the whole tree with a fresh empty root."""
        with self._lock:
            self._root = Directory()
        logger.info("Namespace reset to an empty root.")

    # -- helpers; callers must hold the lock --

    def _lookup(self, segments: AbsolutePath) -> Node | None:
        node: Node = self._root
        for name in segments:
            if not isinstance(node, Directory):
                return None
            child = node.children.get(name)
            if child is None:
                return None
            node = child
        return node

    def _get_directory(self, segments: AbsolutePath) -> Directory:
        node = self._lookup(segments)
        if not isinstance(node, Directory):
            raise InvalidPathError(f"No directory at '{format_path(segments)}'.")
        return node

    def _get_file(self, segments: AbsolutePath) -> File:
        node = self._lookup(segments)
        if not isinstance(node, File):
            raise InvalidPathError(f"No file at '{format_path(segments)}'.")
        return node

    def _plan_create(self, segments: AbsolutePath) -> tuple[Directory, AbsolutePath]:
        """
        Finds where a new node at ``segments`` would be attached, without mutating.

        Returns the deepest existing directory on the path and the segments
        still to be created below it (the last one being the terminal segment).
        """
        if not segments:
            raise InvalidPathError("The root directory already exists and cannot be created.")

        directory = self._root
        for index, name in enumerate(segments[:-1]):
            child = directory.children.get(name)
            if child is None:
                return directory, segments[index:]
            if not isinstance(child, Directory):
                raise InvalidPathError(
                    f"'{format_path(segments[: index + 1])}' is a file, not a directory."
                )
            directory = child

        if segments[-1] in directory.children:
            raise AlreadyExistsError(f"'{format_path(segments)}' already exists.")
        return directory, segments[-1:]

    @staticmethod
    def _attach(parent: Directory, missing: AbsolutePath, node: Node) -> None:
        for name in missing[:-1]:
            child = Directory()
            parent.children[name] = child
            parent = child
        parent.children[missing[-1]] = node
