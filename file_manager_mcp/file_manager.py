"""
Caller-facing file manager.

Every call resolves the caller's path against its session cursor and then
forwards the absolute path to the shared namespace store.
"""

import logging

from file_manager_mcp.errors import InvalidPathError
from file_manager_mcp.storage.namespace_store import NamespaceStore
from file_manager_mcp.utils.path_utils import (
    format_path,
    is_ancestor_or_self,
    resolve_path,
    split_absolute_path,
)
from file_manager_mcp.utils.session_manager import SessionManager

logger = logging.getLogger(__name__)


class FileManager:
    """Composes the namespace store and the session manager, per session."""

    def __init__(self, store: NamespaceStore, sessions: SessionManager) -> None:
        self._store = store
        self._sessions = sessions

    # -- sessions --

    def open_session(self) -> str:
        return self._sessions.open()

    def close_session(self, session_id: str) -> None:
        self._sessions.close(session_id)

    def current_working_directory(self, session_id: str) -> str:
        return self._sessions.current_working_directory(session_id)

    def change_directory(self, session_id: str, path: str) -> str:
        if not path:
            raise InvalidPathError("Path must not be empty.")
        return self._sessions.change_directory(session_id, path)

    # -- namespace --

    def list_directory(self, session_id: str, path: str = ".") -> list[str]:
        return self._store.list_directory(self._sessions.resolve(session_id, path))

    def make_directory(self, session_id: str, path: str) -> None:
        self._store.make_directory(self._sessions.resolve(session_id, path))

    def delete_directory(self, session_id: str, path: str) -> None:
        """
        Deletes a directory and its subtree.

        The caller may not delete its own working directory or any of its
        ancestors. Other sessions' cursors are not protected and go stale.
        """
        if not path:
            raise InvalidPathError("Path must not be empty.")
        # One read of the cursor; target and guard must see the same one.
        cwd = self._sessions.current_working_directory(session_id)
        target = resolve_path(cwd, path)
        if is_ancestor_or_self(target, split_absolute_path(cwd)):
            logger.warning(f"Session {session_id} tried to delete its own cursor or an ancestor of it")
            raise InvalidPathError(
                f"Cannot delete '{format_path(target)}': it contains the current "
                f"working directory '{cwd}'."
            )
        self._store.delete_directory(target)

    def create_file(self, session_id: str, path: str) -> None:
        self._store.create_file(self._sessions.resolve(session_id, path))

    def write_file(self, session_id: str, path: str, contents: bytes | str) -> None:
        self._store.write_file(self._sessions.resolve(session_id, path), contents)

    def read_file(self, session_id: str, path: str) -> bytes:
        return self._store.read_file(self._sessions.resolve(session_id, path))

    def move(self, session_id: str, source: str, destination: str) -> None:
        source_path = self._sessions.resolve(session_id, source)
        destination_path = self._sessions.resolve(session_id, destination)
        self._store.move(source_path, destination_path)
