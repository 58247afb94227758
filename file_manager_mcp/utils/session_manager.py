import logging
from threading import Lock

from file_manager_mcp.errors import InvalidPathError, InvalidSessionError
from file_manager_mcp.models.node import NodeKind
from file_manager_mcp.models.session import Session
from file_manager_mcp.storage.namespace_store import NamespaceStore
from file_manager_mcp.utils.path_utils import AbsolutePath, format_path, resolve_path

logger = logging.getLogger(__name__)


class SessionManager:
    """
    Manages the cursors of all caller sessions into one shared namespace.

    The session table has its own lock, independent of the store's. Only
    ``change_directory`` calls into the store, once, while holding it.
    """

    _storage: dict[str, Session]
    _lock: Lock

    def __init__(self, store: NamespaceStore) -> None:
        self._store = store
        # Sessions live only in this process and never expire on their own.
        self._storage = {}
        self._lock = Lock()

    def open(self) -> str:
        """Creates a session positioned at the root and returns its id."""
        session = Session()
        with self._lock:
            self._storage[session.id] = session
        logger.info(f"Opened session {session.id}")
        return session.id

    def close(self, session_id: str) -> None:
        with self._lock:
            if self._storage.pop(session_id, None) is None:
                raise InvalidSessionError(f"Unknown session '{session_id}'.")
        logger.info(f"Closed session {session_id}")

    def current_working_directory(self, session_id: str) -> str:
        with self._lock:
            return self._get_session(session_id).current_working_directory

    def resolve(self, session_id: str, path_str: str) -> AbsolutePath:
        """Resolves a caller path against the session's cursor."""
        if not path_str:
            raise InvalidPathError("Path must not be empty.")
        cwd = self.current_working_directory(session_id)
        return resolve_path(cwd, path_str)

    def change_directory(self, session_id: str, path_str: str) -> str:
        """
        Moves the session's cursor to an existing directory.

        Args:
            session_id: The session whose cursor changes.
            path_str: An absolute path, or one relative to the current cursor.

        Returns:
            The new absolute cursor.

        Raises:
            InvalidSessionError: If the session is unknown.
            InvalidPathError: If the target is not an existing directory. The
                cursor is left unchanged.
        """
        with self._lock:
            session = self._get_session(session_id)
            segments = resolve_path(session.current_working_directory, path_str)
            self._store.path_exists(segments, NodeKind.DIRECTORY)
            session.current_working_directory = format_path(segments)
            logger.debug(f"Session {session_id} moved to {session.current_working_directory}")
            return session.current_working_directory

    def session_ids(self) -> list[str]:
        with self._lock:
            return list(self._storage)

    def _get_session(self, session_id: str) -> Session:
        session = self._storage.get(session_id)
        if session is None:
            raise InvalidSessionError(f"Unknown session '{session_id}'.")
        return session
