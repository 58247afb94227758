"""A shared in-memory file system with per-session working directories."""

from file_manager_mcp.errors import (
    AlreadyExistsError,
    ErrorKind,
    FileManagerError,
    InvalidPathError,
    InvalidSessionError,
)
from file_manager_mcp.file_manager import FileManager
from file_manager_mcp.models.node import NodeKind
from file_manager_mcp.storage.namespace_store import NamespaceStore
from file_manager_mcp.utils.session_manager import SessionManager

__all__ = [
    "AlreadyExistsError",
    "ErrorKind",
    "FileManager",
    "FileManagerError",
    "InvalidPathError",
    "InvalidSessionError",
    "NamespaceStore",
    "NodeKind",
    "SessionManager",
]
