"""Shared fixtures: a fresh namespace and session table for every test."""

import pytest

from file_manager_mcp.file_manager import FileManager
from file_manager_mcp.storage.namespace_store import NamespaceStore
from file_manager_mcp.utils.session_manager import SessionManager


@pytest.fixture
def store() -> NamespaceStore:
    return NamespaceStore()


@pytest.fixture
def session_manager(store: NamespaceStore) -> SessionManager:
    return SessionManager(store)


@pytest.fixture
def file_manager(store: NamespaceStore, session_manager: SessionManager) -> FileManager:
    return FileManager(store, session_manager)


@pytest.fixture
def session(file_manager: FileManager) -> str:
    return file_manager.open_session()
