"""
Configuration and dependency management for the File Manager MCP server.
"""

import logging
from functools import lru_cache

from file_manager_mcp.file_manager import FileManager
from file_manager_mcp.storage.namespace_store import NamespaceStore
from file_manager_mcp.tools.file_manager_tool import FileManagerTool
from file_manager_mcp.tools.session_tool import SessionTool
from file_manager_mcp.utils.config import ServiceConfig
from file_manager_mcp.utils.session_manager import SessionManager

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


# --- Core Providers ---
# One namespace is shared by every session of the process.


@lru_cache
def get_namespace_store() -> NamespaceStore:
    """Returns the singleton NamespaceStore."""
    logger.info("Initializing NamespaceStore singleton.")
    return NamespaceStore()


@lru_cache
def get_session_manager() -> SessionManager:
    """Returns the singleton SessionManager, bound to the shared store."""
    logger.info("Initializing SessionManager singleton.")
    return SessionManager(get_namespace_store())


@lru_cache
def get_file_manager() -> FileManager:
    """Returns the singleton FileManager facade."""
    return FileManager(get_namespace_store(), get_session_manager())


# --- Tool Providers ---


@lru_cache
def get_session_tool_provider() -> SessionTool:
    """Returns a cached instance of the SessionTool."""
    logger.info("Initializing SessionTool singleton.")
    return SessionTool(get_file_manager())


@lru_cache
def get_file_manager_tool_provider() -> FileManagerTool:
    """Returns a cached instance of the FileManagerTool."""
    logger.info("Initializing FileManagerTool singleton.")
    return FileManagerTool(get_file_manager())
