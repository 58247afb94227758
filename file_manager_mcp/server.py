"""
MCP server definition for the File Manager MCP.
"""

import logging
from typing import Any, Optional

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware

from mcp.server.fastmcp import Context, FastMCP

from file_manager_mcp.prompts import get_prompts
from file_manager_mcp.tools.base import ToolExecResult
from file_manager_mcp.utils.config import ServiceConfig
from file_manager_mcp.utils.dependencies import (
    get_base_config,
    get_file_manager_tool_provider,
    get_namespace_store,
    get_session_tool_provider,
)


# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "file-manager-mcp",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )


def to_response(result: ToolExecResult) -> dict[str, Any]:
    """Converts a tool result into the dictionary returned to MCP clients."""
    if result.error:
        return {"status": "error", "error": result.error, "exit_code": result.error_code}
    return {"status": "success", "result": result.output, "exit_code": result.error_code}


# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Prompt Handlers ---
@mcp_app.prompt(title="Agent System Prompt for the File Manager")
def get_system_prompt() -> str:
    """Provides the main system prompt for the agent."""
    prompts = get_prompts()
    return prompts["agent-system-prompt"]


# --- Tool Definitions ---

@mcp_app.tool()
async def open_session(context: Context) -> dict[str, Any]:
    """
    Opens a new file manager session with its working directory at `/`.

    Returns:
        A dictionary whose `result` is the new session id.
    """
    logger.info("Opening a new session")
    try:
        result = await get_session_tool_provider().execute({"command": "open"})
        return to_response(result)
    except Exception as e:
        logger.error(f"Error opening session: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


@mcp_app.tool()
async def close_session(context: Context, session_id: str) -> dict[str, Any]:
    """
    Closes a file manager session.

    Args:
        session_id: The id returned by `open_session`.

    Returns:
        A dictionary containing the result of the operation.
    """
    logger.info(f"Closing session {session_id}")
    try:
        result = await get_session_tool_provider().execute(
            {"command": "close", "session_id": session_id}
        )
        return to_response(result)
    except Exception as e:
        logger.error(f"Error closing session: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


@mcp_app.tool(name="file_manager")
async def file_manager_tool(
    context: Context,
    session_id: str,
    subcommand: str,
    path: Optional[str] = None,
    destination: Optional[str] = None,
    contents: Optional[str] = None,
) -> dict[str, Any]:
    """
    Navigates and edits the shared in-memory file system on behalf of a session.

    Args:
        session_id: The id returned by `open_session`.
        subcommand: One of 'pwd', 'cd', 'ls', 'mkdir', 'rmdir', 'touch', 'write', 'read', 'mv'.
        path: Absolute or working-directory-relative path. The source for 'mv'.
        destination: The destination for 'mv'.
        contents: The text appended to the file by 'write'.

    Returns:
        A dictionary containing the result of the operation.
    """
    logger.info(f"Executing file_manager '{subcommand}' for session {session_id} on path '{path}'")
    try:
        tool = get_file_manager_tool_provider()
        args = {
            "_session_id": session_id,
            "subcommand": subcommand,
            "path": path,
            "destination": destination,
            "contents": contents,
        }
        # Filter out None values so that tool defaults apply
        args = {k: v for k, v in args.items() if v is not None}

        result = await tool.execute(args)
        return to_response(result)

    except Exception as e:
        logger.error(f"Error executing file_manager command: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}


# --- Reset Tool (Feature Flagged) ---
def register_reset_tool(app: FastMCP) -> None:
    """Registers the `reset_namespace` tool, which wipes the shared namespace."""
    logger.info("Reset feature is enabled. Registering 'reset_namespace' tool.")

    @app.tool(name="reset_namespace")
    async def reset_namespace(context: Context) -> dict[str, Any]:
        """
        Wipes the whole file system back to an empty root. Sessions stay open.

        Returns:
            A dictionary with a confirmation message.
        """
        logger.warning("Resetting the namespace.")
        get_namespace_store().reset()
        return {"status": "success", "result": "Namespace reset.", "exit_code": 0}


if server_config.FEATURE_RESET_ENABLED:
    register_reset_tool(mcp_app)
