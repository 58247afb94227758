import logging
from typing_extensions import override

from file_manager_mcp.errors import FileManagerError
from file_manager_mcp.file_manager import FileManager

from .base import Tool, ToolCallArguments, ToolExecResult, ToolParameter

logger = logging.getLogger(__name__)

SessionToolCommands = ["open", "close"]


class SessionTool(Tool):
    """Tool for opening and closing file manager sessions."""

    def __init__(self, file_manager: FileManager) -> None:
        self._file_manager = file_manager

    @override
    def get_name(self) -> str:
        return "session"

    @override
    def get_description(self) -> str:
        return """Opens and closes file manager sessions.
* `open` returns a new session id whose working directory is `/`.
* `close` forgets the session; its id can no longer be used."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="command",
                type="string",
                description=f"The command to run. Allowed options are: {', '.join(SessionToolCommands)}.",
                required=True,
                enum=SessionToolCommands,
            ),
            ToolParameter(
                name="session_id",
                type="string",
                description="Required parameter of `close`.",
            ),
        ]

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        command = arguments.get("command")
        try:
            match command:
                case "open":
                    return ToolExecResult(output=self._file_manager.open_session())
                case "close":
                    session_id = arguments.get("session_id")
                    if not isinstance(session_id, str):
                        return ToolExecResult(error="Parameter `session_id` is required for close.", error_code=-1)
                    self._file_manager.close_session(session_id)
                    return ToolExecResult(output=f"Session {session_id} closed.")
                case _:
                    return ToolExecResult(error=f"Unknown command: {command}", error_code=-1)
        except FileManagerError as e:
            logger.warning(f"Session command {command} failed: {e}")
            return ToolExecResult.from_error(e)
