import logging
from typing_extensions import override

from file_manager_mcp.errors import FileManagerError
from file_manager_mcp.file_manager import FileManager

from .base import Tool, ToolCallArguments, ToolError, ToolExecResult, ToolParameter

logger = logging.getLogger(__name__)

FileManagerToolSubCommands = ["pwd", "cd", "ls", "mkdir", "rmdir", "touch", "write", "read", "mv"]


class FileManagerTool(Tool):
    """
    Tool for navigating and editing the shared in-memory namespace.
    Every call acts on behalf of one session, whose working directory is used
    to resolve relative paths.
    """

    def __init__(self, file_manager: FileManager) -> None:
        self._file_manager = file_manager

    @override
    def get_name(self) -> str:
        return "file_manager"

    @override
    def get_description(self) -> str:
        return """A tool for working with a shared in-memory file system.
* Call `open_session` first and pass its id as `session_id`; each session keeps its own working directory.
* Paths may be absolute (`/a/b`) or relative to the working directory (`b`, `../c`).
* `mkdir` and `touch` create missing parent directories.
* `write` appends to a file, it never overwrites.
* `mv` never replaces an existing destination.
* You cannot `rmdir` your own working directory or any of its parents."""

    @override
    def get_parameters(self) -> list[ToolParameter]:
        return [
            ToolParameter(
                name="subcommand",
                type="string",
                description=f"The command to run. Allowed options are: {', '.join(FileManagerToolSubCommands)}.",
                required=True,
                enum=FileManagerToolSubCommands,
            ),
            ToolParameter(
                name="path",
                type="string",
                description="Relative or absolute path for the command. `ls` defaults to the working directory. For `mv` this is the source.",
                required=False,
            ),
            ToolParameter(
                name="destination",
                type="string",
                description="Required parameter of `mv`: where to move `path` to.",
                required=False,
            ),
            ToolParameter(
                name="contents",
                type="string",
                description="Required parameter of `write`: the text appended to the file.",
                required=False,
            ),
        ]

    @override
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        session_id = arguments.get("_session_id")
        if not isinstance(session_id, str):
            return ToolExecResult(error="Session id not found in arguments.", error_code=-1)

        subcommand = arguments.get("subcommand")
        if not isinstance(subcommand, str):
            return ToolExecResult(error="Subcommand must be a string.", error_code=-1)

        try:
            match subcommand:
                case "pwd":
                    return ToolExecResult(output=self._file_manager.current_working_directory(session_id))
                case "cd":
                    return self._cd_handler(session_id, arguments)
                case "ls":
                    return self._ls_handler(session_id, arguments)
                case "mkdir":
                    self._file_manager.make_directory(session_id, self._require_path(arguments))
                    return ToolExecResult(output=f"Directory created: {arguments['path']}")
                case "rmdir":
                    self._file_manager.delete_directory(session_id, self._require_path(arguments))
                    return ToolExecResult(output=f"Directory deleted: {arguments['path']}")
                case "touch":
                    self._file_manager.create_file(session_id, self._require_path(arguments))
                    return ToolExecResult(output=f"File created: {arguments['path']}")
                case "write":
                    return self._write_handler(session_id, arguments)
                case "read":
                    return self._read_handler(session_id, arguments)
                case "mv":
                    return self._mv_handler(session_id, arguments)
                case _:
                    return ToolExecResult(error=f"Unknown subcommand: {subcommand}", error_code=-1)
        except FileManagerError as e:
            logger.warning(f"{subcommand} failed for session {session_id}: {e}")
            return ToolExecResult.from_error(e)
        except ToolError as e:
            return ToolExecResult(error=e.message, error_code=-1)

    def _require_path(self, args: ToolCallArguments, name: str = "path") -> str:
        value = args.get(name)
        if not isinstance(value, str):
            raise ToolError(f"Parameter `{name}` is required and must be a string.")
        return value

    def _cd_handler(self, session_id: str, args: ToolCallArguments) -> ToolExecResult:
        cwd = self._file_manager.change_directory(session_id, self._require_path(args))
        return ToolExecResult(output=f"CWD is now {cwd}")

    def _ls_handler(self, session_id: str, args: ToolCallArguments) -> ToolExecResult:
        path = args.get("path", ".")
        if not isinstance(path, str):
            raise ToolError("Path must be a string.")
        return ToolExecResult(output="\n".join(self._file_manager.list_directory(session_id, path)))

    def _write_handler(self, session_id: str, args: ToolCallArguments) -> ToolExecResult:
        path = self._require_path(args)
        contents = self._require_path(args, "contents")
        self._file_manager.write_file(session_id, path, contents)
        return ToolExecResult(output=f"Appended {len(contents)} characters to {path}")

    def _read_handler(self, session_id: str, args: ToolCallArguments) -> ToolExecResult:
        contents = self._file_manager.read_file(session_id, self._require_path(args))
        return ToolExecResult(output=contents.decode("utf-8", errors="replace"))

    def _mv_handler(self, session_id: str, args: ToolCallArguments) -> ToolExecResult:
        source = self._require_path(args)
        destination = self._require_path(args, "destination")
        self._file_manager.move(session_id, source, destination)
        return ToolExecResult(output=f"Moved {source} to {destination}")
