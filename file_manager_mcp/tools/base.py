"""Base classes shared by all tools exposed by the server."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from file_manager_mcp.errors import ErrorKind, FileManagerError

ToolCallArguments = dict[str, Any]

# Exit codes reported for each error kind; anything else is -1.
ERROR_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_PATH: 2,
    ErrorKind.ALREADY_EXISTS: 3,
    ErrorKind.INVALID_SESSION: 4,
}


class ToolError(Exception):
    """Raised by a tool when its arguments cannot be acted upon."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass
class ToolExecResult:
    """Result of a tool execution: output on success, error and code otherwise."""

    output: str | None = None
    error: str | None = None
    error_code: int = 0

    @classmethod
    def from_error(cls, error: FileManagerError) -> "ToolExecResult":
        return cls(error=f"{error.kind.value}: {error.message}", error_code=ERROR_CODES[error.kind])


@dataclass
class ToolParameter:
    name: str
    type: str | list[str]
    description: str
    enum: list[str] | None = None
    items: dict[str, Any] | None = None
    required: bool = False


class Tool(ABC):
    """Base class for all tools."""

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_parameters(self) -> list[ToolParameter]:
        pass

    @abstractmethod
    async def execute(self, arguments: ToolCallArguments) -> ToolExecResult:
        pass

