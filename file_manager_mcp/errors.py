"""Error taxonomy shared by the namespace store, the session manager and the facade."""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_PATH = "invalid_path"
    ALREADY_EXISTS = "already_exists"
    INVALID_SESSION = "invalid_session"


class FileManagerError(Exception):
    """Base class for every error raised by the file manager."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidPathError(FileManagerError):
    """Malformed, nonexistent or wrong-kind path, or a protected deletion."""

    kind = ErrorKind.INVALID_PATH


class AlreadyExistsError(FileManagerError):
    """The terminal segment of a create-style operation is already taken."""

    kind = ErrorKind.ALREADY_EXISTS


class InvalidSessionError(FileManagerError):
    """Unknown or closed session id."""

    kind = ErrorKind.INVALID_SESSION
