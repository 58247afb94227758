from collections.abc import Sequence

from file_manager_mcp.errors import InvalidPathError

SEPARATOR = "/"
CURRENT_DIRECTORY = "."
PARENT_DIRECTORY = ".."

AbsolutePath = tuple[str, ...]


def normalize_segments(segments: Sequence[str]) -> AbsolutePath:
    """
    Lexically normalizes a segment list into an absolute path.

    Empty and "." segments are dropped, ".." pops the preceding segment and is a
    no-op at the root, mirroring a shell ``cd``.
    """
    normalized: list[str] = []
    for segment in segments:
        if segment in ("", CURRENT_DIRECTORY):
            continue
        if segment == PARENT_DIRECTORY:
            if normalized:
                normalized.pop()
            continue
        normalized.append(segment)
    return tuple(normalized)


def resolve_path(cwd: str, path_str: str) -> AbsolutePath:
    """
    Resolves a user-provided path against a session cursor.

    Args:
        cwd: The absolute cursor of the session.
        path_str: The path string provided by the caller, absolute or relative.

    Returns:
        The normalized segments of the absolute path.

    Raises:
        InvalidPathError: If the path string is empty.
    """
    if not path_str:
        raise InvalidPathError("Path must not be empty.")

    if path_str.startswith(SEPARATOR):
        return normalize_segments(path_str.split(SEPARATOR))
    return normalize_segments(cwd.split(SEPARATOR) + path_str.split(SEPARATOR))


def split_absolute_path(path: str | Sequence[str]) -> AbsolutePath:
    """
    Converts an already-absolute path into its segments.

    Strings must start with "/" and must not contain "." or ".." segments.
    Sequences are taken as segment lists and validated the same way.
    """
    if isinstance(path, str):
        if not path.startswith(SEPARATOR):
            raise InvalidPathError(f"'{path}' is not an absolute path.")
        segments = tuple(segment for segment in path.split(SEPARATOR) if segment)
    else:
        segments = tuple(path)

    for segment in segments:
        if segment in ("", CURRENT_DIRECTORY, PARENT_DIRECTORY) or SEPARATOR in segment:
            raise InvalidPathError(f"'{format_path(segments)}' is not a normalized path.")
    return segments


def format_path(segments: Sequence[str]) -> str:
    return SEPARATOR + SEPARATOR.join(segments)


def is_ancestor_or_self(ancestor: Sequence[str], path: Sequence[str]) -> bool:
    """True when ``ancestor`` equals ``path`` or is a segment-wise prefix of it."""
    return len(ancestor) <= len(path) and tuple(path[: len(ancestor)]) == tuple(ancestor)
