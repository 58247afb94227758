"""Defines the composable prompts for the MCP server."""

BASE_PROMPT = """You are working in a shared, in-memory file system.
Other agents use the same file system at the same time, each through its own session.

Follow these steps:

1.  Open a Session:
    - Call the `open_session` tool and keep the returned session id.
    - Pass that id to every `file_manager` call.

2.  Navigate:
    - Use `pwd`, `ls` and `cd` to find your way around. Your working directory starts at `/`.
    - Relative paths are resolved against your working directory; `..` at `/` stays at `/`.

3.  Edit:
    - `mkdir` and `touch` create any missing parent directories.
    - `write` appends to the end of a file. Read the file first if you need to know what is there.
    - `mv` refuses to replace an existing destination.

4.  Clean Up:
    - Close your session with the `close_session` tool when you are done.
"""

CONCURRENCY_NOTES = """
# Working Alongside Other Sessions

- Changes made by other sessions are visible to you immediately.
- Another session may delete the directory you are in. If a relative path suddenly fails with `invalid_path`, run `cd /` and navigate again.
- You cannot delete your own working directory or any of its parents; `cd` elsewhere first.
"""


def get_prompts() -> dict[str, str]:
    """
    Returns a dictionary of available prompt components.
    """
    return {
        "base": BASE_PROMPT,
        "concurrency-notes": CONCURRENCY_NOTES,
    }
