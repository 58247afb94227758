"""Initializes the prompts module and aggregates prompts from all submodules."""

from .system import get_prompts as get_system_prompts


def get_prompts() -> dict[str, str]:
    """
    Returns a dictionary of all available prompts from all prompt files.
    """
    system = get_system_prompts()
    return {
        "agent-system-prompt": system["base"] + system["concurrency-notes"],
    }
