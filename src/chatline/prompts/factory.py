"""Factory for choosing the prompt source."""

from collections.abc import Sequence

from rich.console import Console

from .base import PromptSource
from .sources import ArgumentPromptSource, InteractivePromptSource


def create_prompt_source(
    args: Sequence[str],
    console: Console | None = None
) -> PromptSource:
    """Create the prompt source for a process invocation.

    Args:
        args: Command-line arguments after the program name
        console: Console used for interactive input

    Returns:
        ArgumentPromptSource if any argument was given,
        InteractivePromptSource otherwise
    """
    if args:
        return ArgumentPromptSource(args)
    return InteractivePromptSource(console=console)
