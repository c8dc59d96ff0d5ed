"""Prompt sources for the chat loop.

Hides where prompts come from: an interactive terminal or the
command-line arguments.
"""

from .base import PromptSource
from .factory import create_prompt_source
from .sources import ArgumentPromptSource, InteractivePromptSource

__all__ = [
    "ArgumentPromptSource",
    "InteractivePromptSource",
    "PromptSource",
    "create_prompt_source",
]
