"""
Chatline: an interactive command-line chat client for the OpenAI chat API.

The package is split into modules that each hide one design decision:
where prompts come from, how the conversation is kept, and which remote
provider answers it.
"""

__version__ = "0.1.0"

from .chat import ChatSession
from .errors import ApiError, ChatError, ConfigError, InvalidPromptError
from .llm import ChatMessage, LLMProvider, create_llm_provider
from .prompts import PromptSource, create_prompt_source

__all__ = [
    "ApiError",
    "ChatError",
    "ChatMessage",
    "ChatSession",
    "ConfigError",
    "InvalidPromptError",
    "LLMProvider",
    "PromptSource",
    "create_llm_provider",
    "create_prompt_source",
]
