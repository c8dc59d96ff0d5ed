"""Chat session module for chatline.

Owns the conversation history and the in-band chat commands.
"""

from .session import CHAT_COMMAND_RESET, CHAT_COMMAND_SAVE_TO, ChatSession
from .transcript import format_transcript

__all__ = [
    "CHAT_COMMAND_RESET",
    "CHAT_COMMAND_SAVE_TO",
    "ChatSession",
    "format_transcript",
]
