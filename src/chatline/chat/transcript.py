"""Human-readable rendering of a conversation."""

import os
from collections.abc import Iterable

from ..llm.models import ChatMessage

USER_PREFIX = ">> "
ASSISTANT_PREFIX = "<< "


def format_transcript(
    messages: Iterable[ChatMessage],
    line_separator: str = os.linesep
) -> str:
    """Render messages as plain text, one block per message.

    User messages are prefixed with ``>> `` and assistant messages with
    ``<< ``. Multi-line content starts on the line after its prefix.

    Args:
        messages: Conversation history, oldest first
        line_separator: Separator between blocks (default: os.linesep)

    Returns:
        Transcript text without a trailing separator
    """
    blocks = []
    for msg in messages:
        prefix = USER_PREFIX if msg.role == "user" else ASSISTANT_PREFIX
        if line_separator in msg.content:
            prefix += line_separator
        blocks.append(f"{prefix}{msg.content}")
    return line_separator.join(blocks)
