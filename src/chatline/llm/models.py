from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"] = Field(
        description="Role of the message sender: 'user' or 'assistant'"
    )
    content: str = Field(description="Content of the message")
