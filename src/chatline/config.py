"""Environment-driven configuration.

Environment variables:
    OPENAI_API_KEY: OpenAI API key (required)
    CHAT_OPENAI_MODEL: Chat model (default: gpt-3.5-turbo)
    OPENAI_BASE_URL: Custom API base URL (optional)
    DEBUG: Any non-empty value echoes raw messages as JSON
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigError

DEFAULT_MODEL = "gpt-3.5-turbo"


class ChatConfig(BaseModel):
    """Settings for one chat process."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, description="OpenAI API key")
    model: str = Field(default=DEFAULT_MODEL, description="Chat model identifier")
    debug: bool = Field(default=False, description="Echo raw messages as JSON")
    base_url: str | None = Field(default=None, description="Custom API base URL")


def load_config(environ: Mapping[str, str] | None = None) -> ChatConfig:
    """Build the configuration from environment variables.

    Args:
        environ: Variables to read (default: os.environ)

    Returns:
        ChatConfig instance

    Raises:
        ConfigError: If OPENAI_API_KEY is not set
    """
    env = os.environ if environ is None else environ

    api_key = env.get("OPENAI_API_KEY")
    if not api_key:
        raise ConfigError("OPENAI_API_KEY environment variable is not set.")

    return ChatConfig(
        api_key=api_key,
        model=env.get("CHAT_OPENAI_MODEL") or DEFAULT_MODEL,
        debug=bool(env.get("DEBUG")),
        base_url=env.get("OPENAI_BASE_URL") or None,
    )
