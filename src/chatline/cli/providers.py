"""Provider factory functions for CLI.

Centralizes creation of configuration and LLM instances from environment variables.
Hides configuration details from the command implementation.
"""

import typer
from rich.console import Console
from rich.markup import escape

from ..config import ChatConfig, load_config
from ..errors import ConfigError
from ..llm import LLMProvider, create_llm_provider

# Default console for error output
_console = Console(stderr=True)


def get_config(console: Console | None = None) -> ChatConfig:
    """Load configuration, exiting if it is incomplete.

    Args:
        console: Optional Rich console for error output

    Returns:
        ChatConfig instance

    Raises:
        SystemExit: If OPENAI_API_KEY is not set
    """
    con = console or _console
    try:
        return load_config()
    except ConfigError as e:
        con.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def get_llm(config: ChatConfig) -> LLMProvider:
    """Create the OpenAI provider for a configuration."""
    return create_llm_provider(
        "openai",
        api_key=config.api_key,
        model=config.model,
        base_url=config.base_url,
    )
