"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from ..chat import ChatSession
from ..prompts import create_prompt_source
from .providers import get_config, get_llm

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="chatline",
    help="Interactive command-line chat with OpenAI models",
    add_completion=False,
)

# Consoles for rich output
console = Console()
error_console = Console(stderr=True)


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False}
)
def chat(
    prompt: list[str] | None = typer.Argument(
        None,
        help="Prompt to send once (omit for interactive mode)",
        show_default=False,
    )
):
    """Chat with an OpenAI model.

    Run without arguments for interactive mode, or pass a prompt for
    single-shot mode.

    In-band commands:
    - save to <filename>: write the conversation to a file
    - reset: clear the conversation history
    """
    config = get_config(error_console)

    async def _chat():
        llm = get_llm(config)
        session = ChatSession(
            llm=llm,
            model=config.model,
            console=console,
            error_console=error_console,
            debug=config.debug,
        )
        source = create_prompt_source(prompt or [], console)

        async with llm:
            await session.chat(source)

    try:
        asyncio.run(_chat())
    except Exception as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]")
        if config.debug:
            import traceback
            error_console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        raise typer.Exit(code=1)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
