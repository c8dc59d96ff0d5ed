from collections.abc import AsyncIterator, Sequence

from rich.console import Console

from .base import PromptSource

INPUT_PROMPT = "> "


class InteractivePromptSource(PromptSource):
    """Reads prompts line by line from the terminal.

    The sequence is unbounded: it ends only at end of input, on Ctrl-C,
    or after ``stop()`` has been called.
    """

    def __init__(self, console: Console | None = None, prompt: str = INPUT_PROMPT):
        self._console = console or Console()
        self._prompt = prompt
        self._stopped = False

    def stop(self) -> None:
        """End the current sequence before the next line is read."""
        self._stopped = True

    async def prompts(self) -> AsyncIterator[str]:
        self._stopped = False
        while not self._stopped:
            # Reading blocks the event loop; the chat loop never has more
            # than one prompt in flight, so nothing else is waiting on it.
            try:
                line = self._console.input(self._prompt, markup=False)
            except (EOFError, KeyboardInterrupt):
                return
            yield line


class ArgumentPromptSource(PromptSource):
    """Yields the command-line arguments as a single prompt."""

    def __init__(self, args: Sequence[str]):
        self._args = list(args)

    @property
    def prompt(self) -> str:
        """The arguments joined with single spaces and trimmed."""
        return " ".join(self._args).strip()

    async def prompts(self) -> AsyncIterator[str]:
        yield self.prompt
