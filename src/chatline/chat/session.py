"""Chat session: conversation state and prompt handling."""

import traceback
from pathlib import Path

from rich.console import Console

from ..config import DEFAULT_MODEL
from ..errors import ApiError, InvalidPromptError
from ..llm import ChatMessage, LLMProvider
from ..prompts import PromptSource
from .transcript import format_transcript

CHAT_COMMAND_SAVE_TO = "save to"
CHAT_COMMAND_RESET = "reset"

WELCOME_MESSAGE = "Welcome! Let's chat."

class ChatSession:
    """A single conversation with a remote chat model.

    The session keeps the ordered message history and interprets each
    prompt either as an in-band command or as a message to send:

    - ``save to <filename>`` writes the transcript to a file
    - ``reset`` clears the history
    - anything else is sent to the model together with the history

    A user message is appended before the completion call and stays in
    the history if the call fails, so it is resent with the next prompt.
    """

    def __init__(
        self,
        llm: LLMProvider,
        model: str = DEFAULT_MODEL,
        console: Console | None = None,
        error_console: Console | None = None,
        debug: bool = False
    ):
        """Initialize the session.

        Args:
            llm: Provider answering the conversation
            model: Chat model identifier
            console: Console for replies and confirmations
            error_console: Console for error reports
            debug: Echo raw messages as JSON
        """
        self._llm = llm
        self._model = model
        self._console = console or Console()
        self._error_console = error_console or Console(stderr=True)
        self._debug = debug
        self._messages: list[ChatMessage] = []

    @property
    def model(self) -> str:
        return self._model

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        """Snapshot of the conversation history, oldest first."""
        return tuple(self._messages)

    def transcript(self) -> str:
        """Render the history as transcript text."""
        return format_transcript(self._messages)

    def reset(self) -> None:
        """Clear the conversation history, keeping configuration."""
        self._messages.clear()
        self._echo("Chat history has been reset.")

    def save(self, filename: str) -> None:
        """Write the transcript to a file, replacing its contents.

        Raises:
            InvalidPromptError: If filename is empty
            OSError: If the file cannot be written
        """
        if not filename:
            raise InvalidPromptError(f"Missing filename for '{CHAT_COMMAND_SAVE_TO}'.")

        Path(filename).write_text(self.transcript(), encoding="utf-8", newline="")
        self._echo(f"Chat saved to {filename}")

    async def handle_prompt(self, prompt: str | None) -> None:
        """Handle one prompt: run a command or send a message.

        Args:
            prompt: Raw prompt text

        Raises:
            InvalidPromptError: If prompt is empty or None
            ApiError: If the completion call returned a structured error
        """
        if not prompt:
            raise InvalidPromptError(f"Invalid prompt {prompt!r}.")

        if prompt.startswith(CHAT_COMMAND_SAVE_TO):
            self.save(prompt[len(CHAT_COMMAND_SAVE_TO) + 1:])
            return

        if prompt.startswith(CHAT_COMMAND_RESET):
            self.reset()
            return

        user_message = ChatMessage(role="user", content=prompt)
        self._messages.append(user_message)
        if self._debug:
            self._echo(user_message.model_dump_json())

        answer = await self._llm.chat_completion(list(self._messages), model=self._model)

        self._messages.append(answer)
        self._echo(answer.content)

        if self._debug:
            self._echo(answer.model_dump_json())

    async def chat(self, source: PromptSource) -> None:
        """Run the chat loop until the prompt source is exhausted.

        Errors raised while handling a prompt are reported and the loop
        moves on to the next prompt.
        """
        self._echo(WELCOME_MESSAGE)

        async for prompt in source.prompts():
            try:
                await self.handle_prompt(prompt)
            except ApiError as e:
                self._error_console.print(str(e), markup=False, highlight=False, soft_wrap=True)
            except Exception as e:
                self._report_error(e)

    def _echo(self, text: str) -> None:
        """Print text verbatim to the output console."""
        self._console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def _report_error(self, error: Exception) -> None:
        self._error_console.print(
            f"Error: {error}", style="red", markup=False, highlight=False, soft_wrap=True
        )
        if self._debug:
            self._error_console.print(
                "".join(traceback.format_exception(error)), style="dim", markup=False
            )
