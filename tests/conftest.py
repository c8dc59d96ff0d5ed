"""Pytest configuration and shared fixtures."""
import io
import os
from collections.abc import AsyncIterator, Iterable
from typing import Any

import pytest
from rich.console import Console

from chatline.llm import ChatMessage, LLMProvider
from chatline.prompts import PromptSource


class StubLLMProvider(LLMProvider):
    """LLM provider that answers from a canned list instead of the network.

    Each reply is either the assistant text or an exception to raise.
    When the list runs out every call answers "hi".
    """

    def __init__(self, replies: Iterable[str | Exception] = ()):
        self.replies = list(replies)
        self.calls: list[tuple[list[ChatMessage], str | None]] = []
        self.closed = False

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> ChatMessage:
        self.calls.append((list(messages), model))
        reply = self.replies.pop(0) if self.replies else "hi"
        if isinstance(reply, Exception):
            raise reply
        return ChatMessage(role="assistant", content=reply)

    async def close(self) -> None:
        self.closed = True


class ListPromptSource(PromptSource):
    """Prompt source yielding a fixed list of prompts."""

    def __init__(self, prompts: Iterable[str | None]):
        self._prompts = list(prompts)

    async def prompts(self) -> AsyncIterator[str]:
        for prompt in self._prompts:
            yield prompt


def make_console() -> Console:
    """Return a console that records output in memory."""
    return Console(file=io.StringIO(), width=200, color_system=None)


def output_of(console: Console) -> str:
    """Return everything printed to a console made by make_console()."""
    return console.file.getvalue()


@pytest.fixture
def stub_llm():
    """Return a stub provider answering "hi" to every prompt."""
    return StubLLMProvider()


@pytest.fixture
def console():
    """Return an in-memory output console."""
    return make_console()


@pytest.fixture
def error_console():
    """Return an in-memory error console."""
    return make_console()


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
    }
