"""Unit tests for the prompts module."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from chatline.prompts import (
    ArgumentPromptSource,
    InteractivePromptSource,
    PromptSource,
    create_prompt_source,
)

from conftest import make_console, output_of


async def collect(source: PromptSource) -> list[str]:
    return [prompt async for prompt in source.prompts()]


def fake_input(monkeypatch, lines, end=EOFError):
    """Replace builtins.input with a reader over lines, raising end afterwards."""
    remaining = list(lines)

    def _input(*args):
        if not remaining:
            raise end()
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", _input)


class TestPromptSource:
    """Tests for the PromptSource interface."""

    def test_prompt_source_is_abstract(self):
        """Test that PromptSource cannot be instantiated directly."""
        with pytest.raises(TypeError):
            PromptSource()  # type: ignore


class TestArgumentPromptSource:
    """Tests for ArgumentPromptSource."""

    @pytest.mark.asyncio
    async def test_joins_arguments_into_one_prompt(self):
        """Test that arguments become exactly one prompt."""
        source = ArgumentPromptSource(["what", "is", "2+2"])

        assert await collect(source) == ["what is 2+2"]

    @pytest.mark.asyncio
    async def test_prompt_is_trimmed(self):
        """Test that surrounding whitespace is removed."""
        source = ArgumentPromptSource(["  hello", "world  "])

        assert await collect(source) == ["hello world"]

    @pytest.mark.asyncio
    async def test_sequence_restarts_per_call(self):
        """Test that each call to prompts() yields the prompt again."""
        source = ArgumentPromptSource(["again"])

        assert await collect(source) == ["again"]
        assert await collect(source) == ["again"]

    @given(st.lists(st.text(alphabet="abc xyz", min_size=1), min_size=1))
    def test_prompt_property(self, args):
        """Property test: prompt is the space-joined, trimmed arguments."""
        assert ArgumentPromptSource(args).prompt == " ".join(args).strip()


class TestInteractivePromptSource:
    """Tests for InteractivePromptSource."""

    @pytest.mark.asyncio
    async def test_reads_lines_until_eof(self, monkeypatch):
        """Test that each line becomes a prompt and EOF ends the sequence."""
        fake_input(monkeypatch, ["hello", "", "reset"])
        console = make_console()

        prompts = await collect(InteractivePromptSource(console=console))

        assert prompts == ["hello", "", "reset"]
        assert output_of(console).count(">") == 4

    @pytest.mark.asyncio
    async def test_keyboard_interrupt_ends_sequence(self, monkeypatch):
        """Test that Ctrl-C ends the sequence without raising."""
        fake_input(monkeypatch, ["only"], end=KeyboardInterrupt)

        prompts = await collect(InteractivePromptSource(console=make_console()))

        assert prompts == ["only"]

    @pytest.mark.asyncio
    async def test_stop_ends_sequence_before_next_read(self, monkeypatch):
        """Test that stop() prevents further reads."""
        fake_input(monkeypatch, ["first", "second"])
        source = InteractivePromptSource(console=make_console())

        prompts = []
        async for prompt in source.prompts():
            prompts.append(prompt)
            source.stop()

        assert prompts == ["first"]


class TestPromptSourceFactory:
    """Tests for create_prompt_source."""

    def test_arguments_select_argument_source(self):
        """Test that any argument selects single-shot mode."""
        source = create_prompt_source(["hi"])
        assert isinstance(source, ArgumentPromptSource)

    def test_no_arguments_select_interactive_source(self):
        """Test that no arguments select interactive mode."""
        source = create_prompt_source([], make_console())
        assert isinstance(source, InteractivePromptSource)
