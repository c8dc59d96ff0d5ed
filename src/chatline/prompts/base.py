from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class PromptSource(ABC):
    """Abstract producer of raw prompt strings.

    Each call to ``prompts()`` starts a fresh asynchronous sequence, so the
    same source can drive the chat loop more than once:

        async for prompt in source.prompts():
            await session.handle_prompt(prompt)
    """

    @abstractmethod
    def prompts(self) -> AsyncIterator[str]:
        """Return a new asynchronous sequence of prompts."""
