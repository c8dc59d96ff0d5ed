from abc import ABC, abstractmethod
from typing import Any

from .models import ChatMessage


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which remote completion API
    answers the conversation. Implementations must handle:
    - API client setup and authentication
    - Request/response format conversion
    - Translating structured API failures into ApiError

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            reply = await provider.chat_completion(messages)
        # Automatically cleaned up
    """

    @abstractmethod
    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> ChatMessage:
        """Generate the assistant reply to a conversation.

        Args:
            messages: Full conversation history, oldest first
            model: Model to use (None uses provider's default)
            **kwargs: Provider-specific parameters

        Returns:
            The assistant message from the first returned choice

        Raises:
            ApiError: If the API answered with a structured error
            Exception: Other provider-specific errors
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
