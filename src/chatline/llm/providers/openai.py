from typing import Any

from openai import APIStatusError, AsyncOpenAI

from ...config import DEFAULT_MODEL
from ...errors import ApiError
from ..base import LLMProvider
from ..models import ChatMessage


def _api_error_from_status(error: APIStatusError) -> ApiError | None:
    """Convert an OpenAI status error into an ApiError.

    The SDK stores the decoded ``error`` object of the response body in
    ``error.body``. Only errors carrying a server message are converted;
    anything else is left to the caller's generic handling.

    Returns:
        ApiError, or None if the body has no error message
    """
    body = error.body
    if not isinstance(body, dict):
        return None

    message = body.get("message")
    if not message:
        return None

    return ApiError(
        status=error.status_code,
        status_text=error.response.reason_phrase,
        message=message,
    )


class OpenAIProvider(LLMProvider):
    """OpenAI LLM provider implementation.

    Hidden design decisions:
    - OpenAI API client initialization
    - Message format conversion
    - Error translation
    - Authentication mechanism
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Default chat model
            base_url: Optional custom API base URL
        """
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        **kwargs: Any
    ) -> ChatMessage:
        """Generate a chat completion using the Chat Completions API.

        Args:
            messages: Conversation history
            model: Model to use (overrides default)
            **kwargs: Additional OpenAI-specific parameters

        Returns:
            Assistant message from the first choice

        Raises:
            ApiError: If the API returned an error with a message
        """
        openai_messages = [
            {"role": msg.role, "content": msg.content}
            for msg in messages
        ]

        try:
            completion = await self._client.chat.completions.create(
                model=model or self._model,
                messages=openai_messages,
                **kwargs
            )
        except APIStatusError as e:
            api_error = _api_error_from_status(e)
            if api_error is None:
                raise
            raise api_error from e

        message = completion.choices[0].message
        return ChatMessage(role="assistant", content=message.content or "")

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async context manager for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
