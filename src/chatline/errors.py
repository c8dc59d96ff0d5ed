"""Exceptions raised by chatline.

Per-prompt errors are raised where they are detected and handled at the
chat loop boundary; only ConfigError is fatal.
"""


class ChatError(Exception):
    """Base class for chatline errors."""


class ConfigError(ChatError):
    """Required configuration is missing or invalid."""


class InvalidPromptError(ChatError):
    """A prompt cannot be handled (empty prompt, missing filename)."""


class ApiError(ChatError):
    """Structured error returned by the remote completion API.

    Attributes:
        status: HTTP status code
        status_text: HTTP reason phrase
        message: Server-provided error message
    """

    def __init__(self, status: int, status_text: str, message: str):
        self.status = status
        self.status_text = status_text
        self.message = message
        super().__init__(f"Error {status} {status_text}: {message}")
