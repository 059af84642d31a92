"""Exception hierarchy for the local model-server client."""
from __future__ import annotations


class OllamaClientError(Exception):
    """Base exception for ollama_local."""


class ServerConnectionError(OllamaClientError):
    """Raised when a connection to the server cannot be opened."""


class TransportError(OllamaClientError):
    """Raised when a read or write fails mid-exchange."""

    def __init__(self, message: str, stage: str = "read") -> None:
        super().__init__(message)
        self.stage = stage


class ProtocolError(OllamaClientError):
    """Raised when HTTP framing or JSON structure is not what we expect."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


class EmptyResponseError(OllamaClientError):
    """Raised when a generation exchange succeeds but carries no text."""

    def __init__(self, body: str, status_code: int | None = None) -> None:
        super().__init__(f"No 'response' field in response: {body}")
        self.body = body
        self.status_code = status_code


class NoModelSelectedError(OllamaClientError):
    """Raised when prompting without a bound or supplied model."""
