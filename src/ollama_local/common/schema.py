"""Pydantic models and constants for request/response types."""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

# Values returned by ModelServiceClient.version() when no version is available.
NOT_CONNECTED = "not connected"
WRITE_ERROR = "write error"
READ_ERROR = "read error"
INVALID_RESPONSE = "invalid response"

VERSION_SENTINELS = frozenset({NOT_CONNECTED, WRITE_ERROR, READ_ERROR, INVALID_RESPONSE})


class GenerationRequest(BaseModel):
    """Body of a non-streaming POST /api/generate."""
    model: str = Field(min_length=1)
    prompt: str
    stream: Literal[False] = False

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump()
