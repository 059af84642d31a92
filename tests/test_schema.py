from __future__ import annotations

import pytest
from pydantic import ValidationError

from ollama_local.common.schema import GenerationRequest


def test_generation_request_payload() -> None:
    req = GenerationRequest(model="llama3", prompt="hello")
    assert req.to_payload() == {"model": "llama3", "prompt": "hello", "stream": False}


def test_generation_request_rejects_empty_model() -> None:
    with pytest.raises(ValidationError):
        GenerationRequest(model="", prompt="x")


def test_generation_request_cannot_stream() -> None:
    with pytest.raises(ValidationError):
        GenerationRequest(model="m", prompt="x", stream=True)
