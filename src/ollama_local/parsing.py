"""Extract values from model-server response bodies.

These functions only ever see the decoded body text, so they can be exercised
against literal strings without a server.
"""
from __future__ import annotations
import json
from typing import Any

from ollama_local.common.errors import ProtocolError
from ollama_local.common.schema import INVALID_RESPONSE


def _loads(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def _lines(body: str) -> list[str]:
    # Split on LF only: JSON strings may legally contain U+2028 and friends.
    return [line.rstrip("\r") for line in body.split("\n")]


def version_from_body(body: str) -> str:
    """
    Return the server version reported in a /api/version body.

    Falls back to the first line mentioning "version" when the body is not the
    expected JSON object, and to INVALID_RESPONSE when there is no such line.
    """
    parsed = _loads(body.strip())
    if isinstance(parsed, dict) and isinstance(parsed.get("version"), str):
        return parsed["version"]
    for line in _lines(body):
        if "version" in line:
            return line
    return INVALID_RESPONSE


def model_names(body: str) -> list[str]:
    """
    Return installed model names from a /api/tags body, in server order.

    Entries without a string "name" are skipped.

    Raises:
        ProtocolError: body is not JSON or has no "models" array.
    """
    try:
        parsed = json.loads(body)
    except ValueError as e:
        raise ProtocolError(f"JSON parse error: {e}", body=body) from e

    models = parsed.get("models") if isinstance(parsed, dict) else None
    if not isinstance(models, list):
        raise ProtocolError("Invalid models format in response", body=body)

    names = []
    for entry in models:
        name = entry.get("name") if isinstance(entry, dict) else None
        if isinstance(name, str):
            names.append(name)
    return names


def generated_text(body: str) -> str:
    """
    Concatenate the "response" fragments of a /api/generate body.

    Each line is tried as its own JSON object first (NDJSON output); only if no
    line carries a fragment is the whole body parsed as a single object.
    Returns "" when neither path yields text.
    """
    chunks = []
    for line in _lines(body):
        value = _loads(line)
        if isinstance(value, dict) and isinstance(value.get("response"), str):
            chunks.append(value["response"])
    text = "".join(chunks)
    if text:
        return text

    whole = _loads(body)
    if isinstance(whole, dict) and isinstance(whole.get("response"), str):
        return whole["response"]
    return ""
