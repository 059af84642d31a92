"""Synchronous client for a local model server (Ollama-style HTTP API).

Endpoints:
- GET  /api/version
- GET  /api/tags
- POST /api/generate  { "model": "...", "prompt": "...", "stream": false }

Every call opens its own connection and closes it afterwards.
"""
from __future__ import annotations
import logging
import time
from typing import Any

import httpx

from ollama_local.common.config import ClientConfig
from ollama_local.common.errors import (
    EmptyResponseError,
    NoModelSelectedError,
    OllamaClientError,
    ProtocolError,
    ServerConnectionError,
    TransportError,
)
from ollama_local.common.schema import (
    INVALID_RESPONSE,
    NOT_CONNECTED,
    READ_ERROR,
    VERSION_SENTINELS,
    WRITE_ERROR,
    GenerationRequest,
)
from ollama_local.launcher import NullLauncher, ServerLauncher, SubprocessLauncher
from ollama_local.parsing import generated_text, model_names, version_from_body

LOGGER = logging.getLogger("ollama_local.client")

_HEADERS = {"Host": "localhost", "Connection": "close"}
_MIN_POLL_TIMEOUT = 0.05


def _translate(exc: httpx.HTTPError) -> OllamaClientError:
    """Map an httpx failure onto the client's error kinds."""
    if isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout)):
        return ServerConnectionError(f"Could not connect to server: {exc}")
    if isinstance(exc, (httpx.WriteError, httpx.WriteTimeout)):
        return TransportError(f"Write failed: {exc}", stage="write")
    if isinstance(exc, (httpx.ProtocolError, httpx.DecodingError)):
        return ProtocolError(f"Malformed HTTP response: {exc}")
    return TransportError(f"Read failed: {exc}", stage="read")


class ModelServiceClient:
    """
    Client handle for a local model server.

    Usage:
        client = ModelServiceClient("llama3")
        client.version()
        client.list_models()
        client.prompt("Why is the sky blue?")
    """

    def __init__(
        self,
        model: str | None = None,
        *,
        config: ClientConfig | None = None,
        launcher: ServerLauncher | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            model: Model used by prompt() when none is passed explicitly.
            config: Connection settings (default from environment).
            launcher: Started once here; failures are ignored.
            transport: httpx transport for every request (tests inject a mock).
                It is closed along with each per-call httpx.Client.
        """
        self.config = config or ClientConfig.from_env()
        self._model = model
        self._transport = transport
        if launcher is None:
            launcher = SubprocessLauncher(self.config.server_command) if self.config.launch_server else NullLauncher()
        try:
            launcher.launch()
        except Exception as e:
            LOGGER.debug("Server launcher failed: %s", e)

    @property
    def model(self) -> str | None:
        return self._model

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def switch_model(self, model: str) -> None:
        """Bind the model used by later prompt() calls."""
        self._model = model

    def _send(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> httpx.Response:
        """Send one request on a fresh connection; `timeout` overrides the config for this call."""
        LOGGER.debug("%s %s%s", method, self.base_url, path)
        try:
            with httpx.Client(
                base_url=self.base_url,
                headers=_HEADERS,
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                r = client.request(method, path, json=payload, timeout=timeout)
        except httpx.HTTPError as e:
            raise _translate(e) from e
        if r.is_error:
            LOGGER.warning("%s %s returned HTTP %s", method, path, r.status_code)
        return r

    def version(self) -> str:
        """
        Return the server version, or a descriptive sentinel string.

        Never raises: an unreachable or misbehaving server yields one of
        NOT_CONNECTED, WRITE_ERROR, READ_ERROR or INVALID_RESPONSE.
        """
        return self._version(httpx.USE_CLIENT_DEFAULT)

    def _version(self, timeout: Any) -> str:
        try:
            r = self._send("GET", "/api/version", timeout=timeout)
        except ServerConnectionError:
            return NOT_CONNECTED
        except TransportError as e:
            return WRITE_ERROR if e.stage == "write" else READ_ERROR
        except ProtocolError:
            return INVALID_RESPONSE
        return version_from_body(r.text)

    def list_models(self) -> list[str]:
        """
        Return the names of the installed models.

        Raises:
            ServerConnectionError, TransportError, ProtocolError
        """
        r = self._send("GET", "/api/tags")
        return model_names(r.text)

    def prompt(self, text: str, model: str | None = None) -> str:
        """
        Generate a completion for `text` and return it as one string.

        Args:
            text: Prompt text.
            model: Overrides the bound model for this call only.

        Raises:
            NoModelSelectedError: neither `model` nor a bound model is set.
            EmptyResponseError: the server answered without any text.
            ServerConnectionError, TransportError, ProtocolError
        """
        chosen = model if model is not None else self._model
        if not chosen:
            raise NoModelSelectedError("No model selected; pass model= or call switch_model()")

        req = GenerationRequest(model=chosen, prompt=text)
        r = self._send("POST", "/api/generate", req.to_payload())
        body = r.text
        out = generated_text(body)
        if not out:
            raise EmptyResponseError(body, status_code=r.status_code)
        return out

    def wait_until_ready(self, timeout: float | None = None, interval: float | None = None) -> bool:
        """Poll version() until the server answers or `timeout` seconds pass."""
        timeout = self.config.ready_timeout if timeout is None else timeout
        interval = self.config.ready_interval if interval is None else interval
        start = time.monotonic()
        while True:
            # Each poll is bounded by the time left, even when config.timeout is None.
            remaining = max(timeout - (time.monotonic() - start), _MIN_POLL_TIMEOUT)
            if self._version(remaining) not in VERSION_SENTINELS:
                return True
            if time.monotonic() - start >= timeout:
                LOGGER.info("Server at %s not ready after %.1fs", self.base_url, timeout)
                return False
            time.sleep(interval)
