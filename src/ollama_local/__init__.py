"""
ollama_local: minimal client for a local model server.

Provides:
- ModelServiceClient (version, model listing, prompt generation)
- Best-effort background launch of the server process
- YAML/environment configuration and central logging setup
"""
from ollama_local.client import ModelServiceClient
from ollama_local.common.config import ClientConfig, load_config
from ollama_local.common.errors import (
    EmptyResponseError,
    NoModelSelectedError,
    OllamaClientError,
    ProtocolError,
    ServerConnectionError,
    TransportError,
)
from ollama_local.common.logging_setup import setup_logging
from ollama_local.launcher import NullLauncher, ServerLauncher, SubprocessLauncher

__all__ = [
    "ModelServiceClient",
    "ClientConfig",
    "load_config",
    "setup_logging",
    "ServerLauncher",
    "SubprocessLauncher",
    "NullLauncher",
    "OllamaClientError",
    "ServerConnectionError",
    "TransportError",
    "ProtocolError",
    "EmptyResponseError",
    "NoModelSelectedError",
]

__version__ = "0.1.0"
