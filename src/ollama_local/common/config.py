"""Client configuration: defaults, YAML file, environment overrides."""
from __future__ import annotations
import os
from dataclasses import dataclass, fields, replace
from typing import Any

import yaml

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 11434

_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ClientConfig:
    """Where the server lives and how the client treats it."""
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    timeout: float | None = None
    launch_server: bool = True
    server_command: tuple[str, ...] = ("ollama", "serve")
    ready_timeout: float = 30.0
    ready_interval: float = 0.5
    # Consumed by callers via setup_logging(config.log_level).
    log_level: str = "INFO"

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return _apply_env(cls())


def _env_overrides() -> dict[str, Any]:
    out: dict[str, Any] = {}
    host = os.getenv("OLLAMA_LOCAL_HOST")
    if host:
        out["host"] = host
    port = os.getenv("OLLAMA_LOCAL_PORT")
    if port:
        out["port"] = int(port)
    timeout = os.getenv("OLLAMA_LOCAL_TIMEOUT")
    if timeout:
        out["timeout"] = float(timeout)
    launch = os.getenv("OLLAMA_LOCAL_LAUNCH")
    if launch:
        out["launch_server"] = launch.strip().lower() not in _FALSY
    level = os.getenv("OLLAMA_LOCAL_LOG_LEVEL")
    if level:
        out["log_level"] = level
    return out


def _apply_env(cfg: ClientConfig) -> ClientConfig:
    return replace(cfg, **_env_overrides())


def load_config(path: str) -> ClientConfig:
    """
    Load client settings from a YAML file, then apply environment overrides.

    Args:
        path: YAML config path. Keys mirror ClientConfig field names.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(ClientConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    if "server_command" in raw:
        cmd = raw["server_command"]
        raw["server_command"] = tuple(cmd.split()) if isinstance(cmd, str) else tuple(map(str, cmd))
    if "port" in raw:
        raw["port"] = int(raw["port"])
    for key in ("timeout", "ready_timeout", "ready_interval"):
        if raw.get(key) is not None:
            raw[key] = float(raw[key])
    return _apply_env(ClientConfig(**raw))
