from __future__ import annotations

import subprocess
from typing import Any

import httpx

from ollama_local import ClientConfig, ModelServiceClient
from ollama_local.launcher import NullLauncher, SubprocessLauncher


class _FakePopen:
    calls: list[dict[str, Any]] = []

    def __init__(self, args: list[str], **kwargs: Any) -> None:
        _FakePopen.calls.append({"args": args, **kwargs})


def _missing_binary(args: list[str], **kwargs: Any) -> None:
    raise FileNotFoundError(2, "No such file or directory", args[0])


def test_subprocess_launcher_discards_output(monkeypatch) -> None:
    _FakePopen.calls = []
    monkeypatch.setattr(subprocess, "Popen", _FakePopen)
    assert SubprocessLauncher(["ollama", "serve"]).launch() is True
    call = _FakePopen.calls[0]
    assert call["args"] == ["ollama", "serve"]
    assert call["stdout"] is subprocess.DEVNULL
    assert call["stderr"] is subprocess.DEVNULL
    assert call["start_new_session"] is True


def test_subprocess_launcher_missing_binary(monkeypatch) -> None:
    monkeypatch.setattr(subprocess, "Popen", _missing_binary)
    assert SubprocessLauncher().launch() is False


def test_null_launcher() -> None:
    assert NullLauncher().launch() is False


def test_client_uses_configured_command(monkeypatch) -> None:
    _FakePopen.calls = []
    monkeypatch.setattr(subprocess, "Popen", _FakePopen)
    cfg = ClientConfig(server_command=("my-server", "--quiet"))
    ModelServiceClient(config=cfg, transport=httpx.MockTransport(lambda req: httpx.Response(200)))
    assert [c["args"] for c in _FakePopen.calls] == [["my-server", "--quiet"]]


def test_client_skips_launch_when_disabled(monkeypatch) -> None:
    _FakePopen.calls = []
    monkeypatch.setattr(subprocess, "Popen", _FakePopen)
    ModelServiceClient(config=ClientConfig(launch_server=False))
    assert _FakePopen.calls == []


def test_client_survives_missing_binary(monkeypatch) -> None:
    monkeypatch.setattr(subprocess, "Popen", _missing_binary)
    client = ModelServiceClient("llama3", config=ClientConfig())
    assert client.model == "llama3"
