"""Best-effort background launch of the model server."""
from __future__ import annotations
import logging
import subprocess
from typing import Protocol, Sequence

LOGGER = logging.getLogger("ollama_local.launcher")

DEFAULT_COMMAND = ("ollama", "serve")


class ServerLauncher(Protocol):
    def launch(self) -> bool:
        """Try to start the server; report whether a process was spawned."""
        ...


class NullLauncher:
    """Launcher that never starts anything."""

    def launch(self) -> bool:
        return False


class SubprocessLauncher:
    """
    Spawn the server command detached, discarding its output.

    The process is never waited on or terminated. If the server is already
    running, the spawned copy simply exits when it fails to bind the port.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND) -> None:
        self.command = [str(part) for part in command]

    def launch(self) -> bool:
        try:
            subprocess.Popen(
                self.command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except (OSError, ValueError) as e:
            LOGGER.debug("Could not launch %s: %s", self.command, e)
            return False
        LOGGER.debug("Launched %s", self.command)
        return True
