from __future__ import annotations

import logging

import pytest

from ollama_local.common.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_by_name() -> None:
    setup_logging("debug")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert "%(name)s" in root.handlers[0].formatter._fmt


def test_setup_logging_rejects_unknown_name() -> None:
    with pytest.raises(ValueError):
        setup_logging("chatty")


def test_setup_logging_from_config_level() -> None:
    from ollama_local.common.config import ClientConfig

    setup_logging(ClientConfig(log_level="WARNING").log_level)
    assert logging.getLogger().level == logging.WARNING
