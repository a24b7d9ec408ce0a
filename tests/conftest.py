"""
Shared pytest fixtures:
- BINKIT_* environment isolation
- binkit logger state restored after every test
"""
from __future__ import annotations

import logging
import os

import pytest

from binkit.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _isolate_binkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests start without any BINKIT_* configuration from the outer shell."""
    for key in list(os.environ):
        if key.startswith("BINKIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_binkit_logger():
    """`configure()` swaps handlers on the package logger; put them back."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for h in list(logger.handlers):
        logger.removeHandler(h)
    for h in handlers:
        logger.addHandler(h)
    logger.setLevel(level)
    logger.propagate = propagate
