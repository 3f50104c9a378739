"""Shared fixtures for the utilstoolkit test suite."""

from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture this package's loguru output as a list of strings."""
    messages: list[str] = []
    logger.enable("utilstoolkit")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("utilstoolkit")
