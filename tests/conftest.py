# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import logging
import os
from datetime import datetime

import pytest


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep CRONFIELD_* variables from the host out of settings."""
    for name in list(os.environ):
        if name.startswith("CRONFIELD_"):
            monkeypatch.delenv(name)
    yield


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo handler/level changes made by setup_logging()."""
    logger = logging.getLogger("cronfield")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def second_monday() -> datetime:
    """Monday 12 October 2026, the second Monday of its month."""
    return datetime(2026, 10, 12, 9, 30)
