"""Shared pytest fixtures and configuration for the lambdava test suite.

Guidelines
----------
* No network or filesystem access in any test.
* Core tests must be pure — no side effects.
* The project logger is restored after every test, since the CLI
  attaches a handler to it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _restore_project_logger() -> Iterator[None]:
    project_logger = logging.getLogger("lambdava")
    level = project_logger.level
    handlers = list(project_logger.handlers)
    propagate = project_logger.propagate
    yield
    project_logger.setLevel(level)
    project_logger.handlers[:] = handlers
    project_logger.propagate = propagate
