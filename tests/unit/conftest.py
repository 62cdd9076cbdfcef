"""Shared unit-test fixtures."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_elbonian_logger():
    """Drop handlers bound to a test's captured stderr once the test is done."""
    yield
    logger = logging.getLogger("elbonian")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
