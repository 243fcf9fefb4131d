"""Pytest configuration and shared fixtures."""

import logging

import pytest

from core.logging_config import LOGGER_NAMESPACES
from distributions.gaussian import GaussianModel


@pytest.fixture
def standard_model():
    """Standard normal N(0, 1)."""
    return GaussianModel()


@pytest.fixture
def shifted_model():
    """Shifted and scaled normal N(5, 2²)."""
    return GaussianModel(5.0, 2.0)


@pytest.fixture
def restore_loggers():
    """Restore handlers and levels of the library loggers after a test."""
    saved = {}
    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, list(logger.handlers))
    yield
    for name, (level, handlers) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.setLevel(level)
        logger.handlers[:] = handlers
