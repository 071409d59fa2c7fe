"""Shared fixtures: a fresh registry per test and clean settings/logging state."""

import logging

import pytest
import structlog

from fieldrules.config import get_settings
from fieldrules.logging_config import LOGGER_NAME
from fieldrules.validators import RuleRegistry, Validator


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Drop cached settings and any logging configuration a test installs."""
    for name in ("DEBUG", "LOG_LEVEL", "WARN_ON_DUPLICATE_RULES", "FREEZE_REGISTRY"):
        monkeypatch.delenv(f"FIELDRULES_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers[:] = [logging.NullHandler()]
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def registry():
    return RuleRegistry()


@pytest.fixture
def validator(registry):
    return Validator(registry)
