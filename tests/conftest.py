"""
Pytest fixtures for adaptive chunking tests.
"""

import logging

import pytest

from adaptive_chunking import ChunkingConfig
from adaptive_chunking.logging_config import ROOT_LOGGER_NAME

ENV_VARS = ("CHUNKING_CONFIG_PATH", "CHUNKING_ENABLED", "CHUNKING_LOG_LEVEL")


@pytest.fixture
def default_config():
    return ChunkingConfig()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove chunking environment variables and restore them afterwards."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def reset_package_logger():
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(level)
