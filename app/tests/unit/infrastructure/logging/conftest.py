"""Fixtures for infrastructure.logging tests."""

import logging

import pytest
import structlog
from unittest.mock import Mock

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture(autouse=True)
def restore_logging_config():
    """Restore structlog and root logger state changed by configure_logging."""
    saved_config = structlog.get_config()
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = list(root.handlers)

    yield

    structlog.configure(**saved_config)
    for handler in root.handlers:
        if handler not in saved_handlers:
            root.removeHandler(handler)
    root.setLevel(saved_level)
