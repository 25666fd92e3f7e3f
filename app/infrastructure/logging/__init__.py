"""Structured logging infrastructure.

Public API:
    - configure_logging(): Optional host-side setup, never run on import
    - get_module_logger(): Get a logger for the calling module

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.debug("module_initialized")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
]
