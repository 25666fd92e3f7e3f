"""Structlog logger setup.

Package modules only ask for loggers. Configuration belongs to the host
application, which may call ``configure_logging`` once at startup or set up
structlog itself.

Usage:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.debug("blocks_built", block_count=3)
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.typing import BindableLogger

from infrastructure.configuration import Settings, settings as default_settings


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BindableLogger:
    """Configure structlog and the root logger for a host application.

    Never called on import. Hosts that already configure structlog can skip it.

    Args:
        settings: Optional settings object. Defaults to the module singleton.
        log_level: Optional override for settings.LOG_LEVEL.
        is_production: Optional override for settings.is_production. Controls
            JSON vs console output.

    Returns:
        Configured logger instance
    """
    settings = settings or default_settings
    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BindableLogger:
    """Get a logger for the calling module with full path context.

    The logger wraps the module's stdlib logger and resolves the structlog
    configuration on first use, so whatever the host configured applies.

    Example:
        # In modules/block_kit/builder.py
        logger = get_module_logger()
        # context: {"component": "builder", "module_path": "modules.block_kit.builder"}
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame else None
    module = inspect.getmodule(frame) if frame else None
    module_name = module.__name__ if module else "unknown"

    return structlog.wrap_logger(
        logging.getLogger(module_name),
        wrapper_class=structlog.stdlib.BoundLogger,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
