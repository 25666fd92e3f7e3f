"""Infrastructure modules for the Block Kit builder package.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (configure_logging, get_module_logger)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

__all__ = [
    "settings",
    "get_module_logger",
]
