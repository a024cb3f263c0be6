"""Structured logging for glossa.

Public API:
    - configure_logging(): Initialize logging
    - get_module_logger(): Get a logger for the calling module

Example:
    from glossa.logging import get_module_logger

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from glossa.logging.setup import (
    configure_logging,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
]
