"""Structured logging infrastructure.

Centralized logging configuration for iam-idc using structlog.

Public API:
    - configure_logging(): Initialize logging at CLI startup
    - get_module_logger(): Get a logger for the calling module
    - bind_command_context(): Context manager for command-scoped logging

Example:
    from infrastructure.logging import (
        bind_command_context,
        configure_logging,
        get_module_logger,
    )

    configure_logging(log_level="DEBUG")
    logger = get_module_logger()

    with bind_command_context(command="list-users"):
        logger.info("listing_users")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import bind_command_context

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_command_context",
]
