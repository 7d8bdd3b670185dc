"""Command context binding for structured logging.

Binds invocation-scoped context (command name, invocation id, identity
store) to every log entry emitted while a command runs, including entries
from enrichment worker threads that copy the caller's context.

Usage:
    from infrastructure.logging import bind_command_context

    with bind_command_context(command="list-groups", identity_store_id=store_id):
        logger.info("listing_groups")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_command_context(
    command: str,
    invocation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind command-scoped context to all logs within the block.

    Args:
        command: CLI subcommand being executed (e.g. "list-groups")
        invocation_id: Unique id for this run. Auto-generated if not provided.
        **extra_context: Additional key-value pairs to include in logs.
            None values are dropped.

    Yields:
        The invocation id bound for the block.
    """
    context: dict[str, Any] = {
        "command": command,
        "invocation_id": invocation_id or str(uuid.uuid4()),
    }
    context.update({k: v for k, v in extra_context.items() if v is not None})

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["invocation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
