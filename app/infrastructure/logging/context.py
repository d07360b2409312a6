"""Scoped logging context.

Two scopes exist: an HTTP request (bound by RequestContextMiddleware) and a
dispatch call (bound by NotificationDispatcher). Every log entry written
inside a scope carries its keys, so per-recipient channel logs can be tied
back to the request and dispatch that produced them.

Usage:
    with bind_request_context(correlation_id="req-123", request_path="/health"):
        with bind_dispatch_context(DeliveryMode.DIRECT, target_count=3):
            logger.info("dm_sent", recipient_id="80351110224678912")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog


def _without_none(**context: Any) -> dict[str, Any]:
    return {key: value for key, value in context.items() if value is not None}


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[str]:
    """Bind request metadata for the duration of the block.

    Args:
        correlation_id: Request identifier; a uuid4 is generated when omitted.
        request_path: HTTP path, e.g. "/discord/send-notification".
        request_method: HTTP method.
        **extra_context: Additional keys to bind.

    Yields:
        The bound correlation id.
    """
    correlation_id = correlation_id or str(uuid.uuid4())
    with structlog.contextvars.bound_contextvars(
        **_without_none(
            correlation_id=correlation_id,
            request_path=request_path,
            request_method=request_method,
            **extra_context,
        )
    ):
        yield correlation_id


@contextmanager
def bind_dispatch_context(mode: Any, target_count: int) -> Iterator[str]:
    """Bind a dispatch id, the delivery mode and the number of targets.

    Yields:
        The generated dispatch id.
    """
    dispatch_id = uuid.uuid4().hex[:12]
    with structlog.contextvars.bound_contextvars(
        dispatch_id=dispatch_id,
        delivery_mode=getattr(mode, "value", mode),
        target_count=target_count,
    ):
        yield dispatch_id
