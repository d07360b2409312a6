"""structlog-based logging for bodax notify.

Modules create their logger once at import time:

    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.warning("dm_send_failed", recipient_id=recipient_id, status_code=403)

configure_logging() runs in the application lifespan. Request and dispatch
scopes are bound with bind_request_context() and bind_dispatch_context().
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.context import (
    bind_dispatch_context,
    bind_request_context,
)
from infrastructure.logging.formatters import (
    SENSITIVE_PATTERNS,
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "bind_dispatch_context",
    "bind_request_context",
    "SENSITIVE_PATTERNS",
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
]
