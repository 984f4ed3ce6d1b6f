"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for the application using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_request_context(): Context manager for request-scoped logging
    - bind_locale(): Attach the negotiated locale to the logging context
    - get_correlation_id(): Get current correlation ID from context
    - clear_request_context(): Clear all request context

Formatters:
    - add_service_info(): Processor to stamp service, version and environment
    - mask_request_headers(): Processor to redact cookie and authorization headers
    - truncate_fragments(): Processor to shorten long string fields
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_locale,
    bind_request_context,
    clear_request_context,
    get_correlation_id,
)

from infrastructure.logging.formatters import (
    SENSITIVE_HEADERS,
    add_service_info,
    mask_request_headers,
    truncate_fragments,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_request_context",
    "bind_locale",
    "get_correlation_id",
    "clear_request_context",
    # Formatters
    "add_service_info",
    "mask_request_headers",
    "truncate_fragments",
    "SENSITIVE_HEADERS",
]
