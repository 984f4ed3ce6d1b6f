"""structlog processors applied before rendering.

Usage:
    from infrastructure.logging.formatters import mask_request_headers
"""

from typing import Any, Callable, Iterable, Mapping

EventDict = dict[str, Any]
Processor = Callable[[Any, str, EventDict], EventDict]

# Header names are compared lower-cased with "-" folded to "_"
SENSITIVE_HEADERS = frozenset(
    {"authorization", "proxy_authorization", "cookie", "set_cookie"}
)


def _header_key(name: str) -> str:
    return name.lower().replace("-", "_")


def add_service_info(app_name: str, version: str, environment: str) -> Processor:
    """Stamp every event with the service name, build and environment.

    Args:
        app_name: Service name (``APP_NAME``).
        version: Build identifier, usually the git SHA.
        environment: Deployment environment (e.g., "production").

    Returns:
        A structlog processor function.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", app_name)
        event_dict.setdefault("version", version)
        event_dict.setdefault("environment", environment)
        return event_dict

    return processor


def mask_request_headers(
    mask_value: str = "***",
    headers: Iterable[str] = SENSITIVE_HEADERS,
) -> Processor:
    """Redact credential-bearing headers from log events.

    A field is masked when its name is one of ``headers``, either as a
    top-level event key (``cookie=...``) or as a key of a mapping value
    such as ``headers=dict(request.headers)``. Other fields are untouched,
    so ``accept_language`` and ``locale`` stay readable.

    Args:
        mask_value: Replacement for masked values.
        headers: Header names to mask, in any spelling.

    Returns:
        A structlog processor function.
    """
    names = frozenset(_header_key(name) for name in headers)

    def mask(mapping: Mapping[str, Any]) -> dict[str, Any]:
        return {
            key: (
                mask_value
                if value is not None and _header_key(str(key)) in names
                else value
            )
            for key, value in mapping.items()
        }

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        masked = mask(event_dict)
        for key, value in masked.items():
            if isinstance(value, Mapping):
                masked[key] = mask(value)
        return masked

    return processor


def truncate_fragments(max_length: int = 500) -> Processor:
    """Shorten long string fields such as rendered template output.

    Args:
        max_length: Characters kept from each long field.

    Returns:
        A structlog processor function.
    """

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if key == "exception" or not isinstance(value, str):
                continue
            if len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}... ({len(value) - max_length} more chars)"
                )
        return event_dict

    return processor
