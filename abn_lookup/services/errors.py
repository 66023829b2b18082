"""Turn lookup failures into messages the user can read."""

from __future__ import annotations

from typing import Any, Mapping

from abn_lookup.logging import logger
from abn_lookup.services.exceptions import LookupServiceError

FALLBACK_MESSAGE = "An error occurred while searching. Please try again."


def _read_field(container: Any, name: str) -> Any:
    if container is None:
        return None
    if isinstance(container, Mapping):
        return container.get(name)
    return getattr(container, name, None)


def extract_message(failure: Any, *, fallback: str = FALLBACK_MESSAGE) -> str:
    """Return ``failure.body.message`` when present, else ``fallback``.

    Accepts ``LookupServiceError`` as well as any object or mapping exposing
    a ``body`` with a ``message`` entry.
    """

    if isinstance(failure, LookupServiceError):
        message = failure.message
    else:
        message = _read_field(_read_field(failure, "body"), "message")
    if isinstance(message, str) and message:
        return message
    return fallback


def report_failure(failure: Any, **context: Any) -> None:
    logger.error(
        "abn_lookup_failed",
        error_type=failure.__class__.__name__,
        error=str(failure),
        status_code=getattr(failure, "status_code", None),
        **context,
    )


def normalize_failure(failure: Any, *, fallback: str = FALLBACK_MESSAGE, **context: Any) -> str:
    """Log the failure to diagnostics and return its display message."""

    report_failure(failure, **context)
    return extract_message(failure, fallback=fallback)


__all__ = ["FALLBACK_MESSAGE", "extract_message", "report_failure", "normalize_failure"]
