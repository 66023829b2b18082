"""Domain-specific exceptions."""

from __future__ import annotations

from typing import Any, Mapping

DEFAULT_LOOKUP_DETAIL = "lookup failed"


class ServiceError(Exception):
    pass


class SearchValidationError(ServiceError):
    """The search term does not satisfy the active mode's rules."""


class InvalidIdentifierFormat(SearchValidationError):
    pass


class NameTooShort(SearchValidationError):
    pass


class LookupServiceError(ServiceError):
    """Raised when the remote lookup fails or is misconfigured.

    ``body`` mirrors the structured payload returned by the service, if any;
    its ``"message"`` entry is what gets displayed to the user.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        body: Mapping[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(detail or (body or {}).get("message") or DEFAULT_LOOKUP_DETAIL)
        self.body = dict(body) if body is not None else None
        self.status_code = status_code

    @property
    def message(self) -> str | None:
        if not self.body:
            return None
        value = self.body.get("message")
        return value if isinstance(value, str) and value else None


__all__ = [
    "DEFAULT_LOOKUP_DETAIL",
    "ServiceError",
    "SearchValidationError",
    "InvalidIdentifierFormat",
    "NameTooShort",
    "LookupServiceError",
]
