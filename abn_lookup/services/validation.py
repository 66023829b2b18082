"""Search term validation."""

from __future__ import annotations

import re

from abn_lookup.domain.models import SearchMode
from abn_lookup.services.exceptions import InvalidIdentifierFormat, NameTooShort

ABN_PATTERN = re.compile(r"[0-9]{11}")
MIN_NAME_LENGTH = 3

_WHITESPACE = re.compile(r"\s+")


def compact(value: str) -> str:
    """Remove every whitespace character from ``value``."""

    return _WHITESPACE.sub("", value or "")


def validate_term(mode: SearchMode, raw_term: str) -> str:
    """Return the term to dispatch for ``mode`` or raise a validation error.

    Identifiers are returned with whitespace removed, names with surrounding
    whitespace trimmed.
    """

    raw_term = raw_term or ""
    if mode is SearchMode.IDENTIFIER:
        abn = compact(raw_term)
        if not ABN_PATTERN.fullmatch(abn):
            raise InvalidIdentifierFormat(f"{abn!r} is not an 11-digit ABN")
        return abn

    name = raw_term.strip()
    if len(name) < MIN_NAME_LENGTH:
        raise NameTooShort(f"business name needs at least {MIN_NAME_LENGTH} characters")
    return name


__all__ = ["ABN_PATTERN", "MIN_NAME_LENGTH", "compact", "validate_term"]
