"""Turn raw lookup records into display records."""

from __future__ import annotations

from typing import Any, Mapping

from abn_lookup.domain.models import DisplayRecord, LookupRecord
from abn_lookup.services.validation import ABN_PATTERN, compact


def format_abn(abn: str) -> str:
    """Group an 11-digit ABN as ``NN NNN NNN NNN``.

    Anything that is not exactly 11 digits once whitespace is removed is
    returned compacted but otherwise untouched.
    """

    digits = compact(abn)
    if not ABN_PATTERN.fullmatch(digits):
        return digits
    return " ".join((digits[:2], digits[2:5], digits[5:8], digits[8:]))


def transform_record(record: LookupRecord | Mapping[str, Any]) -> DisplayRecord:
    if not isinstance(record, LookupRecord):
        record = LookupRecord.model_validate(dict(record))
    data = record.model_dump()
    data["formatted_abn"] = format_abn(record.abn)
    return DisplayRecord(**data)


__all__ = ["format_abn", "transform_record"]
