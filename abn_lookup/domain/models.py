"""Models shared between the controller, the lookup client and the frontend."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class SearchMode(str, Enum):
    IDENTIFIER = "abn"
    NAME = "name"


class SearchPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"


class SearchOutcome(str, Enum):
    """How a single submit ended."""

    SUCCESS = "success"
    FAILED = "failed"
    INVALID = "invalid"
    IGNORED = "ignored"
    STALE = "stale"


class LookupRecord(BaseModel):
    """Raw record returned by the lookup service.

    Attributes beyond ``abn`` and ``name`` are kept as extra fields so that
    nothing the service returns is lost on the way to the display layer.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    abn: str = ""
    name: str | None = None

    @field_validator("abn", mode="before")
    @classmethod
    def _abn_to_str(cls, value):
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class DisplayRecord(LookupRecord):
    formatted_abn: str


@dataclass(slots=True)
class SearchState:
    mode: SearchMode = SearchMode.IDENTIFIER
    term: str = ""
    results: list[DisplayRecord] = field(default_factory=list)
    is_loading: bool = False
    error: str = ""


__all__ = [
    "SearchMode",
    "SearchPhase",
    "SearchOutcome",
    "LookupRecord",
    "DisplayRecord",
    "SearchState",
]
