"""Search orchestration: validation, dispatch, result and error handling."""

from __future__ import annotations

from typing import Any

from abn_lookup.domain.models import (
    DisplayRecord,
    SearchMode,
    SearchOutcome,
    SearchPhase,
    SearchState,
)
from abn_lookup.i18n import MessageCatalog
from abn_lookup.logging import logger
from abn_lookup.services.errors import normalize_failure
from abn_lookup.services.exceptions import InvalidIdentifierFormat, SearchValidationError
from abn_lookup.services.formatting import transform_record
from abn_lookup.services.lookup import LookupService
from abn_lookup.services.validation import MIN_NAME_LENGTH, validate_term


class SearchController:
    """Owns the search state and drives at most one lookup at a time.

    Every submission gets a sequence number. A lookup that settles after its
    number stopped being the active one (mode change) is discarded.
    """

    def __init__(
        self,
        lookup: LookupService,
        *,
        catalog: MessageCatalog | None = None,
        locale: str | None = None,
    ) -> None:
        self._lookup = lookup
        self._catalog = catalog or MessageCatalog()
        self._locale = locale
        self._request_seq = 0
        self._active_request: int | None = None
        self.state = SearchState()

    @property
    def is_identifier_mode(self) -> bool:
        return self.state.mode is SearchMode.IDENTIFIER

    @property
    def is_name_mode(self) -> bool:
        return self.state.mode is SearchMode.NAME

    @property
    def mode_label(self) -> str:
        return self._text(f"mode.{self.state.mode.value}.label")

    @property
    def term_placeholder(self) -> str:
        return self._text(f"mode.{self.state.mode.value}.placeholder", min_length=MIN_NAME_LENGTH)

    @property
    def has_results(self) -> bool:
        return len(self.state.results) > 0

    @property
    def phase(self) -> SearchPhase:
        return SearchPhase.LOADING if self.state.is_loading else SearchPhase.IDLE

    def change_mode(self, mode: SearchMode | str) -> None:
        state = self.state
        state.mode = SearchMode(mode)
        state.term = ""
        state.results = []
        state.error = ""
        state.is_loading = False
        self._active_request = None

    def change_term(self, raw_term: str) -> None:
        self.state.term = raw_term or ""
        self.state.error = ""

    async def submit(self) -> SearchOutcome:
        state = self.state
        mode = state.mode
        if state.is_loading:
            logger.info("submit_ignored_while_loading", mode=mode.value)
            return SearchOutcome.IGNORED

        try:
            term = validate_term(mode, state.term)
        except SearchValidationError as exc:
            state.error = self._validation_message(exc)
            return SearchOutcome.INVALID

        self._request_seq += 1
        request_id = self._request_seq
        self._active_request = request_id
        state.is_loading = True
        state.error = ""
        state.results = []
        logger.info("search_dispatched", mode=mode.value, request_id=request_id)

        try:
            try:
                results = await self._dispatch(mode, term)
            except Exception as exc:
                if not self._is_active(request_id):
                    logger.info("stale_response_discarded", mode=mode.value, request_id=request_id)
                    return SearchOutcome.STALE
                state.error = normalize_failure(
                    exc,
                    fallback=self._text("error.fallback"),
                    mode=mode.value,
                    request_id=request_id,
                )
                return SearchOutcome.FAILED

            if not self._is_active(request_id):
                logger.info("stale_response_discarded", mode=mode.value, request_id=request_id)
                return SearchOutcome.STALE
            state.results = results
            logger.info(
                "search_completed",
                mode=mode.value,
                request_id=request_id,
                result_count=len(results),
            )
            return SearchOutcome.SUCCESS
        finally:
            if self._is_active(request_id):
                state.is_loading = False
                self._active_request = None

    async def _dispatch(self, mode: SearchMode, term: str) -> list[DisplayRecord]:
        if mode is SearchMode.IDENTIFIER:
            record = await self._lookup.search_by_abn(term)
            return [] if record is None else [transform_record(record)]
        records = await self._lookup.search_by_name(term)
        return [transform_record(record) for record in records or []]

    def _is_active(self, request_id: int) -> bool:
        return self._active_request == request_id

    def _validation_message(self, exc: SearchValidationError) -> str:
        if isinstance(exc, InvalidIdentifierFormat):
            return self._text("error.invalid_abn")
        return self._text("error.name_too_short", min_length=MIN_NAME_LENGTH)

    def _text(self, key: str, **kwargs: Any) -> str:
        return self._catalog.text(key, locale=self._locale, **kwargs)


__all__ = ["SearchController"]
