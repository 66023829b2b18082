"""Shared pytest fixtures for controller tests."""

from __future__ import annotations

import asyncio
from typing import Sequence

import pytest

from abn_lookup.domain.models import LookupRecord
from abn_lookup.services.search import SearchController


class FakeLookupService:
    """In-memory lookup service; ``gate`` holds calls open until it is set."""

    def __init__(
        self,
        *,
        record: LookupRecord | None = None,
        records: Sequence[LookupRecord] = (),
        error: BaseException | None = None,
    ) -> None:
        self.record = record
        self.records = list(records)
        self.error = error
        self.gate: asyncio.Event | None = None
        self.calls: list[tuple[str, str]] = []

    async def search_by_abn(self, abn: str) -> LookupRecord | None:
        self.calls.append(("abn", abn))
        await self._wait()
        if self.error is not None:
            raise self.error
        return self.record

    async def search_by_name(self, name: str) -> Sequence[LookupRecord]:
        self.calls.append(("name", name))
        await self._wait()
        if self.error is not None:
            raise self.error
        return self.records

    async def _wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()


@pytest.fixture
def lookup() -> FakeLookupService:
    return FakeLookupService()


@pytest.fixture
def controller(lookup: FakeLookupService) -> SearchController:
    return SearchController(lookup)
