"""Remote ABN lookup backed by the ABR JSON web services."""

from __future__ import annotations

import json
import re
from typing import Any, Protocol, Sequence

import httpx

from abn_lookup.config import AbrSettings
from abn_lookup.domain.models import LookupRecord
from abn_lookup.logging import logger
from abn_lookup.services.exceptions import LookupServiceError
from abn_lookup.utils.retry import retry_async

_JSONP = re.compile(r"^\s*[\w$.]+\((?P<payload>.*)\)\s*;?\s*$", re.DOTALL)


class LookupService(Protocol):
    async def search_by_abn(self, abn: str) -> LookupRecord | None: ...

    async def search_by_name(self, name: str) -> Sequence[LookupRecord]: ...


class AbrLookupClient:
    """Implements ``LookupService`` on top of ``AbnDetails`` and ``MatchingNames``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: AbrSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or AbrSettings()

    async def search_by_abn(self, abn: str) -> LookupRecord | None:
        payload = await self._fetch("AbnDetails.aspx", {"abn": abn})
        if not payload.get("Abn"):
            return None
        return _details_to_record(payload)

    async def search_by_name(self, name: str) -> Sequence[LookupRecord]:
        payload = await self._fetch(
            "MatchingNames.aspx",
            {"name": name, "maxResults": self._settings.max_name_results},
        )
        names = payload.get("Names") or []
        return [_match_to_record(item) for item in names]

    async def _fetch(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        guid = self._read_secret(self._settings.guid)
        if not guid:
            raise LookupServiceError("ABR GUID is not configured.")

        url = f"{str(self._settings.base_url).rstrip('/')}/{endpoint}"
        query = {**params, "guid": guid, "callback": "callback"}

        async def _request():
            response = await self._client.get(
                url,
                params=query,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
            return response

        try:
            response = await retry_async(
                _request,
                max_attempts=self._settings.retry_attempts,
                base_delay=self._settings.retry_base_delay,
                should_retry=_is_transient,
                logger=logger,
                operation_name=f"abr_{endpoint}",
            )
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise LookupServiceError(
                f"ABR request failed ({status_code}): {exc.response.text[:500]}",
                status_code=status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise LookupServiceError(f"ABR request failed: {exc}") from exc

        payload = _decode(response.text)
        message = payload.get("Message")
        if message:
            raise LookupServiceError(body={"message": message}, status_code=response.status_code)
        return payload

    @staticmethod
    def _read_secret(secret: Any) -> str | None:
        if not secret:
            return None
        try:
            return secret.get_secret_value()
        except AttributeError:
            return str(secret)


def _is_transient(exc: Exception) -> bool:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return isinstance(exc, httpx.TransportError)


def _decode(body: str) -> dict[str, Any]:
    match = _JSONP.match(body)
    raw = match.group("payload") if match else body
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise LookupServiceError(f"Unexpected ABR response: {body[:200]!r}") from exc
    if not isinstance(payload, dict):
        raise LookupServiceError(f"Unexpected ABR response: {body[:200]!r}")
    return payload


def _details_to_record(payload: dict[str, Any]) -> LookupRecord:
    return LookupRecord(
        abn=payload.get("Abn") or "",
        name=payload.get("EntityName") or None,
        status=payload.get("AbnStatus") or None,
        status_effective_from=payload.get("AbnStatusEffectiveFrom") or None,
        acn=payload.get("Acn") or None,
        state=payload.get("AddressState") or None,
        postcode=payload.get("AddressPostcode") or None,
        entity_type=payload.get("EntityTypeName") or None,
        entity_type_code=payload.get("EntityTypeCode") or None,
        gst_registered_from=payload.get("Gst") or None,
        business_names=list(payload.get("BusinessName") or []),
    )


def _match_to_record(item: dict[str, Any]) -> LookupRecord:
    return LookupRecord(
        abn=item.get("Abn") or "",
        name=item.get("Name") or None,
        status=item.get("AbnStatus") or None,
        state=item.get("State") or None,
        postcode=item.get("Postcode") or None,
        name_type=item.get("NameType") or None,
        score=item.get("Score"),
        is_current=item.get("IsCurrent"),
    )


__all__ = ["LookupService", "AbrLookupClient"]
