"""JSON message catalog with per-locale fallback."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class MessageCatalog:
    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = "en") -> None:
        self.locales_path = Path(locales_path or Path(__file__).with_name("locales"))
        self.default_locale = default_locale.lower()
        self._tables: dict[str, dict[str, str]] = {}

    def text(self, key: str, *, locale: str | None = None, **kwargs: Any) -> str:
        """Return the message for ``key``, formatted with ``kwargs``.

        Falls back to the default locale, then to the key itself.
        """

        loc = (locale or self.default_locale).lower()
        message = self._table(loc).get(key)
        if message is None and loc != self.default_locale:
            message = self._table(self.default_locale).get(key)
        if message is None:
            return key
        return message.format(**kwargs) if kwargs else message

    def _table(self, locale: str) -> dict[str, str]:
        if locale not in self._tables:
            file_path = self.locales_path / f"{locale}.json"
            if file_path.exists():
                with file_path.open("r", encoding="utf-8") as fp:
                    self._tables[locale] = json.load(fp)
            else:
                self._tables[locale] = {}
        return self._tables[locale]


__all__ = ["MessageCatalog"]
