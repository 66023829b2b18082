"""Application entrypoint.

Run:
  python -m abn_lookup.main 51824753556
  python -m abn_lookup.main --name "Example Pty"
  python -m abn_lookup.main            # interactive
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

import httpx

from abn_lookup.config import get_settings
from abn_lookup.domain.models import SearchMode
from abn_lookup.frontend.console import MODE_SWITCHES, console, prompt_for_term, render_state
from abn_lookup.i18n import MessageCatalog
from abn_lookup.logging import configure_logging, logger
from abn_lookup.services.lookup import AbrLookupClient
from abn_lookup.services.search import SearchController


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="abn-lookup", description="Look up Australian Business Numbers.")
    parser.add_argument("term", nargs="?", help="ABN or business name; omit for interactive mode")
    parser.add_argument("--name", action="store_true", help="search by business name instead of ABN")
    return parser.parse_args(argv)


async def run_once(controller: SearchController, term: str) -> None:
    controller.change_term(term)
    await controller.submit()
    render_state(controller)


async def run_interactive(controller: SearchController) -> None:
    while True:
        raw = await asyncio.to_thread(prompt_for_term, controller)
        command = raw.strip().lower()
        if command in {":q", ":quit", ":exit"}:
            return
        if command in MODE_SWITCHES:
            controller.change_mode(MODE_SWITCHES[command])
            continue
        with console.status("Searching…"):
            await run_once(controller, raw)


async def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    async with httpx.AsyncClient() as http_client:
        controller = SearchController(
            AbrLookupClient(http_client, settings=settings.abr),
            catalog=MessageCatalog(),
            locale=settings.locale,
        )
        if args.name:
            controller.change_mode(SearchMode.NAME)

        logger.info("abn_lookup_starting", environment=settings.environment)
        if args.term is None:
            await run_interactive(controller)
        else:
            await run_once(controller, args.term)


def cli() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    cli()
