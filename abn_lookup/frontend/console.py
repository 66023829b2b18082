"""Terminal rendering of the search state."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from abn_lookup.domain.models import SearchMode
from abn_lookup.services.search import SearchController

console = Console()

MODE_SWITCHES = {":abn": SearchMode.IDENTIFIER, ":name": SearchMode.NAME}


def build_results_table(controller: SearchController) -> Table:
    table = Table(box=box.SIMPLE_HEAVY, show_lines=False)
    table.add_column("ABN", style="bold cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("State", no_wrap=True)
    table.add_column("Postcode", no_wrap=True)

    for record in controller.state.results:
        extra = record.model_extra or {}
        table.add_row(
            record.formatted_abn,
            record.name or "",
            str(extra.get("status") or ""),
            str(extra.get("state") or ""),
            str(extra.get("postcode") or ""),
        )
    return table


def render_state(controller: SearchController, target: Console | None = None) -> None:
    out = target or console
    state = controller.state
    if state.error:
        out.print(f"[red]✗[/red] {state.error}")
        return
    if not controller.has_results:
        out.print("[dim]No matching businesses found.[/dim]")
        return
    out.print(build_results_table(controller))


def prompt_for_term(controller: SearchController) -> str:
    label = f"{controller.mode_label} [dim]({controller.term_placeholder}, :abn / :name to switch, :q to quit)[/dim]"
    return Prompt.ask(label)


__all__ = ["MODE_SWITCHES", "build_results_table", "render_state", "prompt_for_term"]
