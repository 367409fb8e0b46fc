"""Commands that inspect and apply the configured authoring policy."""

from __future__ import annotations

from typing import List, Optional

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from authorship.authoring import ENTRY_POINTS, resolve_author

from .common import CLIError, abort, console, get_state


app = typer.Typer(
    add_completion=False,
    help="Inspect the configured authoring policy and apply it to origin authors.",
    no_args_is_help=True,
)


def _show_command(ctx: typer.Context) -> None:
    try:
        authoring = get_state(ctx).authoring()
    except CLIError as error:
        abort(error)
    table = Table(title="Authoring policy", show_header=False, box=None)
    table.add_row("Mode", authoring.mode.name)
    table.add_row("Default author", escape(str(authoring.default_author)))
    table.add_row("Whitelist", escape(", ".join(sorted(authoring.whitelist))) or "-")
    console.print(table)


def _decide_command(
    ctx: typer.Context,
    origin_ids: List[str] = typer.Argument(..., help="Raw origin author identifiers."),
) -> None:
    try:
        authoring = get_state(ctx).authoring()
    except CLIError as error:
        abort(error)
    for origin_id in origin_ids:
        verdict = "origin" if authoring.use_author(origin_id) else "default"
        console.print(f"{escape(origin_id)}: {verdict}")


def _resolve_command(
    ctx: typer.Context,
    origin_id: str = typer.Argument(..., help="Raw origin author identifier."),
    origin_author: Optional[str] = typer.Option(
        None,
        "--origin-author",
        "-a",
        help="Origin author as 'Name <email>'; defaults to the policy default when absent.",
    ),
) -> None:
    try:
        authoring = get_state(ctx).authoring()
    except CLIError as error:
        abort(error)
    console.print(escape(str(resolve_author(authoring, origin_id, origin_author))))


def _entry_points_command() -> None:
    for name, entry in ENTRY_POINTS.items():
        signature = ", ".join(entry.parameters)
        lines = [escape(entry.doc), ""]
        for example in entry.examples:
            lines.append(f"[bold]{escape(example.title)}[/bold]")
            if example.before:
                lines.append(escape(example.before))
            lines.append(escape(example.code))
            lines.append("")
        console.print(
            Panel("\n".join(lines).rstrip(), title=f"{name}({signature})", border_style="cyan")
        )


app.command("show")(_show_command)
app.command("decide")(_decide_command)
app.command("resolve")(_resolve_command)
app.command("entry-points")(_entry_points_command)
