"""Primary Typer application wiring the authorship CLI."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.table import Table

from . import policy
from .common import CLIError, abort, configure_state, console, parse_override


app = typer.Typer(
    add_completion=False,
    help="""
    Decide which author a migrated change is committed under, based on the
    configured authoring policy.
    """.strip(),
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    environment: Optional[str] = typer.Option(
        None,
        "--environment",
        "-e",
        help="Active configuration environment (development, testing, production).",
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file holding the authoring policy.",
        show_default=False,
    ),
    override: List[str] = typer.Option(  # noqa: B008 - Typer callback signature
        [],
        "--override",
        "-o",
        metavar="KEY=VALUE",
        help="Configuration override in dotted.key=value notation (repeatable).",
    ),
    run_id: Optional[str] = typer.Option(
        None,
        "--run-id",
        help="Explicit run identifier; defaults to a generated value.",
        show_default=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Emit verbose diagnostic output for CLI operations.",
    ),
) -> None:
    """Configure shared CLI state prior to executing subcommands."""

    overrides = [parse_override(item) for item in override]
    try:
        configure_state(
            ctx,
            environment=environment,
            config_path=config,
            overrides=overrides,
            run_id=run_id,
            verbose=verbose,
        )
    except CLIError as error:
        abort(error)

    if verbose:
        state = ctx.obj
        table = Table(title="CLI Context", show_header=False, box=None)
        table.add_row("Environment", state.environment)
        table.add_row("Run ID", state.run_id)
        console.print(table)


app.add_typer(policy.app, name="policy", help="Authoring policy commands")
