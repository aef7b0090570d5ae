"""goto CLI — main application definition."""

from __future__ import annotations

import typer

from wpgoto.commands import goto

app = typer.Typer(
    name="goto",
    help="Navigate between WordPress projects and their themes and plugins.",
    add_completion=False,
)

# ---------------------------------------------------------------------------
# Global state — set by the command, read by its helpers
# ---------------------------------------------------------------------------

class _State:
    verbose: bool = False

state = _State()


# ---------------------------------------------------------------------------
# Register commands
# ---------------------------------------------------------------------------

app.command(name="goto", help="Print the directory for a project and location.")(goto.goto_cmd)


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------

def run() -> None:
    app()
