"""goto — resolve a project directory for shell navigation."""

from __future__ import annotations

import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from wpgoto.utils.classify import RunContext, classify_context
from wpgoto.utils.config import load_config
from wpgoto.utils.errors import GotoError
from wpgoto.utils.resolve import LOCATION_OPTIONS, resolve
from wpgoto.utils.themes import WordPressOptionsLookup, database_name

# Diagnostics go to stderr so stdout stays a bare path for `cd`
console = Console(stderr=True)


def _debug(message: str) -> None:
    from wpgoto.main import state

    if state.verbose:
        console.print(f"  [dim]{escape(message)}[/dim]")


def goto_cmd(
    tokens: Optional[List[str]] = typer.Argument(
        None,
        help="A project host name and/or a location: root, themes, plugins, parent, child.",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show how the path was resolved."),
) -> None:
    """Jump to a WordPress project, or a location inside it.

    Prints the resolved path to stdout for shell integration, e.g.
    goto() { cd ~/Projects && cd "$(command goto "$@")"; }
    """
    from wpgoto.main import state

    state.verbose = verbose

    try:
        config = load_config()
        _debug(f"config: {config.source or 'built-in defaults'}")

        context = RunContext.from_process(tokens or [], projects_root=config.projects_root)
        _debug(f"projects root: {context.root}")
        _debug(f"cwd: {context.cwd}")

        request = classify_context(context)
        _debug(f"project: {request.project}  location: {request.location or '-'}")

        if request.location in LOCATION_OPTIONS:
            _debug(
                f"reading {LOCATION_OPTIONS[request.location]} from "
                f"{database_name(request.project)}.{config.database.options_table} "
                f"on {config.database.host}:{config.database.port}"
            )
        path = resolve(request, WordPressOptionsLookup(config.database))
    except GotoError as err:
        sys.stderr.write(f"{err.message}\n")
        raise typer.Exit(1)

    print(path)
