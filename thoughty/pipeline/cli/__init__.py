#!/usr/bin/env python3
"""
Thoughty CLI
------------------------

Command-line interface for journal text import and export.

Command Groups:
    - Format: format show, format set
    - Transfer: export, preview, import
    - Text: convert

Usage:
    # Show / change the text-format tokens of user 1
    thoughty format show
    thoughty format set --tag-open-bracket "(" --tag-close-bracket ")"

    # Export everything, or one diary
    thoughty export -o backups/
    thoughty export --diary 2

    # Inspect, then import a file
    thoughty preview journal.txt
    thoughty import journal.txt --keep-duplicates

    # Re-encode a file between two token sets
    thoughty convert old.txt -o new.txt --from-format old.yaml
"""
from __future__ import annotations

import click
from pathlib import Path

from thoughty.core.cli import setup_logger
from thoughty.core.cli_options import (
    db_option,
    log_dir_option,
    user_option,
    verbose_option,
)


@click.group()
@db_option
@log_dir_option
@user_option
@verbose_option
@click.pass_context
def cli(
    ctx: click.Context, db_path: str, log_dir: str, user_id: int, verbose: bool
) -> None:
    """Thoughty journal import/export tools"""
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = Path(db_path)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["user_id"] = user_id
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "cli")
    ctx.call_on_close(ctx.obj["logger"].close)


# Import and register commands from submodules
from .format import format_group
from .transfer import export, preview, import_cmd
from .text import convert

cli.add_command(format_group)
cli.add_command(export)
cli.add_command(preview)
cli.add_command(import_cmd)
cli.add_command(convert)


__all__ = ["cli"]
