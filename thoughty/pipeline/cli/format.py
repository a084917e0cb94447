"""
Format Commands
-------------------------

Commands for the text-format tokens stored in a user's settings.

Commands:
    - format show: Print the effective tokens as YAML
    - format set: Store tokens from a YAML file and/or options
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import click

from thoughty.core.cli import get_db
from thoughty.core.cli_options import format_token_options
from thoughty.core.logging_manager import ThoughtyLogger, handle_cli_error
from thoughty.dataclasses.format_config import dump_format_config, load_format_config
from thoughty.pipeline.journal_io import get_format_config, save_format_config


@click.group("format")
def format_group() -> None:
    """View or change the journal text format."""


@format_group.command("show")
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the user's format tokens as YAML."""
    try:
        db = get_db(ctx)
        with db.session_scope() as session:
            config = get_format_config(session, ctx.obj["user_id"], ctx.obj["logger"])
        click.echo(dump_format_config(config), nl=False)
    except Exception as e:
        handle_cli_error(ctx, e, "format_show")


@format_group.command("set")
@click.option(
    "--file",
    "format_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with token overrides",
)
@format_token_options
@click.pass_context
def set_format(ctx: click.Context, format_file: Optional[str], **tokens: Any) -> None:
    """
    Store format tokens for the user.

    Tokens not given (neither in --file nor as options) are reset to their
    defaults. Options win over the file.
    """
    logger: ThoughtyLogger = ctx.obj["logger"]

    try:
        overrides: Dict[str, Any] = {}
        if format_file:
            overrides.update(load_format_config(Path(format_file)).to_dict())
        overrides.update({k: v for k, v in tokens.items() if v is not None})

        db = get_db(ctx)
        with db.session_scope() as session:
            _, config = save_format_config(session, ctx.obj["user_id"], overrides, logger)

        click.echo("✅ Format saved:")
        click.echo(dump_format_config(config), nl=False)
    except Exception as e:
        handle_cli_error(ctx, e, "format_set", additional_context={"file": format_file})


__all__ = ["format_group"]
