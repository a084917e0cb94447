#!/usr/bin/env python3
"""
cli_options.py
-------------------
Reusable Click option decorators for consistent CLI interfaces.

Usage:
    from thoughty.core.cli_options import diary_option, format_token_options

    @cli.command()
    @diary_option
    @format_token_options
    def my_command(diary, **tokens):
        pass
"""
import click

from thoughty.core.paths import DB_PATH, LOG_DIR
from thoughty.dataclasses.format_config import FIELD_NAMES


# ═══════════════════════════════════════════════════════════════════════════
# LOGGING OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

verbose_option = click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose logging with detailed output"
)

log_dir_option = click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files"
)


# ═══════════════════════════════════════════════════════════════════════════
# DATABASE OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(dir_okay=False),
    default=str(DB_PATH),
    show_default=True,
    help="SQLite database file"
)

user_option = click.option(
    "--user",
    "user_id",
    type=int,
    default=1,
    show_default=True,
    help="Id of the user whose journal is used"
)

diary_option = click.option(
    "--diary",
    "diary_id",
    type=int,
    default=None,
    help="Restrict to (or import into) this diary id"
)


# ═══════════════════════════════════════════════════════════════════════════
# FORMAT OPTIONS
# ═══════════════════════════════════════════════════════════════════════════

def format_token_options(function):
    """
    Add one ``--<token>`` option per format token (e.g. ``--date-prefix``).

    Options left out are passed as None.
    """
    for camel, attr in reversed(list(FIELD_NAMES.items())):
        function = click.option(
            f"--{attr.replace('_', '-')}",
            attr,
            default=None,
            help=f"Value for the {camel} token",
        )(function)
    return function
