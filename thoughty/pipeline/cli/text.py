"""
Text Commands
-------------------------

Commands working on journal text files alone (no database).

Commands:
    - convert: Re-encode a file from one set of format tokens to another
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from thoughty.core.cli import ExportStats
from thoughty.core.exceptions import ExportError
from thoughty.core.logging_manager import ThoughtyLogger, handle_cli_error
from thoughty.dataclasses.format_config import DEFAULT_FORMAT, load_format_config
from thoughty.pipeline.journal_io import reencode_text

from .transfer import read_upload


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file (default: print to stdout)",
)
@click.option(
    "--from-format",
    "from_format",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML tokens FILE is written in (default tokens if omitted)",
)
@click.option(
    "--to-format",
    "to_format",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML tokens to write with (default tokens if omitted)",
)
@click.pass_context
def convert(
    ctx: click.Context,
    file: str,
    output: Optional[str],
    from_format: Optional[str],
    to_format: Optional[str],
) -> None:
    """Re-encode journal text FILE with different format tokens."""
    logger: ThoughtyLogger = ctx.obj["logger"]
    stats = ExportStats()

    try:
        source = load_format_config(Path(from_format)) if from_format else DEFAULT_FORMAT
        target = load_format_config(Path(to_format)) if to_format else DEFAULT_FORMAT

        text, count = reencode_text(read_upload(Path(file)), source, target)
        stats.entries_exported = count

        if output is None:
            click.echo(text, nl=False)
            return

        try:
            Path(output).write_bytes(text.encode("utf-8"))
        except OSError as e:
            raise ExportError(f"Cannot write {output}: {e}") from e

        stats.files_created += 1
        logger.log_operation("convert_complete", {"file": file, "output": output})
        logger.log_stats("convert", stats)
        click.echo(f"✅ Converted {count} entries to {output}")
    except Exception as e:
        handle_cli_error(ctx, e, "convert", additional_context={"file": file})


__all__ = ["convert"]
