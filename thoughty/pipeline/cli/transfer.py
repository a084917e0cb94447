"""
Transfer Commands
-------------------------

Commands that move entries between the database and journal text files.

Commands:
    - export: Write the user's entries to a text file
    - preview: Show what an import would do
    - import: Persist the entries of a text file
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from thoughty.core.cli import get_db
from thoughty.core.cli_options import diary_option
from thoughty.core.logging_manager import ThoughtyLogger, handle_cli_error
from thoughty.core.paths import EXPORT_DIR
from thoughty.pipeline.journal_io import (
    export_entries,
    import_entries,
    preview_import,
    write_export,
)


def read_upload(path: Path) -> str:
    """Read a journal file verbatim (line endings untouched)."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


@click.command()
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=str(EXPORT_DIR),
    help="Output file, or directory (existing, ending in / or without suffix)",
)
@diary_option
@click.pass_context
def export(ctx: click.Context, output: str, diary_id: Optional[int]) -> None:
    """Export journal entries to a text file."""
    logger: ThoughtyLogger = ctx.obj["logger"]

    try:
        db = get_db(ctx)
        with db.session_scope() as session:
            result = export_entries(session, ctx.obj["user_id"], diary_id, logger=logger)

        path = write_export(result, output, logger)

        click.echo(f"✅ Exported {result.stats.entries_exported} entries to {path}")
        if ctx.obj.get("verbose"):
            click.echo(f"   {result.stats.summary()}")
    except Exception as e:
        handle_cli_error(
            ctx, e, "export", additional_context={"output": output, "diary_id": diary_id}
        )


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@diary_option
@click.pass_context
def preview(ctx: click.Context, file: str, diary_id: Optional[int]) -> None:
    """Show the entries of FILE and which of them already exist."""
    logger: ThoughtyLogger = ctx.obj["logger"]

    try:
        content = read_upload(Path(file))

        db = get_db(ctx)
        with db.session_scope() as session:
            result = preview_import(session, ctx.obj["user_id"], content, diary_id, logger)

        click.echo(f"📄 {result.total_count} entries found in {file}")
        if ctx.obj.get("verbose"):
            for entry in result.entries:
                tags = f" [{', '.join(entry.tags)}]" if entry.tags else ""
                click.echo(f"  • {entry.date} #{entry.index}{tags}")

        click.echo(f"🔁 {result.duplicate_count} duplicates")
        for duplicate in result.duplicates:
            click.echo(f"  • {duplicate['date']}: {duplicate['content']}")
    except Exception as e:
        handle_cli_error(ctx, e, "preview", additional_context={"file": file})


@click.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@diary_option
@click.option(
    "--keep-duplicates",
    is_flag=True,
    help="Import entries even if an identical entry already exists",
)
@click.pass_context
def import_cmd(
    ctx: click.Context, file: str, diary_id: Optional[int], keep_duplicates: bool
) -> None:
    """Import the entries of a journal text FILE."""
    logger: ThoughtyLogger = ctx.obj["logger"]

    try:
        content = read_upload(Path(file))

        db = get_db(ctx)
        with db.session_scope() as session:
            stats = import_entries(
                session,
                ctx.obj["user_id"],
                content,
                skip_duplicates=not keep_duplicates,
                diary_id=diary_id,
                logger=logger,
            )

        click.echo(f"✅ Imported {stats.entries_imported} entries from {file}")
        if stats.entries_skipped:
            click.echo(f"   Skipped {stats.entries_skipped} duplicates")
        if stats.errors:
            click.echo(f"⚠️  {stats.errors} entries could not be imported", err=True)
        if ctx.obj.get("verbose"):
            click.echo(f"   {stats.summary()}")
    except Exception as e:
        handle_cli_error(
            ctx,
            e,
            "import",
            additional_context={"file": file, "diary_id": diary_id},
        )


__all__ = ["export", "preview", "import_cmd", "read_upload"]
