# csvview/cli/cli.py
"""
csvview CLI.

Commands:
    csvview show FILE       Print the parsed table
    csvview columns FILE    List header names with value counts
    csvview guess FILE      Print the guessed delimiter
    csvview convert FILE    Re-serialize with another delimiter
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from csvview.cli.ui import ui
from csvview.config.loader import load_config
from csvview.config.schema import CSVConfig, ViewKind
from csvview.core.exceptions import ConfigValidationError, CSVError
from csvview.delimiter import delimiter_label, guess_delimiter, validate_delimiter
from csvview.document import CSV
from csvview.io.loader import read_text
from csvview.logging.logger import configure_logging, get_logger
from csvview.logging.tags import CLI
from csvview.views.named import NamedRow

logger = get_logger(__name__)

app = typer.Typer(
    name="csvview",
    help="Parse, inspect and convert delimited text files.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """csvview - comma/tab/semicolon separated tables."""
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)


# =============================================================================
# Helpers
# =============================================================================


def _resolve_config(config_path: Optional[Path], **overrides: Any) -> CSVConfig:
    """Load the layered config and apply command-line overrides."""
    config = load_config(config_path)
    updates = {k: v for k, v in overrides.items() if v is not None}
    if not updates:
        return config
    try:
        return CSVConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid option: {e}") from e


def _load(file: Path, config: CSVConfig) -> CSV:
    text = read_text(file, encoding=config.encoding)
    return CSV.from_config(text, config)


def _display_rows(doc: CSV) -> list[list[str]]:
    """Rows padded/truncated to the header width for display."""
    width = len(doc.header)
    out = []
    for row in doc.rows:
        fields = row.normalized() if isinstance(row, NamedRow) else row
        out.append(list(fields[:width]) + [""] * (width - len(fields)))
    return out


# =============================================================================
# Commands
# =============================================================================


@app.command("show")
def show(
    file: Path = typer.Argument(..., help="Delimited text file."),
    delimiter: Optional[str] = typer.Option(
        None, "--delimiter", "-d", help="Separator or name (comma, semicolon, tab). Guessed if omitted."
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Parse at most this many data rows."),
    named: bool = typer.Option(False, "--named", help="Use the name-keyed view."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config YAML file."),
) -> None:
    """Parse a file and print it as a table."""
    try:
        config = _resolve_config(
            config_path,
            delimiter=delimiter,
            row_limit=limit,
            view=ViewKind.NAMED if named else None,
            load_columns=False,
        )
        doc = _load(file, config)
    except (CSVError, OSError, UnicodeDecodeError) as e:
        ui.error(str(e))
        raise typer.Exit(1)

    logger.info(f"{CLI} Showing {file} ({len(doc.rows)} rows)")
    ui.header(str(file), f"{len(doc.header)} columns, {len(doc.rows)} rows, {delimiter_label(doc.delimiter)}")
    ui.table(doc.header, _display_rows(doc))
    if config.row_limit is not None and len(doc.rows) == config.row_limit:
        ui.warning(f"Row limit reached: showing {config.row_limit} rows", detail="--limit")


@app.command("columns")
def columns(
    file: Path = typer.Argument(..., help="Delimited text file."),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", "-d", help="Separator or name."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config YAML file."),
) -> None:
    """List header names with the number of non-empty values in each column."""
    try:
        config = _resolve_config(
            config_path,
            delimiter=delimiter,
            view=ViewKind.ENUMERATED,
            load_columns=True,
        )
        doc = _load(file, config)
    except (CSVError, OSError, UnicodeDecodeError) as e:
        ui.error(str(e))
        raise typer.Exit(1)

    summary = [
        [column.header, str(sum(1 for value in column.rows if value)), str(len(column.rows))]
        for column in doc.columns
    ]
    ui.table(["Column", "Non-empty", "Values"], summary, title=str(file))


@app.command("guess")
def guess(
    file: Path = typer.Argument(..., help="Delimited text file."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config YAML file."),
) -> None:
    """Print the delimiter csvview would guess for a file."""
    try:
        config = _resolve_config(config_path)
        text = read_text(file, encoding=config.encoding)
    except (CSVError, OSError, UnicodeDecodeError) as e:
        ui.error(str(e))
        raise typer.Exit(1)

    typer.echo(delimiter_label(guess_delimiter(text, sample_size=config.guess_sample_size)))


@app.command("convert")
def convert(
    file: Path = typer.Argument(..., help="Delimited text file."),
    to: str = typer.Option("comma", "--to", "-t", help="Target separator or name."),
    delimiter: Optional[str] = typer.Option(None, "--delimiter", "-d", help="Source separator. Guessed if omitted."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write here instead of stdout."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Config YAML file."),
) -> None:
    """Re-serialize a file with a different delimiter."""
    try:
        target = validate_delimiter(to)
        config = _resolve_config(config_path, delimiter=delimiter, load_columns=False)
        doc = _load(file, config)
    except (CSVError, OSError, UnicodeDecodeError) as e:
        ui.error(str(e))
        raise typer.Exit(1)

    text = doc.content.serialize(doc.header, target, line_terminator=config.line_terminator)

    if output is None:
        typer.echo(text, nl=False)
        return

    try:
        output.write_text(text, encoding=config.encoding, newline="")
    except OSError as e:
        ui.error(str(e))
        raise typer.Exit(1)
    ui.success(f"Wrote {len(doc.rows)} rows to {output} ({delimiter_label(target)})")


__all__ = ["app"]
