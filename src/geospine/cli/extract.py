"""
CLI: ``geospine extract`` - run the Feature processor over JSON documents.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from geospine.cli.utils import InputFormatError, err_console, format_documents, parse_documents, read_text
from geospine.core.errors import ConfigError, ValidationError, categorize_error, is_retryable
from geospine.core.logging import LogContext, get_logger
from geospine.core.settings import get_settings
from geospine.framework.processors.feature import FeatureProcessor
from geospine.framework.registry import create_processor

logger = get_logger(__name__)


def extract(
    input_path: str = typer.Argument("-", help="JSON file to read, or - for stdin"),
    field: str | None = typer.Option(None, "--field", "-f", help="Destination field for the geometry"),
    on_failure: str | None = typer.Option(None, "--on-failure", help="abort | skip"),
    lines: bool = typer.Option(False, "--lines", help="Newline-delimited JSON in and out"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write documents here instead of stdout"),
    tag: str = typer.Option("cli", "--tag", help="Processor tag used in logs and errors"),
) -> None:
    """Move each Feature's geometry into FIELD and promote its properties."""
    settings = get_settings()
    policy = on_failure or settings.on_failure
    if policy not in ("abort", "skip"):
        err_console.print(f"[bold red]Invalid --on-failure:[/bold red] {escape(policy)} (expected abort or skip)")
        raise typer.Exit(code=2)

    try:
        processor = create_processor(
            FeatureProcessor.TYPE,
            {FeatureProcessor.FIELD_KEY: field if field is not None else settings.default_field},
            tag=tag,
            description="geospine extract",
        )
    except ConfigError as e:
        err_console.print(f"[bold red]Invalid configuration:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=2)

    try:
        documents, single = parse_documents(read_text(input_path), lines=lines)
    except (InputFormatError, UnicodeDecodeError, OSError) as e:
        err_console.print(f"[bold red]Cannot read input:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=2)

    processed = []
    with LogContext(source=input_path, processor=processor.type, tag=tag):
        for index, document in enumerate(documents):
            try:
                processor(document)
            except ValidationError as e:
                if policy == "abort":
                    err_console.print(f"[bold red]Invalid document {index}:[/bold red] {escape(e.message)}")
                    raise typer.Exit(code=1)
                logger.warning(
                    "document_skipped",
                    index=index,
                    reason=e.message,
                    field_name=e.field,
                    category=categorize_error(e).value,
                    retryable=is_retryable(e),
                )
                continue
            processed.append(document)

        logger.info("documents_processed", total=len(documents), processed=len(processed))

    rendered = format_documents(processed, single=single, lines=lines)
    if output is not None:
        output.write_text(rendered + "\n" if rendered else "", encoding="utf-8")
    elif rendered:
        typer.echo(rendered)
