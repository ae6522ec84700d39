# src/nodecounter/cli/report.py
"""
Implements the `report` command: fetch the grid nodes and write the monthly CSV.
"""

import asyncio
import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..core.config import config
from ..core.exceptions import NodeCounterError
from ..core.processor import ReportProcessor
from ..reporters.console_reporter import ConsoleReporter

logger = logging.getLogger(__name__)

app = typer.Typer(help="Generate the monthly node count report.", add_completion=False)


@app.callback(invoke_without_command=True)
def report(
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            help="CSV file to write. Default: './node_count.csv'",
            dir_okay=False,
        ),
    ] = None,
    start_year: Annotated[
        Optional[int],
        typer.Option("--start-year", help="First year of the report (default 2022)."),
    ] = None,
    years: Annotated[
        Optional[int],
        typer.Option("--years", min=1, help="Maximum number of years covered (default 10)."),
    ] = None,
    endpoint: Annotated[
        Optional[str],
        typer.Option("--endpoint", help="GraphQL endpoint to query."),
    ] = None,
    table: Annotated[
        bool,
        typer.Option("--table/--no-table", help="Also print the report as a table."),
    ] = False,
):
    """
    Fetch every grid node and write the cumulative monthly history as CSV.
    """
    try:
        config.validate_instance()
        settings = config.to_settings(
            output_path=str(output) if output else None,
            start_year=start_year,
            years=years,
            graphql_url=endpoint,
        )
    except (ValueError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)

    logger.info("Generating node count report...")

    try:
        rows = asyncio.run(ReportProcessor(settings).run())
    except NodeCounterError as e:
        logger.error(f"Report generation failed: {e}")
        logger.debug("Report generation failed: %s", traceback.format_exc())
        raise typer.Exit(code=1)

    if table:
        ConsoleReporter().report(rows)

    print(f"Report written to: {settings.output_path}", file=sys.stderr)
