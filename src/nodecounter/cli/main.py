# src/nodecounter/cli/main.py
"""
This module is the main entry point for the node counter CLI.
"""

import logging

import typer

from ..core.config import config
from . import report

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="nodecounter",
    help="Build a monthly history of ThreeFold Grid nodes, farms and capacity.",
    add_completion=False,
)


def version_callback(value: bool):
    """
    Prints the version of the node counter.
    """
    if value:
        from .. import __version__

        typer.echo(f"nodecounter version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of the node counter.
    """
    from .. import __version__

    typer.echo(f"nodecounter version: {__version__}")


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    Node counter CLI main entry point.
    """
    pass


app.add_typer(report.app, name="report")


if __name__ == "__main__":
    app()
