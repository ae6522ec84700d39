# src/nodecounter/reporters/console_reporter.py
"""
A reporter that displays the monthly history in a formatted table in the console.
"""

import logging
from typing import List

from rich.console import Console
from rich.table import Table

from ..models.report import CSV_HEADER, MonthlyAggregate
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)


class ConsoleReporter(BaseReporter):
    """
    Renders the monthly node history to the console using the 'rich' library.
    """

    def __init__(self):
        self.console = Console()

    def report(self, data: List[MonthlyAggregate]):
        if not data:
            self.console.print("No months to report.", style="yellow")
            return

        table = Table(
            title="Grid Node History",
            header_style="bold magenta",
        )
        table.add_column("Date", style="cyan")
        for title in CSV_HEADER[1:]:
            table.add_column(title.capitalize(), justify="right")

        for item in data:
            table.add_row(*item.to_csv_row())

        self.console.print(table)
