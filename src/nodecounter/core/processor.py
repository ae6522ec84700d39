# src/nodecounter/core/processor.py
import logging
from datetime import datetime
from typing import List, Optional

from ..collectors.grid_node_collector import GridNodeCollector
from ..exporters.csv_exporter import NodeCountCSVExporter
from ..models.report import MonthlyAggregate
from .aggregator import build_monthly_report
from .config import ReportSettings

logger = logging.getLogger(__name__)


class ReportProcessor:
    """Orchestrates the fetch, the monthly aggregation and the CSV export."""

    def __init__(
        self,
        settings: ReportSettings,
        collector: Optional[GridNodeCollector] = None,
        exporter: Optional[NodeCountCSVExporter] = None,
    ):
        self.settings = settings
        self.collector = collector or GridNodeCollector(settings)
        self.exporter = exporter or NodeCountCSVExporter()

    async def run(self, now: Optional[datetime] = None) -> List[MonthlyAggregate]:
        """
        Fetches the nodes, aggregates them per month and writes the report.

        Nothing is written when the fetch fails.
        """
        try:
            nodes = await self.collector.collect()
        finally:
            await self.collector.close()

        rows = build_monthly_report(nodes, self.settings.start_year, self.settings.years, now=now)
        logger.info(
            "Computed %d monthly rows from %d nodes starting %d.",
            len(rows),
            len(nodes),
            self.settings.start_year,
        )

        await self.exporter.export(rows, self.settings.output_path)
        return rows
