from __future__ import annotations

import csv
import io
import logging
import os
from typing import List

import aiofiles

from ..core.exceptions import ReportWriteError
from ..models.report import CSV_HEADER, MonthlyAggregate
from .base_exporter import BaseExporter

logger = logging.getLogger(__name__)


class NodeCountCSVExporter(BaseExporter):
    DEFAULT_FILENAME = "node_count.csv"

    def render(self, rows: List[MonthlyAggregate]) -> str:
        """Render the header and one line per month, in the given order."""
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for row in rows:
            writer.writerow(row.to_csv_row())
        return output.getvalue()

    async def export(self, rows: List[MonthlyAggregate], path: str | None = None) -> str:
        """Write the report, replacing any existing file. Returns path written.

        The content is rendered before the file is opened, so the file is only
        touched once the whole report is known.
        """
        out_path = path or self.DEFAULT_FILENAME
        content = self.render(list(rows or []))

        try:
            os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
            async with aiofiles.open(out_path, "w", encoding="utf-8", newline="") as fh:
                await fh.write(content)
        except OSError as e:
            raise ReportWriteError(f"Cannot write report to {out_path}: {e}") from e

        logger.info(f"Wrote {len(rows or [])} monthly rows to {out_path}")
        return out_path
