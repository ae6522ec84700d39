from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ..models.report import MonthlyAggregate


class BaseExporter(ABC):
    """Abstract base class for file exporters.

    Subclasses should provide a DEFAULT_FILENAME and implement `export`.
    """

    DEFAULT_FILENAME: str = "node_count"

    @abstractmethod
    async def export(self, rows: List[MonthlyAggregate], path: str | None = None) -> str:
        """Export the provided rows to disk. Return the written path."""
        raise NotImplementedError()
