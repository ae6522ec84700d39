from .node import Node, Resources
from .report import CSV_HEADER, MonthlyAggregate

__all__ = ["CSV_HEADER", "MonthlyAggregate", "Node", "Resources"]
