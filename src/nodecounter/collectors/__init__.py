from .base_collector import BaseCollector
from .grid_node_collector import GridNodeCollector

__all__ = ["BaseCollector", "GridNodeCollector"]
