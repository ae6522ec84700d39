# src/nodecounter/collectors/base_collector.py
"""
This module defines the abstract base class for all data collectors.
A collector fetches records from a remote source and returns them as
validated Pydantic models.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class BaseCollector(ABC):
    """
    Abstract Base Class for all collectors.
    """

    @abstractmethod
    async def collect(self) -> List[Any]:
        """
        The main method for a collector. It should fetch data from its
        source, parse it, and return a list of Pydantic models.
        """
        pass

    async def close(self):
        """
        Clean up resources (e.g., close HTTP sessions or API clients).
        """
        pass
