"""
Defines the abstract base class for all reporters.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models.report import MonthlyAggregate


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report(self, data: List[MonthlyAggregate]):
        """
        Takes the computed monthly rows and presents them.
        """
        pass
