# src/nodecounter/models/report.py

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .node import Resources

CSV_HEADER = [
    "date",
    "node count",
    "farms with nodes",
    "total CRU",
    "total MRU",
    "total SRU",
    "total HRU",
]


class MonthlyAggregate(BaseModel):
    """
    Cumulative totals over all nodes created before the first instant of a month.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int = Field(..., description="Calendar year")
    month: int = Field(..., ge=1, le=12, description="Calendar month, 1-12")
    node_count: int = Field(0, ge=0, description="Nodes created before the month start")
    farm_count: int = Field(0, ge=0, description="Distinct farms among those nodes")
    total_resources: Resources = Field(default_factory=Resources.zero, description="Summed node resources")

    @property
    def date_label(self) -> str:
        # Month and day are not zero padded.
        return f"{self.year}-{self.month}-1"

    def to_csv_row(self) -> List[str]:
        r = self.total_resources
        return [
            self.date_label,
            str(self.node_count),
            str(self.farm_count),
            str(r.cru),
            str(r.mru),
            str(r.sru),
            str(r.hru),
        ]
