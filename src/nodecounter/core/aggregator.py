# src/nodecounter/core/aggregator.py
"""
Builds the cumulative monthly history of the grid from a node snapshot.

Every month is recomputed from the full node list: a node counts towards a
month when it was created strictly before the first instant of that month.
"""

from datetime import datetime
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..models.node import Node, Resources
from ..models.report import MonthlyAggregate
from ..utils.date_utils import month_start_timestamp, utc_now_timestamp


def iter_report_months(start_year: int, years: int, now: int) -> Iterator[Tuple[int, int]]:
    """Yield (year, month) pairs from January of `start_year`, oldest first.

    At most `years * 12` months are produced. Generation stops at the first
    month that starts after `now` (Unix seconds); a month starting exactly at
    `now` is still yielded. Months must stay in increasing order, otherwise
    stopping at the first future month would drop past ones.
    """
    for offset in range(years * 12):
        year, month = start_year + offset // 12, offset % 12 + 1
        if now < month_start_timestamp(year, month):
            return
        yield year, month


def aggregate_nodes(nodes: Iterable[Node], cutoff: int) -> Tuple[int, int, Resources]:
    """Return (node count, distinct farm count, summed resources) of nodes created before `cutoff`."""
    node_count = 0
    farms = set()
    total = Resources.zero()
    for node in nodes:
        if node.created >= cutoff:
            continue
        node_count += 1
        farms.add(node.farm_id)
        total = total + node.resources
    return node_count, len(farms), total


def build_monthly_report(
    nodes: Sequence[Node],
    start_year: int,
    years: int,
    now: Optional[datetime] = None,
) -> List[MonthlyAggregate]:
    """Aggregate `nodes` for every elapsed month of the report window.

    `now` defaults to the current wall clock and is read once, so the whole
    report is computed against a single instant.
    """
    now_ts = utc_now_timestamp(now)
    result: List[MonthlyAggregate] = []
    for year, month in iter_report_months(start_year, years, now_ts):
        node_count, farm_count, total = aggregate_nodes(nodes, month_start_timestamp(year, month))
        result.append(
            MonthlyAggregate(
                year=year,
                month=month,
                node_count=node_count,
                farm_count=farm_count,
                total_resources=total,
            )
        )
    return result
