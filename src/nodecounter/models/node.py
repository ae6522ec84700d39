# src/nodecounter/models/node.py

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

U64_MAX = 2**64 - 1

_DECIMAL = re.compile(r"\+?[0-9]+")


def parse_u64(value: Any) -> int:
    """
    Normalizes a resource counter to an unsigned 64-bit integer.

    The GraphQL API returns big numbers as decimal strings and small ones as
    JSON integers, so both are accepted. Anything else (booleans, floats,
    null, negative or fractional values) is rejected with a ValueError.
    """
    if isinstance(value, bool):
        raise ValueError("wrong type: boolean")
    if isinstance(value, str):
        if not _DECIMAL.fullmatch(value):
            raise ValueError(f"invalid numeric string: {value!r}")
        number = int(value)
    elif isinstance(value, int):
        number = value
    else:
        raise ValueError(f"wrong type: {type(value).__name__}")

    if number < 0 or number > U64_MAX:
        raise ValueError(f"invalid number: {value!r}")
    return number


class Resources(BaseModel):
    """
    Capacity units of a node.

    Attributes:
        cru: Compute units
        mru: Memory units
        sru: Solid-state storage units
        hru: Hard-disk storage units
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    cru: int = Field(..., description="Compute units")
    mru: int = Field(..., description="Memory units")
    sru: int = Field(..., description="SSD storage units")
    hru: int = Field(..., description="HDD storage units")

    @field_validator("cru", "mru", "sru", "hru", mode="before")
    @classmethod
    def _coerce_u64(cls, value: Any) -> int:
        return parse_u64(value)

    @classmethod
    def zero(cls) -> "Resources":
        return cls(cru=0, mru=0, sru=0, hru=0)

    def __add__(self, other: "Resources") -> "Resources":
        if not isinstance(other, Resources):
            return NotImplemented
        # Totals are not wire values: they may exceed the per-node u64 limit.
        return Resources.model_construct(
            cru=self.cru + other.cru,
            mru=self.mru + other.mru,
            sru=self.sru + other.sru,
            hru=self.hru + other.hru,
        )


class Node(BaseModel):
    """
    A grid node as returned by the GraphQL `nodes` query.

    Attributes:
        node_id: Node identifier (nodeID)
        farm_id: Farm the node belongs to (farmID)
        created: Creation time, Unix seconds
        resources: Total capacity of the node (resourcesTotal)
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    node_id: int = Field(..., alias="nodeID", strict=True, description="Node identifier")
    farm_id: int = Field(..., alias="farmID", strict=True, description="Farm identifier")
    created: int = Field(..., strict=True, description="Creation timestamp in Unix seconds")
    resources: Resources = Field(..., alias="resourcesTotal", description="Total node resources")
