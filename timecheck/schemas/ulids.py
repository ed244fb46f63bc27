"""ULID Schemas — response contract for the batch statistics endpoint.

Invariants:
    - JSON field names are contract strings: "christmas eve", "weekday",
      "in the future", "LSB is 1" (spaces and casing preserved)
    - All counts are non-negative integers

Design Decisions:
    - Aliases carry the spaced names; Python code uses snake_case attributes
    - populate_by_name: built from core BatchStats by attribute name
"""

from pydantic import BaseModel, ConfigDict, Field

from timecheck.core.ulid_analytics import BatchStats


class BatchStatsResponse(BaseModel):
    """Batch statistics as returned by POST /12/ulids/{weekday}."""
    model_config = ConfigDict(populate_by_name=True)

    christmas_eve: int = Field(ge=0, alias="christmas eve")
    weekday: int = Field(ge=0)
    in_the_future: int = Field(ge=0, alias="in the future")
    lsb_is_1: int = Field(ge=0, alias="LSB is 1")

    @classmethod
    def from_stats(cls, stats: BatchStats) -> "BatchStatsResponse":
        return cls(
            christmas_eve=stats.christmas_eve,
            weekday=stats.weekday,
            in_the_future=stats.in_the_future,
            lsb_is_1=stats.lsb_is_1,
        )
