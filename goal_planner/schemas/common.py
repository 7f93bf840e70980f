"""Shared result contracts."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Horizon(BaseModel):
    """Outcome of solving for the number of months needed to reach a target.

    ``reached`` carries the month count (0 when the goal is already met);
    ``unreachable`` means the target is not attained within the horizon ceiling
    or can never be attained with the given contribution.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["reached", "unreachable"]
    months: Optional[int] = Field(default=None, ge=0)

    @classmethod
    def reached_in(cls, months: int) -> "Horizon":
        return cls(status="reached", months=months)

    @classmethod
    def unreachable(cls) -> "Horizon":
        return cls(status="unreachable")

    @property
    def is_reached(self) -> bool:
        return self.status == "reached"

    def months_or(self, ceiling: int) -> int:
        """Month count, substituting ``ceiling`` for an unreachable horizon."""
        return self.months if self.months is not None else ceiling
