"""Per-side score containers shared by games and tournaments."""

from __future__ import annotations

from typing import Literal, Tuple, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


Side = Literal["USA", "EUROPE"]
SIDES: Tuple[Side, Side] = ("USA", "EUROPE")

# Scores stay permissive: NaN and fractional values flow through untouched.
Number = Union[int, float]


def other_side(side: Side) -> Side:
    return "EUROPE" if side == "USA" else "USA"


class SideScores(BaseModel):
    """A USA/EUROPE pair keyed the way the stored documents key it."""

    usa: Number = Field(default=0, alias="USA")
    europe: Number = Field(default=0, alias="EUROPE")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def of(self, side: Side) -> Number:
        return self.usa if side == "USA" else self.europe


class ScoreLine(BaseModel):
    """Raw and handicap-adjusted variants of the same per-side figure."""

    raw: SideScores = Field(default_factory=SideScores)
    adjusted: SideScores = Field(default_factory=SideScores)

    model_config = ConfigDict(frozen=True)

    def pick(self, adjusted: bool) -> SideScores:
        return self.adjusted if adjusted else self.raw
