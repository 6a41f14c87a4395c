"""Player records as maintained by the roster tooling."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .scores import Number, Side


class HistoricalScore(BaseModel):
    year: int
    score: Number

    model_config = ConfigDict(frozen=True)


class Player(BaseModel):
    """Read-only view of a player; ``average_score`` is the handicap index."""

    id: str = Field(..., min_length=1)
    name: str
    team: Side
    tier: Optional[int] = None
    average_score: Optional[Number] = Field(default=None, alias="averageScore")
    historical_scores: List[HistoricalScore] = Field(
        default_factory=list, alias="historicalScores"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)
