"""Tournament records, progress snapshots and the analysis snapshot bundle."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .game import Game
from .player import Player
from .scores import ScoreLine


TeamConfig = Literal["USA_VS_EUROPE", "EUROPE_VS_EUROPE", "USA_VS_USA"]


class ProgressSnapshot(BaseModel):
    """Cumulative totals at one point in time; never edited once appended."""

    timestamp: datetime
    score: ScoreLine
    projected_score: ScoreLine = Field(..., alias="projectedScore")
    completed_games: int = Field(..., ge=0, alias="completedGames")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Tournament(BaseModel):
    id: str
    name: str = ""
    year: Optional[int] = None
    is_active: bool = Field(default=True, alias="isActive")
    use_handicaps: bool = Field(default=False, alias="useHandicaps")
    team_config: TeamConfig = Field(default="USA_VS_EUROPE", alias="teamConfig")
    # Pairing state is owned by the admin tooling and carried through untouched.
    matchups: List[Dict[str, Any]] = Field(default_factory=list)
    total_score: ScoreLine = Field(default_factory=ScoreLine, alias="totalScore")
    projected_score: ScoreLine = Field(default_factory=ScoreLine, alias="projectedScore")
    progress: Tuple[ProgressSnapshot, ...] = ()

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class TournamentSnapshot(BaseModel):
    """A consistent read of one tournament, its games and the player roster."""

    tournament: Optional[Tournament] = None
    games: List[Game] = Field(default_factory=list)
    players: List[Player] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
