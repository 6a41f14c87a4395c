"""Game and hole records consumed and produced by the scoring engine."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .scores import Number, ScoreLine, Side


class HoleResult(BaseModel):
    """One hole of a game.

    Raw scores are entered externally; adjusted scores and the four
    match-play outcome fields are always derived by the engine.
    """

    hole_number: int = Field(..., alias="holeNumber")
    stroke_index: Number = Field(..., alias="strokeIndex")
    par_score: int = Field(default=3, alias="parScore")
    usa_score: Optional[Number] = Field(default=None, alias="usaPlayerScore")
    europe_score: Optional[Number] = Field(default=None, alias="europePlayerScore")
    usa_adjusted_score: Optional[Number] = Field(
        default=None, alias="usaPlayerAdjustedScore"
    )
    europe_adjusted_score: Optional[Number] = Field(
        default=None, alias="europePlayerAdjustedScore"
    )
    usa_outcome: int = Field(default=0, alias="usaPlayerMatchPlayScore")
    europe_outcome: int = Field(default=0, alias="europePlayerMatchPlayScore")
    usa_adjusted_outcome: int = Field(default=0, alias="usaPlayerMatchPlayAdjustedScore")
    europe_adjusted_outcome: int = Field(
        default=0, alias="europePlayerMatchPlayAdjustedScore"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def score(self, side: Side, *, adjusted: bool = False) -> Optional[Number]:
        if side == "USA":
            return self.usa_adjusted_score if adjusted else self.usa_score
        return self.europe_adjusted_score if adjusted else self.europe_score

    def outcome(self, side: Side, *, adjusted: bool = False) -> int:
        if side == "USA":
            return self.usa_adjusted_outcome if adjusted else self.usa_outcome
        return self.europe_adjusted_outcome if adjusted else self.europe_outcome

    @property
    def is_played(self) -> bool:
        """True once at least one side has a raw score."""

        return self.usa_score is not None or self.europe_score is not None

    @property
    def is_scored(self) -> bool:
        """True once both sides have a raw score and the hole can be decided."""

        return self.usa_score is not None and self.europe_score is not None


class Game(BaseModel):
    """A head-to-head match between one USA and one EUROPE player."""

    id: str
    tournament_id: str = Field(default="", alias="tournamentId")
    usa_player_id: str = Field(..., alias="usaPlayerId")
    usa_player_name: str = Field(default="", alias="usaPlayerName")
    usa_player_handicap: Optional[Number] = Field(default=None, alias="usaPlayerHandicap")
    europe_player_id: str = Field(..., alias="europePlayerId")
    europe_player_name: str = Field(default="", alias="europePlayerName")
    europe_player_handicap: Optional[Number] = Field(
        default=None, alias="europePlayerHandicap"
    )
    handicap_strokes: Number = Field(default=0, alias="handicapStrokes")
    higher_handicap_side: Side = Field(default="USA", alias="higherHandicapTeam")
    use_handicaps: Optional[bool] = Field(default=None, alias="useHandicaps")
    holes: Tuple[HoleResult, ...] = ()
    stroke_play_score: ScoreLine = Field(default_factory=ScoreLine, alias="strokePlayScore")
    match_play_score: ScoreLine = Field(default_factory=ScoreLine, alias="matchPlayScore")
    points: ScoreLine = Field(default_factory=ScoreLine)
    is_started: bool = Field(default=False, alias="isStarted")
    is_complete: bool = Field(default=False, alias="isComplete")
    status: Optional[str] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def player_id(self, side: Side) -> str:
        return self.usa_player_id if side == "USA" else self.europe_player_id

    def player_name(self, side: Side) -> str:
        return self.usa_player_name if side == "USA" else self.europe_player_name

    def player_handicap(self, side: Side) -> Optional[Number]:
        return self.usa_player_handicap if side == "USA" else self.europe_player_handicap
