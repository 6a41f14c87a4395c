"""Canonical records shared by the scoring, stats and ingest layers."""

from .game import Game, HoleResult
from .player import HistoricalScore, Player
from .scores import SIDES, Number, ScoreLine, Side, SideScores, other_side
from .tournament import ProgressSnapshot, TeamConfig, Tournament, TournamentSnapshot

__all__ = [
    "Game",
    "HistoricalScore",
    "HoleResult",
    "Number",
    "Player",
    "ProgressSnapshot",
    "SIDES",
    "ScoreLine",
    "Side",
    "SideScores",
    "TeamConfig",
    "Tournament",
    "TournamentSnapshot",
    "other_side",
]
