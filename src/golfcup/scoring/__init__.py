"""Handicap-adjusted scoring engine: holes, games and tournaments."""

from .game import (
    GameStatus,
    GameTotals,
    StatusFilter,
    aggregate_game,
    award_points,
    filter_games,
    game_status,
    recompute_game,
)
from .handicap import (
    HandicapContext,
    HoleAdjustment,
    adjust_hole,
    allocate_strokes,
    apply_adjustment,
    handicap_differential,
    handicap_index,
    hole_outcome,
)
from .setup import new_game
from .tournament import (
    TournamentTotals,
    TournamentUpdate,
    aggregate_tournament,
    project_game,
    recompute_tournament,
)

__all__ = [
    "GameStatus",
    "GameTotals",
    "HandicapContext",
    "HoleAdjustment",
    "StatusFilter",
    "TournamentTotals",
    "TournamentUpdate",
    "adjust_hole",
    "aggregate_game",
    "aggregate_tournament",
    "allocate_strokes",
    "apply_adjustment",
    "award_points",
    "filter_games",
    "game_status",
    "handicap_differential",
    "handicap_index",
    "hole_outcome",
    "new_game",
    "project_game",
    "recompute_game",
    "recompute_tournament",
]
