"""Create empty games for a new matchup."""

from __future__ import annotations

from typing import Iterable, Optional

from golfcup.config.course import COURSE_PAR, stroke_indices, validate_stroke_indices
from golfcup.models import Game, HoleResult, Player, Tournament

from .handicap import handicap_differential


def new_game(
    game_id: str,
    tournament: Tournament,
    usa_player: Player,
    europe_player: Player,
    *,
    indices: Optional[Iterable[int]] = None,
    use_handicaps: Optional[bool] = None,
) -> Game:
    """Build an unscored 18-hole game between two players.

    The differential comes from the players' handicap indices only when
    handicaps are enabled for the game (falling back to the tournament flag).
    Raises ValueError when ``indices`` is not a permutation of 1..18.
    """

    table = validate_stroke_indices(indices) if indices is not None else stroke_indices()
    enabled = tournament.use_handicaps if use_handicaps is None else use_handicaps
    strokes, higher = handicap_differential(usa_player, europe_player) if enabled else (0, "USA")

    holes = tuple(
        HoleResult(hole_number=number, stroke_index=index, par_score=COURSE_PAR)
        for number, index in enumerate(table, start=1)
    )
    return Game(
        id=game_id,
        tournament_id=tournament.id,
        usa_player_id=usa_player.id,
        usa_player_name=usa_player.name,
        usa_player_handicap=usa_player.average_score,
        europe_player_id=europe_player.id,
        europe_player_name=europe_player.name,
        europe_player_handicap=europe_player.average_score,
        handicap_strokes=strokes,
        higher_handicap_side=higher,
        use_handicaps=use_handicaps,
        holes=holes,
    )
