"""Tournament roll-ups: running totals, projected finish and progress history."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from golfcup.config.course import HOLES_PER_ROUND
from golfcup.models import Game, ProgressSnapshot, ScoreLine, SideScores, Tournament

from .game import recompute_game


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TournamentTotals:
    total_score: ScoreLine
    projected_score: ScoreLine
    completed_games: int


@dataclass
class TournamentUpdate:
    tournament: Tournament
    games: List[Game]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def project_game(game: Game, *, adjusted: bool = False) -> Tuple[float, float]:
    """Expected final (usa, europe) holes won for one game.

    A complete game is taken as it stands. Otherwise the current margin per
    decided hole is carried across the holes still to play and credited to
    whichever side it favours; with no decided holes the margin is zero.
    """

    current = game.match_play_score.pick(adjusted)
    usa, europe = float(current.usa), float(current.europe)
    if game.is_complete:
        return usa, europe

    decided = sum(1 for hole in game.holes if hole.is_scored)
    remaining = max(HOLES_PER_ROUND - decided, 0)
    if decided == 0 or remaining == 0:
        return usa, europe

    projected_margin = (usa - europe) / decided * remaining
    if projected_margin > 0:
        usa += projected_margin
    else:
        europe -= projected_margin
    return usa, europe


def _projected_side_scores(games: Sequence[Game], *, adjusted: bool) -> SideScores:
    usa_total = 0.0
    europe_total = 0.0
    for game in games:
        usa, europe = project_game(game, adjusted=adjusted)
        usa_total += usa
        europe_total += europe
    return SideScores(usa=_round_half_up(usa_total), europe=_round_half_up(europe_total))


def _total_side_scores(games: Sequence[Game], *, adjusted: bool) -> SideScores:
    lines = [game.match_play_score.pick(adjusted) for game in games]
    return SideScores(
        usa=sum(line.usa for line in lines),
        europe=sum(line.europe for line in lines),
    )


def aggregate_tournament(games: Sequence[Game]) -> TournamentTotals:
    """Totals over already recomputed games.

    Every game counts toward the totals, finished or not.
    """

    total = ScoreLine(
        raw=_total_side_scores(games, adjusted=False),
        adjusted=_total_side_scores(games, adjusted=True),
    )
    projected = ScoreLine(
        raw=_projected_side_scores(games, adjusted=False),
        adjusted=_projected_side_scores(games, adjusted=True),
    )
    return TournamentTotals(
        total_score=total,
        projected_score=projected,
        completed_games=sum(1 for game in games if game.is_complete),
    )


def recompute_tournament(
    tournament: Tournament,
    games: Sequence[Game],
    *,
    now: Optional[datetime] = None,
) -> TournamentUpdate:
    """Recompute every game, roll them up and append one progress snapshot."""

    recomputed = [recompute_game(game) for game in games]
    totals = aggregate_tournament(recomputed)
    snapshot = ProgressSnapshot(
        timestamp=now or datetime.now(timezone.utc),
        score=totals.total_score,
        projected_score=totals.projected_score,
        completed_games=totals.completed_games,
    )
    logger.info(
        "Tournament %s: %s games (%s complete), raw %s-%s, projected %s-%s",
        tournament.id,
        len(recomputed),
        totals.completed_games,
        totals.total_score.raw.usa,
        totals.total_score.raw.europe,
        totals.projected_score.raw.usa,
        totals.projected_score.raw.europe,
    )
    updated = tournament.model_copy(
        update={
            "total_score": totals.total_score,
            "projected_score": totals.projected_score,
            "progress": (*tournament.progress, snapshot),
        }
    )
    return TournamentUpdate(tournament=updated, games=recomputed)
