"""Roll a game's adjusted holes up into stroke-play, match-play and points."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Literal, Sequence

from golfcup.models import Game, HoleResult, Number, ScoreLine, Side, SideScores

from .handicap import HandicapContext, apply_adjustment


logger = logging.getLogger(__name__)

GameStatus = Literal["complete", "in_progress", "not_started"]
StatusFilter = Literal["all", "complete", "in_progress", "not_started"]


@dataclass(frozen=True)
class GameTotals:
    stroke_play_score: ScoreLine
    match_play_score: ScoreLine
    points: ScoreLine
    is_started: bool


def _stroke_total(holes: Sequence[HoleResult], side: Side, *, adjusted: bool) -> Number:
    # Unentered holes are skipped, not counted as zero.
    scores = (hole.score(side, adjusted=adjusted) for hole in holes)
    return sum(score for score in scores if score is not None)


def _holes_won(holes: Sequence[HoleResult], side: Side, *, adjusted: bool) -> int:
    return sum(1 for hole in holes if hole.outcome(side, adjusted=adjusted) == 1)


def _line(holes: Sequence[HoleResult], total) -> ScoreLine:
    return ScoreLine(
        raw=SideScores(
            usa=total(holes, "USA", adjusted=False),
            europe=total(holes, "EUROPE", adjusted=False),
        ),
        adjusted=SideScores(
            usa=total(holes, "USA", adjusted=True),
            europe=total(holes, "EUROPE", adjusted=True),
        ),
    )


def award_points(match_play: SideScores) -> SideScores:
    """One point to the side with strictly more holes won; a level game awards none."""

    if match_play.usa > match_play.europe:
        return SideScores(usa=1, europe=0)
    if match_play.europe > match_play.usa:
        return SideScores(usa=0, europe=1)
    return SideScores(usa=0, europe=0)


def aggregate_game(holes: Sequence[HoleResult]) -> GameTotals:
    """Totals for a game whose holes already carry adjusted scores and outcomes."""

    stroke_play = _line(holes, _stroke_total)
    match_play = _line(holes, _holes_won)
    points = ScoreLine(
        raw=award_points(match_play.raw),
        adjusted=award_points(match_play.adjusted),
    )
    return GameTotals(
        stroke_play_score=stroke_play,
        match_play_score=match_play,
        points=points,
        is_started=any(hole.is_played for hole in holes),
    )


def recompute_game(game: Game) -> Game:
    """Rebuild every derived hole field and aggregate from the raw scores.

    ``is_complete`` and ``status`` are operator-owned and copied through.
    """

    context = HandicapContext.for_game(game)
    holes = tuple(apply_adjustment(hole, context) for hole in game.holes)
    totals = aggregate_game(holes)
    logger.debug(
        "Recomputed game %s: match play raw %s-%s adjusted %s-%s",
        game.id,
        totals.match_play_score.raw.usa,
        totals.match_play_score.raw.europe,
        totals.match_play_score.adjusted.usa,
        totals.match_play_score.adjusted.europe,
    )
    return game.model_copy(
        update={
            "holes": holes,
            "stroke_play_score": totals.stroke_play_score,
            "match_play_score": totals.match_play_score,
            "points": totals.points,
            "is_started": totals.is_started,
        }
    )


def game_status(game: Game) -> GameStatus:
    if game.is_complete:
        return "complete"
    if game.is_started:
        return "in_progress"
    return "not_started"


def filter_games(games: Iterable[Game], status: StatusFilter = "all") -> List[Game]:
    if status == "all":
        return list(games)
    return [game for game in games if game_status(game) == status]
