"""Handicap stroke allocation and per-hole adjustment."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, Optional, Tuple

from golfcup.config.course import HOLES_PER_ROUND
from golfcup.models import Game, HistoricalScore, HoleResult, Number, Player, Side


def _as_number(value: Any) -> Number:
    if isinstance(value, bool) or not isinstance(value, Real):
        return math.nan
    return value


def allocate_strokes(handicap_differential: Any, stroke_index: Any) -> Number:
    """Strokes given on a hole of ``stroke_index`` for a game differential.

    Every hole gets ``differential // 18``; the ``differential % 18`` hardest
    holes (lowest index) get one more. A zero or negative differential gives
    nothing anywhere. Nothing is validated: a NaN or non-numeric differential
    comes back as NaN.
    """

    differential = _as_number(handicap_differential)
    index = _as_number(stroke_index)
    if differential <= 0:
        return 0
    base = differential // HOLES_PER_ROUND
    remainder = differential % HOLES_PER_ROUND
    extra = 1 if index <= remainder else 0
    return base + extra


@dataclass(frozen=True)
class HandicapContext:
    """The part of a game the adjuster needs."""

    handicap_strokes: Number
    higher_handicap_side: Side

    @classmethod
    def for_game(cls, game: Game) -> "HandicapContext":
        return cls(
            handicap_strokes=game.handicap_strokes,
            higher_handicap_side=game.higher_handicap_side,
        )


@dataclass(frozen=True)
class HoleAdjustment:
    usa_adjusted_score: Optional[Number]
    europe_adjusted_score: Optional[Number]
    usa_outcome: int = 0
    europe_outcome: int = 0
    usa_adjusted_outcome: int = 0
    europe_adjusted_outcome: int = 0


def hole_outcome(usa_score: Number, europe_score: Number) -> Tuple[int, int]:
    """Return (usa, europe) hole wins; a tie credits nobody."""

    if usa_score < europe_score:
        return 1, 0
    if europe_score < usa_score:
        return 0, 1
    return 0, 0


def adjust_hole(
    context: HandicapContext,
    stroke_index: Any,
    usa_score: Optional[Number],
    europe_score: Optional[Number],
) -> HoleAdjustment:
    """Apply the game's handicap strokes to one hole and decide it.

    The allocated strokes are added to the side that is *not* the higher
    handicap side; the higher handicap side keeps its raw score. A hole with
    either score missing is left undecided.
    """

    if usa_score is None or europe_score is None:
        return HoleAdjustment(usa_adjusted_score=usa_score, europe_adjusted_score=europe_score)

    strokes = allocate_strokes(context.handicap_strokes, stroke_index)
    usa_adjusted, europe_adjusted = usa_score, europe_score
    if context.higher_handicap_side == "USA":
        europe_adjusted = europe_score + strokes
    else:
        usa_adjusted = usa_score + strokes

    usa_outcome, europe_outcome = hole_outcome(usa_score, europe_score)
    usa_adjusted_outcome, europe_adjusted_outcome = hole_outcome(usa_adjusted, europe_adjusted)
    return HoleAdjustment(
        usa_adjusted_score=usa_adjusted,
        europe_adjusted_score=europe_adjusted,
        usa_outcome=usa_outcome,
        europe_outcome=europe_outcome,
        usa_adjusted_outcome=usa_adjusted_outcome,
        europe_adjusted_outcome=europe_adjusted_outcome,
    )


def apply_adjustment(hole: HoleResult, context: HandicapContext) -> HoleResult:
    """Return ``hole`` with its derived fields recomputed from the raw scores."""

    result = adjust_hole(context, hole.stroke_index, hole.usa_score, hole.europe_score)
    return hole.model_copy(
        update={
            "usa_adjusted_score": result.usa_adjusted_score,
            "europe_adjusted_score": result.europe_adjusted_score,
            "usa_outcome": result.usa_outcome,
            "europe_outcome": result.europe_outcome,
            "usa_adjusted_outcome": result.usa_adjusted_outcome,
            "europe_adjusted_outcome": result.europe_adjusted_outcome,
        }
    )


def handicap_index(historical_scores: Iterable[HistoricalScore]) -> Optional[int]:
    """Rounded mean of the three most recent yearly scores."""

    recent = sorted(historical_scores, key=lambda entry: entry.year, reverse=True)[:3]
    if not recent:
        return None
    mean = sum(entry.score for entry in recent) / len(recent)
    return math.floor(mean + 0.5)


def handicap_differential(
    usa_player: Optional[Player],
    europe_player: Optional[Player],
) -> Tuple[Number, Side]:
    """Game differential and the higher handicap side, from two players' indices."""

    if usa_player is None or europe_player is None:
        return 0, "USA"
    if usa_player.average_score is None or europe_player.average_score is None:
        return 0, "USA"
    usa_index = usa_player.average_score
    europe_index = europe_player.average_score
    higher: Side = "USA" if usa_index > europe_index else "EUROPE"
    return abs(usa_index - europe_index), higher
