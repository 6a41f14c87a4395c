"""Fun-facts feed: read-only pattern scans over a tournament snapshot."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from golfcup.config.course import COURSE_PAR
from golfcup.config.thresholds import DEFAULT_THRESHOLDS, FactThresholds
from golfcup.models import SIDES, Game, HoleResult, Number, Player, Side, TournamentSnapshot


logger = logging.getLogger(__name__)

NOT_ENOUGH_DATA = (
    "Tournament data is still loading or no games have been played yet. Check back soon!"
)
NOTHING_NOTABLE = (
    "No particularly wild stats from the tournament yet, but the competition is heating up!"
)
UNKNOWN_PLAYER = "An unknown player"

# Birdie and tier-par scans assume every hole is played to the course par.
BIRDIE_SCORE = COURSE_PAR - 1
PAR_SCORE = COURSE_PAR
LOW_TIER = 3

Detector = Callable[[TournamentSnapshot, FactThresholds], List[str]]


class _Names:
    def __init__(self, players: Sequence[Player]):
        self._by_id: Dict[str, str] = {player.id: player.name for player in players}

    def __call__(self, game: Game, side: Side) -> str:
        player_id = game.player_id(side)
        return self._by_id.get(player_id) or game.player_name(side) or UNKNOWN_PLAYER


def _side_scores(snapshot: TournamentSnapshot) -> Iterator[Tuple[Game, HoleResult, Side, Number]]:
    """Yield every entered raw score with its game, hole and side."""

    for game in snapshot.games:
        for hole in game.holes:
            for side in SIDES:
                score = hole.score(side)
                if score is not None:
                    yield game, hole, side, score


def _fmt(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def find_most_strokes_on_hole(
    snapshot: TournamentSnapshot,
    thresholds: FactThresholds = DEFAULT_THRESHOLDS,
) -> List[str]:
    names = _Names(snapshot.players)
    max_strokes: Number = 0
    worst: Optional[Tuple[Game, HoleResult, Side]] = None
    for game, hole, side, score in _side_scores(snapshot):
        if score > max_strokes:
            max_strokes = score
            worst = (game, hole, side)

    if worst is None or max_strokes < thresholds.blow_up_strokes:
        return []
    game, hole, side = worst
    return [
        f"💣 BLOW UP ALERT! {names(game, side)} had a tough time, taking "
        f"{_fmt(max_strokes)} strokes on hole {hole.hole_number}."
    ]


def find_hole_in_ones(
    snapshot: TournamentSnapshot,
    thresholds: FactThresholds = DEFAULT_THRESHOLDS,
) -> List[str]:
    names = _Names(snapshot.players)
    # An ace only counts where par is above one.
    return [
        f"🎯 HOLE-IN-ONE! {names(game, side)} got an ace on hole {hole.hole_number}!"
        for game, hole, side, score in _side_scores(snapshot)
        if score == 1 and hole.par_score > 1
    ]


def find_birdies(
    snapshot: TournamentSnapshot,
    thresholds: FactThresholds = DEFAULT_THRESHOLDS,
) -> List[str]:
    names = _Names(snapshot.players)
    return [
        f"🕊️ BIRDIE! {names(game, side)} makes a birdie on hole {hole.hole_number}!"
        for game, hole, side, score in _side_scores(snapshot)
        if score == BIRDIE_SCORE
    ]


def find_low_tier_pars(
    snapshot: TournamentSnapshot,
    thresholds: FactThresholds = DEFAULT_THRESHOLDS,
) -> List[str]:
    low_tier = {player.id for player in snapshot.players if player.tier == LOW_TIER}
    if not low_tier:
        return []
    names = _Names(snapshot.players)
    return [
        f"👀 TIER {LOW_TIER} PAR! Well, look at that. {names(game, side)} managed a par "
        f"on hole {hole.hole_number}."
        for game, hole, side, score in _side_scores(snapshot)
        if score == PAR_SCORE and game.player_id(side) in low_tier
    ]


def longest_tied_streak(game: Game) -> int:
    """Longest run of consecutive played holes that nobody won."""

    longest = 0
    current = 0
    for hole in sorted(game.holes, key=lambda h: h.hole_number):
        if hole.is_played and hole.usa_outcome == hole.europe_outcome:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def find_grind_matches(
    snapshot: TournamentSnapshot,
    thresholds: FactThresholds = DEFAULT_THRESHOLDS,
) -> List[str]:
    names = _Names(snapshot.players)
    messages: List[str] = []
    for game in snapshot.games:
        streak = longest_tied_streak(game)
        if streak >= thresholds.grind_streak:
            messages.append(
                f"🤝 GRIND ALERT! {names(game, 'USA')} vs {names(game, 'EUROPE')} featured a "
                f"hard-fought streak of {streak} consecutive tied holes!"
            )
    return messages


def _uses_handicaps(snapshot: TournamentSnapshot, game: Game) -> bool:
    if game.use_handicaps is not None:
        return game.use_handicaps
    return snapshot.tournament.use_handicaps if snapshot.tournament else False


def find_upset_alerts(
    snapshot: TournamentSnapshot,
    thresholds: FactThresholds = DEFAULT_THRESHOLDS,
) -> List[str]:
    """Finished handicap games won on adjusted points by the clearly weaker player.

    Compares the players' own handicaps, not the game differential.
    """

    names = _Names(snapshot.players)
    messages: List[str] = []
    for game in snapshot.games:
        if not game.is_complete or not _uses_handicaps(snapshot, game):
            continue
        if game.usa_player_handicap is None or game.europe_player_handicap is None:
            continue

        points = game.points.adjusted
        for underdog, favourite in (("USA", "EUROPE"), ("EUROPE", "USA")):
            gap = game.player_handicap(underdog) - game.player_handicap(favourite)
            if gap >= thresholds.upset_handicap_gap and points.of(underdog) > points.of(favourite):
                messages.append(
                    f"🚨 UPSET ALERT! {names(game, underdog)} "
                    f"(Hcp {_fmt(game.player_handicap(underdog))}) overcame the odds to defeat "
                    f"{names(game, favourite)} (Hcp {_fmt(game.player_handicap(favourite))})!"
                )
    return messages


DETECTORS: Tuple[Detector, ...] = (
    find_most_strokes_on_hole,
    find_hole_in_ones,
    find_birdies,
    find_low_tier_pars,
    find_grind_matches,
    find_upset_alerts,
)


def generate_facts(
    snapshot: Union[TournamentSnapshot, Mapping, None],
    thresholds: Optional[FactThresholds] = None,
) -> List[str]:
    """Run every detector in feed order and concatenate their findings."""

    if snapshot is None:
        return [NOT_ENOUGH_DATA]
    if isinstance(snapshot, Mapping):
        snapshot = TournamentSnapshot.model_validate(snapshot)
    if not snapshot.games:
        return [NOT_ENOUGH_DATA]

    resolved = thresholds or DEFAULT_THRESHOLDS
    facts: List[str] = []
    for detector in DETECTORS:
        found = detector(snapshot, resolved)
        if found:
            logger.debug("%s produced %d fact(s)", detector.__name__, len(found))
        facts.extend(found)

    if not facts:
        return [NOTHING_NOTABLE]
    return facts
