from golfcup.config import FactThresholds
from golfcup.models import Game, HoleResult, Player, ScoreLine, SideScores, Tournament, TournamentSnapshot
from golfcup.scoring import recompute_game
from golfcup.stats import (
    NOT_ENOUGH_DATA,
    NOTHING_NOTABLE,
    find_birdies,
    find_grind_matches,
    find_hole_in_ones,
    find_low_tier_pars,
    find_most_strokes_on_hole,
    find_upset_alerts,
    generate_facts,
    longest_tied_streak,
)


PLAYERS = [
    Player(id="u1", name="Jordi", team="USA", tier=1, average_score=68),
    Player(id="e1", name="Shabs", team="EUROPE", tier=3, average_score=97),
]


def _game(usa_scores, europe_scores, *, par=3, game_id="g1", **kwargs) -> Game:
    padding = [None] * (18 - len(usa_scores))
    holes = tuple(
        HoleResult(
            hole_number=number,
            stroke_index=number,
            par_score=par,
            usa_score=usa,
            europe_score=europe,
        )
        for number, (usa, europe) in enumerate(
            zip(list(usa_scores) + padding, list(europe_scores) + padding), start=1
        )
    )
    defaults = dict(
        id=game_id,
        usa_player_id="u1",
        usa_player_name="Jordi",
        europe_player_id="e1",
        europe_player_name="Shabs",
        holes=holes,
    )
    defaults.update(kwargs)
    return recompute_game(Game(**defaults))


def _snapshot(*games, tournament=None, players=PLAYERS) -> TournamentSnapshot:
    return TournamentSnapshot(tournament=tournament, games=list(games), players=players)


def _alternating(count):
    usa, europe = [], []
    for idx in range(count):
        if idx % 2 == 0:
            usa.append(4)
            europe.append(5)
        else:
            usa.append(5)
            europe.append(4)
    return usa, europe


def test_hole_in_one_needs_par_above_one():
    usa = [4, 4, 4, 4, 1]
    europe = [5, 5, 5, 5, 5]

    assert find_hole_in_ones(_snapshot(_game(usa, europe, par=1))) == []

    facts = find_hole_in_ones(_snapshot(_game(usa, europe, par=3)))
    assert len(facts) == 1
    assert "HOLE-IN-ONE" in facts[0]
    assert "hole 5" in facts[0]
    assert "Jordi" in facts[0]


def test_grind_match_reports_longest_streak():
    usa_tail, europe_tail = _alternating(14)
    game = _game([4] * 4 + usa_tail, [4] * 4 + europe_tail)

    facts = find_grind_matches(_snapshot(game))

    assert len(facts) == 1
    assert "4 consecutive tied holes" in facts[0]
    assert "Jordi vs Shabs" in facts[0]


def test_grind_match_ignores_short_streak():
    usa_tail, europe_tail = _alternating(16)
    game = _game([4] * 2 + usa_tail, [4] * 2 + europe_tail)

    assert find_grind_matches(_snapshot(game)) == []


def test_grind_streak_threshold_is_configurable():
    usa_tail, europe_tail = _alternating(14)
    game = _game([4] * 4 + usa_tail, [4] * 4 + europe_tail)

    assert find_grind_matches(_snapshot(game), FactThresholds(grind_streak=5)) == []


def test_tied_streak_stops_at_unplayed_hole():
    game = _game([4, 4, None, 4, 4, 3], [4, 4, None, 4, 4, 4])

    assert longest_tied_streak(game) == 2


def test_tied_streak_counts_one_sided_holes():
    game = _game([4, 4, 6], [4, 4, None])

    assert longest_tied_streak(game) == 3


def test_blow_up_threshold():
    six = _snapshot(_game([4, 6], [4, 4]))
    five = _snapshot(_game([4, 5], [4, 4]))

    facts = find_most_strokes_on_hole(six)
    assert len(facts) == 1
    assert "BLOW UP ALERT" in facts[0]
    assert "6 strokes on hole 2" in facts[0]
    assert find_most_strokes_on_hole(five) == []
    assert find_most_strokes_on_hole(six, FactThresholds(blow_up_strokes=7)) == []


def test_blow_up_reports_single_worst_hole():
    facts = find_most_strokes_on_hole(_snapshot(_game([7, 4, 9], [4, 8, 4])))

    assert facts == [
        "💣 BLOW UP ALERT! Jordi had a tough time, taking 9 strokes on hole 3."
    ]


def test_low_tier_par_only_for_tier_three():
    game = _game([3, 4], [3, 3])

    facts = find_low_tier_pars(_snapshot(game))

    assert len(facts) == 2
    assert all("Shabs" in fact for fact in facts)
    assert find_low_tier_pars(_snapshot(game, players=PLAYERS[:1])) == []


def _upset_game(winner=SideScores(usa=1, europe=0), **kwargs) -> Game:
    defaults = dict(
        is_complete=True,
        usa_player_handicap=20,
        europe_player_handicap=15,
    )
    defaults.update(kwargs)
    game = _game([4] * 18, [4] * 18, **defaults)
    return game.model_copy(
        update={"points": ScoreLine(adjusted=winner)}
    )


def test_upset_alert_for_higher_handicap_winner():
    tournament = Tournament(id="t1", use_handicaps=True)

    facts = find_upset_alerts(_snapshot(_upset_game(), tournament=tournament))

    assert facts == [
        "🚨 UPSET ALERT! Jordi (Hcp 20) overcame the odds to defeat Shabs (Hcp 15)!"
    ]


def test_upset_alert_requires_gap_completion_and_handicaps():
    on = Tournament(id="t1", use_handicaps=True)
    off = Tournament(id="t1", use_handicaps=False)

    assert find_upset_alerts(_snapshot(_upset_game(usa_player_handicap=17), tournament=on)) == []
    assert find_upset_alerts(_snapshot(_upset_game(is_complete=False), tournament=on)) == []
    assert find_upset_alerts(_snapshot(_upset_game(), tournament=off)) == []
    assert find_upset_alerts(_snapshot(_upset_game(europe_player_handicap=None), tournament=on)) == []


def test_upset_alert_at_minimum_gap():
    on = Tournament(id="t1", use_handicaps=True)

    facts = find_upset_alerts(_snapshot(_upset_game(europe_player_handicap=17), tournament=on))

    assert facts == [
        "🚨 UPSET ALERT! Jordi (Hcp 20) overcame the odds to defeat Shabs (Hcp 17)!"
    ]


def test_upset_alert_for_europe_underdog():
    on = Tournament(id="t1", use_handicaps=True)
    game = _upset_game(
        winner=SideScores(usa=0, europe=1),
        usa_player_handicap=14,
        europe_player_handicap=19,
    )

    facts = find_upset_alerts(_snapshot(game, tournament=on))

    assert facts == [
        "🚨 UPSET ALERT! Shabs (Hcp 19) overcame the odds to defeat Jordi (Hcp 14)!"
    ]


def test_game_override_enables_upset_alert():
    off = Tournament(id="t1", use_handicaps=False)

    facts = find_upset_alerts(_snapshot(_upset_game(use_handicaps=True), tournament=off))

    assert len(facts) == 1


def test_birdie_on_two_stroke_hole():
    facts = find_birdies(_snapshot(_game([3, 2, 4], [3, 3, 3])))

    assert facts == ["🕊️ BIRDIE! Jordi makes a birdie on hole 2!"]
    assert find_birdies(_snapshot(_game([3, 3, 4], [3, 3, 3]))) == []


def test_generate_facts_placeholders():
    assert generate_facts(None) == [NOT_ENOUGH_DATA]
    assert generate_facts(TournamentSnapshot(games=[])) == [NOT_ENOUGH_DATA]
    assert generate_facts({"games": []}) == [NOT_ENOUGH_DATA]
    assert generate_facts(_snapshot(_game([4] * 18, [5] * 18))) == [NOTHING_NOTABLE]


def test_generate_facts_concatenates_in_feed_order():
    game = _game([1, 4, 2], [7, 5, 4])

    facts = generate_facts(_snapshot(game))

    assert len(facts) > 1
    assert facts[0].startswith("💣 BLOW UP ALERT!")
    assert "7 strokes on hole 1" in facts[0]
    assert any("HOLE-IN-ONE" in fact and "hole 1" in fact for fact in facts)
    assert facts.index(next(f for f in facts if "HOLE-IN-ONE" in f)) < facts.index(
        next(f for f in facts if "BIRDIE" in f)
    )


def test_unknown_player_names():
    game = _game([1], [4], usa_player_id="ghost", usa_player_name="")

    facts = find_hole_in_ones(_snapshot(game, players=[]))

    assert facts == ["🎯 HOLE-IN-ONE! An unknown player got an ace on hole 1!"]
