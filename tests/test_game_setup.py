import pytest

from golfcup.config import COURSE_PAR, DEFAULT_STROKE_INDICES
from golfcup.models import HistoricalScore, Player, Tournament
from golfcup.scoring import handicap_differential, handicap_index, new_game


def _player(player_id, team, average_score=None) -> Player:
    return Player(id=player_id, name=player_id.title(), team=team, average_score=average_score)


def test_handicap_index_uses_three_latest_years():
    scores = [
        HistoricalScore(year=2021, score=50),
        HistoricalScore(year=2024, score=89),
        HistoricalScore(year=2023, score=108),
        HistoricalScore(year=2022, score=101),
    ]

    assert handicap_index(scores) == 99


def test_handicap_index_rounds_half_up():
    scores = [HistoricalScore(year=2024, score=85), HistoricalScore(year=2023, score=86)]

    assert handicap_index(scores) == 86
    assert handicap_index([]) is None


def test_handicap_differential():
    usa = _player("mansir", "USA", 113)
    europe = _player("gilo", "EUROPE", 79)

    assert handicap_differential(usa, europe) == (34, "USA")
    assert handicap_differential(europe.model_copy(update={"team": "USA"}), usa) == (34, "EUROPE")
    assert handicap_differential(usa, None) == (0, "USA")
    assert handicap_differential(usa, _player("new", "EUROPE")) == (0, "USA")


def test_new_game_with_handicaps():
    tournament = Tournament(id="t1", use_handicaps=True)
    usa = _player("jordi", "USA", 68)
    europe = _player("paul", "EUROPE", 99)

    game = new_game("g1", tournament, usa, europe)

    assert game.tournament_id == "t1"
    assert game.handicap_strokes == 31
    assert game.higher_handicap_side == "EUROPE"
    assert game.usa_player_handicap == 68
    assert game.europe_player_handicap == 99
    assert len(game.holes) == 18
    assert tuple(h.stroke_index for h in game.holes) == DEFAULT_STROKE_INDICES
    assert all(h.par_score == COURSE_PAR and h.usa_score is None for h in game.holes)
    assert game.is_started is False


def test_new_game_without_handicaps():
    tournament = Tournament(id="t1", use_handicaps=False)

    game = new_game("g1", tournament, _player("a", "USA", 60), _player("b", "EUROPE", 100))

    assert game.handicap_strokes == 0
    assert game.higher_handicap_side == "USA"
    assert game.use_handicaps is None


def test_new_game_override_and_custom_table():
    tournament = Tournament(id="t1", use_handicaps=False)
    table = list(range(1, 19))

    game = new_game(
        "g1",
        tournament,
        _player("a", "USA", 60),
        _player("b", "EUROPE", 70),
        indices=table,
        use_handicaps=True,
    )

    assert game.handicap_strokes == 10
    assert game.use_handicaps is True
    assert [h.stroke_index for h in game.holes] == table


def test_new_game_rejects_bad_table():
    with pytest.raises(ValueError):
        new_game(
            "g1",
            Tournament(id="t1"),
            _player("a", "USA"),
            _player("b", "EUROPE"),
            indices=[1] * 18,
        )
