"""Tarjetas por jugador y puntos por equipos."""

import pytest

from golftour.schemas import HoleSpec, PlayerScore, TeamMatch
from golftour.scorecards import (
    match_play_scores,
    stableford_scores,
    stroke_play_scores,
    team_match_play_results,
)
from golftour.scoring import total_stableford_points


@pytest.fixture
def holes() -> list[HoleSpec]:
    return [
        HoleSpec(number=1, par=4, stroke_index=1, distance=380),
        HoleSpec(number=2, par=3, stroke_index=3, distance=160),
        HoleSpec(number=3, par=5, stroke_index=2, distance=490),
    ]


def test_stroke_play_net_only_on_played_holes(holes) -> None:
    [card] = stroke_play_scores([PlayerScore(player_id="p1", scores=[5, 4, 0])], holes, {"p1": 2})

    assert card.total_gross == 9
    assert card.total_net == 8
    assert card.holes_played == 2


def test_stableford_scores(holes) -> None:
    cards = stableford_scores(
        [PlayerScore(player_id="p1", scores=[5, 4, 6]), PlayerScore(player_id="p2", scores=[4, None, 5])],
        holes,
        {"p1": 2},
    )

    assert cards[0].stableford_points == [2, 1, 2]
    assert cards[0].total_stableford == 5
    assert cards[0].holes_played == 3
    # sin hcp registrado juega scratch
    assert cards[1].stableford_points == [2, 0, 2]
    assert cards[1].holes_played == 2
    # las tarjetas originales no se tocan
    assert cards[0].scores == [5, 4, 6]


def test_missing_stroke_index_falls_back_to_hole_order() -> None:
    # SI 0 = sin dato: el hoyo i usa SI i+1, igual que el motor
    unindexed = [
        HoleSpec(number=1, par=4, stroke_index=0),
        HoleSpec(number=2, par=4, stroke_index=0),
    ]
    player = PlayerScore(player_id="p1", scores=[5, 5])

    [card] = stableford_scores([player], unindexed, {"p1": 1})
    assert card.stableford_points == [2, 1]
    assert card.total_stableford == total_stableford_points([5, 5], [4, 4], [0, 0], 1) == 3

    [card] = stroke_play_scores([player], unindexed, {"p1": 1})
    assert card.total_net == 9


class TestMatchPlayScores:
    def test_only_higher_handicap_receives_strokes(self, holes) -> None:
        a, b = match_play_scores(
            PlayerScore(player_id="a", scores=[5, 3, 6]),
            PlayerScore(player_id="b", scores=[4, 4, 5]),
            holes,
            {"a": 10, "b": 8},
        )

        assert a.match_result == "win"
        assert b.match_result == "loss"
        assert a.match_score == b.match_score == "1 UP"

    def test_live_match_reports_each_side(self, holes) -> None:
        a, b = match_play_scores(
            PlayerScore(player_id="a", scores=[5, 3, None]),
            PlayerScore(player_id="b", scores=[4, 4, None]),
            holes,
            {"a": 10, "b": 8},
        )

        assert a.match_result is None and b.match_result is None
        assert a.match_score == "1 UP"
        assert b.match_score == "1 DOWN"

    def test_decided_before_the_last_hole(self, holes) -> None:
        a, b = match_play_scores(
            PlayerScore(player_id="a", scores=[5, 5]),
            PlayerScore(player_id="b", scores=[3, 2]),
            holes,
            {},
        )

        assert b.match_result == "win"
        assert a.match_result == "loss"
        assert b.match_score == "2&1"

    def test_halved(self, holes) -> None:
        a, b = match_play_scores(
            PlayerScore(player_id="a", scores=[4, 3, 5]),
            PlayerScore(player_id="b", scores=[4, 3, 5]),
            holes,
            {},
        )

        assert a.match_result == b.match_result == "halved"
        assert a.match_score == "AS"


def test_team_match_play_results() -> None:
    scores = {
        "p1": PlayerScore(player_id="p1", match_result="win"),
        "p2": PlayerScore(player_id="p2", match_result="loss"),
        "p5": PlayerScore(player_id="p5", match_result="win"),
        "p7": PlayerScore(player_id="p7"),
        "p9": PlayerScore(player_id="p9"),
    }
    matches = [
        TeamMatch(team1_players=["p1"], team2_players=["p2"], format="singles"),
        TeamMatch(team1_players=["p3", "p4"], team2_players=["p5", "p6"], format="fourball"),
        TeamMatch(team1_players=["p7", "p8"], team2_players=["p9", "p10"], format="foursomes"),
        # sin tarjeta de uno de los dos -> no cuenta
        TeamMatch(team1_players=["p1"], team2_players=["p99"], format="singles"),
        # individual mal formado -> no cuenta
        TeamMatch(team1_players=["p1", "p3"], team2_players=["p2"], format="singles"),
    ]

    team1, team2 = team_match_play_results(matches, scores)

    assert team1.total_points == team2.total_points == 1.5
    assert (team1.matches_won, team1.matches_lost, team1.matches_halved) == (1, 1, 1)
    assert (team2.matches_won, team2.matches_lost, team2.matches_halved) == (1, 1, 1)


def test_team_match_play_respects_match_points() -> None:
    scores = {
        "p1": PlayerScore(player_id="p1"),
        "p2": PlayerScore(player_id="p2"),
    }
    team1, team2 = team_match_play_results(
        [TeamMatch(team1_players=["p1"], team2_players=["p2"], points=2)], scores
    )

    assert team1.total_points == team2.total_points == 1
