from typing import Mapping, Sequence

from .logger import get_logger
from .schemas import HoleSpec, PlayerScore, TeamMatch, TeamScore
from .scoring import (
    determine_match_result,
    match_play_hole_results,
    stableford_points,
    stroke_index_at,
    strokes_received,
)

log = get_logger("golftour.scorecards")


def _handicap_for(handicaps: Mapping[str, float], player_id: str) -> float:
    return handicaps.get(player_id) or 0


#---------------------------------------------------------------------------------
# ---------------------------------- Stroke play ---------------------------------
# --------------------------------------------------------------------------------

def stroke_play_scores(
    player_scores: Sequence[PlayerScore],
    holes: Sequence[HoleSpec],
    handicaps: Mapping[str, float],
) -> list[PlayerScore]:
    """Bruto, neto (golpes recibidos solo en hoyos jugados) y hoyos jugados."""
    stroke_indices = [h.stroke_index for h in holes]
    results = []
    for ps in player_scores:
        handicap = _handicap_for(handicaps, ps.player_id)

        gross = 0
        net = 0
        played = 0
        for i, score in enumerate(ps.scores):
            if not score:
                continue
            played += 1
            gross += score
            if i < len(holes):
                net += score - strokes_received(handicap, stroke_index_at(stroke_indices, i))
            else:
                net += score

        results.append(ps.model_copy(update={
            "total_gross": gross,
            "total_net": net,
            "holes_played": played,
        }))

    return results


#---------------------------------------------------------------------------------
# ---------------------------------- Stableford ----------------------------------
# --------------------------------------------------------------------------------

def stableford_scores(
    player_scores: Sequence[PlayerScore],
    holes: Sequence[HoleSpec],
    handicaps: Mapping[str, float],
) -> list[PlayerScore]:
    stroke_indices = [h.stroke_index for h in holes]
    results = []
    for ps in player_scores:
        handicap = _handicap_for(handicaps, ps.player_id)

        points = []
        played = 0
        for i, score in enumerate(ps.scores):
            if not score:
                points.append(0)
                continue
            played += 1
            if i >= len(holes):
                # tarjeta más larga que el campo: hoyo sin datos, no puntúa
                points.append(0)
                continue
            hole = holes[i]
            points.append(stableford_points(score, hole.par, stroke_index_at(stroke_indices, i), handicap))

        results.append(ps.model_copy(update={
            "stableford_points": points,
            "total_stableford": sum(points),
            "holes_played": played,
        }))

    return results


#---------------------------------------------------------------------------------
# ---------------------------------- Match play ----------------------------------
# --------------------------------------------------------------------------------

_FLIP = {"UP": "DOWN", "DOWN": "UP"}


def _other_side(notation: str) -> str:
    # "2 UP" <-> "2 DOWN"; "AS" y "3&2" no cambian
    parts = notation.split(" ")
    if len(parts) == 2 and parts[1] in _FLIP:
        return f"{parts[0]} {_FLIP[parts[1]]}"
    return notation


def match_play_scores(
    player_a: PlayerScore,
    player_b: PlayerScore,
    holes: Sequence[HoleSpec],
    handicaps: Mapping[str, float],
) -> tuple[PlayerScore, PlayerScore]:
    """
    Individual match play por diferencia de hcp: solo recibe golpes el
    jugador de hcp más alto, repartidos según la diferencia.
    """
    hcp_a = _handicap_for(handicaps, player_a.player_id)
    hcp_b = _handicap_for(handicaps, player_b.player_id)
    diff = abs(hcp_a - hcp_b)

    results = match_play_hole_results(
        player_a.scores,
        player_b.scores,
        [h.par for h in holes],
        [h.stroke_index for h in holes],
        handicap_a=diff if hcp_a > hcp_b else 0,
        handicap_b=diff if hcp_b > hcp_a else 0,
    )
    outcome = determine_match_result(results, len(holes))

    result_a = result_b = None
    score_a = outcome.notation
    score_b = outcome.notation
    if outcome.is_over:
        if outcome.leading_side == 1:
            result_a, result_b = "win", "loss"
        elif outcome.leading_side == 2:
            result_a, result_b = "loss", "win"
        else:
            result_a = result_b = "halved"
    else:
        score_b = _other_side(outcome.notation)

    log.debug(
        "match %s vs %s: %s after %d holes",
        player_a.player_id, player_b.player_id, outcome.notation, len(results),
    )

    return (
        player_a.model_copy(update={"match_result": result_a, "match_score": score_a}),
        player_b.model_copy(update={"match_result": result_b, "match_score": score_b}),
    )


#---------------------------------------------------------------------------------
# ----------------------------- Match play por equipos ---------------------------
# --------------------------------------------------------------------------------

def _side_won(players: Sequence[str], player_scores: Mapping[str, PlayerScore]) -> bool:
    return any(
        player_scores.get(pid) is not None and player_scores[pid].match_result == "win"
        for pid in players
    )


def team_match_play_results(
    team_matches: Sequence[TeamMatch],
    player_scores: Mapping[str, PlayerScore],
) -> list[TeamScore]:
    """
    Suma de puntos por equipo (tipo Ryder Cup).

    En fourball/foursomes un equipo gana el partido si alguno de sus jugadores
    tiene match_result == "win" y el otro equipo no. Es una simplificación:
    no recalcula la mejor bola ni el golpe alterno.
    """
    team1 = TeamScore(team_id="team1", team_name="Team 1")
    team2 = TeamScore(team_id="team2", team_name="Team 2")

    def _win(winner: TeamScore, loser: TeamScore, points: float):
        winner.total_points += points
        winner.matches_won += 1
        loser.matches_lost += 1

    def _halve(points: float):
        team1.total_points += points / 2
        team2.total_points += points / 2
        team1.matches_halved += 1
        team2.matches_halved += 1

    for match in team_matches:
        if match.format == "singles":
            if len(match.team1_players) != 1 or len(match.team2_players) != 1:
                log.warning("singles match with %d vs %d players skipped",
                            len(match.team1_players), len(match.team2_players))
                continue

            score1 = player_scores.get(match.team1_players[0])
            score2 = player_scores.get(match.team2_players[0])
            if score1 is None or score2 is None:
                continue

            if score1.match_result == "win":
                _win(team1, team2, match.points)
            elif score2.match_result == "win":
                _win(team2, team1, match.points)
            else:
                _halve(match.points)
            continue

        team1_won = _side_won(match.team1_players, player_scores)
        team2_won = _side_won(match.team2_players, player_scores)

        if team1_won and not team2_won:
            _win(team1, team2, match.points)
        elif team2_won and not team1_won:
            _win(team2, team1, match.points)
        else:
            _halve(match.points)

    log.info("team match play: %s - %s", team1.total_points, team2.total_points)
    return [team1, team2]
