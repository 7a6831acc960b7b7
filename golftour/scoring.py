from typing import Optional, Sequence

from .schemas import MatchOutcome, MatchStatus, TeamPoints


def strokes_received(handicap: Optional[float], stroke_index: int) -> int:
    """
    Golpes de ventaja en un hoyo.
    Un golpe por cada tramo de 18 en el que el hcp alcanza el stroke index:
    hcp >= SI, hcp - 18 >= SI, hcp - 36 >= SI. Hcp <= 0 no recibe nada.
    """
    if not handicap or handicap <= 0:
        return 0

    strokes = 0
    for tier in (0, 18, 36):
        if handicap - tier >= stroke_index:
            strokes += 1
    return strokes


def stroke_index_at(stroke_indices: Optional[Sequence[Optional[int]]], index: int) -> int:
    # sin dato de SI -> posición del hoyo (1..N)
    if stroke_indices and index < len(stroke_indices) and stroke_indices[index]:
        return stroke_indices[index]
    return index + 1


#---------------------------------------------------------------------------------
# ---------------------------------- Stableford ----------------------------------
# --------------------------------------------------------------------------------

def stableford_points(gross: Optional[int], par: int, stroke_index: int, handicap: float = 0) -> int:
    if not gross:
        return 0

    net = gross - strokes_received(handicap, stroke_index)

    if net <= par - 2: return 4
    if net == par - 1: return 3
    if net == par: return 2
    if net == par + 1: return 1
    return 0


def hole_stableford_points(
    scores: Sequence[Optional[int]],
    pars: Sequence[int],
    stroke_indices: Optional[Sequence[Optional[int]]] = None,
    handicap: float = 0,
) -> list[int]:
    """Puntos hoyo a hoyo, uno por cada golpe de la tarjeta (0 si no hay par)."""
    return [
        stableford_points(score, pars[i], stroke_index_at(stroke_indices, i), handicap)
        if i < len(pars) else 0
        for i, score in enumerate(scores)
    ]


def total_stableford_points(
    scores: Sequence[Optional[int]],
    pars: Sequence[int],
    stroke_indices: Optional[Sequence[Optional[int]]] = None,
    handicap: float = 0,
) -> int:
    total = 0
    for i, score in enumerate(scores):
        if not score or i >= len(pars):
            continue
        total += stableford_points(score, pars[i], stroke_index_at(stroke_indices, i), handicap)
    return total


#---------------------------------------------------------------------------------
# ---------------------------------- Match play ----------------------------------
# --------------------------------------------------------------------------------

def match_play_result(
    score_a: Optional[int],
    score_b: Optional[int],
    par: Optional[int],
    stroke_index: int,
    handicap_a: float = 0,
    handicap_b: float = 0,
) -> int:
    """1 gana A, -1 gana B, 0 empate o hoyo sin decidir. El par no interviene."""
    if not score_a or not score_b:
        return 0

    net_a = score_a - strokes_received(handicap_a, stroke_index)
    net_b = score_b - strokes_received(handicap_b, stroke_index)

    if net_a < net_b:
        return 1
    if net_b < net_a:
        return -1
    return 0


def match_play_hole_results(
    scores_a: Sequence[Optional[int]],
    scores_b: Sequence[Optional[int]],
    pars: Sequence[int],
    stroke_indices: Optional[Sequence[Optional[int]]] = None,
    handicap_a: float = 0,
    handicap_b: float = 0,
) -> list[int]:
    """
    Resultados hoyo a hoyo hasta el último hoyo que tienen ambos jugadores.
    Los huecos intermedios cuentan como 0.
    """
    results = []
    last_played = 0
    for i in range(len(pars)):
        a = scores_a[i] if i < len(scores_a) else None
        b = scores_b[i] if i < len(scores_b) else None
        results.append(
            match_play_result(a, b, pars[i], stroke_index_at(stroke_indices, i), handicap_a, handicap_b)
        )
        if a and b:
            last_played = i + 1
    return results[:last_played]


def match_play_status(results: Sequence[int]) -> MatchStatus:
    total = sum(results)
    if total > 0:
        return MatchStatus(status="up", difference=total)
    if total < 0:
        return MatchStatus(status="down", difference=abs(total))
    return MatchStatus(status="all square", difference=0)


def running_match_status(results: Sequence[int]) -> list[MatchStatus]:
    running = []
    for i in range(len(results)):
        running.append(match_play_status(results[: i + 1]))
    return running


def format_match_play_status(status: MatchStatus) -> str:
    if status.status == "all square":
        return "AS"
    return f"{status.difference} {status.status.upper()}"


def format_match_play_result(difference: int, holes_remaining: int) -> str:
    if holes_remaining == 0:
        return f"{difference} UP"
    return f"{difference}&{holes_remaining}"


def determine_match_result(results: Sequence[int], total_holes: int) -> MatchOutcome:
    """
    Estado del partido a partir de los resultados jugados hasta ahora.

    Si la ventaja supera los hoyos que quedan, el partido está decidido:
    se busca el hoyo exacto en el que pasó y la notación usa la ventaja de
    ese momento ("3&2"), no la final.
    """
    status = match_play_status(results)
    remaining = total_holes - len(results)
    leading_side = 1 if status.status == "up" else 2 if status.status == "down" else 0

    if status.difference > 0 and status.difference > remaining:
        decided_on = len(results)
        lead_at_decision = status.difference
        running = 0
        for i, result in enumerate(results):
            running += result
            # un hoyo empatado también consume hoyos restantes (dormie)
            if abs(running) > total_holes - (i + 1):
                decided_on = i + 1
                lead_at_decision = abs(running)
                break

        holes_remaining = max(total_holes - decided_on, 0)
        return MatchOutcome(
            is_over=True,
            leading_side=leading_side,
            difference=status.difference,
            holes_remaining=holes_remaining,
            notation=format_match_play_result(lead_at_decision, holes_remaining),
            ended_on_hole=decided_on,
        )

    if len(results) >= total_holes:
        # todos los hoyos jugados y nadie por delante
        return MatchOutcome(
            is_over=True,
            leading_side=0,
            difference=0,
            holes_remaining=0,
            notation="AS",
            ended_on_hole=total_holes,
        )

    return MatchOutcome(
        is_over=False,
        leading_side=leading_side,
        difference=status.difference,
        holes_remaining=remaining,
        notation=format_match_play_status(status),
        ended_on_hole=0,
    )


#---------------------------------------------------------------------------------
# -------------------------------- Formatos de equipo ----------------------------
# --------------------------------------------------------------------------------

def four_ball_result(
    team_a_scores: Sequence[Optional[int]],
    team_b_scores: Sequence[Optional[int]],
    par: Optional[int] = None,
) -> int:
    """Mejor bola (bruto) de cada pareja; 0 si a alguna le falta tarjeta."""
    played_a = [s for s in team_a_scores if s and s > 0]
    played_b = [s for s in team_b_scores if s and s > 0]
    if not played_a or not played_b:
        return 0

    best_a = min(played_a)
    best_b = min(played_b)
    if best_a < best_b:
        return 1
    if best_a > best_b:
        return -1
    return 0


def four_ball_hole_results(
    team_a: Sequence[Sequence[Optional[int]]],
    team_b: Sequence[Sequence[Optional[int]]],
    pars: Optional[Sequence[int]] = None,
) -> list[int]:
    """team_a[i] = golpes de los jugadores de la pareja A en el hoyo i+1."""
    results = []
    last_played = 0
    for i in range(min(len(team_a), len(team_b))):
        par = pars[i] if pars and i < len(pars) else None
        results.append(four_ball_result(team_a[i], team_b[i], par))
        if any(team_a[i]) and any(team_b[i]):
            last_played = i + 1
    return results[:last_played]


def foursomes_result(score_a: Optional[int], score_b: Optional[int], par: Optional[int] = None) -> int:
    if not score_a or not score_b:
        return 0
    if score_a < score_b:
        return 1
    if score_a > score_b:
        return -1
    return 0


def team_stableford_hole_results(
    team_a_points: Sequence[Sequence[int]],
    team_b_points: Sequence[Sequence[int]],
) -> list[int]:
    """
    Match play por puntos Stableford: en cada hoyo se suman los puntos de los
    jugadores de cada equipo y gana el que más tenga. Sin puntos -> 0.
    """
    holes = max((len(p) for p in [*team_a_points, *team_b_points]), default=0)

    def _hole_total(team, i):
        return sum(p[i] for p in team if i < len(p) and p[i])

    results = []
    for i in range(holes):
        a = _hole_total(team_a_points, i)
        b = _hole_total(team_b_points, i)
        if a > b:
            results.append(1)
        elif b > a:
            results.append(-1)
        else:
            results.append(0)
    return results


def ryder_cup_points(match_results: Sequence[int], holes_played: int, total_holes: int = 18) -> TeamPoints:
    status = match_play_status(match_results)
    remaining = total_holes - holes_played

    if status.difference > 0 and status.difference > remaining:
        if status.status == "up":
            return TeamPoints(team1_points=1, team2_points=0)
        return TeamPoints(team1_points=0, team2_points=1)

    if holes_played == total_holes and status.status == "all square":
        return TeamPoints(team1_points=0.5, team2_points=0.5)

    # partido vivo: todavía no reparte puntos
    return TeamPoints(team1_points=0, team2_points=0)
