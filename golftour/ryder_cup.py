import math
from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from .logger import get_logger
from .schemas import (
    LeaderboardMatch,
    LiveMatch,
    RyderCupDay,
    RyderCupLeaderboard,
    RyderCupMatch,
    RyderCupSchedule,
    RyderCupSession,
    RyderCupStandings,
)
from .scoring import format_match_play_status, match_play_status, ryder_cup_points

log = get_logger("golftour.ryder_cup")

ROUND_HOLES = 18


def _at(day: date, hour: int) -> datetime:
    return datetime.combine(day, time(hour, 0))


#---------------------------------------------------------------------------------
# ---------------------------------- Calendario ----------------------------------
# --------------------------------------------------------------------------------

def default_schedule(start_date: date) -> RyderCupSchedule:
    """Ryder Cup clásica de 3 días: 8 fourballs, 8 foursomes y 12 individuales."""
    day1 = start_date
    day2 = start_date + timedelta(days=1)
    day3 = start_date + timedelta(days=2)

    return RyderCupSchedule(
        days=[
            RyderCupDay(day=1, date=day1, sessions=[
                RyderCupSession(session=1, format="fourball", matches=4, start_time=_at(day1, 8)),
                RyderCupSession(session=2, format="foursomes", matches=4, start_time=_at(day1, 13)),
            ]),
            RyderCupDay(day=2, date=day2, sessions=[
                RyderCupSession(session=3, format="fourball", matches=4, start_time=_at(day2, 8)),
                RyderCupSession(session=4, format="foursomes", matches=4, start_time=_at(day2, 13)),
            ]),
            RyderCupDay(day=3, date=day3, sessions=[
                RyderCupSession(session=5, format="singles", matches=12, start_time=_at(day3, 12)),
            ]),
        ],
        total_matches=28,
        points_to_win=14.5,
    )


def mini_schedule(start_date: date, player_count: int) -> RyderCupSchedule:
    """Versión de un día para partidas rápidas, según el nº de jugadores."""
    sessions = []
    total_matches = 0

    team_matches = player_count // 4
    if team_matches > 0:
        sessions.append(RyderCupSession(
            session=len(sessions) + 1, format="fourball",
            matches=team_matches, start_time=_at(start_date, 8),
        ))
        total_matches += team_matches

        # foursomes solo si hay al menos 2 partidos por parejas
        if team_matches >= 2:
            sessions.append(RyderCupSession(
                session=len(sessions) + 1, format="foursomes",
                matches=team_matches, start_time=_at(start_date, 11),
            ))
            total_matches += team_matches

    singles = player_count // 2
    sessions.append(RyderCupSession(
        session=len(sessions) + 1, format="singles",
        matches=singles, start_time=_at(start_date, 14),
    ))
    total_matches += singles

    return RyderCupSchedule(
        days=[RyderCupDay(day=1, date=start_date, sessions=sessions)],
        total_matches=total_matches,
        points_to_win=total_matches // 2 + 1,
    )


def generate_session_matches(
    session: RyderCupSession,
    team1_players: Sequence[str],
    team2_players: Sequence[str],
    day: int,
) -> list[RyderCupMatch]:
    matches = []

    if session.format == "singles":
        count = min(session.matches, len(team1_players), len(team2_players))
        pairs = [([team1_players[i]], [team2_players[i]]) for i in range(count)]
    else:
        count = min(session.matches, len(team1_players) // 2, len(team2_players) // 2)
        pairs = [
            (list(team1_players[i * 2:i * 2 + 2]), list(team2_players[i * 2:i * 2 + 2]))
            for i in range(count)
        ]

    for i, (side1, side2) in enumerate(pairs):
        matches.append(RyderCupMatch(
            id=f"day{day}_session{session.session}_match{i + 1}",
            day=day,
            session=session.session,
            format=session.format,
            team1_players=side1,
            team2_players=side2,
            status="scheduled",
            start_time=session.start_time,
        ))

    if count < session.matches:
        log.warning(
            "session %d (%s): only %d of %d matches could be paired",
            session.session, session.format, count, session.matches,
        )

    return matches


#---------------------------------------------------------------------------------
# ---------------------------------- Clasificación -------------------------------
# --------------------------------------------------------------------------------

def ryder_cup_standings(matches: Sequence[RyderCupMatch]) -> RyderCupStandings:
    team1 = team2 = 0.0
    completed = remaining = 0

    for m in matches:
        if m.status != "completed" or m.result is None:
            remaining += 1
            continue

        completed += 1
        if m.result.winner == "team1":
            team1 += 1
        elif m.result.winner == "team2":
            team2 += 1
        else:
            team1 += 0.5
            team2 += 0.5

    return RyderCupStandings(
        team1_points=team1,
        team2_points=team2,
        matches_completed=completed,
        matches_remaining=remaining,
    )


def _live_display(match: LiveMatch, winner: int, team1_name: str, team2_name: str) -> str:
    if match.completed:
        if winner == 1:
            return f"{team1_name} wins"
        if winner == -1:
            return f"{team2_name} wins"
        return "Halved"

    status = format_match_play_status(match_play_status(match.results))
    to_play = max(ROUND_HOLES - match.holes_played, 0)
    return f"{status} ({to_play} to play)"


def ryder_cup_leaderboard(
    matches: Sequence[LiveMatch],
    total_points: float,
    team1_name: str = "Team 1",
    team2_name: str = "Team 2",
) -> RyderCupLeaderboard:
    """
    Marcador en vivo: cada partido vale 1 punto en cuanto está decidido
    (o 0.5 por equipo si termina empatado); los partidos vivos no suman.
    """
    board = []
    team1 = team2 = 0.0

    for m in matches:
        pts = ryder_cup_points(m.results, m.holes_played, ROUND_HOLES)

        winner = 0
        if pts.team1_points > pts.team2_points:
            winner = 1
        elif pts.team2_points > pts.team1_points:
            winner = -1
        points = 1.0 if (pts.team1_points > 0 or pts.team2_points > 0) else 0.0

        if winner == 1:
            team1 += points
        elif winner == -1:
            team2 += points
        else:
            team1 += points / 2
            team2 += points / 2

        board.append(LeaderboardMatch(
            **m.model_dump(),
            points=points,
            winner=winner,
            display=_live_display(m, winner, team1_name, team2_name),
        ))

    log.debug("leaderboard: %s - %s over %d matches", team1, team2, len(board))

    return RyderCupLeaderboard(
        team1_points=team1,
        team2_points=team2,
        total_points=total_points,
        points_to_win=math.ceil(total_points / 2),
        team1_percentage=(team1 / total_points * 100) if total_points else 0.0,
        team2_percentage=(team2 / total_points * 100) if total_points else 0.0,
        singles=[b for b in board if b.format == "singles"],
        foursomes=[b for b in board if b.format == "foursomes"],
        fourball=[b for b in board if b.format == "fourball"],
    )


#---------------------------------------------------------------------------------
# ---------------------------------- Marcador ------------------------------------
# --------------------------------------------------------------------------------

def _fmt_points(points: float) -> str:
    # 3.0 -> "3", 2.5 -> "2.5"
    return f"{points:g}"


def format_ryder_cup_score(team1_points: float, team2_points: float) -> str:
    return f"{_fmt_points(team1_points)} - {_fmt_points(team2_points)}"


def has_team_won(
    team1_points: float,
    team2_points: float,
    points_to_win: float,
    total_points: Optional[float] = None,
) -> Optional[str]:
    """team1 / team2 / tie, o None si todavía no hay ganador."""
    if team1_points >= points_to_win:
        return "team1"
    if team2_points >= points_to_win:
        return "team2"

    if total_points is None:
        total_points = points_to_win * 2 - 1
    if team1_points == team2_points and team1_points + team2_points == total_points:
        return "tie"

    return None
