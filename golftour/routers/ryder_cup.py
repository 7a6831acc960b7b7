# golftour/routers/ryder_cup.py

from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from golftour import ryder_cup
from golftour.logger import get_logger
from golftour.scorecards import team_match_play_results
from golftour.schemas import (
    LeaderboardRequest,
    PairingRequest,
    RyderCupLeaderboard,
    RyderCupMatch,
    RyderCupSchedule,
    StandingsRequest,
    StandingsResponse,
    TeamResultsRequest,
    TeamScore,
)

log = get_logger("golftour.api.ryder_cup")

router = APIRouter(prefix="/api/ryder-cup", tags=["ryder-cup"])


@router.get("/schedule", response_model=RyderCupSchedule)
def schedule(start: date, players: Optional[int] = Query(default=None)):
    # sin nº de jugadores -> Ryder Cup completa de 3 días
    if players is None:
        return ryder_cup.default_schedule(start)

    if players < 2:
        raise HTTPException(status_code=400, detail="at least two players are needed")

    log.info("mini schedule for %d players starting %s", players, start)
    return ryder_cup.mini_schedule(start, players)


@router.post("/pairings", response_model=list[RyderCupMatch])
def pairings(body: PairingRequest):
    return ryder_cup.generate_session_matches(body.session, body.team1_players, body.team2_players, body.day)


@router.post("/standings", response_model=StandingsResponse)
def standings(body: StandingsRequest):
    s = ryder_cup.ryder_cup_standings(body.matches)
    return StandingsResponse(
        **s.model_dump(),
        score=ryder_cup.format_ryder_cup_score(s.team1_points, s.team2_points),
        winner=ryder_cup.has_team_won(s.team1_points, s.team2_points, body.points_to_win, body.total_points),
    )


@router.post("/leaderboard", response_model=RyderCupLeaderboard)
def leaderboard(body: LeaderboardRequest):
    if body.total_points <= 0:
        raise HTTPException(status_code=400, detail="total_points must be positive")
    return ryder_cup.ryder_cup_leaderboard(body.matches, body.total_points)


@router.post("/team-results", response_model=list[TeamScore])
def team_results(body: TeamResultsRequest):
    return team_match_play_results(body.matches, body.player_scores)
