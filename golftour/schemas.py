from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


MatchState = Literal["up", "down", "all square"]
MatchFormat = Literal["singles", "fourball", "foursomes"]
MatchResultName = Literal["win", "loss", "halved"]


#---------------------------------------------------------------------------------
# ---------------------------------- Campo / hoyos -------------------------------
# --------------------------------------------------------------------------------

class HoleSpec(BaseModel):
    number: int = Field(ge=1)
    par: int = 4
    stroke_index: int
    distance: Optional[int] = None


#---------------------------------------------------------------------------------
# ---------------------------------- Match play ----------------------------------
# --------------------------------------------------------------------------------

class MatchStatus(BaseModel):
    # "up" = lado A (jugador/equipo 1) por delante
    status: MatchState
    difference: int = 0


class MatchOutcome(BaseModel):
    is_over: bool
    leading_side: Literal[0, 1, 2]  # 1 = lado A, 2 = lado B, 0 = empatados
    difference: int
    holes_remaining: int
    notation: str  # "3&2", "2 UP", "AS"...
    ended_on_hole: int = 0


class TeamPoints(BaseModel):
    team1_points: float = 0.0
    team2_points: float = 0.0


#---------------------------------------------------------------------------------
# ---------------------------------- Tarjetas ------------------------------------
# --------------------------------------------------------------------------------

class PlayerScore(BaseModel):
    player_id: str
    # None / 0 -> hoyo sin jugar
    scores: list[Optional[int]] = Field(default_factory=list)
    stableford_points: Optional[list[int]] = None
    total_gross: Optional[int] = None
    total_net: Optional[int] = None
    total_stableford: Optional[int] = None
    holes_played: Optional[int] = None
    match_result: Optional[MatchResultName] = None
    match_score: Optional[str] = None


class TeamMatch(BaseModel):
    team1_players: list[str]
    team2_players: list[str]
    format: MatchFormat = "singles"
    points: float = 1.0


class TeamScore(BaseModel):
    team_id: str
    team_name: str
    total_points: float = 0.0
    matches_won: int = 0
    matches_lost: int = 0
    matches_halved: int = 0


class PlayerSnapshot(BaseModel):
    player_id: str
    name: Optional[str] = None
    handicap: Optional[float] = None
    team_id: Optional[str] = None
    scores: Optional[list[Optional[int]]] = None


#---------------------------------------------------------------------------------
# ---------------------------------- Ryder Cup -----------------------------------
# --------------------------------------------------------------------------------

class RyderCupResult(BaseModel):
    team1_score: float
    team2_score: float
    winner: Literal["team1", "team2", "halved"]


class RyderCupMatch(BaseModel):
    id: str
    day: int
    session: int
    format: MatchFormat
    team1_players: list[str]
    team2_players: list[str]
    status: Literal["scheduled", "in_progress", "completed"] = "scheduled"
    result: Optional[RyderCupResult] = None
    start_time: Optional[datetime] = None


class RyderCupSession(BaseModel):
    session: int
    format: MatchFormat
    matches: int
    start_time: Optional[datetime] = None


class RyderCupDay(BaseModel):
    day: int
    date: date
    sessions: list[RyderCupSession] = Field(default_factory=list)


class RyderCupSchedule(BaseModel):
    days: list[RyderCupDay]
    total_matches: int
    points_to_win: float


class RyderCupStandings(BaseModel):
    team1_points: float
    team2_points: float
    matches_completed: int
    matches_remaining: int


class LiveMatch(BaseModel):
    """Partido en juego: resultados hoyo a hoyo (1, -1, 0) desde el lado del equipo 1."""
    id: str
    format: MatchFormat = "singles"
    team1_players: list[str] = Field(default_factory=list)
    team2_players: list[str] = Field(default_factory=list)
    results: list[int] = Field(default_factory=list)
    holes_played: int = 0
    completed: bool = False


class LeaderboardMatch(LiveMatch):
    points: float = 0.0
    winner: Literal[-1, 0, 1] = 0
    display: str = "AS"


class RyderCupLeaderboard(BaseModel):
    team1_points: float
    team2_points: float
    total_points: float
    points_to_win: float
    team1_percentage: float
    team2_percentage: float
    singles: list[LeaderboardMatch] = Field(default_factory=list)
    foursomes: list[LeaderboardMatch] = Field(default_factory=list)
    fourball: list[LeaderboardMatch] = Field(default_factory=list)


#---------------------------------------------------------------------------------
# ---------------------------------- API: peticiones -----------------------------
# --------------------------------------------------------------------------------

class StablefordRequest(BaseModel):
    scores: list[Optional[int]]
    pars: list[int]
    stroke_indices: Optional[list[Optional[int]]] = None
    handicap: float = 0.0


class StablefordResponse(BaseModel):
    points: list[int]
    total: int


class MatchPlayRequest(BaseModel):
    scores_a: list[Optional[int]]
    scores_b: list[Optional[int]]
    pars: list[int]
    stroke_indices: Optional[list[Optional[int]]] = None
    handicap_a: float = 0.0
    handicap_b: float = 0.0
    total_holes: Optional[int] = None


class FourBallRequest(BaseModel):
    # una lista por hoyo con los golpes de cada jugador del equipo
    team_a: list[list[Optional[int]]]
    team_b: list[list[Optional[int]]]
    pars: Optional[list[int]] = None
    total_holes: Optional[int] = None


class HoleResultsResponse(BaseModel):
    results: list[int]
    running: list[MatchStatus]
    outcome: MatchOutcome


class MatchResultRequest(BaseModel):
    results: list[int]
    total_holes: Optional[int] = None


class RyderCupPointsRequest(BaseModel):
    results: list[int]
    holes_played: int


class ScorecardRequest(BaseModel):
    players: list[PlayerScore]
    holes: list[HoleSpec]
    handicaps: dict[str, float] = Field(default_factory=dict)


class LeaderboardRequest(BaseModel):
    matches: list[LiveMatch]
    total_points: float


class StandingsRequest(BaseModel):
    matches: list[RyderCupMatch]
    points_to_win: float = 14.5
    total_points: Optional[float] = None


class StandingsResponse(RyderCupStandings):
    score: str
    winner: Optional[Literal["team1", "team2", "tie"]] = None


class PairingRequest(BaseModel):
    session: RyderCupSession
    team1_players: list[str]
    team2_players: list[str]
    day: int = 1


class TeamResultsRequest(BaseModel):
    matches: list[TeamMatch]
    player_scores: dict[str, PlayerScore]


class ReconcileRequest(BaseModel):
    previous: Optional[PlayerSnapshot] = None
    incoming: PlayerSnapshot
