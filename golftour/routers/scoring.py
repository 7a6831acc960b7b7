# golftour/routers/scoring.py

from typing import Optional

from fastapi import APIRouter, HTTPException

from golftour import config
from golftour.logger import get_logger
from golftour.schemas import (
    FourBallRequest,
    HoleResultsResponse,
    MatchOutcome,
    MatchPlayRequest,
    MatchResultRequest,
    PlayerScore,
    RyderCupPointsRequest,
    ScorecardRequest,
    StablefordRequest,
    StablefordResponse,
    TeamPoints,
)
from golftour import scorecards, scoring

log = get_logger("golftour.api.scoring")

router = APIRouter(tags=["scoring"])


def _total_holes(requested: Optional[int], fallback: int) -> int:
    total = requested if requested is not None else (fallback or config.DEFAULT_TOTAL_HOLES)
    if total <= 0:
        raise HTTPException(status_code=400, detail="total_holes must be positive")
    return total


def _hole_results_response(results: list[int], total_holes: int) -> HoleResultsResponse:
    return HoleResultsResponse(
        results=results,
        running=scoring.running_match_status(results),
        outcome=scoring.determine_match_result(results, total_holes),
    )


# ================================================================================
# =============================== MOTOR DE PUNTOS ================================
# ================================================================================

@router.post("/api/scoring/stableford", response_model=StablefordResponse)
def stableford(body: StablefordRequest):
    points = scoring.hole_stableford_points(body.scores, body.pars, body.stroke_indices, body.handicap)
    total = scoring.total_stableford_points(body.scores, body.pars, body.stroke_indices, body.handicap)
    return StablefordResponse(points=points, total=total)


@router.post("/api/scoring/match-play", response_model=HoleResultsResponse)
def match_play(body: MatchPlayRequest):
    total = _total_holes(body.total_holes, len(body.pars))
    results = scoring.match_play_hole_results(
        body.scores_a,
        body.scores_b,
        body.pars,
        body.stroke_indices,
        body.handicap_a,
        body.handicap_b,
    )
    return _hole_results_response(results, total)


@router.post("/api/scoring/four-ball", response_model=HoleResultsResponse)
def four_ball(body: FourBallRequest):
    total = _total_holes(body.total_holes, len(body.pars or []))
    results = scoring.four_ball_hole_results(body.team_a, body.team_b, body.pars)
    return _hole_results_response(results, total)


def _check_hole_codes(results: list[int]) -> None:
    if any(r not in (-1, 0, 1) for r in results):
        raise HTTPException(status_code=400, detail="hole results must be -1, 0 or 1")


@router.post("/api/scoring/match-result", response_model=MatchOutcome)
def match_result(body: MatchResultRequest):
    _check_hole_codes(body.results)
    return scoring.determine_match_result(body.results, _total_holes(body.total_holes, 0))


@router.post("/api/scoring/ryder-cup-points", response_model=TeamPoints)
def ryder_cup_points(body: RyderCupPointsRequest):
    _check_hole_codes(body.results)
    total = config.DEFAULT_TOTAL_HOLES
    if not len(body.results) <= body.holes_played <= total:
        raise HTTPException(
            status_code=400,
            detail=f"holes_played must be between {len(body.results)} and {total}",
        )
    return scoring.ryder_cup_points(body.results, body.holes_played, total)


# ================================================================================
# ================================== TARJETAS ====================================
# ================================================================================

@router.post("/api/scorecards/stroke-play", response_model=list[PlayerScore])
def stroke_play_card(body: ScorecardRequest):
    return scorecards.stroke_play_scores(body.players, body.holes, body.handicaps)


@router.post("/api/scorecards/stableford", response_model=list[PlayerScore])
def stableford_card(body: ScorecardRequest):
    return scorecards.stableford_scores(body.players, body.holes, body.handicaps)


@router.post("/api/scorecards/match-play", response_model=list[PlayerScore])
def match_play_card(body: ScorecardRequest):
    if len(body.players) != 2:
        raise HTTPException(status_code=400, detail="match play needs exactly two players")

    player_a, player_b = scorecards.match_play_scores(
        body.players[0], body.players[1], body.holes, body.handicaps
    )
    log.info("match play card %s vs %s -> %s", player_a.player_id, player_b.player_id, player_a.match_score)
    return [player_a, player_b]
