# golftour/routers/players.py

from fastapi import APIRouter

from golftour.logger import get_logger
from golftour.reconcile import merge_player_snapshot
from golftour.schemas import PlayerSnapshot, ReconcileRequest

log = get_logger("golftour.api.players")

router = APIRouter(prefix="/api/players", tags=["players"])


@router.post("/reconcile", response_model=PlayerSnapshot)
def reconcile(body: ReconcileRequest):
    if body.previous is None:
        log.debug("no previous snapshot for %s", body.incoming.player_id)
    return merge_player_snapshot(body.previous, body.incoming)
