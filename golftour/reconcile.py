from typing import Optional

from .schemas import PlayerSnapshot


def _merge_scores(
    previous: Optional[list[Optional[int]]],
    incoming: Optional[list[Optional[int]]],
) -> Optional[list[Optional[int]]]:
    if incoming is None:
        return list(previous) if previous is not None else None
    if previous is None:
        return list(incoming)

    merged = []
    for i in range(max(len(previous), len(incoming))):
        new = incoming[i] if i < len(incoming) else None
        old = previous[i] if i < len(previous) else None
        # hoyo jugado en la actualización -> manda; si no, el último conocido
        merged.append(new if new else old)
    return merged


def merge_player_snapshot(previous: Optional[PlayerSnapshot], incoming: PlayerSnapshot) -> PlayerSnapshot:
    """
    Une una actualización parcial del jugador con el último estado bueno.
    Los campos que llegan vacíos (None o sin enviar) conservan el valor anterior.
    """
    if previous is None or previous.player_id != incoming.player_id:
        return incoming.model_copy(deep=True)

    data = previous.model_dump()
    for k, v in incoming.model_dump(exclude_unset=True).items():
        if k == "scores" or v is None:
            continue
        data[k] = v

    data["scores"] = _merge_scores(previous.scores, incoming.scores)
    return PlayerSnapshot(**data)
