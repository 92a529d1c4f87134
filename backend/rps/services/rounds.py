import logging
from typing import Optional, Tuple

from rps.models import Choice, Outcome
from rps.services.registry import RoomRegistry
from rps.services.rules import resolve

logger = logging.getLogger(__name__)


class RoundEngine:
    """Collects hidden choices and resolves a round once both players picked."""

    def __init__(self, registry: RoomRegistry):
        self.registry = registry

    @property
    def messenger(self):
        return self.registry.messenger

    def submit_choice(self, sid: str, choice) -> Optional[Tuple[Outcome, Outcome]]:
        """Record a choice for the connection's player.

        Out-of-context connections and values outside rock/paper/scissors are
        dropped without a reply. Returns the round outcomes if this choice
        completed the round.
        """
        room = self.registry.room_for(sid)
        if room is None or sid not in room.players:
            logger.debug(f"[choice-dropped] sid={sid} reason=no-room")
            return None
        parsed = Choice.parse(choice)
        if parsed is None:
            logger.debug(f"[choice-dropped] sid={sid} reason=invalid value={choice!r}")
            return None

        room.players[sid].choice = parsed
        self.registry.broadcast_room_state(room.room_id)
        return self.resolve_round(room.room_id)

    def resolve_round(self, room_id: str) -> Optional[Tuple[Outcome, Outcome]]:
        room = self.registry.get_room(room_id)
        if room is None or len(room.players) != 2:
            return None
        player_a, player_b = room.players.values()
        if not (player_a.has_chosen and player_b.has_chosen):
            return None

        result_a, result_b = resolve(player_a.choice, player_b.choice)
        self.messenger.send_to(player_a.sid, 'round_result', {
            'you': player_a.choice.value,
            'opponent': player_b.choice.value,
            'outcome': result_a.value,
        })
        self.messenger.send_to(player_b.sid, 'round_result', {
            'you': player_b.choice.value,
            'opponent': player_a.choice.value,
            'outcome': result_b.value,
        })
        logger.info(
            f"[round] room={room_id!r} {player_a.name}={player_a.choice.value}:{result_a.value} "
            f"{player_b.name}={player_b.choice.value}:{result_b.value}"
        )

        # reset for the next round
        player_a.choice = None
        player_b.choice = None
        self.registry.broadcast_room_state(room_id)
        return result_a, result_b
