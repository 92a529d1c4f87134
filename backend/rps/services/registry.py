import logging
from typing import Dict, Optional

from rps.exceptions import RoomFull
from rps.messaging import Messenger
from rps.models import Player, Room

logger = logging.getLogger(__name__)

ROOM_FULL_MESSAGE = 'Room is full (2 players max).'
DEFAULT_PLAYER_NAME = 'Player'


class RoomRegistry:
    """In-memory store of active rooms and of which room each connection is in.

    Rooms are created lazily on the first join and deleted as soon as their
    last player leaves. Every successful join or leave broadcasts the room
    state once, unless the room was just deleted.
    """

    def __init__(self, messenger: Messenger, default_name: str = DEFAULT_PLAYER_NAME):
        self.messenger = messenger
        self.default_name = default_name
        self.rooms: Dict[str, Room] = {}
        self._sid_to_room: Dict[str, str] = {}

    def __len__(self):
        return len(self.rooms)

    def __contains__(self, room_id):
        return room_id in self.rooms

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.rooms.get(room_id)

    def room_for(self, sid: str) -> Optional[Room]:
        """Room the connection currently sits in, if any."""
        room_id = self._sid_to_room.get(sid)
        if room_id is None:
            return None
        return self.rooms.get(room_id)

    def get_or_create_room(self, room_id: str) -> Room:
        room = self.rooms.get(room_id)
        if room is None:
            room = Room(room_id)
            self.rooms[room_id] = room
            logger.info(f"[room-create] room={room_id!r}")
        return room

    def _display_name(self, name) -> str:
        if isinstance(name, str) and name.strip():
            return name.strip()
        return self.default_name

    def join_room(self, room_id: str, sid: str, name=None) -> Room:
        """Seat the connection in the room.

        Raises RoomFull after sending `room_error` to the connection when the
        room already holds two players. A connection already in another room
        leaves it first; re-joining the same room only updates the name.
        """
        display_name = self._display_name(name)
        current_id = self._sid_to_room.get(sid)

        if current_id == room_id:
            room = self.rooms[room_id]
            room.players[sid].name = display_name
            logger.info(f"[rename] room={room_id!r} sid={sid} name={display_name!r}")
            self.broadcast_room_state(room_id)
            return room

        existing = self.rooms.get(room_id)
        if existing is not None and existing.is_full:
            logger.warning(f"[join-rejected] room={room_id!r} sid={sid} reason=full")
            self.messenger.send_to(sid, 'room_error', ROOM_FULL_MESSAGE)
            raise RoomFull(room_id)

        if current_id is not None:
            self.leave_room(sid)

        room = self.get_or_create_room(room_id)
        room.players[sid] = Player(sid, display_name)
        self._sid_to_room[sid] = room_id
        self.messenger.enter_room(sid, room_id)
        logger.info(f"[join] room={room_id!r} sid={sid} name={display_name!r} players={len(room.players)}")

        self.broadcast_room_state(room_id)
        return room

    def leave_room(self, sid: str) -> Optional[Room]:
        room_id = self._sid_to_room.pop(sid, None)
        if room_id is None:
            return None
        self.messenger.exit_room(sid, room_id)
        room = self.rooms.get(room_id)
        if room is None:
            return None

        room.players.pop(sid, None)
        logger.info(f"[leave] room={room_id!r} sid={sid} players={len(room.players)}")
        if room.is_empty:
            del self.rooms[room_id]
            logger.info(f"[room-delete] room={room_id!r}")
        else:
            self.broadcast_room_state(room_id)
        return room

    def handle_disconnect(self, sid: str) -> Optional[Room]:
        """Treat a dropped connection as an implicit leave."""
        return self.leave_room(sid)

    def room_state(self, room_id: str) -> Optional[dict]:
        room = self.rooms.get(room_id)
        return room.to_dict() if room else None

    def broadcast_room_state(self, room_id: str) -> None:
        state = self.room_state(room_id)
        if state is None:
            return
        self.messenger.broadcast(room_id, 'room_state', state)
