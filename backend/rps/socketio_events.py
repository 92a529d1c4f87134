from flask import current_app, request
from rps import socketio
from rps.exceptions import RoomFull
from rps.services.registry import RoomRegistry
from rps.services.rounds import RoundEngine
from functools import wraps
from typing import Tuple
import logging

logger = logging.getLogger(__name__)


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _services() -> Tuple[RoomRegistry, RoundEngine]:
    ext = current_app.extensions['rps']
    return ext['registry'], ext['engine']


def _one_at_a_time(handler):
    """Run the handler to completion before any other event touches room state.

    Socket.IO handlers may run on separate threads; the app-wide lock keeps
    every mutation of the registry atomic with respect to other events.
    """
    @wraps(handler)
    def _handler(*args, **kwargs):
        with current_app.extensions['rps']['lock']:
            return handler(*args, **kwargs)
    return _handler


def handle_connect(auth=None):
    logger.debug(f"[connect] sid={_get_sid()}")


@_one_at_a_time
def handle_disconnect(reason=None):
    registry, _ = _services()
    sid = _get_sid()
    logger.debug(f"[disconnect] sid={sid} reason={reason}")
    registry.handle_disconnect(sid)


@_one_at_a_time
def handle_join_room(data=None):
    if not isinstance(data, dict):
        return
    room_id = data.get('roomId')
    if not isinstance(room_id, str) or not room_id:
        logger.debug(f"[join-dropped] sid={_get_sid()} roomId={room_id!r}")
        return
    registry, _ = _services()
    try:
        registry.join_room(room_id, _get_sid(), data.get('name'))
    except RoomFull as exc:
        # room_error already went out to this connection
        logger.debug(f"[join-full] sid={_get_sid()} room={exc.room_id!r}")


@_one_at_a_time
def handle_leave_room(data=None):
    registry, _ = _services()
    registry.leave_room(_get_sid())


@_one_at_a_time
def handle_player_choice(choice=None):
    _, engine = _services()
    engine.submit_choice(_get_sid(), choice)


def register_socketio_handlers(namespace: str = '/') -> None:
    """Bind the client-facing event names to the room and round services."""
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('join_room', handle_join_room, namespace=namespace)
    socketio.on_event('leave_room', handle_leave_room, namespace=namespace)
    socketio.on_event('player_choice', handle_player_choice, namespace=namespace)
