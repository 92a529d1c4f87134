"""Outbound message delivery.

Room and round logic talks to clients only through a Messenger, so it never
touches the Socket.IO request context directly. Production code uses
SocketIOMessenger; tests substitute a recording fake.
"""
from typing import Any

from flask_socketio import SocketIO


class Messenger:
    """Addressing interface: unicast by connection id, broadcast by room id."""

    def send_to(self, sid: str, event: str, payload: Any) -> None:
        raise NotImplementedError

    def broadcast(self, room_id: str, event: str, payload: Any) -> None:
        raise NotImplementedError

    def enter_room(self, sid: str, room_id: str) -> None:
        raise NotImplementedError

    def exit_room(self, sid: str, room_id: str) -> None:
        raise NotImplementedError


class SocketIOMessenger(Messenger):
    def __init__(self, socketio: SocketIO, namespace: str = '/'):
        self.socketio = socketio
        self.namespace = namespace

    def send_to(self, sid, event, payload):
        self.socketio.emit(event, payload, to=sid, namespace=self.namespace)

    def broadcast(self, room_id, event, payload):
        self.socketio.emit(event, payload, to=room_id, namespace=self.namespace)

    def enter_room(self, sid, room_id):
        # socketio.server is replaced on every init_app, so resolve it late
        self.socketio.server.enter_room(sid, room_id, namespace=self.namespace)

    def exit_room(self, sid, room_id):
        self.socketio.server.leave_room(sid, room_id, namespace=self.namespace)
