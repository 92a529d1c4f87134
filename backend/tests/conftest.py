import os
import sys
import pytest

# Ensure the backend root (containing the `rps` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from rps import create_app, socketio
from rps.messaging import Messenger
from rps.services.registry import RoomRegistry
from rps.services.rounds import RoundEngine


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    CORS_ORIGINS = ['*']
    SOCKETIO_NAMESPACE = '/'
    DEFAULT_PLAYER_NAME = 'Player'
    LOG_LEVEL = 'DEBUG'


class FakeMessenger(Messenger):
    """Records every outbound message instead of sending it."""

    def __init__(self):
        self.sent = []        # (kind, target, event, payload)
        self.membership = {}  # room_id -> set of sids

    def send_to(self, sid, event, payload):
        self.sent.append(('unicast', sid, event, payload))

    def broadcast(self, room_id, event, payload):
        self.sent.append(('broadcast', room_id, event, payload))

    def enter_room(self, sid, room_id):
        self.membership.setdefault(room_id, set()).add(sid)

    def exit_room(self, sid, room_id):
        self.membership.get(room_id, set()).discard(sid)

    def events(self, event, kind=None, target=None):
        return [
            payload for k, t, e, payload in self.sent
            if e == event and (kind is None or k == kind) and (target is None or t == target)
        ]

    def clear(self):
        self.sent.clear()


@pytest.fixture()
def messenger():
    return FakeMessenger()


@pytest.fixture()
def registry(messenger):
    return RoomRegistry(messenger)


@pytest.fixture()
def engine(registry):
    return RoundEngine(registry)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_factory(flask_app):
    """Create Socket.IO test clients; all are disconnected at teardown."""
    created = []

    def _make():
        test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
        created.append(test_client)
        return test_client

    yield _make
    for test_client in created:
        try:
            if test_client.is_connected():
                test_client.disconnect()
        except Exception:
            pass
