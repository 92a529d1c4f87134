from flask import Flask
from flask.logging import default_handler
from flask_cors import CORS
from flask_socketio import SocketIO
import logging
import threading
from config import Config

socketio = SocketIO(async_mode=None)


def _allowed_origins(config):
    origins = config.get('CORS_ORIGINS') or ['*']
    return '*' if '*' in origins else origins


def create_app(config_class=Config):
    flask_app = Flask(__name__, static_folder='public', static_url_path='')
    flask_app.config.from_object(config_class)

    # Service loggers live under "rps"; route them through Flask's handler
    rps_logger = logging.getLogger('rps')
    rps_logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))
    if default_handler not in rps_logger.handlers:
        rps_logger.addHandler(default_handler)

    allowed_origins = _allowed_origins(flask_app.config)
    CORS(flask_app, origins=allowed_origins)
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # One registry per app so tests never share rooms
    from rps.messaging import SocketIOMessenger
    from rps.services.registry import RoomRegistry
    from rps.services.rounds import RoundEngine
    namespace = flask_app.config.get('SOCKETIO_NAMESPACE', '/')
    registry = RoomRegistry(
        SocketIOMessenger(socketio, namespace=namespace),
        default_name=flask_app.config.get('DEFAULT_PLAYER_NAME', 'Player'),
    )
    flask_app.extensions['rps'] = {
        'registry': registry,
        'engine': RoundEngine(registry),
        'lock': threading.RLock(),
    }

    from rps.main import main
    flask_app.register_blueprint(main)

    # Importing here ensures the handlers bind to the initialized socketio instance
    from rps.socketio_events import register_socketio_handlers
    register_socketio_handlers(namespace=namespace)

    return flask_app
