"""
project: Delve
module: __init__.py
License: MIT

Flask application and Socket.IO setup.

Wires the Flask app, Flask-SocketIO and the game blueprint together.
Configuration comes from environment variables (optionally loaded from a
.env file) with development defaults. Games live in memory only.
"""

import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_socketio import SocketIO

from delve.config import GameConfig

__version__ = "0.1.0"

# Load .env if present so `SECRET_KEY`, `DELVE_BOARD_SIZE`, etc. can be supplied
# without exporting shell variables during development.
load_dotenv()

app = Flask(__name__, instance_relative_config=True)

# Instance directory holds the rotating log file.
try:
    os.makedirs(app.instance_path, exist_ok=True)
except OSError:
    pass

app.config.update(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
    GAME_CONFIG=GameConfig.from_env(),
    MAX_GAMES=int(os.getenv("DELVE_MAX_GAMES", "256")),
)

# Let Flask-SocketIO select best async_mode based on installed deps (eventlet/gevent/threading)
socketio = SocketIO(
    app,
    async_mode=os.getenv("SOCKETIO_ASYNC_MODE") or None,
    cors_allowed_origins=os.getenv("CORS_ALLOWED_ORIGINS", "*"),
    engineio_logger=bool(os.getenv("ENGINEIO_LOGGER", "0") == "1"),
    ping_interval=20,
    ping_timeout=10,
)

# Register HTTP blueprints (import after app/socketio exist)
from delve.routes.game_api import bp_game  # noqa: E402

app.register_blueprint(bp_game)

from delve.services.registry import games as _games  # noqa: E402

_games.max_games = app.config["MAX_GAMES"]

# Import websocket handlers so their event decorators register with Socket.IO (side-effect)
from delve.websockets import game as _ws_game  # noqa: F401,E402


def create_app():
    """Return the configured Flask app instance."""
    return app


@app.errorhandler(500)
def internal_error(e):
    import logging

    error_id = uuid.uuid4().hex[:8]
    logging.exception("Unhandled exception (id=%s)", error_id)
    return jsonify({"ok": False, "error": "internal_error", "error_id": error_id}), 500
