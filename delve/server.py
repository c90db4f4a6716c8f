"""
project: Delve
module: server.py
License: MIT

Server bootstrap: stdlib logging wiring and the Socket.IO runner.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from delve import app, socketio
from delve.logging_utils import log

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = "app.log"


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Configure logging, then serve the app through Flask-SocketIO until interrupted."""
    _configure_logging()
    cfg = app.config["GAME_CONFIG"]
    log.info(event="listen", host=host, port=port, board_size=cfg.board_size, seed=cfg.seed)
    try:
        print(f"[INFO] Starting Socket.IO server on {host}:{port} (async_mode={socketio.async_mode})")
        socketio.run(app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=True)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(level=logging.INFO):
    """Route stdlib logging (Flask, werkzeug, engineio) to instance/app.log and the console.

    Safe to call repeatedly: existing root handlers are replaced.
    """
    os.makedirs(app.instance_path, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [
        RotatingFileHandler(os.path.join(app.instance_path, LOG_FILE), maxBytes=1_000_000, backupCount=3),
        logging.StreamHandler(),
    ]

    root = logging.getLogger()
    root.setLevel(level)
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(formatter)
        root.addHandler(h)
