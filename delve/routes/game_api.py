"""
project: Delve
module: game_api.py
License: MIT

Game HTTP API.

Thin JSON layer over the turn engine: create a game, read its state and
send the three player commands (new game, move, attack). Input errors come
back as HTTP 400 with ``field`` / ``code``; unknown game ids as 404.
Gameplay no-ops (walls, commands after game over) are ordinary 200s whose
result lists a ``blocked`` or ``ignored`` event.
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from delve.errors import DelveError, GameNotFoundError
from delve.logging_utils import log
from delve.services.registry import games

bp_game = Blueprint("game", __name__)
_log = log.bind(transport="http")


def _json_body() -> dict:
    if not request.data:
        return {}
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise DelveError("body must be a JSON object", "__root__", "type")
    return data


def _payload(game, result=None):
    return {
        "ok": True,
        "game_id": game.game_id,
        "state": game.snapshot(),
        "result": result.to_dict() if result is not None else game.last_result.to_dict(),
    }


@bp_game.errorhandler(GameNotFoundError)
def _not_found(err: GameNotFoundError):
    return jsonify({"ok": False, **err.to_dict()}), 404


@bp_game.errorhandler(DelveError)
def _bad_request(err: DelveError):
    _log.warn(event="invalid_action", path=request.path, field=err.field, code=err.code)
    return jsonify({"ok": False, **err.to_dict()}), 400


@bp_game.route("/api/health")
def health():
    return jsonify({"ok": True, "games": len(games)})


@bp_game.route("/api/game", methods=["POST"])
def create_game():
    """Start a game.

    Body (optional) is either {"config": {<GameConfig overrides>}} or the
    overrides object itself. Keys beside "config" are rejected.
    """
    body = _json_body()
    if "config" in body:
        for key in body:
            if key != "config":
                raise DelveError(f"unknown field {key}", key, "unknown")
        overrides = body["config"]
    else:
        overrides = body
    base = current_app.config["GAME_CONFIG"]
    config = base.with_overrides(overrides)
    game = games.create(config)
    return jsonify(_payload(game)), 201


@bp_game.route("/api/game/<game_id>", methods=["GET"])
def game_state(game_id: str):
    game = games.get(game_id)
    return jsonify(_payload(game))


@bp_game.route("/api/game/<game_id>", methods=["DELETE"])
def delete_game(game_id: str):
    if not games.discard(game_id):
        raise GameNotFoundError(game_id)
    return jsonify({"ok": True, "game_id": game_id})


@bp_game.route("/api/game/<game_id>/new", methods=["POST"])
def restart_game(game_id: str):
    game = games.get(game_id)
    result = game.new_game()
    return jsonify(_payload(game, result))


@bp_game.route("/api/game/<game_id>/move", methods=["POST"])
def move(game_id: str):
    game = games.get(game_id)
    body = _json_body()
    if "direction" not in body:
        raise DelveError("missing required field", "direction", "required")
    result = game.move(body["direction"])
    return jsonify(_payload(game, result))


@bp_game.route("/api/game/<game_id>/attack", methods=["POST"])
def attack(game_id: str):
    game = games.get(game_id)
    result = game.attack_adjacent()
    return jsonify(_payload(game, result))
