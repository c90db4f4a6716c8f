"""Socket.IO game handlers.

Events:
    - new_game: Start or restart a game; payload { game_id?, config? }
    - get_state: Fetch the current frame; payload { game_id }
    - move: Move the player; payload { game_id, direction }
    - attack: Attack an adjacent monster; payload { game_id }

Emits:
    - game_update: { game_id, state, result } after every accepted command
    - error: { message, field, code } for malformed payloads or unknown games
"""

from flask import current_app
from flask_socketio import emit

from delve import socketio
from delve.errors import DelveError
from delve.logging_utils import log
from delve.services.registry import games

from .validation import ATTACK, GET_STATE, MOVE, NEW_GAME, validate

_log = log.bind(transport="socketio")


def _emit_error(event: str, field: str, message: str, code: str):
    emit('error', {'message': f"Invalid {event}: {message}", 'field': field, 'code': code})
    _log.warn(event="invalid_action", action=event, field=field, code=code)


def _emit_update(game, result):
    emit('game_update', {'game_id': game.game_id, 'state': game.snapshot(), 'result': result.to_dict()})


def _checked(event: str, data, schema):
    ok, result = validate(data if data is not None else {}, schema)
    if not ok:
        _emit_error(event, result['field'], result['error'], result['code'])
        return None
    return result


@socketio.on('new_game')
def handle_new_game(data=None):
    payload = _checked('new_game', data, NEW_GAME)
    if payload is None:
        return
    try:
        if 'game_id' in payload:
            game = games.get(payload['game_id'])
            result = game.new_game()
        else:
            config = current_app.config['GAME_CONFIG'].with_overrides(payload.get('config'))
            game = games.create(config)
            result = game.last_result
    except DelveError as err:
        _emit_error('new_game', err.field, err.message, err.code)
        return
    _emit_update(game, result)
    _log.info(event="socket_new_game", game_id=game.game_id)


@socketio.on('get_state')
def handle_get_state(data=None):
    payload = _checked('get_state', data, GET_STATE)
    if payload is None:
        return
    try:
        game = games.get(payload['game_id'])
    except DelveError as err:
        _emit_error('get_state', err.field, err.message, err.code)
        return
    _emit_update(game, game.last_result)


@socketio.on('move')
def handle_move(data=None):
    payload = _checked('move', data, MOVE)
    if payload is None:
        return
    try:
        game = games.get(payload['game_id'])
        result = game.move(payload['direction'])
    except DelveError as err:
        _emit_error('move', err.field, err.message, err.code)
        return
    _emit_update(game, result)


@socketio.on('attack')
def handle_attack(data=None):
    payload = _checked('attack', data, ATTACK)
    if payload is None:
        return
    try:
        game = games.get(payload['game_id'])
    except DelveError as err:
        _emit_error('attack', err.field, err.message, err.code)
        return
    _emit_update(game, game.attack_adjacent())
