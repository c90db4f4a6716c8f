"""Socket.IO payload validation.

Handlers describe their payload with a small schema dict and get back either
the cleaned payload or one ``{field, error, code}`` record describing the
first problem, the same shape the HTTP layer returns for a 400.

Schema mini-language:
{
  'field_name': ('type', required: bool, extras: dict)
}
Types: 'str', 'int', 'dict', 'any'
Extras (str only): min_len, max_len, allow_empty

Example:
 ok, data_or_err = validate({'game_id': ''}, GET_STATE)
 # (False, {'field': 'game_id', 'error': 'must not be empty', 'code': 'empty'})
"""
from __future__ import annotations

from typing import Any, Dict, Tuple

PRIMITIVES = {
    'str': str,
    'int': int,
    'dict': dict,
    'any': object,
}

Outcome = Tuple[bool, Dict[str, Any]]


def _fail(field: str, message: str, code: str) -> Outcome:
    return False, {'field': field, 'error': message, 'code': code}


def _check_str(name: str, value: str, extras: Dict[str, Any]):
    """Return (cleaned, None) or (None, failure)."""
    if extras.get('allow_empty'):
        cleaned = value
    else:
        cleaned = value.strip()
        if not cleaned:
            return None, _fail(name, 'must not be empty', 'empty')
    if len(cleaned) > extras.get('max_len', len(cleaned)):
        return None, _fail(name, 'too long', 'max_len')
    if len(cleaned) < extras.get('min_len', 0):
        return None, _fail(name, 'too short', 'min_len')
    return cleaned, None


def validate(payload: Any, schema: Dict[str, tuple]) -> Outcome:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    cleaned: Dict[str, Any] = {}
    for name, rule in schema.items():
        type_name, required = rule[0], rule[1]
        extras = rule[2] if len(rule) > 2 else {}
        if type_name not in PRIMITIVES:
            return _fail('__schema__', f'unsupported type {type_name}', 'schema')
        if name not in payload:
            if required:
                return _fail(name, 'missing required field', 'required')
            continue
        value = payload[name]
        # bool is an int subclass; never accept it as a count
        if not isinstance(value, PRIMITIVES[type_name]) or (type_name == 'int' and isinstance(value, bool)):
            return _fail(name, f'expected {type_name}', 'type')
        if type_name == 'str':
            value, failure = _check_str(name, value, extras)
            if failure:
                return failure
        cleaned[name] = value
    return True, cleaned


# Schemas used by the game handlers
GAME_ID = ('str', True, {'min_len': 1, 'max_len': 64})
NEW_GAME = {
    'game_id': ('str', False, {'min_len': 1, 'max_len': 64}),
    'config': ('dict', False),
}
GET_STATE = {
    'game_id': GAME_ID,
}
MOVE = {
    'game_id': GAME_ID,
    # name, [dx, dy] or {"x": dx, "y": dy}; parsed by the engine
    'direction': ('any', True),
}
ATTACK = GET_STATE
