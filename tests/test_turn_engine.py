import pytest

from delve.config import GameConfig
from delve.dungeon import EXIT
from delve.errors import InvalidDirectionError
from delve.services import events as ev
from delve.services.directions import Direction, parse_direction
from delve.services.turn_engine import (
    NO_TARGET_MESSAGE,
    WELCOME_MESSAGE,
    Game,
    attack_adjacent,
    move,
    new_game,
    start_game,
)
from tests.factories import ScriptedRandom, make_state


def test_start_game_places_player_on_start():
    state, result = start_game(GameConfig(seed=1))
    assert state.player.pos == (1, 1)
    assert state.player.health == 20
    assert state.player.max_health == 20
    assert state.player.level == 1
    assert state.game_over is False
    assert state.message == WELCOME_MESSAGE
    assert result.has(ev.GAME_STARTED)
    assert state.maze.grid[8][8] == EXIT


def test_wall_bump_is_a_no_op():
    state = make_state(monsters=[(4, 1, 3)])
    before = state.to_dict()
    result = move(state, "up", ScriptedRandom())

    assert result.turn_consumed is False
    assert result.has(ev.BLOCKED)
    assert not result.has(ev.MONSTER_MOVED)
    assert state.to_dict() == before


def test_out_of_bounds_step_is_blocked():
    lines = [
        ".....",
        ".....",
        ".....",
        ".....",
        ".....",
    ]
    state = make_state(lines, player=(0, 0))
    result = move(state, (-1, 0), ScriptedRandom())
    assert result.has(ev.BLOCKED)
    assert state.player.pos == (0, 0)
    assert state.turn == 0


def test_plain_move_then_monsters_close_in():
    state = make_state(monsters=[(5, 1, 3)])
    result = move(state, "right", ScriptedRandom())

    assert state.player.pos == (2, 1)
    assert state.turn == 1
    assert result.turn_consumed is True
    (moved,) = result.of_type(ev.MONSTER_MOVED)
    assert moved.data == {"from": [5, 1], "to": [4, 1]}
    assert state.entity_at(4, 1) is not None
    # Player action is reported before the enemy phase
    assert [e.type for e in result.events] == [ev.MOVED, ev.MONSTER_MOVED]


def test_interaction_is_followed_by_enemy_pass():
    state = make_state(gold=[(2, 1)], monsters=[(5, 1, 3)])
    result = move(state, "right", ScriptedRandom(ints=[2]))

    assert state.player.pos == (1, 1)
    assert state.player.gold == 2
    assert result.has(ev.MONSTER_MOVED)
    assert state.entity_at(4, 1) is not None


def test_exit_advances_level_and_keeps_gold():
    state = make_state(player=(7, 8), monsters=[(5, 8, 3)])
    state.player.gold = 9
    state.player.health = 4
    result = move(state, "right", ScriptedRandom(seed=3))

    p = state.player
    assert p.level == 2
    assert p.max_health == 25
    assert p.health == 25
    assert p.gold == 9
    assert p.pos == (1, 1)
    assert state.turn == 1
    assert result.turn_consumed is True
    assert result.has(ev.LEVEL_UP)
    assert not result.has(ev.MONSTER_MOVED)
    assert state.message == "You found the exit! Welcome to level 2."
    assert state.maze.grid[8][8] == EXIT


def test_each_level_adds_health_bonus():
    state = make_state(player=(7, 8))
    rng = ScriptedRandom(seed=8)
    move(state, "right", rng)
    # Fresh level: jump the player next to the exit again
    state.entities = []
    state.player.x, state.player.y = 8, 7
    state.maze.set(8, 7, "F")
    move(state, "down", rng)
    assert state.player.level == 3
    assert state.player.max_health == 30
    assert state.player.health == 30


@pytest.mark.parametrize("command", ["move", "attack"])
def test_game_over_is_terminal(command):
    state = make_state(monsters=[(2, 1, 3)], health=0)
    state.game_over = True
    before = state.to_dict()
    rng = ScriptedRandom()
    if command == "move":
        result = move(state, "right", rng)
    else:
        result = attack_adjacent(state, rng)
    assert result.has(ev.IGNORED)
    assert result.turn_consumed is False
    assert state.to_dict() == before


def test_invalid_direction_raises_even_after_game_over():
    state = make_state()
    state.game_over = True
    with pytest.raises(InvalidDirectionError):
        move(state, "sideways", ScriptedRandom())


def test_new_game_leaves_game_over():
    state = make_state(health=0)
    state.game_over = True
    state.player.gold = 40
    state.player.level = 4
    state.player.max_health = 35
    state.turn = 17
    result = new_game(state, ScriptedRandom(seed=2))

    p = state.player
    assert state.game_over is False
    assert (p.health, p.max_health, p.level, p.gold) == (20, 20, 1, 0)
    assert p.pos == (1, 1)
    assert state.turn == 0
    assert result.message == WELCOME_MESSAGE


def test_attack_with_no_target_does_not_consume_turn():
    state = make_state(monsters=[(5, 1, 3)])
    result = attack_adjacent(state, ScriptedRandom())
    assert result.turn_consumed is False
    assert state.turn == 0
    assert state.message == NO_TARGET_MESSAGE
    assert state.entity_at(5, 1) is not None


def test_attack_with_target_runs_enemy_pass():
    state = make_state(monsters=[(2, 1, 5), (5, 1, 3)])
    result = attack_adjacent(state, ScriptedRandom(ints=[1, 1]))
    assert result.turn_consumed is True
    assert state.turn == 1
    assert state.entity_at(4, 1) is not None


@pytest.mark.parametrize(
    "value,expected",
    [
        ("UP", Direction.UP),
        (" east ", Direction.RIGHT),
        ("s", Direction.DOWN),
        ((-1, 0), Direction.LEFT),
        ([0, 1], Direction.DOWN),
        ({"x": 1, "y": 0}, Direction.RIGHT),
        (Direction.LEFT, Direction.LEFT),
    ],
)
def test_parse_direction_accepts_common_forms(value, expected):
    assert parse_direction(value) is expected


@pytest.mark.parametrize(
    "value,code",
    [
        ("diagonal", "direction"),
        ((1, 1), "direction"),
        ((0, 0), "direction"),
        ((True, 0), "type"),
        ((1, 0, 0), "type"),
        ({"x": 1}, "direction"),
        (None, "type"),
        (3, "type"),
    ],
)
def test_parse_direction_rejects_malformed(value, code):
    with pytest.raises(InvalidDirectionError) as exc:
        parse_direction(value)
    assert exc.value.code == code
    assert exc.value.field == "direction"


def test_game_wrapper_tracks_last_result():
    game = Game(GameConfig(seed=12), game_id="abc")
    assert game.last_result.has(ev.GAME_STARTED)
    game.move("up")  # (1, 0) is border wall
    assert game.last_result.has(ev.BLOCKED)
    snap = game.snapshot()
    assert snap["player"]["x"] == 1 and snap["player"]["y"] == 1
    assert snap["status"] == "playing"


def test_same_seed_same_game():
    a = Game(GameConfig(seed=99))
    b = Game(GameConfig(seed=99))
    assert a.snapshot()["grid"] == b.snapshot()["grid"]
    assert a.snapshot()["entities"] == b.snapshot()["entities"]
    for step in ("right", "down", "down", "right"):
        a.move(step)
        b.move(step)
    assert a.snapshot()["entities"] == b.snapshot()["entities"]
