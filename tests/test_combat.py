"""Melee, gold and potion interactions driven through the turn engine."""

from delve.models.entities import GOLD, MONSTER, POTION
from delve.services import events as ev
from delve.services.turn_engine import attack_adjacent, move
from tests.factories import ScriptedRandom, make_state


def test_bump_attack_wounds_monster_and_it_counterattacks():
    state = make_state(monsters=[(2, 1, 4)])
    rng = ScriptedRandom(ints=[3, 2])
    result = move(state, "right", rng)

    monster = state.entity_at(2, 1)
    assert monster is not None and monster.health == 1
    assert state.player.pos == (1, 1)
    assert state.player.health == 18
    assert result.has(ev.PLAYER_ATTACKED)
    assert result.has(ev.MONSTER_COUNTERATTACKED)
    assert state.message == "Monster counterattacks for 2 damage!"
    assert result.turn_consumed is True


def test_killing_blow_removes_monster_without_counterattack():
    state = make_state(monsters=[(2, 1, 3)])
    rng = ScriptedRandom(ints=[4])
    result = move(state, "right", rng)

    assert state.entity_at(2, 1) is None
    assert state.player.health == 20
    assert state.player.pos == (1, 1)
    assert result.has(ev.MONSTER_DEFEATED)
    assert not result.has(ev.MONSTER_COUNTERATTACKED)
    assert state.message == "You defeated the monster!"


def test_counterattack_can_end_the_game():
    state = make_state(monsters=[(1, 2, 5)], health=1)
    rng = ScriptedRandom(ints=[1, 3])
    result = move(state, "down", rng)

    assert state.game_over is True
    assert state.player.health == 0
    assert state.status == "game_over"
    assert result.has(ev.GAME_OVER)
    assert state.message == "Game Over! You reached level 1 and collected 0 gold."
    # No enemy pass once the game has ended
    assert not result.has(ev.MONSTER_MOVED)


def test_gold_pickup_leaves_player_in_place():
    state = make_state(gold=[(2, 1)])
    state.player.gold = 7
    rng = ScriptedRandom(ints=[5])
    result = move(state, "right", rng)

    assert state.player.gold == 12
    assert state.player.pos == (1, 1)
    assert state.entities == []
    (event,) = result.of_type(ev.GOLD_COLLECTED)
    assert event.data["amount"] == 5
    assert state.message == "You found 5 gold!"


def test_potion_heals_up_to_max():
    state = make_state(potions=[(2, 1)], health=18)
    rng = ScriptedRandom(ints=[6])
    result = move(state, "right", rng)

    assert state.player.health == 20
    assert state.entities == []
    (event,) = result.of_type(ev.POTION_QUAFFED)
    assert event.data["amount"] == 6
    assert event.data["healed"] == 2
    # Message reports the rolled amount, not the clamped gain
    assert state.message == "You drink a potion and heal for 6 health!"


def test_potion_partial_heal():
    state = make_state(potions=[(1, 2)], health=10)
    move(state, "down", ScriptedRandom(ints=[4]))
    assert state.player.health == 14
    assert state.player.pos == (1, 1)


def test_attack_adjacent_prefers_up_then_right_then_down_then_left():
    state = make_state(player=(4, 4), monsters=[(3, 4, 5), (4, 5, 5), (5, 4, 5)])
    rng = ScriptedRandom(ints=[1, 1])
    attack_adjacent(state, rng)
    hurt = {e.pos: e.health for e in state.entities if e.kind == MONSTER}
    assert hurt[(5, 4)] == 4
    assert hurt[(4, 5)] == 5
    assert hurt[(3, 4)] == 5

    state = make_state(player=(4, 4), monsters=[(3, 4, 5), (4, 3, 5)])
    attack_adjacent(state, ScriptedRandom(ints=[2, 1]))
    assert state.entity_at(4, 3).health == 3
    assert state.entity_at(3, 4).health == 5


def test_attack_adjacent_ignores_items_and_diagonals():
    state = make_state(player=(4, 4), gold=[(4, 3)], potions=[(5, 4)], monsters=[(5, 5, 3)])
    before = state.to_dict()
    result = attack_adjacent(state, ScriptedRandom())

    assert result.has(ev.NO_TARGET)
    assert result.turn_consumed is False
    assert state.message == "There are no monsters nearby to attack!"
    after = state.to_dict()
    after["message"] = before["message"]
    assert after == before
    assert {e.kind for e in state.entities} == {GOLD, POTION, MONSTER}
