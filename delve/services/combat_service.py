"""Player interactions with entities: melee, gold pickup and potions.

Each handler mutates the ``GameState`` in place, records what happened on
the supplied ``TurnResult`` and updates the state's message line. None of
them runs the enemy pass; ``turn_engine`` sequences that afterwards.
"""

from __future__ import annotations

import random
from typing import Sequence

from delve.logging_utils import log
from delve.models.entities import GOLD, MONSTER, POTION, Entity
from delve.models.game_state import GameState

from . import events as ev
from .events import TurnResult


def roll(rng: random.Random, bounds: Sequence[int]) -> int:
    """Uniform integer in the inclusive ``bounds`` pair."""
    lo, hi = bounds
    return rng.randint(lo, hi)


def _say(state: GameState, result: TurnResult, message: str) -> None:
    state.message = message
    result.message = message


def end_game(state: GameState, result: TurnResult) -> None:
    state.game_over = True
    p = state.player
    result.add(ev.GAME_OVER, level=p.level, gold=p.gold)
    _say(state, result, f"Game Over! You reached level {p.level} and collected {p.gold} gold.")
    log.info(event="game_over", dungeon_level=p.level, gold=p.gold, turn=state.turn)


def player_attack(state: GameState, monster: Entity, rng: random.Random, result: TurnResult) -> None:
    """Strike ``monster``; a surviving monster hits back once."""
    damage = roll(rng, state.config.damage_range)
    monster.health = (monster.health or 0) - damage
    result.add(ev.PLAYER_ATTACKED, x=monster.x, y=monster.y, damage=damage, monster_health=monster.health)
    _say(state, result, f"You attack the monster for {damage} damage!")
    if monster.health <= 0:
        state.remove(monster)
        result.add(ev.MONSTER_DEFEATED, x=monster.x, y=monster.y)
        _say(state, result, "You defeated the monster!")
        return
    counter = roll(rng, state.config.enemy_damage_range)
    state.player.take_damage(counter)
    result.add(
        ev.MONSTER_COUNTERATTACKED,
        x=monster.x,
        y=monster.y,
        damage=counter,
        player_health=state.player.health,
    )
    _say(state, result, f"Monster counterattacks for {counter} damage!")
    if state.player.is_dead:
        end_game(state, result)


def collect_gold(state: GameState, gold: Entity, rng: random.Random, result: TurnResult) -> None:
    amount = roll(rng, state.config.gold_range)
    state.player.gold += amount
    state.remove(gold)
    result.add(ev.GOLD_COLLECTED, x=gold.x, y=gold.y, amount=amount, gold=state.player.gold)
    _say(state, result, f"You found {amount} gold!")


def quaff_potion(state: GameState, potion: Entity, rng: random.Random, result: TurnResult) -> None:
    amount = roll(rng, state.config.potion_heal_range)
    healed = state.player.heal(amount)
    state.remove(potion)
    result.add(
        ev.POTION_QUAFFED,
        x=potion.x,
        y=potion.y,
        amount=amount,
        healed=healed,
        player_health=state.player.health,
    )
    _say(state, result, f"You drink a potion and heal for {amount} health!")


def interact(state: GameState, entity: Entity, rng: random.Random, result: TurnResult) -> None:
    if entity.kind == MONSTER:
        player_attack(state, entity, rng, result)
    elif entity.kind == GOLD:
        collect_gold(state, entity, rng, result)
    elif entity.kind == POTION:
        quaff_potion(state, entity, rng, result)
    else:
        raise ValueError(f"unknown entity kind {entity.kind!r}")


__all__ = ["roll", "player_attack", "collect_gold", "quaff_potion", "interact", "end_game"]
