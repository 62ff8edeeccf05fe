"""CombatResolver — the player's melee attack.

An attack strikes every enemy standing in the target set around the player:
the four orthogonal neighbours, or all eight surrounding cells, depending on
the configured AttackShape. Struck enemies lose the attack damage and are
removed once their HP reaches 0. Rewards for kills are left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from crawl.core.enums import AttackShape
from crawl.core.models import Enemy, Vector2

logger = logging.getLogger(__name__)

_CARDINAL = (Vector2(0, -1), Vector2(1, 0), Vector2(0, 1), Vector2(-1, 0))
_DIAGONAL = (Vector2(1, -1), Vector2(1, 1), Vector2(-1, 1), Vector2(-1, -1))

TARGET_OFFSETS: dict[AttackShape, tuple[Vector2, ...]] = {
    AttackShape.CARDINAL: _CARDINAL,
    AttackShape.SURROUNDING: _CARDINAL + _DIAGONAL,
}


@dataclass(frozen=True, slots=True)
class AttackResult:
    """Outcome of one attack."""

    survivors: tuple[Enemy, ...]
    defeated: tuple[Enemy, ...]
    struck: tuple[Vector2, ...]    # positions of every enemy hit

    @property
    def hit_occurred(self) -> bool:
        return bool(self.struck)

    @property
    def defeated_count(self) -> int:
        return len(self.defeated)


class CombatResolver:
    """Stateless resolver for player attacks."""

    __slots__ = ("_shape",)

    def __init__(self, shape: AttackShape = AttackShape.SURROUNDING) -> None:
        self._shape = shape

    @property
    def shape(self) -> AttackShape:
        return self._shape

    def target_set(self, player_pos: Vector2) -> frozenset[Vector2]:
        return frozenset(player_pos + off for off in TARGET_OFFSETS[self._shape])

    def resolve_attack(self, player_pos: Vector2, damage: int, enemies: Iterable[Enemy]) -> AttackResult:
        """Apply *damage* to every enemy in the target set.

        *enemies* is left untouched; survivors are returned as copies.
        """
        targets = self.target_set(player_pos)
        survivors: list[Enemy] = []
        defeated: list[Enemy] = []
        struck: list[Vector2] = []

        for enemy in enemies:
            if not enemy.alive:
                continue
            if enemy.pos not in targets:
                survivors.append(enemy.copy())
                continue
            hit = enemy.copy()
            hit.hp -= damage
            struck.append(hit.pos)
            logger.debug("Enemy %d at %s takes %d damage [HP: %d/%d]",
                         hit.id, hit.pos, damage, max(hit.hp, 0), hit.max_hp)
            if hit.alive:
                survivors.append(hit)
            else:
                defeated.append(hit)

        if not struck:
            return AttackResult(survivors=tuple(survivors), defeated=(), struck=())

        logger.info("Attack from %s struck %d enemies, defeated %d",
                    player_pos, len(struck), len(defeated))
        return AttackResult(survivors=tuple(survivors), defeated=tuple(defeated), struck=tuple(struck))
