"""EnemyAI — greedy pursuit and melee for every enemy on the floor.

Each enemy decides on its own, all against the same frozen view of where
everyone stood before the turn. The ConflictResolver then commits the
decisions as one replacement collection, so the order in which enemies are
evaluated never changes the outcome.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, AbstractSet, Iterable

from crawl.actions.base import ActionProposal
from crawl.core.enums import ActionType
from crawl.core.models import Enemy, Vector2

if TYPE_CHECKING:
    from crawl.config import GameConfig
    from crawl.core.grid import Grid
    from crawl.engine.conflict_resolver import ConflictResolver, EnemyStep

logger = logging.getLogger(__name__)


def greedy_step(origin: Vector2, goal: Vector2) -> Vector2:
    """One unit step toward *goal*, correcting x before y."""
    if goal.x != origin.x:
        return Vector2(origin.x + (1 if goal.x > origin.x else -1), origin.y)
    if goal.y != origin.y:
        return Vector2(origin.x, origin.y + (1 if goal.y > origin.y else -1))
    return origin


class EnemyAI:
    """Stateless decision engine for enemies."""

    __slots__ = ("_config", "_resolver")

    def __init__(self, config: GameConfig, resolver: ConflictResolver) -> None:
        self._config = config
        self._resolver = resolver

    def decide(self, enemy: Enemy, player_pos: Vector2, grid: Grid, occupied: AbstractSet[Vector2]) -> ActionProposal:
        """Pick BITE, MOVE or WAIT for one enemy."""
        cfg = self._config
        dist = enemy.pos.distance(player_pos)

        if dist <= cfg.contact_distance:
            return ActionProposal(enemy.id, ActionType.BITE, player_pos, reason="contact")

        if dist <= cfg.aggro_radius:
            target = greedy_step(enemy.pos, player_pos)
            if grid.is_floor(target) and target not in occupied and target != player_pos:
                return ActionProposal(enemy.id, ActionType.MOVE, target, reason="pursue")
            return ActionProposal(enemy.id, ActionType.WAIT, reason="path blocked")

        return ActionProposal(enemy.id, ActionType.WAIT, reason="idle")

    def step_enemies(self, grid: Grid, player_pos: Vector2, enemies: Iterable[Enemy]) -> EnemyStep:
        """Run one AI pass. Returns the next enemy configuration and the bites landed."""
        before = tuple(e.copy() for e in enemies if e.alive)
        occupied = frozenset(e.pos for e in before)
        proposals = [self.decide(e, player_pos, grid, occupied) for e in before]
        for p in proposals:
            logger.debug("AI: %s", p)
        return self._resolver.resolve(proposals, before, grid, player_pos)
