"""Deterministic resolution of simultaneous enemy proposals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from crawl.actions.base import ActionProposal
from crawl.actions.move import MoveAction
from crawl.core.enums import ActionType
from crawl.core.models import Enemy

if TYPE_CHECKING:
    from crawl.config import GameConfig
    from crawl.core.grid import Grid
    from crawl.core.models import Vector2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EnemyStep:
    """Result of one AI pass."""

    enemies: tuple[Enemy, ...]       # next configuration, ordered by id
    bites: tuple[int, ...] = ()      # ids of enemies that bit the player
    bite_damage: int = 1

    @property
    def damage(self) -> int:
        return len(self.bites) * self.bite_damage


class ConflictResolver:
    """Validates and commits proposals against the pre-turn configuration.

    Resolution policies:
    - Movement: the destination must be free in the pre-turn snapshot; when
      several enemies target the same cell the lowest enemy id wins and the
      others stay put.
    - Bites: every biting enemy lands exactly one bite.
    """

    __slots__ = ("_config",)

    def __init__(self, config: GameConfig) -> None:
        self._config = config

    def resolve(
        self,
        proposals: Iterable[ActionProposal],
        before: Iterable[Enemy],
        grid: Grid,
        player_pos: Vector2,
    ) -> EnemyStep:
        current = {e.id: e.copy() for e in before}
        occupied = frozenset(e.pos for e in current.values())
        claimed: set[Vector2] = set()
        bites: list[int] = []

        for proposal in self._sort(proposals):
            enemy = current.get(proposal.actor_id)
            if enemy is None:
                continue

            match proposal.verb:
                case ActionType.BITE:
                    bites.append(enemy.id)

                case ActionType.MOVE:
                    if proposal.target in claimed:
                        logger.debug("Enemy %d lost the race for %s", enemy.id, proposal.target)
                        continue
                    if MoveAction.validate(proposal, grid, occupied, player_pos):
                        claimed.add(proposal.target)
                        enemy.pos = proposal.target

                case ActionType.WAIT:
                    pass

        return EnemyStep(
            enemies=tuple(sorted(current.values(), key=lambda e: e.id)),
            bites=tuple(bites),
            bite_damage=self._config.enemy_bite_damage,
        )

    @staticmethod
    def _sort(proposals: Iterable[ActionProposal]) -> list[ActionProposal]:
        """Deterministic order: enemy id, then action type."""
        return sorted(proposals, key=lambda p: (p.actor_id, p.verb.value))
