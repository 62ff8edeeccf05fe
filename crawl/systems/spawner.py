"""EnemySpawner — populates a freshly generated floor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from crawl.core.enums import Domain, Tile
from crawl.core.models import Enemy

if TYPE_CHECKING:
    from crawl.config import GameConfig
    from crawl.core.world_state import WorldState
    from crawl.systems.map_generator import GeneratedMap
    from crawl.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


class EnemySpawner:
    """Places ``base + floor`` enemies, each with floor-scaled HP."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: GameConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def count_for(self, floor: int) -> int:
        return self._config.enemy_base_count + floor

    def hp_for(self, floor: int) -> int:
        return max(1, self._config.enemy_hp_base + self._config.enemy_hp_per_floor * floor)

    def spawn(self, world: WorldState, generated: GeneratedMap, floor: int, *, stream: int = 0) -> list[Enemy]:
        """Create the enemy batch for *floor* on *generated*.

        Enemies only stand on FLOOR tiles, never on the start tile and never
        on each other. If the map has fewer free tiles than the batch size
        the batch is cut short.
        """
        free = [p for p in generated.grid.positions_of(Tile.FLOOR) if p != generated.start]
        wanted = self.count_for(floor)
        hp = self.hp_for(floor)
        enemies: list[Enemy] = []

        for i in range(wanted):
            if not free:
                logger.warning("Floor %d: only room for %d of %d enemies", floor, len(enemies), wanted)
                break
            idx = self._rng.next_int(Domain.SPAWN, stream, i, 0, len(free) - 1)
            pos = free.pop(idx)
            enemies.append(Enemy(id=world.allocate_enemy_id(), pos=pos, hp=hp, max_hp=hp))

        logger.info("Floor %d: spawned %d enemies with %d HP", floor, len(enemies), hp)
        return enemies
