"""MapGenerator — random-walk carver producing one connected floor.

A cursor starts in the middle of a solid grid and wanders one cardinal step
at a time, turning every wall it stands on into floor. The cursor never
jumps, so every carved cell is connected to the start. The last cell carved
becomes the exit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from crawl.core.enums import Domain, Tile
from crawl.core.grid import Grid
from crawl.core.models import DIRECTION_OFFSETS, Vector2

if TYPE_CHECKING:
    from crawl.config import GameConfig
    from crawl.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


class GenerationFailed(RuntimeError):
    """The carve budget cannot be met on a grid of the requested size."""


@dataclass(frozen=True, slots=True)
class GeneratedMap:
    """Result of one generation: the grid plus its landmarks."""

    grid: Grid
    start: Vector2
    exit: Vector2
    carved: tuple[Vector2, ...]   # first-carved-first


class MapGenerator:
    """Carves floors with a bounded random walk."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: GameConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def carve_budget(self, size: int, carve_fraction: float | None = None) -> int:
        """Number of distinct floor cells to carve on a *size* x *size* grid."""
        if carve_fraction is None:
            return self._config.carve_steps
        interior = max(size - 2, 0) ** 2
        return int(interior * carve_fraction)

    def generate(self, size: int, carve_fraction: float | None = None, *, stream: int = 0) -> GeneratedMap:
        """Generate a *size* x *size* map.

        *stream* selects an independent random sequence from the same seed
        (one per run and floor). Raises GenerationFailed when the budget
        cannot be carved.
        """
        budget = self.carve_budget(size, carve_fraction)
        interior = max(size - 2, 0) ** 2
        if size < 3 or budget < 2 or budget > interior:
            raise GenerationFailed(
                f"cannot carve {budget} floor cells on a {size}x{size} grid "
                f"({interior} interior cells)"
            )

        grid = Grid(size, size, default=Tile.WALL)
        x = y = size // 2
        start = Vector2(x, y)
        carved: list[Vector2] = []
        remaining = budget
        max_iterations = budget * self._config.max_walk_factor
        lo, hi = 1, size - 2

        for iteration in range(max_iterations):
            if grid.get_xy(x, y) == Tile.WALL:
                pos = Vector2(x, y)
                grid.set(pos, Tile.FLOOR)
                carved.append(pos)
                remaining -= 1
                if remaining == 0:
                    break

            step = DIRECTION_OFFSETS[self._rng.next_int(Domain.MAP_GEN, stream, iteration, 0, 3)]
            # Stay off the border ring
            if lo <= x + step.x <= hi and lo <= y + step.y <= hi:
                x += step.x
                y += step.y
        else:
            raise GenerationFailed(
                f"random walk carved {len(carved)}/{budget} cells in {max_iterations} iterations"
            )

        exit_pos = carved[-1]
        grid.set(exit_pos, Tile.EXIT)
        logger.info(
            "Generated %dx%d map (stream=%d): %d floor cells, start=%s exit=%s, %d iterations",
            size, size, stream, len(carved), start, exit_pos, iteration + 1,
        )
        logger.debug("Map:\n%s", grid)
        return GeneratedMap(grid=grid, start=start, exit=exit_pos, carved=tuple(carved))
