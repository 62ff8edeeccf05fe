"""Distance-based visibility around the player.

Nothing is remembered between queries: what is lit depends only on where the
player stands right now.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from crawl.core.models import Vector2

if TYPE_CHECKING:
    from crawl.core.grid import Grid, GridView


def is_visible(tile: Vector2, player: Vector2, radius: float) -> bool:
    """Visible iff Euclidean distance is strictly below *radius*."""
    if tile == player:
        return True
    return tile.distance(player) < radius


def intensity(tile: Vector2, player: Vector2, radius: float, min_light: float = 0.0) -> float:
    """Light level in [0, 1]; fades linearly with distance, floored at *min_light*."""
    if tile == player:
        return 1.0
    dist = tile.distance(player)
    if dist >= radius:
        return 0.0
    return max(min_light, 1.0 - dist / radius)


@dataclass(frozen=True, slots=True)
class VisibilityModel:
    """Fixed-radius light source carried by the player."""

    radius: float = 5.0
    min_light: float = 0.15

    def is_visible(self, tile: Vector2, player: Vector2) -> bool:
        return is_visible(tile, player, self.radius)

    def intensity(self, tile: Vector2, player: Vector2) -> float:
        return intensity(tile, player, self.radius, self.min_light)

    def visible_tiles(self, grid: Grid | GridView, player: Vector2) -> frozenset[Vector2]:
        """All in-bounds positions lit from *player*."""
        r = int(self.radius) + 1
        lit: set[Vector2] = set()
        for y in range(player.y - r, player.y + r + 1):
            for x in range(player.x - r, player.x + r + 1):
                pos = Vector2(x, y)
                if grid.in_bounds(pos) and self.is_visible(pos, player):
                    lit.add(pos)
        return frozenset(lit)
