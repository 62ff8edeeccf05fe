"""Grid / map system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from crawl.core.enums import Tile
from crawl.core.models import Vector2


class _GridQueries:
    """Read-only tile queries shared by the live grid and its published view."""

    __slots__ = ()

    width: int
    height: int
    _tiles: Sequence[Tile]

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Vector2) -> Tile:
        if not self.in_bounds(pos):
            return Tile.WALL
        return self._tiles[pos.y * self.width + pos.x]

    def is_floor(self, pos: Vector2) -> bool:
        return self.get(pos) == Tile.FLOOR

    def positions_of(self, tile: Tile) -> list[Vector2]:
        """All positions holding *tile*, in row-major order."""
        w = self.width
        return [Vector2(i % w, i // w) for i, t in enumerate(self._tiles) if t == tile]

    def count(self, tile: Tile) -> int:
        return self._tiles.count(tile)

    def rows(self) -> Iterator[Sequence[Tile]]:
        w = self.width
        for y in range(self.height):
            yield self._tiles[y * w:(y + 1) * w]

    @property
    def tiles(self) -> tuple[Tile, ...]:
        """Flat row-major tiles."""
        return tuple(self._tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _GridQueries):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and self.tiles == other.tiles

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        glyphs = {Tile.FLOOR: ".", Tile.WALL: "#", Tile.EXIT: ">"}
        return "\n".join("".join(glyphs[t] for t in row) for row in self.rows())


class Grid(_GridQueries):
    """Square-or-rectangular tile grid backed by a flat list."""

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, default: Tile = Tile.WALL) -> None:
        self.width = width
        self.height = height
        self._tiles: list[Tile] = [default] * (width * height)

    def set(self, pos: Vector2, tile: Tile) -> None:
        if self.in_bounds(pos):
            self._tiles[pos.y * self.width + pos.x] = tile

    # -- fast raw-coordinate access --

    def get_xy(self, x: int, y: int) -> Tile:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._tiles[y * self.width + x]
        return Tile.WALL

    # -- copies --

    def copy(self) -> Grid:
        new = Grid.__new__(Grid)
        new.width = self.width
        new.height = self.height
        new._tiles = list(self._tiles)
        return new

    def view(self) -> GridView:
        """Frozen copy for readers outside the engine."""
        return GridView(self.width, self.height, tuple(self._tiles))


@dataclass(frozen=True, slots=True, eq=False)
class GridView(_GridQueries):
    """Immutable grid published in snapshots. Has no ``set``."""

    width: int
    height: int
    _tiles: tuple[Tile, ...]
