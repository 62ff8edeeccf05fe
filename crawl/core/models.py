"""Core data models: Vector2, Player, Enemy."""

from __future__ import annotations

import math
from dataclasses import dataclass

from crawl.core.enums import Direction


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def distance(self, other: Vector2) -> float:
        """Euclidean distance."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Direction offsets mapped to Direction enum values
DIRECTION_OFFSETS: dict[int, Vector2] = {
    Direction.NORTH: Vector2(0, -1),
    Direction.EAST: Vector2(1, 0),
    Direction.SOUTH: Vector2(0, 1),
    Direction.WEST: Vector2(-1, 0),
}


@dataclass(slots=True)
class Player:
    """The player character. Persists across floors."""

    pos: Vector2
    hp: int = 10
    max_hp: int = 10
    floor: int = 1
    attack: int = 1
    xp: int = 0

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def take_damage(self, amount: int) -> int:
        """Lose up to *amount* HP, never below 0. Returns the HP actually lost."""
        lost = min(max(amount, 0), self.hp)
        self.hp -= lost
        return lost

    def heal(self, amount: int) -> int:
        """Regain up to *amount* HP, never above max_hp. Returns the HP gained."""
        gained = min(max(amount, 0), self.max_hp - self.hp)
        self.hp += gained
        return gained

    def copy(self) -> Player:
        return Player(
            pos=self.pos, hp=self.hp, max_hp=self.max_hp,
            floor=self.floor, attack=self.attack, xp=self.xp,
        )


@dataclass(slots=True)
class Enemy:
    """A pursuing monster. Created per floor, removed when HP drops to 0."""

    id: int
    pos: Vector2
    hp: int = 2
    max_hp: int = 2

    @property
    def alive(self) -> bool:
        return self.hp > 0

    def copy(self) -> Enemy:
        return Enemy(id=self.id, pos=self.pos, hp=self.hp, max_hp=self.max_hp)
