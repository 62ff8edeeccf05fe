"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Tile(IntEnum):
    """Tile kinds on the grid."""

    FLOOR = 0
    WALL = 1
    EXIT = 2


@unique
class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    MAP_GEN = 0
    SPAWN = 1
    AUTOPLAY = 2


@unique
class ActionType(IntEnum):
    """Types of actions an enemy can propose."""

    WAIT = 0
    MOVE = 1
    BITE = 2


@unique
class GameStatus(IntEnum):
    """Top-level states of the turn engine."""

    PLAYING = 0
    DEAD = 1


@unique
class AttackShape(IntEnum):
    """Cells a player attack reaches, relative to the player."""

    CARDINAL = 0       # 4 orthogonal neighbours
    SURROUNDING = 1    # all 8 neighbours


@unique
class HpCarryOver(IntEnum):
    """What happens to player HP when a new floor starts."""

    RESTORE_FULL = 0
    FIXED = 1


@unique
class TurnEvent(str, Enum):
    """Outcome kinds reported to the presentation layer."""

    MOVED = "moved"
    BLOCKED = "blocked"
    ENEMY_ENCOUNTERED = "enemy_encountered"
    HIT_LANDED = "hit_landed"
    MISS = "miss"
    ENEMY_DEFEATED = "enemy_defeated"
    PLAYER_HURT = "player_hurt"
    FLOOR_ADVANCED = "floor_advanced"
    PLAYER_DIED = "player_died"
