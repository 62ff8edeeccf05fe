"""Core data models and world representation."""

from crawl.core.enums import ActionType, AttackShape, Direction, Domain, GameStatus, HpCarryOver, Tile, TurnEvent
from crawl.core.models import Enemy, Player, Vector2
from crawl.core.grid import Grid
from crawl.core.world_state import WorldState

__all__ = [
    "ActionType",
    "AttackShape",
    "Direction",
    "Domain",
    "Enemy",
    "GameStatus",
    "Grid",
    "HpCarryOver",
    "Player",
    "Tile",
    "TurnEvent",
    "Vector2",
    "WorldState",
]
