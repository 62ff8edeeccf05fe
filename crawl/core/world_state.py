"""Mutable authoritative world state. Only the TurnEngine writes to it."""

from __future__ import annotations

from crawl.core.enums import GameStatus
from crawl.core.grid import Grid
from crawl.core.models import Enemy, Player, Vector2
from crawl.utils.event_log import MessageLog


class WorldState:
    """The single source of truth for a run.

    Doubles as the per-turn context handed to the resolvers: each step reads
    the slice it needs and the engine writes the returned slice back.
    """

    __slots__ = (
        "turn", "seed", "grid", "start", "exit", "player", "enemies",
        "status", "messages", "hit_markers", "_next_enemy_id",
    )

    def __init__(
        self,
        seed: int,
        grid: Grid,
        start: Vector2,
        exit: Vector2,
        player: Player,
        message_log_size: int = 3,
    ) -> None:
        self.turn: int = 0
        self.seed: int = seed
        self.grid: Grid = grid
        self.start: Vector2 = start
        self.exit: Vector2 = exit
        self.player: Player = player
        self.enemies: list[Enemy] = []
        self.status: GameStatus = GameStatus.PLAYING
        self.messages: MessageLog = MessageLog(message_log_size)
        self.hit_markers: tuple[Vector2, ...] = ()
        self._next_enemy_id: int = 1

    def allocate_enemy_id(self) -> int:
        eid = self._next_enemy_id
        self._next_enemy_id += 1
        return eid

    def enemy_at(self, pos: Vector2) -> Enemy | None:
        for enemy in self.enemies:
            if enemy.pos == pos and enemy.alive:
                return enemy
        return None

    def enter_floor(self, grid: Grid, start: Vector2, exit: Vector2, enemies: list[Enemy]) -> None:
        """Swap in a freshly generated floor and place the player on its start."""
        self.grid = grid
        self.start = start
        self.exit = exit
        self.enemies = sorted(enemies, key=lambda e: e.id)
        self.player.pos = start
        self.hit_markers = ()
