"""Immutable snapshot of the world state for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from crawl.core.enums import GameStatus
from crawl.core.grid import GridView
from crawl.core.models import Enemy, Player, Vector2
from crawl.core.world_state import WorldState
from crawl.systems.visibility import VisibilityModel


@dataclass(frozen=True, slots=True)
class PlayerView:
    """Frozen record of the player as published after a command."""

    pos: Vector2
    hp: int
    max_hp: int
    floor: int
    attack: int
    xp: int

    @classmethod
    def of(cls, player: Player) -> PlayerView:
        return cls(player.pos, player.hp, player.max_hp, player.floor, player.attack, player.xp)

    @property
    def alive(self) -> bool:
        return self.hp > 0


@dataclass(frozen=True, slots=True)
class EnemyView:
    id: int
    pos: Vector2
    hp: int
    max_hp: int

    @classmethod
    def of(cls, enemy: Enemy) -> EnemyView:
        return cls(enemy.id, enemy.pos, enemy.hp, enemy.max_hp)


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the world after a command completes.

    Every member is immutable, so one snapshot can be handed to any number
    of readers and none of them can change what the others see.
    """

    turn: int
    seed: int
    status: GameStatus
    grid: GridView
    start: Vector2
    exit: Vector2
    player: PlayerView
    enemies: tuple[EnemyView, ...]
    messages: tuple[str, ...]
    hit_markers: tuple[Vector2, ...]
    visibility: VisibilityModel
    _by_pos: Mapping[Vector2, EnemyView] = field(repr=False, compare=False)

    @classmethod
    def from_world(cls, world: WorldState, visibility: VisibilityModel) -> Snapshot:
        views = tuple(EnemyView.of(e) for e in sorted(world.enemies, key=lambda e: e.id) if e.alive)
        return cls(
            turn=world.turn,
            seed=world.seed,
            status=world.status,
            grid=world.grid.view(),
            start=world.start,
            exit=world.exit,
            player=PlayerView.of(world.player),
            enemies=views,
            messages=world.messages.latest(),
            hit_markers=world.hit_markers,
            visibility=visibility,
            _by_pos=MappingProxyType({e.pos: e for e in views}),
        )

    @property
    def floor(self) -> int:
        return self.player.floor

    @property
    def dead(self) -> bool:
        return self.status == GameStatus.DEAD

    def enemy_at(self, pos: Vector2) -> EnemyView | None:
        return self._by_pos.get(pos)

    def is_visible(self, pos: Vector2) -> bool:
        return self.visibility.is_visible(pos, self.player.pos)

    def intensity(self, pos: Vector2) -> float:
        return self.visibility.intensity(pos, self.player.pos)

    def visible_tiles(self) -> frozenset[Vector2]:
        return self.visibility.visible_tiles(self.grid, self.player.pos)
