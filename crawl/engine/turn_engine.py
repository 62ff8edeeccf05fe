"""TurnEngine — the authoritative command processor.

One command is one turn:
  1. Validate: reject illegal moves without touching state
  2. Player phase: move, attack, or descend to the next floor
  3. Enemy phase: every enemy bites or steps (skipped on blocked
     commands and floor transitions)
  4. Publish: push messages, swap in a fresh immutable Snapshot
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from crawl.actions.combat import CombatResolver
from crawl.ai.brain import EnemyAI
from crawl.core.enums import GameStatus, HpCarryOver, Tile, TurnEvent
from crawl.core.models import Player, Vector2
from crawl.core.snapshot import Snapshot
from crawl.core.world_state import WorldState
from crawl.engine.conflict_resolver import ConflictResolver
from crawl.systems.map_generator import MapGenerator
from crawl.systems.rng import DeterministicRNG
from crawl.systems.spawner import EnemySpawner
from crawl.systems.visibility import VisibilityModel

if TYPE_CHECKING:
    from crawl.config import GameConfig

logger = logging.getLogger(__name__)

_UNIT_STEPS = frozenset({(0, -1), (1, 0), (0, 1), (-1, 0)})


@dataclass(frozen=True, slots=True)
class TurnResult:
    """What one command did, plus the world as it stands afterwards."""

    snapshot: Snapshot
    events: tuple[TurnEvent, ...]
    messages: tuple[str, ...]

    def has(self, event: TurnEvent) -> bool:
        return event in self.events


class TurnEngine:
    """Runs a game: floor setup, player commands and the enemy response.

    States: PLAYING and DEAD. DEAD accepts nothing but ``new_game``.
    """

    __slots__ = (
        "_config",
        "_rng",
        "_map_generator",
        "_spawner",
        "_combat",
        "_ai",
        "_visibility",
        "_world",
        "_snapshot",
        "_run",
    )

    def __init__(self, config: GameConfig, rng: DeterministicRNG | None = None) -> None:
        self._config = config
        self._rng = rng or DeterministicRNG(config.seed)
        self._map_generator = MapGenerator(config, self._rng)
        self._spawner = EnemySpawner(config, self._rng)
        self._combat = CombatResolver(config.attack_shape)
        self._ai = EnemyAI(config, ConflictResolver(config))
        self._visibility = VisibilityModel(config.visibility_radius, config.min_light)
        self._world: WorldState | None = None
        self._snapshot: Snapshot | None = None
        self._run = 0

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def world(self) -> WorldState:
        """Live mutable state. Meant for tests and tooling, not presentation."""
        return self._require_world()

    @property
    def status(self) -> GameStatus:
        return self._require_world().status

    # -- commands --

    def new_game(self, floor: int = 1) -> Snapshot:
        """Start a fresh run at *floor*. Also the restart after death."""
        cfg = self._config
        floor = max(floor, 1)
        self._run += 1
        player = Player(
            pos=Vector2(0, 0), hp=cfg.player_max_hp, max_hp=cfg.player_max_hp,
            floor=floor, attack=cfg.player_attack,
        )
        generated = self._map_generator.generate(cfg.map_size, stream=self._stream(floor))
        world = WorldState(
            seed=self._rng.seed,
            grid=generated.grid,
            start=generated.start,
            exit=generated.exit,
            player=player,
            message_log_size=cfg.message_log_size,
        )
        world.enter_floor(
            generated.grid, generated.start, generated.exit,
            self._spawner.spawn(world, generated, floor, stream=self._stream(floor)),
        )
        world.messages.push(f"Floor {floor} started!")
        self._world = world
        logger.info("=== Run %d started on floor %d (seed=%d) ===", self._run, floor, world.seed)
        self._snapshot = Snapshot.from_world(world, self._visibility)
        return self._snapshot

    def submit_move(self, dx: int, dy: int) -> TurnResult:
        """Move the player one cardinal step, then let the enemies act."""
        world = self._require_world()
        world.hit_markers = ()

        if world.status == GameStatus.DEAD:
            return self._finish(world, [TurnEvent.BLOCKED], ["You are dead. Start a new game."])

        if (dx, dy) not in _UNIT_STEPS:
            return self._finish(world, [TurnEvent.BLOCKED], ["You can't move that way."])

        player = world.player
        target = player.pos + Vector2(dx, dy)

        if not world.grid.in_bounds(target):
            return self._finish(world, [TurnEvent.BLOCKED], ["The edge of the world."])

        if world.grid.get(target) == Tile.WALL:
            logger.debug("Turn %d: move to %s blocked by wall", world.turn, target)
            return self._finish(world, [TurnEvent.BLOCKED], ["A wall blocks your way."])

        enemy = world.enemy_at(target)
        if enemy is not None:
            logger.debug("Turn %d: move to %s blocked by enemy %d", world.turn, target, enemy.id)
            return self._finish(world, [TurnEvent.ENEMY_ENCOUNTERED], ["A monster blocks the way! Attack it."])

        world.turn += 1
        if world.grid.get(target) == Tile.EXIT:
            return self._finish(world, [TurnEvent.FLOOR_ADVANCED], [self._advance_floor(world)])

        player.pos = target
        events = [TurnEvent.MOVED]
        messages: list[str] = []
        self._enemy_phase(world, events, messages)
        return self._finish(world, events, messages)

    def submit_attack(self) -> TurnResult:
        """Strike the target set around the player, then let the enemies act."""
        world = self._require_world()
        world.hit_markers = ()

        if world.status == GameStatus.DEAD:
            return self._finish(world, [TurnEvent.BLOCKED], ["You are dead. Start a new game."])

        cfg = self._config
        player = world.player
        result = self._combat.resolve_attack(player.pos, player.attack, world.enemies)
        world.enemies = list(result.survivors)
        world.hit_markers = result.struck
        world.turn += 1

        events: list[TurnEvent] = []
        messages: list[str] = []
        if result.hit_occurred:
            events.append(TurnEvent.HIT_LANDED)
            if result.defeated_count:
                gained = cfg.xp_per_kill * result.defeated_count
                player.xp += gained
                events.append(TurnEvent.ENEMY_DEFEATED)
                noun = "Monster" if result.defeated_count == 1 else f"{result.defeated_count} monsters"
                messages.append(f"{noun} defeated! +{gained} EXP")
                logger.info("Turn %d: %d enemies defeated, player XP %d",
                            world.turn, result.defeated_count, player.xp)
            else:
                messages.append("You struck the monster!")
        else:
            events.append(TurnEvent.MISS)
            messages.append("You swing at empty air.")

        self._enemy_phase(world, events, messages)
        return self._finish(world, events, messages)

    def current_snapshot(self) -> Snapshot:
        self._require_world()
        return self._snapshot

    # -- internals --

    def _require_world(self) -> WorldState:
        if self._world is None:
            raise RuntimeError("No game in progress; call new_game() first.")
        return self._world

    def _stream(self, floor: int) -> int:
        return self._rng.stream_for(self._run, floor)

    def _advance_floor(self, world: WorldState) -> str:
        """Regenerate map and enemies for the next floor. Returns the log line."""
        cfg = self._config
        player = world.player
        player.floor += 1
        generated = self._map_generator.generate(cfg.map_size, stream=self._stream(player.floor))
        enemies = self._spawner.spawn(world, generated, player.floor, stream=self._stream(player.floor))
        world.enter_floor(generated.grid, generated.start, generated.exit, enemies)

        match cfg.hp_carry_over:
            case HpCarryOver.RESTORE_FULL:
                player.heal(player.max_hp)
            case HpCarryOver.FIXED:
                player.hp = min(player.max_hp, max(cfg.fixed_floor_hp, 0))

        logger.info("Turn %d: player reached floor %d [HP: %d/%d]",
                    world.turn, player.floor, player.hp, player.max_hp)
        return f"Floor {player.floor} started!"

    def _enemy_phase(self, world: WorldState, events: list[TurnEvent], messages: list[str]) -> None:
        player = world.player
        step = self._ai.step_enemies(world.grid, player.pos, world.enemies)
        world.enemies = list(step.enemies)

        if step.bites:
            lost = sum(player.take_damage(step.bite_damage) for _ in step.bites)
            events.append(TurnEvent.PLAYER_HURT)
            times = "once" if len(step.bites) == 1 else f"{len(step.bites)} times"
            messages.append(f"Bitten {times}! -{lost} HP")
            logger.debug("Turn %d: bitten by %s [HP: %d/%d]",
                         world.turn, list(step.bites), player.hp, player.max_hp)

        if not player.alive:
            world.status = GameStatus.DEAD
            events.append(TurnEvent.PLAYER_DIED)
            messages.append(f"You died on floor {player.floor}.")
            logger.info("Turn %d: player died on floor %d (XP %d)", world.turn, player.floor, player.xp)

    def _finish(self, world: WorldState, events: list[TurnEvent], messages: list[str]) -> TurnResult:
        world.messages.push_many(messages)
        self._snapshot = Snapshot.from_world(world, self._visibility)
        return TurnResult(snapshot=self._snapshot, events=tuple(events), messages=tuple(messages))
