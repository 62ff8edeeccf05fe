"""Tests for the TurnEngine — commands, events, floor transitions, death."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from crawl.config import GameConfig
from crawl.core.enums import AttackShape, GameStatus, HpCarryOver, Tile, TurnEvent
from crawl.core.models import DIRECTION_OFFSETS, Vector2
from crawl.engine.turn_engine import TurnEngine
from tests.helpers.arena import Arena


# ---------------------------------------------------------------------------
# Game setup
# ---------------------------------------------------------------------------

class TestNewGame:
    def test_commands_before_new_game_raise(self):
        engine = TurnEngine(GameConfig())
        with pytest.raises(RuntimeError):
            engine.submit_attack()

    def test_initial_population(self):
        engine = TurnEngine(GameConfig())
        snap = engine.new_game()
        assert snap.status == GameStatus.PLAYING
        assert snap.floor == 1
        assert snap.player.pos == snap.start
        assert snap.player.hp == snap.player.max_hp == 10
        assert len(snap.enemies) == 6
        positions = [e.pos for e in snap.enemies]
        assert len(set(positions)) == len(positions)
        for e in snap.enemies:
            assert e.hp == e.max_hp == 2
            assert snap.grid.get(e.pos) == Tile.FLOOR
            assert e.pos != snap.start
        assert snap.messages == ("Floor 1 started!",)

    def test_start_on_deeper_floor_scales_enemies(self):
        snap = TurnEngine(GameConfig()).new_game(floor=3)
        assert snap.floor == 3
        assert len(snap.enemies) == 8
        assert all(e.hp == 4 for e in snap.enemies)

    def test_restart_draws_a_new_dungeon(self):
        engine = TurnEngine(GameConfig())
        first = engine.new_game()
        second = engine.new_game()
        assert first.grid != second.grid

    def test_same_seed_same_game(self):
        def play() -> list:
            engine = TurnEngine(GameConfig(seed=7))
            engine.new_game()
            out = []
            for direction in [0, 1, 2, 3, 1, 1, 2, 0]:
                off = DIRECTION_OFFSETS[direction]
                snap = engine.submit_move(off.x, off.y).snapshot
                out.append((snap.player.pos, snap.player.hp, tuple((e.id, e.pos, e.hp) for e in snap.enemies)))
            out.append(engine.submit_attack().snapshot.player.xp)
            return out

        assert play() == play()


# ---------------------------------------------------------------------------
# Movement
# ---------------------------------------------------------------------------

class TestMove:
    def test_walking_into_wall_four_times_is_blocked(self):
        # Two carve steps: the start plus the exit, so three start neighbours are walls
        engine = TurnEngine(GameConfig(map_size=20, carve_steps=2))
        snap = engine.new_game()
        wall_dir = next(
            off for off in DIRECTION_OFFSETS.values()
            if snap.grid.get(snap.start + off) == Tile.WALL
        )
        for _ in range(4):
            result = engine.submit_move(wall_dir.x, wall_dir.y)
            assert result.events == (TurnEvent.BLOCKED,)
            assert result.snapshot.player.pos == snap.start
            assert result.snapshot.player.hp == snap.player.hp
        assert engine.world.turn == 0

    def test_move_onto_floor(self):
        arena = Arena()
        arena.place_player(5, 5)
        result = arena.move(1, 0)
        assert result.events == (TurnEvent.MOVED,)
        assert arena.player.pos == Vector2(6, 5)
        assert arena.world.turn == 1

    @pytest.mark.parametrize("dx,dy", [(1, 1), (0, 0), (2, 0), (-1, -1)])
    def test_invalid_vector_blocked(self, dx, dy):
        arena = Arena()
        arena.place_player(5, 5)
        result = arena.move(dx, dy)
        assert result.events == (TurnEvent.BLOCKED,)
        assert arena.player.pos == Vector2(5, 5)

    def test_out_of_bounds_blocked(self):
        arena = Arena()
        arena.place_player(0, 5)
        result = arena.move(-1, 0)
        assert result.events == (TurnEvent.BLOCKED,)
        assert arena.player.pos == Vector2(0, 5)

    def test_bump_into_enemy_does_not_attack(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.add_enemy(1, pos=(6, 5), hp=1)
        result = arena.move(1, 0)
        assert result.events == (TurnEvent.ENEMY_ENCOUNTERED,)
        assert arena.enemy(1).hp == 1
        assert arena.player.pos == Vector2(5, 5)
        assert arena.player.hp == arena.player.max_hp   # no enemy phase
        assert result.messages

    def test_enemy_in_contact_bites_after_move(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.add_enemy(1, pos=(6, 5))
        result = arena.move(0, -1)
        assert TurnEvent.MOVED in result.events
        assert TurnEvent.PLAYER_HURT in result.events
        assert arena.player.hp == arena.player.max_hp - 1
        assert arena.enemy(1).pos == Vector2(6, 5)

    def test_stepping_away_escapes_the_bite(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.add_enemy(1, pos=(6, 5))
        result = arena.move(-1, 0)
        assert result.events == (TurnEvent.MOVED,)
        assert arena.player.hp == arena.player.max_hp
        assert arena.enemy(1).pos == Vector2(5, 5)

    def test_enemies_chase_new_position(self):
        arena = Arena()
        arena.place_player(3, 3)
        arena.add_enemy(1, pos=(8, 3))
        arena.move(0, 1)
        assert arena.enemy(1).pos == Vector2(7, 3)


# ---------------------------------------------------------------------------
# Attack
# ---------------------------------------------------------------------------

class TestAttack:
    def test_lethal_attack_removes_enemy(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.add_enemy(1, pos=(6, 5), hp=1)
        result = arena.attack()
        assert TurnEvent.HIT_LANDED in result.events
        assert TurnEvent.ENEMY_DEFEATED in result.events
        assert arena.enemy(1) is None
        assert result.snapshot.enemies == ()
        assert arena.player.xp == 20
        assert arena.player.hp == arena.player.max_hp

    def test_wounding_attack_then_bite(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.add_enemy(1, pos=(6, 6), hp=3)
        result = arena.attack()
        assert result.events == (TurnEvent.HIT_LANDED, TurnEvent.PLAYER_HURT)
        assert arena.enemy(1).hp == 2
        assert arena.player.hp == arena.player.max_hp - 1

    def test_miss_still_lets_enemies_act(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.add_enemy(1, pos=(8, 5))
        result = arena.attack()
        assert result.events == (TurnEvent.MISS,)
        assert arena.enemy(1).pos == Vector2(7, 5)
        assert arena.world.turn == 1

    def test_cardinal_attack_shape(self):
        arena = Arena(attack_shape=AttackShape.CARDINAL)
        arena.place_player(5, 5)
        arena.add_enemy(1, pos=(6, 6), hp=1)
        result = arena.attack()
        assert TurnEvent.MISS in result.events
        assert arena.enemy(1) is not None

    def test_hit_markers_cleared_by_next_command(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.add_enemy(1, pos=(4, 5), hp=3)
        first = arena.attack()
        assert first.snapshot.hit_markers == (Vector2(4, 5),)
        second = arena.move(0, 1)
        assert second.snapshot.hit_markers == ()


# ---------------------------------------------------------------------------
# Floor transitions
# ---------------------------------------------------------------------------

class TestFloorTransition:
    def test_exit_advances_floor(self):
        arena = Arena()
        arena.place_player(9, 10)
        arena.player.hp = 3
        result = arena.move(1, 0)
        snap = result.snapshot
        assert result.events == (TurnEvent.FLOOR_ADVANCED,)
        assert snap.floor == 2
        assert snap.player.hp == snap.player.max_hp
        assert snap.player.pos == snap.start
        assert len(snap.enemies) == 5 + 2
        assert all(e.hp == e.max_hp == 3 for e in snap.enemies)
        assert snap.messages[0] == "Floor 2 started!"
        assert snap.grid.count(Tile.EXIT) == 1

    def test_fixed_hp_carry_over(self):
        arena = Arena(hp_carry_over=HpCarryOver.FIXED, fixed_floor_hp=6)
        arena.place_player(9, 10)
        arena.player.hp = 2
        snap = arena.move(1, 0).snapshot
        assert snap.player.hp == 6

    def test_no_enemy_step_on_transition(self):
        arena = Arena()
        arena.place_player(9, 10)
        arena.add_enemy(1, pos=(9, 9))
        result = arena.move(1, 0)
        assert TurnEvent.PLAYER_HURT not in result.events
        assert arena.enemy(1) is None

    def test_enemy_ids_stay_unique_across_floors(self):
        engine = TurnEngine(GameConfig())
        first = {e.id for e in engine.new_game().enemies}
        world = engine.world
        world.player.pos = world.exit + Vector2(-1, 0)
        if world.grid.get(world.player.pos) == Tile.WALL:
            world.player.pos = world.exit + Vector2(1, 0)
        world.grid.set(world.player.pos, Tile.FLOOR)
        world.enemies = [e for e in world.enemies if e.pos != world.player.pos]
        dx = world.exit.x - world.player.pos.x
        result = engine.submit_move(dx, 0)
        assert TurnEvent.FLOOR_ADVANCED in result.events
        second = {e.id for e in result.snapshot.enemies}
        assert first.isdisjoint(second)


# ---------------------------------------------------------------------------
# Death
# ---------------------------------------------------------------------------

class TestDeath:
    def test_last_bite_kills(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.player.hp = 1
        arena.add_enemy(1, pos=(6, 5), hp=5)
        result = arena.attack()
        assert result.events[-1] == TurnEvent.PLAYER_DIED
        assert arena.world.status == GameStatus.DEAD
        assert result.snapshot.dead

    def test_hp_never_negative(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.player.hp = 1
        for eid, pos in enumerate([(4, 5), (6, 5), (5, 4), (5, 6)], start=1):
            arena.add_enemy(eid, pos=pos, hp=9)
        result = arena.attack()
        assert result.snapshot.player.hp == 0
        assert TurnEvent.PLAYER_DIED in result.events

    def test_dead_player_commands_are_blocked(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.player.hp = 1
        arena.add_enemy(1, pos=(6, 5), hp=5)
        arena.attack()
        turn = arena.world.turn
        assert arena.move(-1, 0).events == (TurnEvent.BLOCKED,)
        assert arena.attack().events == (TurnEvent.BLOCKED,)
        assert arena.player.pos == Vector2(5, 5)
        assert arena.enemy(1).hp == 4
        assert arena.world.turn == turn

    def test_new_game_restarts_after_death(self):
        arena = Arena()
        arena.place_player(5, 5)
        arena.player.hp = 1
        arena.add_enemy(1, pos=(6, 5), hp=5)
        arena.attack()
        snap = arena.engine.new_game()
        assert snap.status == GameStatus.PLAYING
        assert snap.player.hp == snap.player.max_hp
        assert snap.player.xp == 0
        assert snap.floor == 1
