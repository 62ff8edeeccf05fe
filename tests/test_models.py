"""Tests for core value types and the seeded RNG."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from crawl.core.enums import Domain, Tile
from crawl.core.grid import Grid
from crawl.core.models import Enemy, Player, Vector2
from crawl.systems.rng import DeterministicRNG


class TestVector2:
    def test_arithmetic_and_distances(self):
        a, b = Vector2(1, 2), Vector2(4, 6)
        assert a + b == Vector2(5, 8)
        assert b - a == Vector2(3, 4)
        assert a.manhattan(b) == 7
        assert a.distance(b) == pytest.approx(5.0)

    def test_hashable(self):
        assert len({Vector2(1, 1), Vector2(1, 1), Vector2(2, 1)}) == 2


class TestPlayerHp:
    def test_damage_clamps_at_zero(self):
        p = Player(pos=Vector2(0, 0), hp=2, max_hp=10)
        assert p.take_damage(5) == 2
        assert p.hp == 0
        assert not p.alive

    def test_heal_clamps_at_max(self):
        p = Player(pos=Vector2(0, 0), hp=8, max_hp=10)
        assert p.heal(5) == 2
        assert p.hp == 10

    def test_copy_is_independent(self):
        e = Enemy(id=1, pos=Vector2(3, 3), hp=2, max_hp=2)
        c = e.copy()
        c.hp = 0
        assert e.hp == 2


class TestGrid:
    def test_out_of_bounds_reads_as_wall(self):
        grid = Grid(4, 4, default=Tile.FLOOR)
        assert grid.get(Vector2(-1, 0)) == Tile.WALL
        assert grid.get(Vector2(4, 2)) == Tile.WALL
        assert grid.get(Vector2(0, 9)) == Tile.WALL

    def test_render(self):
        grid = Grid(3, 1, default=Tile.WALL)
        grid.set(Vector2(1, 0), Tile.FLOOR)
        grid.set(Vector2(2, 0), Tile.EXIT)
        assert str(grid) == "#.>"


class TestDeterministicRNG:
    def test_same_key_same_value(self):
        a, b = DeterministicRNG(42), DeterministicRNG(42)
        for step in range(20):
            assert a.next_float(Domain.MAP_GEN, 1, step) == b.next_float(Domain.MAP_GEN, 1, step)

    def test_domains_and_streams_differ(self):
        rng = DeterministicRNG(42)
        base = [rng.next_int(Domain.MAP_GEN, 1, s, 0, 1000) for s in range(10)]
        assert base != [rng.next_int(Domain.SPAWN, 1, s, 0, 1000) for s in range(10)]
        assert base != [rng.next_int(Domain.MAP_GEN, 2, s, 0, 1000) for s in range(10)]

    def test_int_range_inclusive(self):
        rng = DeterministicRNG(3)
        values = {rng.next_int(Domain.AUTOPLAY, 0, s, 0, 3) for s in range(400)}
        assert values == {0, 1, 2, 3}
