"""Engine systems: RNG, map generation, visibility, enemy spawning."""

from crawl.systems.rng import DeterministicRNG
from crawl.systems.map_generator import GenerationFailed, GeneratedMap, MapGenerator
from crawl.systems.spawner import EnemySpawner
from crawl.systems.visibility import VisibilityModel

__all__ = [
    "DeterministicRNG",
    "EnemySpawner",
    "GeneratedMap",
    "GenerationFailed",
    "MapGenerator",
    "VisibilityModel",
]
