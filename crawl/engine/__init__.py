"""Engine layer: turn processing and conflict resolution."""

from crawl.engine.conflict_resolver import ConflictResolver, EnemyStep
from crawl.engine.turn_engine import TurnEngine, TurnResult

__all__ = ["ConflictResolver", "EnemyStep", "TurnEngine", "TurnResult"]
