"""AI layer: enemy decision-making."""

from crawl.ai.brain import EnemyAI, greedy_step

__all__ = ["EnemyAI", "greedy_step"]
