"""Enemy action proposals passed from EnemyAI to the conflict resolver."""

from __future__ import annotations

from dataclasses import dataclass

from crawl.core.enums import ActionType
from crawl.core.models import Vector2


@dataclass(frozen=True, slots=True)
class ActionProposal:
    """An intent produced by the AI for one enemy.

    The ConflictResolver validates and applies (or rejects) each proposal.
    """

    actor_id: int
    verb: ActionType
    target: Vector2 | None = None
    reason: str = ""

    def __repr__(self) -> str:
        return f"Proposal(enemy={self.actor_id}, {self.verb.name}, target={self.target}, reason={self.reason!r})"
