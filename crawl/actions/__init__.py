"""Action system: proposals, validation, and resolution."""

from crawl.actions.base import ActionProposal
from crawl.actions.move import MoveAction
from crawl.actions.combat import AttackResult, CombatResolver

__all__ = ["ActionProposal", "AttackResult", "CombatResolver", "MoveAction"]
