"""MoveAction — validates enemy movement proposals."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, AbstractSet

from crawl.actions.base import ActionProposal
from crawl.core.enums import ActionType

if TYPE_CHECKING:
    from crawl.core.grid import Grid
    from crawl.core.models import Vector2

logger = logging.getLogger(__name__)


class MoveAction:
    """Stateless handler for MOVE proposals."""

    @staticmethod
    def validate(
        proposal: ActionProposal,
        grid: Grid,
        occupied: AbstractSet[Vector2],
        player_pos: Vector2,
    ) -> bool:
        """A step is legal onto FLOOR that no enemy held before the turn and the player does not hold."""
        if proposal.verb != ActionType.MOVE or proposal.target is None:
            return False

        target = proposal.target
        if not grid.is_floor(target):
            logger.debug("Enemy %d blocked by terrain at %s", proposal.actor_id, target)
            return False

        if target in occupied:
            logger.debug("Enemy %d blocked by occupant at %s", proposal.actor_id, target)
            return False

        if target == player_pos:
            logger.debug("Enemy %d cannot step onto the player at %s", proposal.actor_id, target)
            return False

        return True
