"""GameManager — serializes HTTP commands onto a single TurnEngine.

FastAPI runs sync endpoints on a thread pool; the lock makes sure exactly
one command is processed at a time and that readers only ever see the
snapshot published by a completed command.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from crawl.engine.turn_engine import TurnEngine, TurnResult

if TYPE_CHECKING:
    from crawl.config import GameConfig
    from crawl.core.snapshot import Snapshot

logger = logging.getLogger(__name__)


class GameManager:
    """Owns the engine for the lifetime of the server."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._engine = TurnEngine(config)
        self._games_started = 0

    @property
    def games_started(self) -> int:
        return self._games_started

    def new_game(self, floor: int = 1) -> Snapshot:
        with self._lock:
            snapshot = self._engine.new_game(floor)
            self._games_started += 1
        logger.info("GameManager: game #%d started on floor %d", self._games_started, floor)
        return snapshot

    def move(self, dx: int, dy: int) -> TurnResult:
        with self._lock:
            return self._engine.submit_move(dx, dy)

    def attack(self) -> TurnResult:
        with self._lock:
            return self._engine.submit_attack()

    def get_snapshot(self) -> Snapshot | None:
        with self._lock:
            if self._games_started == 0:
                return None
            return self._engine.current_snapshot()
