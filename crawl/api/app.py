"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crawl.api.dependencies import set_game_manager
from crawl.api.game_manager import GameManager
from crawl.api.routes import api_router
from crawl.config import GameConfig
from crawl.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = GameManager(_config)
        manager.new_game(1)
        set_game_manager(manager)
        logger.info("API server started, game ready.")
        yield
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Dungeon Crawl Engine",
        description=(
            "Turn-based dungeon-crawl simulation API.\n\n"
            "## API Groups\n\n"
            "- **Game** : Commands (new game, move, attack) and the live snapshot\n"
            "- **Map** : Tile layout of the current floor\n"
            "- **Config** : Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Game", "description": "Player commands and the world snapshot after each turn."},
            {"name": "Map", "description": "Tile layout of the current floor. Changes only when the player takes the exit."},
            {"name": "Config", "description": "Read-only game configuration (map size, radii, combat numbers)."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
