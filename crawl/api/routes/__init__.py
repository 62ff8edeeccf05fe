"""Versioned API route modules."""

from fastapi import APIRouter

from crawl.api.routes.config import router as config_router
from crawl.api.routes.game import router as game_router
from crawl.api.routes.map import router as map_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(game_router, tags=["Game"])
api_router.include_router(map_router, tags=["Map"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
