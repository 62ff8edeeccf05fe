"""GET /api/v1/map — tile layout of the current floor."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from crawl.api.dependencies import get_game_manager
from crawl.api.game_manager import GameManager
from crawl.api.schemas import MapResponse, PositionSchema
from crawl.core.grid import Grid, GridView

router = APIRouter()


def rle_encode(grid: Grid | GridView) -> list[int]:
    """Run-length encode the row-major tiles as [value, count, ...]."""
    tiles = grid.tiles
    rle: list[int] = []
    if not tiles:
        return rle
    cur_val = int(tiles[0])
    cur_count = 1
    for t in tiles[1:]:
        v = int(t)
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: GameManager = Depends(get_game_manager)) -> MapResponse:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=503, detail="Game not initialized yet.")
    grid = snap.grid
    return MapResponse(
        width=grid.width,
        height=grid.height,
        grid=rle_encode(grid),
        start=PositionSchema(x=snap.start.x, y=snap.start.y),
        exit=PositionSchema(x=snap.exit.x, y=snap.exit.y),
    )
