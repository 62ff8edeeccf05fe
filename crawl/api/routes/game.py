"""Game commands and live state: new game, move, attack, snapshot."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from crawl.api.dependencies import get_game_manager
from crawl.api.game_manager import GameManager
from crawl.api.schemas import (
    EnemySchema,
    MoveRequest,
    PlayerSchema,
    PositionSchema,
    SnapshotResponse,
    TurnResponse,
)
from crawl.core.snapshot import Snapshot
from crawl.engine.turn_engine import TurnResult
from crawl.systems.map_generator import GenerationFailed

router = APIRouter()


def serialize_snapshot(snap: Snapshot) -> SnapshotResponse:
    p = snap.player
    return SnapshotResponse(
        turn=snap.turn,
        seed=snap.seed,
        status=snap.status.name.lower(),
        floor=snap.floor,
        player=PlayerSchema(
            x=p.pos.x, y=p.pos.y, hp=p.hp, max_hp=p.max_hp,
            floor=p.floor, attack=p.attack, xp=p.xp,
        ),
        enemies=[
            EnemySchema(id=e.id, x=e.pos.x, y=e.pos.y, hp=e.hp, max_hp=e.max_hp)
            for e in snap.enemies
        ],
        messages=list(snap.messages),
        hit_markers=[PositionSchema(x=m.x, y=m.y) for m in snap.hit_markers],
        visible=[
            PositionSchema(x=v.x, y=v.y)
            for v in sorted(snap.visible_tiles(), key=lambda v: (v.y, v.x))
        ],
    )


def serialize_turn(result: TurnResult) -> TurnResponse:
    return TurnResponse(
        events=[e.value for e in result.events],
        messages=list(result.messages),
        snapshot=serialize_snapshot(result.snapshot),
    )


@router.post("/game/new", response_model=SnapshotResponse)
def new_game(
    floor: int = Query(1, ge=1, le=1000, description="Floor to start on"),
    manager: GameManager = Depends(get_game_manager),
) -> SnapshotResponse:
    try:
        snap = manager.new_game(floor)
    except GenerationFailed as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return serialize_snapshot(snap)


@router.post("/game/move", response_model=TurnResponse)
def move(
    body: MoveRequest,
    manager: GameManager = Depends(get_game_manager),
) -> TurnResponse:
    if manager.get_snapshot() is None:
        raise HTTPException(status_code=409, detail="No game in progress.")
    try:
        result = manager.move(body.dx, body.dy)
    except GenerationFailed as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return serialize_turn(result)


@router.post("/game/attack", response_model=TurnResponse)
def attack(manager: GameManager = Depends(get_game_manager)) -> TurnResponse:
    if manager.get_snapshot() is None:
        raise HTTPException(status_code=409, detail="No game in progress.")
    return serialize_turn(manager.attack())


@router.get("/state", response_model=SnapshotResponse)
def get_state(manager: GameManager = Depends(get_game_manager)) -> SnapshotResponse:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=503, detail="Game not initialized yet.")
    return serialize_snapshot(snap)
