"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Entities ---

class PositionSchema(BaseModel):
    x: int
    y: int


class PlayerSchema(BaseModel):
    x: int
    y: int
    hp: int
    max_hp: int
    floor: int
    attack: int
    xp: int


class EnemySchema(BaseModel):
    id: int
    x: int
    y: int
    hp: int
    max_hp: int


# --- World ---

class SnapshotResponse(BaseModel):
    turn: int
    seed: int
    status: str
    floor: int
    player: PlayerSchema
    enemies: list[EnemySchema] = Field(default_factory=list)
    messages: list[str] = Field(default_factory=list)
    hit_markers: list[PositionSchema] = Field(default_factory=list)
    visible: list[PositionSchema] = Field(default_factory=list)


class TurnResponse(BaseModel):
    events: list[str]
    messages: list[str]
    snapshot: SnapshotResponse


class MapResponse(BaseModel):
    width: int
    height: int
    grid: list[int]        # RLE: [value, count, value, count, ...]
    start: PositionSchema
    exit: PositionSchema


# --- Commands ---

class MoveRequest(BaseModel):
    dx: int = Field(..., ge=-1, le=1)
    dy: int = Field(..., ge=-1, le=1)


# --- Config ---

class GameConfigResponse(BaseModel):
    seed: int
    map_size: int
    carve_steps: int
    visibility_radius: float
    min_light: float
    player_max_hp: int
    player_attack: int
    xp_per_kill: int
    hp_carry_over: str
    attack_shape: str
    enemy_base_count: int
    enemy_bite_damage: int
    contact_distance: float
    aggro_radius: float
    message_log_size: int
