"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from crawl.api.dependencies import get_game_manager
from crawl.api.game_manager import GameManager
from crawl.api.schemas import GameConfigResponse

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(manager: GameManager = Depends(get_game_manager)) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        seed=cfg.seed,
        map_size=cfg.map_size,
        carve_steps=cfg.carve_steps,
        visibility_radius=cfg.visibility_radius,
        min_light=cfg.min_light,
        player_max_hp=cfg.player_max_hp,
        player_attack=cfg.player_attack,
        xp_per_kill=cfg.xp_per_kill,
        hp_carry_over=cfg.hp_carry_over.name.lower(),
        attack_shape=cfg.attack_shape.name.lower(),
        enemy_base_count=cfg.enemy_base_count,
        enemy_bite_damage=cfg.enemy_bite_damage,
        contact_distance=cfg.contact_distance,
        aggro_radius=cfg.aggro_radius,
        message_log_size=cfg.message_log_size,
    )
