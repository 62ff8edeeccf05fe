"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from crawl.core.enums import AttackShape, HpCarryOver


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a game run."""

    # World
    seed: int = 42
    map_size: int = 20

    # Map generation
    carve_steps: int = 180
    max_walk_factor: int = 100         # iteration cap = carve budget * factor

    # Visibility
    visibility_radius: float = 5.0
    min_light: float = 0.15            # dimmest intensity of a visible tile

    # Player
    player_max_hp: int = 10
    player_attack: int = 1
    xp_per_kill: int = 20
    hp_carry_over: HpCarryOver = HpCarryOver.RESTORE_FULL
    fixed_floor_hp: int = 10           # used with HpCarryOver.FIXED
    attack_shape: AttackShape = AttackShape.SURROUNDING

    # Enemies
    enemy_base_count: int = 5          # per floor: base + floor number
    enemy_hp_base: int = 1
    enemy_hp_per_floor: int = 1
    enemy_bite_damage: int = 1
    contact_distance: float = 1.5      # covers diagonal neighbours
    aggro_radius: float = 6.0

    # Messages
    message_log_size: int = 3

    # Logging
    log_level: str = "INFO"

    @classmethod
    def for_map_size(cls, size: int, **overrides) -> GameConfig:
        """Config for a *size* x *size* map, carve budget scaled to its interior.

        Keeps the default map's ratio (180 of 324 interior cells) unless
        ``carve_steps`` is given explicitly.
        """
        interior = max(size - 2, 0) ** 2
        overrides.setdefault("carve_steps", max(2, round(interior * _CARVE_RATIO)))
        return cls(map_size=size, **overrides)


_CARVE_RATIO = 180 / 324
