"""Combat tuning configuration.

All balance constants the engine uses live in CombatConfig. Defaults encode
the shipped game balance; a YAML file can override any subset of them for
experiments or difficulty presets:

    combat:
      technique_crit_threshold: 0.75
      training_target_health_floor: 800
"""

import os
from dataclasses import dataclass, fields, replace
from typing import Optional

import yaml


@dataclass(frozen=True)
class CombatConfig:
    """Balance constants for combat resolution and training."""
    # Critical thresholds on the accuracy value (kept distinct on purpose)
    technique_crit_threshold: float = 0.8
    vital_point_crit_threshold: float = 0.9

    # Vital point content fallbacks
    default_vital_radius: float = 10.0
    default_required_force: float = 50.0
    max_force_multiplier: float = 2.0
    vital_point_bonus_divisor: float = 10.0
    force_per_damage: float = 2.0

    # Hit chance
    min_hit_chance: float = 0.05
    max_hit_chance: float = 0.95
    stance_accuracy_weight: float = 0.5
    min_strike_accuracy: float = 0.5

    # Mitigation
    max_damage_reduction: float = 0.8
    defense_softcap: float = 50.0
    blocking_factor: float = 0.5

    # Damage side effects
    pain_per_damage: float = 0.5
    blood_loss_per_damage: float = 0.1
    vital_blood_loss_per_damage: float = 0.3

    # Impact intensity buckets (upper bounds, exclusive)
    light_impact_below: int = 10
    medium_impact_below: int = 20
    heavy_impact_below: int = 30

    # Training
    training_target_max_health: int = 1000
    training_target_health_floor: int = 900
    training_target_condition_floor: float = 50.0
    improvement_threshold: float = 0.7
    form_score_baseline: float = 0.7
    accuracy_history_size: int = 10
    trend_window: int = 3
    trend_band: float = 0.1


DEFAULT_CONFIG = CombatConfig()


def load_combat_config(path: str, base: Optional[CombatConfig] = None) -> CombatConfig:
    """Load combat configuration overrides from a YAML file.

    Args:
        path: Path to a YAML file with a top-level ``combat`` mapping
        base: Configuration to override (defaults to DEFAULT_CONFIG)

    Returns:
        New CombatConfig with the file's values applied

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is malformed or names an unknown setting
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Combat config file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Invalid combat config structure in {path}: expected a mapping")

    overrides = data.get("combat", {}) or {}
    if not isinstance(overrides, dict):
        raise ValueError(f"Invalid combat config structure in {path}: 'combat' must be a mapping")

    known = {f.name: f for f in fields(CombatConfig)}
    unknown = sorted(set(overrides) - set(known))
    if unknown:
        raise ValueError(f"Unknown combat settings in {path}: {', '.join(unknown)}")

    coerced = {}
    for name, value in overrides.items():
        field_type = known[name].type
        try:
            coerced[name] = int(value) if field_type in (int, "int") else float(value)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid value for {name} in {path}: {value!r}")

    return replace(base or DEFAULT_CONFIG, **coerced)
