"""Combat system components.

This package contains the combat logic with clear separation of concerns:
- hit_detection.py: Vital point radius and force tests
- damage_calculator.py: Damage, critical chance, mitigation and forecasts
- combat_resolver.py: Per-action orchestration producing CombatResult records
"""

from .hit_detection import HitOutcome, resolve_hit, is_within_radius, force_multiplier, applied_force_for, detect_vital_point_hit
from .damage_calculator import (
    DamageResult,
    CombatForecast,
    hit_chance,
    accuracy_from_roll,
    calculate_technique_damage,
    calculate_vital_point_damage,
    calculate_critical_chance,
    calculate_damage_reduction,
    mitigate,
    impact_intensity,
    forecast,
)
from .combat_resolver import CombatResolver, CombatResult

__all__ = [
    "HitOutcome",
    "resolve_hit",
    "is_within_radius",
    "force_multiplier",
    "applied_force_for",
    "detect_vital_point_hit",
    "DamageResult",
    "CombatForecast",
    "hit_chance",
    "accuracy_from_roll",
    "calculate_technique_damage",
    "calculate_vital_point_damage",
    "calculate_critical_chance",
    "calculate_damage_reduction",
    "mitigate",
    "impact_intensity",
    "forecast",
    "CombatResolver",
    "CombatResult",
]
