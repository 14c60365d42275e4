"""
Vital point hit detection.

Geometric test of an impact against a vital point's hit radius, plus the force
test that decides whether the vital point's effects trigger. A miss is a
normal outcome reported in the returned HitOutcome, never an exception.
"""
import math
from dataclasses import dataclass
from typing import Optional

from ...core.config import DEFAULT_CONFIG, CombatConfig
from ...core.data_structures import Vector2
from ...core.game_enums import PlayerArchetype, VitalPointSeverity
from ..catalog.archetypes import archetype_modifier
from ..catalog.techniques import Technique
from ..catalog.vital_points import VitalPoint, find_vital_point_at
from ..entities.status_effects import StatusEffect, materialize_all


@dataclass(frozen=True)
class HitOutcome:
    """Result of testing one impact against one vital point."""
    hit: bool
    damage: int
    effects: tuple[StatusEffect, ...]
    severity: VitalPointSeverity
    vital_point_id: str
    distance: float
    force_multiplier: float = 0.0

    @property
    def effects_triggered(self) -> bool:
        return bool(self.effects)


def is_within_radius(vital_point: VitalPoint, impact: Vector2, config: CombatConfig = DEFAULT_CONFIG) -> bool:
    """Whether an impact lands inside a vital point's hit radius (inclusive)."""
    return impact.distance_to(vital_point.position) <= vital_point.hit_radius(config)


def force_multiplier(applied_force: float, required_force: float, config: CombatConfig = DEFAULT_CONFIG) -> float:
    """Damage scaling from applied force, capped at the configured maximum."""
    if required_force <= 0:
        required_force = config.default_required_force
    return max(0.0, min(applied_force / required_force, config.max_force_multiplier))


def applied_force_for(technique: Technique, archetype: PlayerArchetype, config: CombatConfig = DEFAULT_CONFIG) -> float:
    """Force a technique delivers when the caller supplies none."""
    return technique.base_damage * config.force_per_damage * archetype_modifier(archetype)


def resolve_hit(
    vital_point: VitalPoint,
    impact: Vector2,
    applied_force: float,
    now: float = 0.0,
    config: CombatConfig = DEFAULT_CONFIG,
) -> HitOutcome:
    """Resolve an impact against a vital point.

    Args:
        vital_point: Targeted vital point
        impact: Impact position in body space
        applied_force: Force delivered by the strike
        now: Timestamp for materialized effects (ms)
        config: Fallback radius, required force and force cap

    Returns:
        HitOutcome. On a hit, damage scales with force up to the cap and the
        vital point's effects materialize when the force meets the threshold.
        On a miss, damage is zero and no effects are produced.
    """
    distance = impact.distance_to(vital_point.position)

    if distance > vital_point.hit_radius(config):
        return HitOutcome(
            hit=False,
            damage=0,
            effects=(),
            severity=vital_point.severity,
            vital_point_id=vital_point.id,
            distance=distance,
        )

    required_force = vital_point.force_threshold(config)
    multiplier = force_multiplier(applied_force, required_force, config)
    damage = math.floor(vital_point.base_damage * multiplier)

    effects: tuple[StatusEffect, ...] = ()
    if applied_force >= required_force:
        effects = materialize_all(vital_point.effects, vital_point.id, now)

    return HitOutcome(
        hit=True,
        damage=damage,
        effects=effects,
        severity=vital_point.severity,
        vital_point_id=vital_point.id,
        distance=distance,
        force_multiplier=multiplier,
    )


def detect_vital_point_hit(
    impact: Vector2,
    applied_force: float,
    now: float = 0.0,
    vital_point: Optional[VitalPoint] = None,
    config: CombatConfig = DEFAULT_CONFIG,
) -> tuple[Optional[VitalPoint], Optional[HitOutcome]]:
    """Resolve an impact against an explicit or the nearest containing vital point.

    Returns:
        (vital point, outcome), or (None, None) when no target was given and
        no vital point contains the impact
    """
    target = vital_point or find_vital_point_at(impact, config=config)
    if target is None:
        return None, None
    return target, resolve_hit(target, impact, applied_force, now, config)
