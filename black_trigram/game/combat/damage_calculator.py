"""
Damage calculation for techniques and vital point strikes.

All functions are pure: they read static catalog data and the snapshots they
are given, and return result records. The forecast entry point lets the UI
preview an exchange without rolling or touching any state.
"""
import math
from dataclasses import dataclass
from typing import Optional

from ...core.config import DEFAULT_CONFIG, CombatConfig
from ...core.data_structures import clamp
from ...core.game_enums import AttackType, ImpactIntensity, TrigramStance
from ..catalog.archetypes import archetype_modifier, get_archetype_data
from ..catalog.effects import EffectTemplate
from ..catalog.stances import effectiveness_of, get_stance_data
from ..catalog.techniques import Technique
from ..catalog.vital_points import VitalPoint, severity_profile
from ..entities.player_state import PlayerState


# Attack types resolved through the vital point damage path when they land on one
VITAL_POINT_ATTACKS = frozenset({AttackType.PRESSURE_POINT, AttackType.NERVE_STRIKE})

# Critical chance modifiers
VITAL_POINT_CRIT_FACTOR = 2.0
PERFECT_BALANCE = 95.0
PERFECT_BALANCE_CRIT_FACTOR = 1.2


@dataclass(frozen=True)
class DamageResult:
    """Final damage of one landed strike."""
    damage: int
    is_critical: bool
    accuracy: float
    vital_point: Optional[VitalPoint] = None
    effects: tuple[EffectTemplate, ...] = ()
    consciousness_loss: int = 0
    balance_loss: int = 0
    damage_reduction: float = 0.0


@dataclass(frozen=True)
class CombatForecast:
    """Expected outcome of a technique, for preview only."""
    technique_id: str
    hit_chance: float
    min_damage: int
    max_damage: int
    critical_chance: float
    damage_reduction: float
    effectiveness: float


def hit_chance(
    technique: Technique,
    attacker_stance: TrigramStance,
    defender_stance: TrigramStance,
    config: CombatConfig = DEFAULT_CONFIG,
) -> float:
    """Effective accuracy: base accuracy shifted by stance effectiveness.

    The result is clamped so no strike is certain to land or to miss.
    """
    effectiveness = effectiveness_of(attacker_stance, defender_stance)
    chance = technique.accuracy + (effectiveness - 1.0) * config.stance_accuracy_weight
    return clamp(chance, config.min_hit_chance, config.max_hit_chance)


def accuracy_from_roll(roll: float, chance: float, config: CombatConfig = DEFAULT_CONFIG) -> float:
    """Map a passing roll onto the accuracy value in [min_strike_accuracy, 1].

    A roll of zero is a perfect strike; a roll right at the hit chance only
    grazes.
    """
    if chance <= 0:
        return config.min_strike_accuracy
    spread = 1.0 - config.min_strike_accuracy
    return clamp(1.0 - (roll / chance) * spread, config.min_strike_accuracy, 1.0)


def calculate_technique_damage(
    technique: Technique,
    attacker: PlayerState,
    vital_point: Optional[VitalPoint],
    accuracy: float,
    config: CombatConfig = DEFAULT_CONFIG,
    vital_effects_triggered: bool = True,
) -> DamageResult:
    """Damage of a technique that landed, optionally on a vital point.

    final = base * archetype modifier * accuracy, times the vital point's
    bonus factor when one was hit; floored, never below 1. The vital point's
    effect templates are listed only when the strike met its force threshold.
    """
    raw = technique.base_damage * archetype_modifier(attacker.archetype) * accuracy
    effects = technique.effects
    consciousness_loss = balance_loss = 0

    if vital_point is not None:
        raw *= vital_point.base_damage / config.vital_point_bonus_divisor
        if vital_effects_triggered:
            effects = effects + vital_point.effects
        profile = severity_profile(vital_point.severity)
        consciousness_loss = profile.consciousness_loss
        balance_loss = profile.balance_loss

    return DamageResult(
        damage=max(1, math.floor(raw)),
        is_critical=accuracy > config.technique_crit_threshold,
        accuracy=accuracy,
        vital_point=vital_point,
        effects=effects,
        consciousness_loss=consciousness_loss,
        balance_loss=balance_loss,
    )


def calculate_vital_point_damage(
    vital_point: VitalPoint,
    base_damage: float,
    attacker: PlayerState,
    accuracy: float,
    config: CombatConfig = DEFAULT_CONFIG,
    vital_effects_triggered: bool = True,
) -> DamageResult:
    """Damage of a precise strike resolved on a vital point.

    final = base * archetype modifier * accuracy * severity multiplier;
    floored, never below 1. Criticals need a higher accuracy than on the
    technique path.
    """
    profile = severity_profile(vital_point.severity)
    raw = base_damage * archetype_modifier(attacker.archetype) * accuracy * profile.damage_multiplier

    return DamageResult(
        damage=max(1, math.floor(raw)),
        is_critical=accuracy > config.vital_point_crit_threshold,
        accuracy=accuracy,
        vital_point=vital_point,
        effects=vital_point.effects if vital_effects_triggered else (),
        consciousness_loss=profile.consciousness_loss,
        balance_loss=profile.balance_loss,
    )


def attacker_condition(attacker: PlayerState) -> float:
    """Condition factor in [0.5, 1.0] weighing body over mind."""
    health = attacker.health / attacker.max_health if attacker.max_health else 0.0
    stamina = attacker.stamina / attacker.max_stamina if attacker.max_stamina else 0.0
    mental = (attacker.consciousness / 100.0 + attacker.balance / 100.0) / 2
    physical = (health + stamina) / 2
    return 0.5 + (mental * 0.3 + physical * 0.7) * 0.5


def calculate_critical_chance(
    technique: Technique,
    attacker: PlayerState,
    vital_point_hit: bool = False,
) -> float:
    """Chance in [0, 1] that a strike is critical."""
    chance = technique.crit_chance * get_stance_data(attacker.stance).modifiers.damage
    if vital_point_hit:
        chance *= VITAL_POINT_CRIT_FACTOR
    chance *= attacker_condition(attacker)
    if attacker.balance >= PERFECT_BALANCE:
        chance *= PERFECT_BALANCE_CRIT_FACTOR
    return clamp(chance, 0.0, 1.0)


def calculate_damage_reduction(
    defender: PlayerState,
    technique: Optional[Technique] = None,
    config: CombatConfig = DEFAULT_CONFIG,
) -> float:
    """Fraction of incoming damage the defender negates.

    Defense comes from the archetype and the current stance, with diminishing
    returns and a hard cap. Active blocking halves what is left, unless the
    technique is unblockable.
    """
    defense = get_archetype_data(defender.archetype).defense * get_stance_data(defender.stance).modifiers.defense
    reduction = min(config.max_damage_reduction, defense / (defense + config.defense_softcap))

    blockable = technique is None or not technique.is_unblockable
    if defender.is_blocking and blockable:
        reduction = 1.0 - (1.0 - reduction) * config.blocking_factor

    return reduction


def mitigate(damage: int, reduction: float) -> int:
    """Apply a damage reduction to landed damage, keeping the floor of 1."""
    if damage <= 0:
        return 0
    return max(1, math.floor(damage * (1.0 - reduction)))


def impact_intensity(damage: int, is_critical: bool = False, config: CombatConfig = DEFAULT_CONFIG) -> ImpactIntensity:
    """Bucket damage for the audio layer."""
    if damage <= 0:
        return ImpactIntensity.NONE
    if is_critical:
        return ImpactIntensity.CRITICAL
    if damage < config.light_impact_below:
        return ImpactIntensity.LIGHT
    if damage < config.medium_impact_below:
        return ImpactIntensity.MEDIUM
    if damage < config.heavy_impact_below:
        return ImpactIntensity.HEAVY
    return ImpactIntensity.CRITICAL


def forecast(
    attacker: PlayerState,
    defender: PlayerState,
    technique: Technique,
    vital_point: Optional[VitalPoint] = None,
    config: CombatConfig = DEFAULT_CONFIG,
) -> CombatForecast:
    """Preview a technique against a defender without rolling.

    The damage range spans the weakest and the perfect landed strike after
    the defender's mitigation.
    """
    reduction = calculate_damage_reduction(defender, technique, config)

    def landed(accuracy: float) -> int:
        if vital_point is not None and technique.attack_type in VITAL_POINT_ATTACKS:
            result = calculate_vital_point_damage(vital_point, vital_point.base_damage, attacker, accuracy, config)
        else:
            result = calculate_technique_damage(technique, attacker, vital_point, accuracy, config)
        return mitigate(result.damage, reduction)

    return CombatForecast(
        technique_id=technique.id,
        hit_chance=hit_chance(technique, attacker.stance, defender.stance, config),
        min_damage=landed(config.min_strike_accuracy),
        max_damage=landed(1.0),
        critical_chance=calculate_critical_chance(technique, attacker, vital_point is not None),
        damage_reduction=reduction,
        effectiveness=effectiveness_of(attacker.stance, defender.stance),
    )
