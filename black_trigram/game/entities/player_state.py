"""
Player state snapshots and pure state transitions.

A PlayerState is never mutated. Every helper here takes a snapshot and
returns a new one, with clamp_player() run on the result so bounded fields
stay within their limits and the readiness tier always matches health.
"""
from dataclasses import dataclass, field, replace
from typing import Optional

from ...core.config import DEFAULT_CONFIG, CombatConfig
from ...core.data_structures import KoreanText, clamp
from ...core.game_enums import CombatReadiness, EffectType, PlayerArchetype, TrigramStance
from ..catalog.archetypes import get_archetype_data
from ..catalog.stances import get_stance_data, stance_change_cost
from .status_effects import StatusEffect, has_effect, tick


# Percent-scale fields share a 0-100 range
PERCENT_MAX = 100.0

# Per-second recovery while not acting
REGEN_FRACTION_PER_SECOND = 0.1
BALANCE_RECOVERY_PER_SECOND = 20.0
CONSCIOUSNESS_RECOVERY_PER_SECOND = 5.0
PAIN_DECAY_PER_SECOND = 5.0

# can_act thresholds
MIN_ACTING_CONSCIOUSNESS = 10.0
MIN_ACTING_BALANCE = 10.0


@dataclass(frozen=True)
class CombatStats:
    """Running per-match counters."""
    hits_landed: int = 0
    hits_taken: int = 0
    damage_dealt: int = 0
    damage_received: int = 0
    critical_hits: int = 0
    vital_point_hits: int = 0


@dataclass(frozen=True)
class PlayerState:
    """Immutable snapshot of one combatant."""
    id: str
    name: KoreanText
    archetype: PlayerArchetype
    stance: TrigramStance
    health: float
    max_health: float
    ki: float
    max_ki: float
    stamina: float
    max_stamina: float
    consciousness: float = PERCENT_MAX
    pain: float = 0.0
    balance: float = PERCENT_MAX
    blood_loss: float = 0.0
    effects: tuple[StatusEffect, ...] = ()
    readiness: CombatReadiness = CombatReadiness.READY
    technique_skill: int = 50
    is_attacking: bool = False
    is_blocking: bool = False
    is_countering: bool = False
    is_stunned: bool = False
    last_stance_change: float = 0.0
    stats: CombatStats = field(default_factory=CombatStats)

    @property
    def health_fraction(self) -> float:
        return self.health / self.max_health if self.max_health > 0 else 0.0


@dataclass(frozen=True)
class StanceChangeResult:
    """Outcome of a stance change request."""
    success: bool
    player: PlayerState
    ki_cost: int = 0
    stamina_cost: int = 0
    message: Optional[KoreanText] = None


def readiness_for(health: float, max_health: float) -> CombatReadiness:
    """Derive the readiness tier from the health fraction alone."""
    if max_health <= 0 or health <= 0:
        return CombatReadiness.INCAPACITATED

    fraction = health / max_health
    if fraction >= 0.8:
        return CombatReadiness.READY
    if fraction >= 0.6:
        return CombatReadiness.LIGHT
    if fraction >= 0.4:
        return CombatReadiness.MODERATE
    if fraction >= 0.2:
        return CombatReadiness.HEAVY
    return CombatReadiness.CRITICAL


def clamp_player(player: PlayerState) -> PlayerState:
    """Clamp every bounded field and recompute the readiness tier."""
    health = clamp(player.health, 0, player.max_health)
    return replace(
        player,
        health=health,
        ki=clamp(player.ki, 0, player.max_ki),
        stamina=clamp(player.stamina, 0, player.max_stamina),
        consciousness=clamp(player.consciousness, 0, PERCENT_MAX),
        pain=clamp(player.pain, 0, PERCENT_MAX),
        balance=clamp(player.balance, 0, PERCENT_MAX),
        blood_loss=clamp(player.blood_loss, 0, PERCENT_MAX),
        readiness=readiness_for(health, player.max_health),
    )


def apply_damage(
    player: PlayerState,
    delta: float,
    vital_point_strike: bool = False,
    config: CombatConfig = DEFAULT_CONFIG,
) -> PlayerState:
    """Apply a health change.

    Args:
        player: Current snapshot
        delta: Negative for damage, positive for healing
        vital_point_strike: Damage came from a vital point strike, which
            bleeds more
        config: Supplies the pain and blood loss factors

    Returns:
        New clamped snapshot. Healing only restores health.
    """
    if delta == 0:
        return clamp_player(player)

    if delta > 0:
        return clamp_player(replace(player, health=player.health + delta))

    damage = -delta
    blood_factor = config.vital_blood_loss_per_damage if vital_point_strike else config.blood_loss_per_damage
    return clamp_player(
        replace(
            player,
            health=player.health - damage,
            pain=player.pain + damage * config.pain_per_damage,
            blood_loss=player.blood_loss + damage * blood_factor,
        )
    )


def consume_resources(player: PlayerState, ki: float, stamina: float) -> PlayerState:
    """Deduct ki and stamina, never below zero."""
    return clamp_player(replace(player, ki=player.ki - ki, stamina=player.stamina - stamina))


def regenerate_resources(player: PlayerState, elapsed: float) -> PlayerState:
    """Recover resources over elapsed milliseconds of inactivity.

    Ki and stamina regain a fixed fraction of their maximum per second, ki
    scaled by the current stance's regeneration modifier. Balance and
    consciousness recover, pain fades, and status effects tick down; the
    stunned flag clears once no stun effect remains.

    Raises:
        ValueError: If elapsed is negative
    """
    if elapsed < 0:
        raise ValueError(f"Elapsed time cannot be negative: {elapsed}")

    seconds = elapsed / 1000.0
    ki_regen = get_stance_data(player.stance).modifiers.ki_regen
    effects = tick(player.effects, elapsed)

    return clamp_player(
        replace(
            player,
            ki=player.ki + player.max_ki * REGEN_FRACTION_PER_SECOND * seconds * ki_regen,
            stamina=player.stamina + player.max_stamina * REGEN_FRACTION_PER_SECOND * seconds,
            balance=player.balance + BALANCE_RECOVERY_PER_SECOND * seconds,
            consciousness=player.consciousness + CONSCIOUSNESS_RECOVERY_PER_SECOND * seconds,
            pain=player.pain - PAIN_DECAY_PER_SECOND * seconds,
            effects=effects,
            is_stunned=player.is_stunned and has_effect(effects, EffectType.STUN),
        )
    )


def can_act(player: PlayerState) -> bool:
    """Whether the player is able to start an action."""
    return (
        player.health > 0
        and player.consciousness > MIN_ACTING_CONSCIOUSNESS
        and not player.is_stunned
        and player.balance > MIN_ACTING_BALANCE
    )


def is_defeated(player: PlayerState) -> bool:
    return player.health <= 0 or player.consciousness <= 0


def combat_effectiveness(player: PlayerState) -> int:
    """Weighted 0-100 rating of the player's current condition."""
    health_factor = player.health / player.max_health if player.max_health else 0.0
    ki_factor = player.ki / player.max_ki if player.max_ki else 0.0
    stamina_factor = player.stamina / player.max_stamina if player.max_stamina else 0.0
    balance_factor = player.balance / PERCENT_MAX
    consciousness_factor = player.consciousness / PERCENT_MAX

    return round(
        (
            health_factor * 0.35
            + consciousness_factor * 0.25
            + ki_factor * 0.2
            + stamina_factor * 0.15
            + balance_factor * 0.05
        )
        * 100
    )


def change_stance(player: PlayerState, new_stance: TrigramStance, now: float) -> StanceChangeResult:
    """Move the player into a new trigram stance.

    The cost grows with circular distance between the stances. Insufficient
    resources and an incapacitated player are reported as a failed result;
    the player snapshot is returned unchanged in that case.

    Args:
        player: Current snapshot
        new_stance: Stance to assume
        now: Externally supplied timestamp (ms)
    """
    if new_stance == player.stance:
        return StanceChangeResult(success=True, player=player)

    target = get_stance_data(new_stance)
    ki_cost, stamina_cost = stance_change_cost(player.stance, new_stance)

    if not can_act(player):
        return StanceChangeResult(
            success=False,
            player=player,
            ki_cost=ki_cost,
            stamina_cost=stamina_cost,
            message=KoreanText("행동할 수 없습니다", "Cannot act"),
        )

    if player.ki < ki_cost or player.stamina < stamina_cost:
        return StanceChangeResult(
            success=False,
            player=player,
            ki_cost=ki_cost,
            stamina_cost=stamina_cost,
            message=KoreanText("자세 전환 자원이 부족합니다", "Insufficient resources for stance change"),
        )

    changed = clamp_player(
        replace(
            player,
            stance=new_stance,
            ki=player.ki - ki_cost,
            stamina=player.stamina - stamina_cost,
            last_stance_change=now,
        )
    )
    return StanceChangeResult(
        success=True,
        player=changed,
        ki_cost=ki_cost,
        stamina_cost=stamina_cost,
        message=KoreanText(
            f"{target.name.korean} 자세로 전환",
            f"Switched to {target.name.english} stance",
        ),
    )


def create_player(
    archetype: PlayerArchetype,
    player_index: int = 0,
    player_id: Optional[str] = None,
    stance: Optional[TrigramStance] = None,
) -> PlayerState:
    """Create a fresh player from archetype data.

    Args:
        archetype: Character archetype
        player_index: Picks the display name and the default id
        player_id: Explicit id (defaults to player_<index>)
        stance: Starting stance (defaults to the archetype's core stance)
    """
    data = get_archetype_data(archetype)
    return PlayerState(
        id=player_id or f"player_{player_index}",
        name=data.player_names[player_index % len(data.player_names)],
        archetype=archetype,
        stance=stance or data.core_stance,
        health=data.base_health,
        max_health=data.base_health,
        ki=data.base_ki,
        max_ki=data.base_ki,
        stamina=data.base_stamina,
        max_stamina=data.base_stamina,
        technique_skill=data.technique_skill,
    )
