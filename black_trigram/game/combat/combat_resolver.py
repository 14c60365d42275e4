"""
Combat resolution for a single discrete action.

The resolver walks one action through Validating -> Resolving -> Applying and
returns a CombatResult holding fresh attacker/defender snapshots. Rejected
actions (wrong stance, missing resources, incapacitated attacker) come back
as failed results with both snapshots untouched; nothing in normal play
raises. Only programming errors such as an unknown technique id do.
"""
from dataclasses import dataclass, replace
from typing import Optional, Union

from ...core.config import DEFAULT_CONFIG, CombatConfig
from ...core.data_structures import KoreanText, Vector2
from ...core.game_enums import EffectType, HitType, ImpactIntensity, ResolutionPhase
from ...core.log_manager import LogManager
from ...core.random_source import RandomSource
from ..catalog.stances import get_stance_data
from ..catalog.techniques import Technique, get_technique
from ..catalog.vital_points import VitalPoint, get_vital_point
from ..entities.player_state import (
    CombatStats,
    PlayerState,
    apply_damage,
    can_act,
    clamp_player,
    consume_resources,
)
from ..entities.status_effects import StatusEffect, apply_effects, expire, has_effect, materialize_all
from .damage_calculator import (
    VITAL_POINT_ATTACKS,
    DamageResult,
    accuracy_from_roll,
    calculate_damage_reduction,
    calculate_technique_damage,
    calculate_vital_point_damage,
    hit_chance,
    impact_intensity,
    mitigate,
)
from .hit_detection import HitOutcome, applied_force_for, detect_vital_point_hit


@dataclass(frozen=True)
class CombatResult:
    """Outcome of one resolved action, forwarded to rendering and audio."""
    success: bool
    damage: int
    technique: Technique
    hit_type: HitType
    intensity: ImpactIntensity
    message: KoreanText
    attacker_state: PlayerState
    defender_state: PlayerState
    log: str
    damage_result: Optional[DamageResult] = None
    hit_outcome: Optional[HitOutcome] = None
    effects_applied: tuple[StatusEffect, ...] = ()
    is_critical: bool = False
    accuracy: float = 0.0

    @property
    def hit(self) -> bool:
        """Whether the strike landed."""
        return self.hit_type in (
            HitType.DIRECT_HIT,
            HitType.CRITICAL_HIT,
            HitType.VITAL_POINT_STRIKE,
            HitType.BLOCKED,
        )

    @property
    def vital_point_id(self) -> Optional[str]:
        if self.damage_result and self.damage_result.vital_point:
            return self.damage_result.vital_point.id
        return None


class CombatResolver:
    """Resolves combat actions against injected randomness and configuration.

    One resolver is created per match. It owns no player state; the phase
    attribute only reflects the action currently being resolved.
    """

    def __init__(
        self,
        rng: RandomSource,
        log_manager: Optional[LogManager] = None,
        config: CombatConfig = DEFAULT_CONFIG,
    ):
        """
        Initialize the resolver.

        Args:
            rng: Source for hit rolls
            log_manager: Session log (None disables logging)
            config: Balance constants
        """
        self.rng = rng
        self.log_manager = log_manager
        self.config = config
        self.phase = ResolutionPhase.IDLE

    def resolve(
        self,
        attacker: PlayerState,
        defender: PlayerState,
        technique: Union[Technique, str],
        now: float = 0.0,
        impact: Optional[Vector2] = None,
        vital_point_id: Optional[str] = None,
        applied_force: Optional[float] = None,
    ) -> CombatResult:
        """
        Resolve one action from attacker against defender.

        Args:
            attacker: Acting player's snapshot
            defender: Target player's snapshot
            technique: Technique or technique id
            now: Monotonic action timestamp (ms) for effect bookkeeping
            impact: Impact position in body space, if aimed
            vital_point_id: Targeted vital point, if any
            applied_force: Strike force (defaults to a technique-derived value)

        Returns:
            CombatResult. Rejections have success False and the input
            snapshots unchanged.

        Raises:
            KeyError: If the technique or vital point id is unknown
        """
        if isinstance(technique, str):
            technique = get_technique(technique)
        vital_point = get_vital_point(vital_point_id) if vital_point_id else None

        self._set_phase(ResolutionPhase.VALIDATING, now)
        rejection = self._validate(attacker, technique)
        if rejection is not None:
            return self._reject(attacker, defender, technique, rejection, now)

        self._set_phase(ResolutionPhase.RESOLVING, now)
        chance = hit_chance(technique, attacker.stance, defender.stance, self.config)
        roll = self.rng.random()
        attacker_after = consume_resources(attacker, technique.ki_cost, technique.stamina_cost)

        if roll > chance:
            return self._miss(attacker_after, defender, technique, now)

        accuracy = accuracy_from_roll(roll, chance, self.config)
        damage_result, outcome = self._calculate(
            technique, attacker, vital_point, impact, applied_force, accuracy, now
        )

        blocked = defender.is_blocking and not technique.is_unblockable
        if defender.is_blocking or defender.is_countering:
            reduction = calculate_damage_reduction(defender, technique, self.config)
            damage_result = replace(
                damage_result,
                damage=mitigate(damage_result.damage, reduction),
                damage_reduction=reduction,
            )

        self._set_phase(ResolutionPhase.APPLYING, now)
        return self._apply(attacker_after, defender, technique, damage_result, outcome, blocked, now)

    def _set_phase(self, phase: ResolutionPhase, now: float) -> None:
        self.phase = phase
        if self.log_manager:
            self.log_manager.debug(f"Resolution phase: {phase.value}", now)

    def _validate(self, attacker: PlayerState, technique: Technique) -> Optional[KoreanText]:
        """Return a rejection reason, or None if the action may proceed."""
        if attacker.stance != technique.stance:
            required = get_stance_data(technique.stance).name
            return KoreanText(
                f"{required.korean} 자세가 필요합니다",
                f"{required.english} stance required",
            )
        if attacker.ki < technique.ki_cost:
            return KoreanText("기력이 부족합니다", "Insufficient Ki")
        if attacker.stamina < technique.stamina_cost:
            return KoreanText("체력이 부족합니다", "Insufficient stamina")
        if not can_act(attacker):
            return KoreanText("행동할 수 없습니다", "Cannot act")
        return None

    def _reject(
        self,
        attacker: PlayerState,
        defender: PlayerState,
        technique: Technique,
        reason: KoreanText,
        now: float,
    ) -> CombatResult:
        log_line = reason.format()
        if self.log_manager:
            self.log_manager.warning(f"{technique.id} rejected: {log_line}", now)
        self._set_phase(ResolutionPhase.DONE, now)

        return CombatResult(
            success=False,
            damage=0,
            technique=technique,
            hit_type=HitType.REJECTED,
            intensity=ImpactIntensity.NONE,
            message=reason,
            attacker_state=attacker,
            defender_state=defender,
            log=log_line,
        )

    def _miss(
        self,
        attacker: PlayerState,
        defender: PlayerState,
        technique: Technique,
        now: float,
    ) -> CombatResult:
        message = KoreanText(
            f"{technique.name.korean} 빗나감!",
            f"{technique.name.english} missed!",
        )
        log_line = message.format()
        if self.log_manager:
            self.log_manager.battle(log_line, now)
        self._set_phase(ResolutionPhase.DONE, now)

        return CombatResult(
            success=True,
            damage=0,
            technique=technique,
            hit_type=HitType.MISS,
            intensity=ImpactIntensity.NONE,
            message=message,
            attacker_state=attacker,
            defender_state=defender,
            log=log_line,
        )

    def _calculate(
        self,
        technique: Technique,
        attacker: PlayerState,
        vital_point: Optional[VitalPoint],
        impact: Optional[Vector2],
        applied_force: Optional[float],
        accuracy: float,
        now: float,
    ) -> tuple[DamageResult, Optional[HitOutcome]]:
        """Route a landed strike through vital point detection and damage."""
        if vital_point is None and impact is None:
            return calculate_technique_damage(technique, attacker, None, accuracy, self.config), None

        force = applied_force if applied_force is not None else applied_force_for(
            technique, attacker.archetype, self.config
        )
        point = impact if impact is not None else vital_point.position
        target, outcome = detect_vital_point_hit(point, force, now, vital_point, self.config)

        if target is None or outcome is None or not outcome.hit:
            return calculate_technique_damage(technique, attacker, None, accuracy, self.config), outcome

        if technique.attack_type in VITAL_POINT_ATTACKS:
            base = technique.base_damage + outcome.damage
            return calculate_vital_point_damage(
                target, base, attacker, accuracy, self.config,
                vital_effects_triggered=outcome.effects_triggered,
            ), outcome

        return calculate_technique_damage(
            technique, attacker, target, accuracy, self.config,
            vital_effects_triggered=outcome.effects_triggered,
        ), outcome

    def _apply(
        self,
        attacker: PlayerState,
        defender: PlayerState,
        technique: Technique,
        damage_result: DamageResult,
        outcome: Optional[HitOutcome],
        blocked: bool,
        now: float,
    ) -> CombatResult:
        """Build the post-action snapshots and the result record."""
        damage = damage_result.damage
        vital_strike = damage_result.vital_point is not None

        new_effects = materialize_all(technique.effects, technique.id, now)
        if vital_strike and outcome is not None:
            new_effects = new_effects + outcome.effects

        # The stun flag follows the live effect list
        live_effects = apply_effects(expire(defender.effects, now), new_effects)
        defender_after = apply_damage(defender, -damage, vital_point_strike=vital_strike, config=self.config)
        defender_after = clamp_player(
            replace(
                defender_after,
                consciousness=defender_after.consciousness - damage_result.consciousness_loss,
                balance=defender_after.balance - damage_result.balance_loss,
                effects=live_effects,
                is_stunned=has_effect(live_effects, EffectType.STUN),
                stats=_record_taken(defender.stats, damage),
            )
        )
        attacker_after = replace(
            attacker,
            stats=_record_landed(attacker.stats, damage, damage_result.is_critical, vital_strike),
        )

        if vital_strike:
            hit_type = HitType.VITAL_POINT_STRIKE
        elif blocked:
            hit_type = HitType.BLOCKED
        elif damage_result.is_critical:
            hit_type = HitType.CRITICAL_HIT
        else:
            hit_type = HitType.DIRECT_HIT

        message = self._hit_message(technique, damage_result)
        log_line = message.format()
        if self.log_manager:
            self.log_manager.battle(log_line, now)
        self._set_phase(ResolutionPhase.DONE, now)

        return CombatResult(
            success=True,
            damage=damage,
            technique=technique,
            hit_type=hit_type,
            intensity=impact_intensity(damage, damage_result.is_critical, self.config),
            message=message,
            attacker_state=attacker_after,
            defender_state=defender_after,
            log=log_line,
            damage_result=damage_result,
            hit_outcome=outcome,
            effects_applied=new_effects,
            is_critical=damage_result.is_critical,
            accuracy=damage_result.accuracy,
        )

    @staticmethod
    def _hit_message(technique: Technique, damage_result: DamageResult) -> KoreanText:
        damage = damage_result.damage
        vital_point = damage_result.vital_point
        if vital_point is not None:
            return KoreanText(
                f"{technique.name.korean} 급소 적중! {vital_point.name.korean} {damage} 피해",
                f"{technique.name.english} struck {vital_point.name.english}! {damage} damage",
            )
        return KoreanText(
            f"{technique.name.korean} 적중! {damage} 피해",
            f"{technique.name.english} hit! {damage} damage",
        )


def _record_landed(stats: CombatStats, damage: int, critical: bool, vital_strike: bool) -> CombatStats:
    return replace(
        stats,
        hits_landed=stats.hits_landed + 1,
        damage_dealt=stats.damage_dealt + damage,
        critical_hits=stats.critical_hits + int(critical),
        vital_point_hits=stats.vital_point_hits + int(vital_strike),
    )


def _record_taken(stats: CombatStats, damage: int) -> CombatStats:
    return replace(
        stats,
        hits_taken=stats.hits_taken + 1,
        damage_received=stats.damage_received + damage,
    )
