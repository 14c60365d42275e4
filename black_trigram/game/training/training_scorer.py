"""
Training mode scoring.

The scorer runs attempts through the combat resolver against a practice
target that can never be knocked out, then grades each attempt and produces
bilingual feedback. Accuracy history and session statistics are in-memory
and live as long as the scorer does.
"""
from collections import deque
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

import numpy as np

from ...core.config import DEFAULT_CONFIG, CombatConfig
from ...core.data_structures import KoreanText, Vector2
from ...core.game_enums import ImprovementArea, PlayerArchetype, TrainingTrend, TrigramStance
from ...core.log_manager import LogManager
from ...core.random_source import RandomSource
from ..catalog.techniques import Technique, get_technique
from ..combat.combat_resolver import CombatResolver, CombatResult
from ..entities.player_state import PlayerState, clamp_player, create_player


FormScoreFn = Callable[[PlayerState, Technique], float]

IMPROVEMENT_TEXT: dict[ImprovementArea, KoreanText] = {
    ImprovementArea.TARGETING_PRECISION: KoreanText("급소 타격 정확도 향상", "Improve targeting precision"),
    ImprovementArea.TECHNIQUE_EXECUTION: KoreanText("기술 실행 개선", "Refine technique execution"),
    ImprovementArea.STANCE_STABILITY: KoreanText("자세 안정성 강화", "Strengthen stance stability"),
}

BASIC_STANCE_GOAL = KoreanText("기본 자세 숙달", "Master the basic stances")
ACCURACY_GOAL = KoreanText("정확도 80% 달성", "Reach 80% accuracy")
ADVANCED_TECHNIQUE_GOAL = KoreanText("고급 기술 연습", "Practice advanced techniques")
KI_MANAGEMENT_GOAL = KoreanText("기력 관리 연습", "Practice ki management")

STANCE_GOALS: dict[TrigramStance, KoreanText] = {
    TrigramStance.GEON: KoreanText("건괘의 강력한 직선 공격 연마", "Refine Geon's powerful direct strikes"),
    TrigramStance.TAE: KoreanText("태괘의 유연한 연속기 연습", "Practice Tae's fluid combinations"),
    TrigramStance.LI: KoreanText("리괘의 정밀 급소 타격 훈련", "Train Li's precise vital point strikes"),
    TrigramStance.JIN: KoreanText("진괘의 순간 돌격 속도 향상", "Sharpen Jin's explosive charges"),
    TrigramStance.SON: KoreanText("손괘의 끊임없는 연타 유지", "Sustain Son's relentless barrages"),
    TrigramStance.GAM: KoreanText("감괘의 반격 타이밍 익히기", "Learn Gam's counter timing"),
    TrigramStance.GAN: KoreanText("간괘의 굳건한 방어 유지", "Hold Gan's immovable defense"),
    TrigramStance.GON: KoreanText("곤괘의 제압 기술 숙련", "Master Gon's grappling control"),
}

MAX_GOALS = 3

# Accuracy-score curve
ACCURACY_BASE = 0.5
ACCURACY_SKILL_WEIGHT = 0.4
BASIC_GOAL_BELOW = 0.6
ACCURACY_GOAL_BELOW = 0.8

# Technique-score curve
TECHNIQUE_BASE = 0.6
TECHNIQUE_KI_WEIGHT = 0.2
TECHNIQUE_STAMINA_WEIGHT = 0.2


def constant_form_score(baseline: float) -> FormScoreFn:
    """Form scorer that ignores its inputs and returns a fixed baseline."""
    def score(attacker: PlayerState, technique: Technique) -> float:
        return baseline
    return score


@dataclass(frozen=True)
class TrainingCombatResult:
    """CombatResult plus training grades and feedback."""
    combat: CombatResult
    accuracy_score: float
    technique_score: float
    form_score: float
    improvement_areas: tuple[ImprovementArea, ...]
    improvement_messages: tuple[KoreanText, ...]
    next_goals: tuple[KoreanText, ...]
    trend: TrainingTrend

    @property
    def hit(self) -> bool:
        return self.combat.hit

    @property
    def damage(self) -> int:
        return self.combat.damage


@dataclass
class TrainingSessionStats:
    """Counters for one training session."""
    attempts: int = 0
    rejected: int = 0
    hits: int = 0
    vital_point_hits: int = 0
    critical_hits: int = 0
    total_damage: int = 0
    best_accuracy: float = 0.0

    @property
    def hit_rate(self) -> float:
        return self.hits / self.attempts if self.attempts else 0.0


def create_practice_target(config: CombatConfig = DEFAULT_CONFIG) -> PlayerState:
    """Near-invulnerable training dummy."""
    dummy = create_player(PlayerArchetype.MUSA, player_id="training_dummy")
    return replace(
        dummy,
        name=KoreanText("수련용 허수아비", "Training Dummy"),
        health=config.training_target_max_health,
        max_health=config.training_target_max_health,
    )


def accuracy_score(attacker: PlayerState) -> float:
    return min(1.0, ACCURACY_BASE + attacker.technique_skill / 100 * ACCURACY_SKILL_WEIGHT)


def technique_score(attacker: PlayerState) -> float:
    ki_ratio = attacker.ki / attacker.max_ki if attacker.max_ki else 0.0
    stamina_ratio = attacker.stamina / attacker.max_stamina if attacker.max_stamina else 0.0
    return min(1.0, TECHNIQUE_BASE + TECHNIQUE_KI_WEIGHT * ki_ratio + TECHNIQUE_STAMINA_WEIGHT * stamina_ratio)


def improvement_areas(
    accuracy: float,
    technique: float,
    form: float,
    threshold: float = DEFAULT_CONFIG.improvement_threshold,
) -> tuple[ImprovementArea, ...]:
    """Areas whose score falls below the threshold."""
    scored = (
        (ImprovementArea.TARGETING_PRECISION, accuracy),
        (ImprovementArea.TECHNIQUE_EXECUTION, technique),
        (ImprovementArea.STANCE_STABILITY, form),
    )
    return tuple(area for area, score in scored if score < threshold)


def next_goals(
    accuracy: float,
    technique: float,
    stance: TrigramStance,
    threshold: float = DEFAULT_CONFIG.improvement_threshold,
) -> tuple[KoreanText, ...]:
    """Up to three goals, escalating with accuracy, ending with the stance goal."""
    if accuracy < BASIC_GOAL_BELOW:
        goals = [BASIC_STANCE_GOAL]
    elif accuracy < ACCURACY_GOAL_BELOW:
        goals = [ACCURACY_GOAL]
    else:
        goals = [ADVANCED_TECHNIQUE_GOAL]

    if technique < threshold:
        goals.append(KI_MANAGEMENT_GOAL)

    goals.append(STANCE_GOALS[stance])
    return tuple(goals[:MAX_GOALS])


def accuracy_trend(history: list[float], window: int = 3, band: float = 0.1) -> TrainingTrend:
    """Compare the mean of the newest window with the window before it.

    Differences inside the band count as stable, as does a history too short
    to hold two full windows.
    """
    if len(history) < window * 2:
        return TrainingTrend.STABLE

    samples = np.asarray(history[-window * 2:], dtype=float)
    difference = samples[window:].mean() - samples[:window].mean()
    if difference > band:
        return TrainingTrend.IMPROVING
    if difference < -band:
        return TrainingTrend.DECLINING
    return TrainingTrend.STABLE


class TrainingScorer:
    """Grades training attempts against a practice target."""

    def __init__(
        self,
        rng: RandomSource,
        log_manager: Optional[LogManager] = None,
        config: CombatConfig = DEFAULT_CONFIG,
        compute_form_score: Optional[FormScoreFn] = None,
    ):
        """
        Initialize the scorer.

        Args:
            rng: Source for the resolver's hit rolls
            log_manager: Session log (None disables logging)
            config: Balance constants
            compute_form_score: Form scorer (defaults to the configured baseline)
        """
        self.config = config
        self.log_manager = log_manager
        self.resolver = CombatResolver(rng, log_manager, config)
        self.compute_form_score = compute_form_score or constant_form_score(config.form_score_baseline)
        self.target = create_practice_target(config)
        self.history: deque[float] = deque(maxlen=config.accuracy_history_size)
        self.stats = TrainingSessionStats()

    def attempt(
        self,
        player: PlayerState,
        technique: Union[Technique, str],
        now: float = 0.0,
        impact: Optional[Vector2] = None,
        vital_point_id: Optional[str] = None,
        applied_force: Optional[float] = None,
    ) -> TrainingCombatResult:
        """
        Resolve and grade one training attempt.

        Scores are computed from the player's state before the attempt.
        Rejected attempts are graded but not added to the accuracy history.

        Raises:
            KeyError: If the technique or vital point id is unknown
        """
        if isinstance(technique, str):
            technique = get_technique(technique)

        combat = self.resolver.resolve(
            player, self.target, technique, now,
            impact=impact, vital_point_id=vital_point_id, applied_force=applied_force,
        )
        self.target = self._restore_target(combat.defender_state)
        self._record(combat)

        accuracy = accuracy_score(player)
        tech = technique_score(player)
        form = self.compute_form_score(player, technique)
        areas = improvement_areas(accuracy, tech, form, self.config.improvement_threshold)

        result = TrainingCombatResult(
            combat=combat,
            accuracy_score=accuracy,
            technique_score=tech,
            form_score=form,
            improvement_areas=areas,
            improvement_messages=tuple(IMPROVEMENT_TEXT[a] for a in areas),
            next_goals=next_goals(accuracy, tech, player.stance, self.config.improvement_threshold),
            trend=self.trend(),
        )

        if self.log_manager:
            self.log_manager.training(
                f"{combat.log} | accuracy {accuracy:.2f} technique {tech:.2f} form {form:.2f}",
                now,
            )
        return result

    def _restore_target(self, target: PlayerState) -> PlayerState:
        """Lift the target back above its floors so practice never defeats it."""
        condition_floor = self.config.training_target_condition_floor
        return clamp_player(
            replace(
                target,
                health=max(target.health, self.config.training_target_health_floor),
                consciousness=max(target.consciousness, condition_floor),
                balance=max(target.balance, condition_floor),
            )
        )

    def _record(self, combat: CombatResult) -> None:
        if not combat.success:
            self.stats.rejected += 1
            return

        sample = combat.accuracy if combat.hit else 0.0
        self.history.append(sample)
        self.stats.attempts += 1
        if combat.hit:
            self.stats.hits += 1
            self.stats.total_damage += combat.damage
            self.stats.best_accuracy = max(self.stats.best_accuracy, sample)
        if combat.vital_point_id is not None:
            self.stats.vital_point_hits += 1
        if combat.is_critical:
            self.stats.critical_hits += 1

    def trend(self) -> TrainingTrend:
        return accuracy_trend(list(self.history), self.config.trend_window, self.config.trend_band)

    def average_accuracy(self) -> float:
        if not self.history:
            return 0.0
        return float(np.mean(self.history))

    def reset_target(self) -> None:
        """Restore the practice target to full condition."""
        self.target = create_practice_target(self.config)

    def reset_session(self) -> None:
        """Clear history and statistics and restore the target."""
        self.history.clear()
        self.stats = TrainingSessionStats()
        self.reset_target()
