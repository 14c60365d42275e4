"""
Tests for training mode scoring and session tracking.
"""
from dataclasses import replace

import pytest

from black_trigram.core.game_enums import HitType, ImprovementArea, TrainingTrend, TrigramStance
from black_trigram.core.log_manager import LogCategory
from black_trigram.game.entities.player_state import is_defeated, readiness_for
from black_trigram.game.training.training_scorer import (
    ACCURACY_GOAL,
    ADVANCED_TECHNIQUE_GOAL,
    BASIC_STANCE_GOAL,
    IMPROVEMENT_TEXT,
    KI_MANAGEMENT_GOAL,
    MAX_GOALS,
    STANCE_GOALS,
    TrainingScorer,
    accuracy_score,
    accuracy_trend,
    constant_form_score,
    create_practice_target,
    improvement_areas,
    next_goals,
    technique_score,
)
from tests.test_utils import PlayerBuilder, ScriptedRandom


THUNDER = "geon_heavenly_thunder_strike"


def rested(player):
    """Refill resources between repeated attempts."""
    return replace(player, ki=player.max_ki, stamina=player.max_stamina)


class TestScores:
    """Test the grading curves."""

    def test_accuracy_score(self):
        assert accuracy_score(PlayerBuilder().with_skill(90).build()) == pytest.approx(0.86)
        assert accuracy_score(PlayerBuilder().with_skill(0).build()) == pytest.approx(0.5)
        assert accuracy_score(PlayerBuilder().with_skill(200).build()) == 1.0

    def test_technique_score(self):
        assert technique_score(PlayerBuilder().build()) == pytest.approx(1.0)
        assert technique_score(PlayerBuilder().with_resources(ki=0, stamina=0).build()) == pytest.approx(0.6)

    def test_improvement_areas(self):
        assert improvement_areas(0.9, 0.9, 0.9) == ()
        assert improvement_areas(0.5, 0.9, 0.5) == (
            ImprovementArea.TARGETING_PRECISION,
            ImprovementArea.STANCE_STABILITY,
        )
        # Scores at the threshold are not flagged
        assert improvement_areas(0.7, 0.7, 0.7) == ()


class TestGoals:
    """Test goal selection."""

    @pytest.mark.parametrize("accuracy,expected", [
        (0.55, BASIC_STANCE_GOAL),
        (0.74, ACCURACY_GOAL),
        (0.86, ADVANCED_TECHNIQUE_GOAL),
    ])
    def test_goal_escalates_with_accuracy(self, accuracy, expected):
        goals = next_goals(accuracy, 1.0, TrigramStance.GEON)
        assert goals == (expected, STANCE_GOALS[TrigramStance.GEON])

    def test_ki_goal_when_technique_low(self):
        goals = next_goals(0.55, 0.6, TrigramStance.LI)
        assert goals == (BASIC_STANCE_GOAL, KI_MANAGEMENT_GOAL, STANCE_GOALS[TrigramStance.LI])

    def test_at_most_three_goals(self):
        for accuracy in (0.0, 0.6, 0.9):
            for technique in (0.0, 1.0):
                for stance in TrigramStance:
                    assert len(next_goals(accuracy, technique, stance)) <= MAX_GOALS

    def test_every_stance_has_goal(self):
        assert set(STANCE_GOALS) == set(TrigramStance)


class TestTrend:
    """Test accuracy trend classification."""

    def test_short_history_is_stable(self):
        assert accuracy_trend([]) == TrainingTrend.STABLE
        assert accuracy_trend([0.1, 0.9, 0.9, 0.9, 0.9]) == TrainingTrend.STABLE

    def test_improving(self):
        assert accuracy_trend([0.2, 0.2, 0.2, 0.9, 0.9, 0.9]) == TrainingTrend.IMPROVING

    def test_declining(self):
        assert accuracy_trend([0.9, 0.9, 0.9, 0.2, 0.2, 0.2]) == TrainingTrend.DECLINING

    def test_small_changes_are_stable(self):
        assert accuracy_trend([0.7, 0.7, 0.7, 0.75, 0.75, 0.75]) == TrainingTrend.STABLE

    def test_only_recent_windows_count(self):
        history = [0.0, 0.0, 0.0, 0.8, 0.8, 0.8, 0.8, 0.8, 0.8]
        assert accuracy_trend(history) == TrainingTrend.STABLE


class TestPracticeTarget:
    """Test the training dummy."""

    def test_target(self):
        target = create_practice_target()
        assert target.id == "training_dummy"
        assert target.name.english == "Training Dummy"
        assert target.health == target.max_health == 1000


class TestTrainingScorer:
    """Test scored attempts through the resolver."""

    def test_high_accuracy_feedback(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        player = PlayerBuilder().with_skill(90).build()

        result = scorer.attempt(player, THUNDER)

        assert result.hit
        assert result.accuracy_score >= 0.8
        assert ImprovementArea.TARGETING_PRECISION not in result.improvement_areas
        assert ADVANCED_TECHNIQUE_GOAL in result.next_goals
        assert STANCE_GOALS[TrigramStance.GEON] in result.next_goals
        assert len(result.next_goals) <= MAX_GOALS

    def test_low_accuracy_feedback(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        player = PlayerBuilder().with_skill(10).build()

        result = scorer.attempt(player, THUNDER)

        assert ImprovementArea.TARGETING_PRECISION in result.improvement_areas
        assert IMPROVEMENT_TEXT[ImprovementArea.TARGETING_PRECISION] in result.improvement_messages
        assert result.next_goals[0] == BASIC_STANCE_GOAL

    def test_scores_use_pre_attempt_state(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        player = PlayerBuilder().build()
        result = scorer.attempt(player, THUNDER)
        assert result.technique_score == pytest.approx(technique_score(player))

    def test_target_never_drops_below_floor(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        player = PlayerBuilder().build()

        for i in range(20):
            scorer.attempt(rested(player), THUNDER, now=i * 1000)
            assert scorer.target.health >= 900

        assert scorer.target.health == 900

    def test_history_bounded(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        player = PlayerBuilder().build()
        for i in range(12):
            scorer.attempt(rested(player), THUNDER, now=i * 1000)

        assert len(scorer.history) == 10
        assert scorer.stats.attempts == 12
        assert scorer.stats.hits == 12
        assert scorer.average_accuracy() == pytest.approx(1.0)

    def test_miss_recorded_as_zero(self):
        scorer = TrainingScorer(ScriptedRandom([0.999]))
        result = scorer.attempt(PlayerBuilder().build(), THUNDER)
        assert not result.hit
        assert list(scorer.history) == [0.0]
        assert scorer.stats.hits == 0
        assert scorer.stats.hit_rate == 0.0

    def test_rejected_attempt_not_recorded(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        result = scorer.attempt(PlayerBuilder().build(), "li_flame_spear")

        assert not result.combat.success
        assert len(scorer.history) == 0
        assert scorer.stats.rejected == 1
        assert scorer.stats.attempts == 0

    def test_trend_reported(self):
        scorer = TrainingScorer(ScriptedRandom([0.999, 0.999, 0.999, 0.0, 0.0, 0.0]))
        player = PlayerBuilder().build()
        results = [scorer.attempt(rested(player), THUNDER, now=i) for i in range(6)]
        assert results[-1].trend == TrainingTrend.IMPROVING
        assert scorer.trend() == TrainingTrend.IMPROVING

    def test_vital_point_stats(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        player = PlayerBuilder(stance=TrigramStance.LI).build()
        scorer.attempt(player, "li_burning_nerve_strike", vital_point_id="danjung")
        assert scorer.stats.vital_point_hits == 1
        assert scorer.stats.critical_hits == 1

    def test_custom_form_score(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]), compute_form_score=constant_form_score(0.3))
        result = scorer.attempt(PlayerBuilder().build(), THUNDER)
        assert result.form_score == 0.3
        assert ImprovementArea.STANCE_STABILITY in result.improvement_areas

    def test_form_scorer_receives_attempt(self):
        seen = []

        def scorer_fn(attacker, technique):
            seen.append((attacker.id, technique.id))
            return 0.9

        scorer = TrainingScorer(ScriptedRandom([0.0]), compute_form_score=scorer_fn)
        scorer.attempt(PlayerBuilder().build(), THUNDER)
        assert seen == [("player_0", THUNDER)]

    def test_attempt_logged(self, log_manager):
        scorer = TrainingScorer(ScriptedRandom([0.0]), log_manager)
        scorer.attempt(PlayerBuilder().build(), THUNDER, now=300)

        training = log_manager.get_messages(categories={LogCategory.TRAINING})
        assert len(training) == 1
        assert "Heavenly Thunder Strike" in training[0].text
        assert "accuracy" in training[0].text
        assert training[0].timestamp == 300

    def test_reset_session(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        scorer.attempt(PlayerBuilder().build(), THUNDER)
        scorer.reset_session()

        assert len(scorer.history) == 0
        assert scorer.stats.attempts == 0
        assert scorer.target.health == 1000

    def test_reset_target(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        scorer.attempt(PlayerBuilder().build(), THUNDER)
        assert scorer.target.health < 1000
        scorer.reset_target()
        assert scorer.target.health == 1000
        assert scorer.stats.attempts == 1

    def test_target_readiness_tracks_floored_health(self):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        player = PlayerBuilder().build()
        for i in range(20):
            scorer.attempt(rested(player), THUNDER, now=i * 1000)

        target = scorer.target
        assert target.health == 900
        assert target.readiness == readiness_for(target.health, target.max_health)

    def test_repeated_vital_strikes_never_defeat_target(self, config):
        scorer = TrainingScorer(ScriptedRandom([0.0]))
        player = PlayerBuilder(stance=TrigramStance.LI).build()

        for i in range(10):
            result = scorer.attempt(
                rested(player), "li_burning_nerve_strike", now=i * 100000,
                vital_point_id="baekhoe", applied_force=100,
            )
            assert result.combat.hit_type == HitType.VITAL_POINT_STRIKE

            target = scorer.target
            assert target.readiness == readiness_for(target.health, target.max_health)
            assert not is_defeated(target)
            assert target.consciousness >= config.training_target_condition_floor
            assert target.balance >= config.training_target_condition_floor
