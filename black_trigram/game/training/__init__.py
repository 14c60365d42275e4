"""Training mode components.

This package contains training-specific scoring:
- training_scorer.py: Practice target, attempt grading and feedback
"""

from .training_scorer import (
    TrainingScorer,
    TrainingCombatResult,
    TrainingSessionStats,
    FormScoreFn,
    constant_form_score,
    create_practice_target,
    accuracy_score,
    technique_score,
    improvement_areas,
    next_goals,
    accuracy_trend,
)

__all__ = [
    "TrainingScorer",
    "TrainingCombatResult",
    "TrainingSessionStats",
    "FormScoreFn",
    "constant_form_score",
    "create_practice_target",
    "accuracy_score",
    "technique_score",
    "improvement_areas",
    "next_goals",
    "accuracy_trend",
]
