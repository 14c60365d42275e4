"""Combatant state.

This package contains the per-player state and its transitions:
- player_state.py: Immutable player snapshots and pure state helpers
- status_effects.py: Timestamped status effect instances and their lifecycle
"""

from .status_effects import (
    StatusEffect,
    materialize,
    materialize_all,
    tick,
    expire,
    apply_effects,
    has_effect,
    effects_of_type,
)
from .player_state import (
    PlayerState,
    CombatStats,
    StanceChangeResult,
    readiness_for,
    clamp_player,
    apply_damage,
    consume_resources,
    regenerate_resources,
    can_act,
    is_defeated,
    combat_effectiveness,
    change_stance,
    create_player,
)

__all__ = [
    "StatusEffect",
    "materialize",
    "materialize_all",
    "tick",
    "expire",
    "apply_effects",
    "has_effect",
    "effects_of_type",
    "PlayerState",
    "CombatStats",
    "StanceChangeResult",
    "readiness_for",
    "clamp_player",
    "apply_damage",
    "consume_resources",
    "regenerate_resources",
    "can_act",
    "is_defeated",
    "combat_effectiveness",
    "change_stance",
    "create_player",
]
