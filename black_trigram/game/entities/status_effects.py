"""
Status effect engine.

Turns effect templates into timestamped instances and advances them over
elapsed time. Every operation returns a new tuple; instances are frozen and
an expired instance is dropped rather than kept around with zero duration.
"""
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from ...core.data_structures import KoreanText
from ...core.game_enums import EffectIntensity, EffectType
from ..catalog.effects import EFFECT_NAMES, EffectTemplate


@dataclass(frozen=True)
class StatusEffect:
    """Live status effect attached to a player.

    Two clocks run an effect out. end_time is fixed at application and is
    checked against caller timestamps (expire, is_live); remaining counts down
    through elapsed-time ticks (tick, regenerate_resources). Neither moves the
    other, and an effect is over as soon as either one runs out.

    Attributes:
        id: Template id plus application timestamp, unique per stack
        template_id: Template this instance was built from
        source: Id of the technique or vital point that applied it
        start_time: Application timestamp (ms)
        end_time: start_time + duration
        remaining: Duration left after ticks (ms)
    """
    id: str
    template_id: str
    effect_type: EffectType
    intensity: EffectIntensity
    duration: float
    source: str
    start_time: float
    end_time: float
    remaining: float
    stackable: bool = False

    @property
    def display_name(self) -> KoreanText:
        return EFFECT_NAMES[self.effect_type]

    def is_live(self, now: float) -> bool:
        """Live strictly before its end time and while ticks leave time remaining."""
        return now < self.end_time and self.remaining > 0


def materialize(template: EffectTemplate, source_id: str, now: float) -> StatusEffect:
    """Build a live instance from a template.

    Args:
        template: Effect definition
        source_id: Technique or vital point id credited with the effect
        now: Externally supplied timestamp (ms)
    """
    return StatusEffect(
        id=f"{template.id}_{int(now)}",
        template_id=template.id,
        effect_type=template.effect_type,
        intensity=template.intensity,
        duration=template.duration,
        source=source_id,
        start_time=now,
        end_time=now + template.duration,
        remaining=template.duration,
        stackable=template.stackable,
    )


def materialize_all(templates: Iterable[EffectTemplate], source_id: str, now: float) -> tuple[StatusEffect, ...]:
    """Materialize every template, skipping zero-duration ones."""
    return tuple(materialize(t, source_id, now) for t in templates if t.duration > 0)


def tick(effects: Sequence[StatusEffect], elapsed: float) -> tuple[StatusEffect, ...]:
    """Advance effects by elapsed milliseconds.

    Remaining duration is decremented on each effect; effects whose remaining
    duration reaches zero are dropped.

    Raises:
        ValueError: If elapsed is negative
    """
    if elapsed < 0:
        raise ValueError(f"Elapsed time cannot be negative: {elapsed}")

    advanced = []
    for effect in effects:
        remaining = effect.remaining - elapsed
        if remaining > 0:
            advanced.append(replace(effect, remaining=remaining))
    return tuple(advanced)


def expire(effects: Sequence[StatusEffect], now: float) -> tuple[StatusEffect, ...]:
    """Drop effects that are no longer live at now."""
    return tuple(e for e in effects if e.is_live(now))


def apply_effects(existing: Sequence[StatusEffect], incoming: Iterable[StatusEffect]) -> tuple[StatusEffect, ...]:
    """Merge newly applied effects into an effect list.

    A stackable effect is appended alongside earlier instances of its type.
    A non-stackable effect replaces every instance of its type already
    present, so at most one of it is ever held.
    """
    merged = list(existing)
    for effect in incoming:
        if not effect.stackable:
            merged = [e for e in merged if e.effect_type != effect.effect_type]
        merged.append(effect)
    return tuple(merged)


def has_effect(effects: Iterable[StatusEffect], effect_type: EffectType) -> bool:
    return any(e.effect_type == effect_type for e in effects)


def effects_of_type(effects: Iterable[StatusEffect], effect_type: EffectType) -> list[StatusEffect]:
    return [e for e in effects if e.effect_type == effect_type]
