"""Status effect templates.

Templates are the static half of a status effect: what it is, how strong, how
long and whether it stacks. Techniques and vital points carry lists of them;
the status effect engine turns them into timestamped instances.
"""

from dataclasses import dataclass
from typing import Optional

from ...core.data_structures import KoreanText
from ...core.game_enums import EffectIntensity, EffectType


EFFECT_NAMES: dict[EffectType, KoreanText] = {
    EffectType.STUN: KoreanText("기절", "Stun"),
    EffectType.BLEEDING: KoreanText("출혈", "Bleeding"),
    EffectType.WEAKENED: KoreanText("약화", "Weakened"),
    EffectType.PARALYSIS: KoreanText("마비", "Paralysis"),
    EffectType.CONFUSION: KoreanText("혼란", "Confusion"),
    EffectType.STAMINA_DRAIN: KoreanText("체력 소모", "Stamina drain"),
    EffectType.VULNERABILITY: KoreanText("취약", "Vulnerability"),
    EffectType.UNCONSCIOUSNESS: KoreanText("의식 잃음", "Loss of consciousness"),
    EffectType.BREATHLESSNESS: KoreanText("호흡 곤란", "Breathlessness"),
    EffectType.PAIN: KoreanText("고통", "Pain"),
}

# Damage-over-time style effects accumulate; control effects refresh instead
DEFAULT_STACKABLE = frozenset({EffectType.BLEEDING, EffectType.STAMINA_DRAIN, EffectType.PAIN})


@dataclass(frozen=True)
class EffectTemplate:
    """Static definition of a status effect a hit can induce."""
    id: str
    effect_type: EffectType
    intensity: EffectIntensity
    duration: float  # milliseconds
    stackable: bool = False
    description: Optional[KoreanText] = None

    @property
    def display_name(self) -> KoreanText:
        """Bilingual name, falling back to the effect type's name."""
        return self.description or EFFECT_NAMES[self.effect_type]

    @classmethod
    def from_dict(cls, data: dict, owner_id: str = "") -> "EffectTemplate":
        """Create a template from a content mapping.

        Args:
            data: Mapping with ``type``, ``intensity`` and ``duration`` keys
            owner_id: Id of the technique or vital point owning the template,
                used to build a default template id

        Raises:
            ValueError: If type or intensity is unknown, or duration is negative
        """
        try:
            effect_type = EffectType(data["type"])
            intensity = EffectIntensity(data.get("intensity", EffectIntensity.MEDIUM.value))
        except KeyError as e:
            raise ValueError(f"Effect template for {owner_id} missing field: {e}")

        duration = float(data.get("duration", 0))
        if duration < 0:
            raise ValueError(f"Effect template for {owner_id} has negative duration: {duration}")

        description = data.get("description")
        return cls(
            id=data.get("id", f"{owner_id}_{effect_type.value}" if owner_id else effect_type.value),
            effect_type=effect_type,
            intensity=intensity,
            duration=duration,
            stackable=bool(data.get("stackable", effect_type in DEFAULT_STACKABLE)),
            description=KoreanText.from_dict(description) if description else None,
        )


def effect(owner_id: str, effect_type: EffectType, intensity: EffectIntensity,
           duration: float, stackable: Optional[bool] = None) -> EffectTemplate:
    """Shorthand for authoring templates in Python catalogs."""
    return EffectTemplate(
        id=f"{owner_id}_{effect_type.value}",
        effect_type=effect_type,
        intensity=intensity,
        duration=duration,
        stackable=effect_type in DEFAULT_STACKABLE if stackable is None else stackable,
    )
