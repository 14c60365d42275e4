"""
Technique catalog for the eight trigram stances.

Every stance owns a signature technique plus additional forms. Techniques are
immutable and looked up by stance or id. The catalog is validated against the
stance catalog when this module is imported, so an authoring mistake fails at
content-load time instead of in the middle of a match.
"""
from dataclasses import dataclass, field
from typing import Optional

from ...core.data_structures import KoreanText
from ...core.game_enums import (
    AttackType,
    DamageType,
    EffectIntensity,
    EffectType,
    PlayerArchetype,
    TrigramStance,
)
from .archetypes import favored_stances
from .effects import EffectTemplate, effect
from .stances import STANCE_DATA


UNBLOCKABLE = "unblockable"
COUNTER = "counter"
PRECISE = "precise"


@dataclass(frozen=True)
class Technique:
    """Immutable technique definition."""
    id: str
    name: KoreanText
    stance: TrigramStance
    attack_type: AttackType
    damage_type: DamageType
    base_damage: int
    ki_cost: int
    stamina_cost: int
    range: float
    accuracy: float
    crit_chance: float = 0.1
    crit_multiplier: float = 1.5
    properties: frozenset[str] = field(default_factory=frozenset)
    effects: tuple[EffectTemplate, ...] = ()
    description: Optional[KoreanText] = None

    @property
    def is_unblockable(self) -> bool:
        """Whether blocking mitigation is ignored."""
        return UNBLOCKABLE in self.properties


_T = TrigramStance
_A = AttackType
_D = DamageType
_E = EffectType
_I = EffectIntensity

TECHNIQUE_CATALOG: dict[TrigramStance, tuple[Technique, ...]] = {
    _T.GEON: (
        Technique(
            id="geon_heavenly_thunder_strike",
            name=KoreanText("천둥벽력", "Heavenly Thunder Strike", "cheondung_byeokryeok"),
            stance=_T.GEON,
            attack_type=_A.STRIKE,
            damage_type=_D.BLUNT,
            base_damage=28,
            ki_cost=15,
            stamina_cost=10,
            range=1.2,
            accuracy=0.8,
            crit_chance=0.1,
            crit_multiplier=1.5,
            description=KoreanText("하늘의 힘을 담은 직접적인 타격", "Direct strike imbued with heavenly power"),
        ),
        Technique(
            id="geon_bone_breaking_fist",
            name=KoreanText("쇄골파", "Bone-Breaking Fist", "swaegolpa"),
            stance=_T.GEON,
            attack_type=_A.PUNCH,
            damage_type=_D.BLUNT,
            base_damage=34,
            ki_cost=22,
            stamina_cost=18,
            range=1.0,
            accuracy=0.7,
            crit_chance=0.12,
            crit_multiplier=1.7,
            effects=(effect("geon_bone_breaking_fist", _E.WEAKENED, _I.MEDIUM, 3000),),
        ),
    ),
    _T.TAE: (
        Technique(
            id="tae_flowing_strikes",
            name=KoreanText("유수연타", "Flowing Strikes", "yusu_yeonta"),
            stance=_T.TAE,
            attack_type=_A.STRIKE,
            damage_type=_D.BLUNT,
            base_damage=25,
            ki_cost=12,
            stamina_cost=18,
            range=1.0,
            accuracy=0.85,
            crit_chance=0.08,
            crit_multiplier=1.3,
            description=KoreanText("물의 흐름처럼 연속적인 타격", "Continuous strikes like flowing water"),
        ),
        Technique(
            id="tae_joint_lock",
            name=KoreanText("관절꺾기", "Joint Lock", "gwanjeol_kkeokgi"),
            stance=_T.TAE,
            attack_type=_A.GRAPPLE,
            damage_type=_D.JOINT,
            base_damage=20,
            ki_cost=14,
            stamina_cost=16,
            range=0.6,
            accuracy=0.78,
            crit_chance=0.1,
            crit_multiplier=1.4,
            properties=frozenset({UNBLOCKABLE}),
            effects=(effect("tae_joint_lock", _E.PARALYSIS, _I.LOW, 1500),),
        ),
    ),
    _T.LI: (
        Technique(
            id="li_flame_spear",
            name=KoreanText("화염지창", "Flame Spear", "hwayeom_jichang"),
            stance=_T.LI,
            attack_type=_A.THRUST,
            damage_type=_D.PIERCING,
            base_damage=35,
            ki_cost=18,
            stamina_cost=15,
            range=1.5,
            accuracy=0.9,
            crit_chance=0.15,
            crit_multiplier=1.8,
            properties=frozenset({PRECISE}),
            description=KoreanText("불꽃처럼 정확하고 날카로운 공격", "Precise and sharp attack like flame"),
        ),
        Technique(
            id="li_burning_nerve_strike",
            name=KoreanText("신경화격", "Burning Nerve Strike", "singyeong_hwagyeok"),
            stance=_T.LI,
            attack_type=_A.NERVE_STRIKE,
            damage_type=_D.NERVE,
            base_damage=22,
            ki_cost=20,
            stamina_cost=10,
            range=1.0,
            accuracy=0.88,
            crit_chance=0.18,
            crit_multiplier=1.6,
            properties=frozenset({PRECISE}),
            effects=(effect("li_burning_nerve_strike", _E.CONFUSION, _I.MEDIUM, 2000),),
        ),
    ),
    _T.JIN: (
        Technique(
            id="jin_lightning_flash",
            name=KoreanText("벽력일섬", "Lightning Flash", "byeokryeok_ilseom"),
            stance=_T.JIN,
            attack_type=_A.STRIKE,
            damage_type=_D.BLUNT,
            base_damage=28,
            ki_cost=10,
            stamina_cost=25,
            range=1.0,
            accuracy=0.75,
            crit_chance=0.12,
            crit_multiplier=1.6,
            description=KoreanText("번개처럼 빠른 일격", "Swift strike like lightning"),
        ),
        Technique(
            id="jin_thunder_knee",
            name=KoreanText("뇌성슬격", "Thunder Knee", "noeseong_seulgyeok"),
            stance=_T.JIN,
            attack_type=_A.KNEE,
            damage_type=_D.BLUNT,
            base_damage=30,
            ki_cost=14,
            stamina_cost=20,
            range=0.7,
            accuracy=0.74,
            crit_chance=0.14,
            crit_multiplier=1.5,
            effects=(effect("jin_thunder_knee", _E.STUN, _I.LOW, 1000),),
        ),
    ),
    _T.SON: (
        Technique(
            id="son_whirlwind_barrage",
            name=KoreanText("선풍연격", "Whirlwind Barrage", "seonpung_yeongyeok"),
            stance=_T.SON,
            attack_type=_A.STRIKE,
            damage_type=_D.BLUNT,
            base_damage=22,
            ki_cost=8,
            stamina_cost=30,
            range=0.8,
            accuracy=0.7,
            crit_chance=0.06,
            crit_multiplier=1.2,
            effects=(effect("son_whirlwind_barrage", _E.STAMINA_DRAIN, _I.LOW, 2000),),
            description=KoreanText("바람처럼 연속적인 공격", "Continuous attacks like wind"),
        ),
        Technique(
            id="son_piercing_breeze",
            name=KoreanText("관통풍", "Piercing Breeze", "gwantongpung"),
            stance=_T.SON,
            attack_type=_A.PRESSURE_POINT,
            damage_type=_D.PRESSURE,
            base_damage=18,
            ki_cost=16,
            stamina_cost=8,
            range=0.9,
            accuracy=0.92,
            crit_chance=0.2,
            crit_multiplier=1.6,
            properties=frozenset({PRECISE, UNBLOCKABLE}),
        ),
    ),
    _T.GAM: (
        Technique(
            id="gam_water_counter",
            name=KoreanText("수류반격", "Water Counter", "suryu_bangyeok"),
            stance=_T.GAM,
            attack_type=_A.COUNTER_ATTACK,
            damage_type=_D.BLUNT,
            base_damage=32,
            ki_cost=20,
            stamina_cost=12,
            range=0.9,
            accuracy=0.85,
            crit_chance=0.18,
            crit_multiplier=1.7,
            properties=frozenset({COUNTER}),
            description=KoreanText("물의 흐름으로 적의 공격을 받아넘기는 반격", "Counter-attack that flows like water"),
        ),
        Technique(
            id="gam_undertow_strike",
            name=KoreanText("역류타", "Undertow Strike", "yeongnyuta"),
            stance=_T.GAM,
            attack_type=_A.ELBOW,
            damage_type=_D.INTERNAL,
            base_damage=24,
            ki_cost=15,
            stamina_cost=12,
            range=0.9,
            accuracy=0.82,
            crit_chance=0.1,
            crit_multiplier=1.5,
            effects=(effect("gam_undertow_strike", _E.BREATHLESSNESS, _I.MEDIUM, 2500),),
        ),
    ),
    _T.GAN: (
        Technique(
            id="gan_rock_defense",
            name=KoreanText("반석방어", "Rock Defense", "banseok_bangeo"),
            stance=_T.GAN,
            attack_type=_A.BLOCK,
            damage_type=_D.BLUNT,
            base_damage=15,
            ki_cost=5,
            stamina_cost=8,
            range=0.5,
            accuracy=0.95,
            crit_chance=0.02,
            crit_multiplier=1.0,
            description=KoreanText("바위처럼 견고한 방어 자세", "Solid defense like a rock"),
        ),
        Technique(
            id="gan_mountain_shoulder",
            name=KoreanText("산악견타", "Mountain Shoulder", "sanak_gyeonta"),
            stance=_T.GAN,
            attack_type=_A.STRIKE,
            damage_type=_D.BLUNT,
            base_damage=26,
            ki_cost=12,
            stamina_cost=20,
            range=0.8,
            accuracy=0.8,
            crit_chance=0.08,
            crit_multiplier=1.4,
            effects=(effect("gan_mountain_shoulder", _E.VULNERABILITY, _I.LOW, 2000),),
        ),
    ),
    _T.GON: (
        Technique(
            id="gon_earth_embrace",
            name=KoreanText("대지포옹", "Earth Embrace", "daeji_poong"),
            stance=_T.GON,
            attack_type=_A.GRAPPLE,
            damage_type=_D.BLUNT,
            base_damage=26,
            ki_cost=16,
            stamina_cost=22,
            range=0.7,
            accuracy=0.72,
            crit_chance=0.08,
            crit_multiplier=1.4,
            properties=frozenset({UNBLOCKABLE}),
            description=KoreanText("대지의 힘으로 상대를 제압하는 기술", "Grappling technique using earth's power"),
        ),
        Technique(
            id="gon_ground_throw",
            name=KoreanText("지면투", "Ground Throw", "jimyeontu"),
            stance=_T.GON,
            attack_type=_A.THROW,
            damage_type=_D.BLUNT,
            base_damage=30,
            ki_cost=20,
            stamina_cost=24,
            range=0.8,
            accuracy=0.7,
            crit_chance=0.1,
            crit_multiplier=1.5,
            effects=(effect("gon_ground_throw", _E.STUN, _I.MEDIUM, 1500),),
        ),
    ),
}
del _T, _A, _D, _E, _I

_TECHNIQUES_BY_ID: dict[str, Technique] = {
    technique.id: technique
    for techniques in TECHNIQUE_CATALOG.values()
    for technique in techniques
}


def technique_for(stance: TrigramStance) -> Technique:
    """Signature technique of a stance."""
    return _TECHNIQUES_BY_ID[STANCE_DATA[stance].signature_technique_id]


def techniques_for(stance: TrigramStance) -> list[Technique]:
    """All techniques available in a stance, signature first."""
    return list(TECHNIQUE_CATALOG.get(stance, ()))


def techniques_for_archetype(archetype: PlayerArchetype) -> list[Technique]:
    """Techniques of the stances an archetype favors."""
    result: list[Technique] = []
    for stance in favored_stances(archetype):
        result.extend(techniques_for(stance))
    return result


def by_id(technique_id: str) -> Optional[Technique]:
    """Look up a technique by id, None if not found."""
    return _TECHNIQUES_BY_ID.get(technique_id)


def get_technique(technique_id: str) -> Technique:
    """Look up a technique by id.

    Raises:
        KeyError: If no technique has that id
    """
    technique = _TECHNIQUES_BY_ID.get(technique_id)
    if technique is None:
        raise KeyError(f"Unknown technique: {technique_id}")
    return technique


def all_techniques() -> list[Technique]:
    """Every technique in the catalog."""
    return list(_TECHNIQUES_BY_ID.values())


def validate_technique(technique: Technique) -> None:
    """Validate one technique against the stance catalog.

    Raises:
        ValueError: If the technique references an unknown stance or carries
            out-of-range numbers
    """
    if technique.stance not in STANCE_DATA:
        raise ValueError(f"Technique {technique.id} references unknown stance: {technique.stance!r}")
    if technique.base_damage <= 0:
        raise ValueError(f"Technique {technique.id} must deal positive damage")
    if technique.ki_cost < 0 or technique.stamina_cost < 0:
        raise ValueError(f"Technique {technique.id} has negative resource cost")
    if not 0.0 < technique.accuracy <= 1.0:
        raise ValueError(f"Technique {technique.id} accuracy out of range: {technique.accuracy}")
    if not 0.0 <= technique.crit_chance <= 1.0:
        raise ValueError(f"Technique {technique.id} crit chance out of range: {technique.crit_chance}")


def validate_technique_catalog(catalog: Optional[dict[TrigramStance, tuple[Technique, ...]]] = None) -> None:
    """Validate the full technique catalog once at content-load time.

    Raises:
        ValueError: If any technique is malformed, filed under the wrong
            stance, duplicated, or a stance lacks its signature technique
    """
    catalog = TECHNIQUE_CATALOG if catalog is None else catalog
    seen: set[str] = set()

    for stance, techniques in catalog.items():
        if stance not in STANCE_DATA:
            raise ValueError(f"Technique catalog lists unknown stance: {stance!r}")
        for technique in techniques:
            validate_technique(technique)
            if technique.stance != stance:
                raise ValueError(f"Technique {technique.id} filed under {stance.value} but requires {technique.stance.value}")
            if technique.id in seen:
                raise ValueError(f"Duplicate technique id: {technique.id}")
            seen.add(technique.id)

    for stance, data in STANCE_DATA.items():
        if data.signature_technique_id not in seen:
            raise ValueError(f"Stance {stance.value} signature technique missing: {data.signature_technique_id}")


validate_technique_catalog()
