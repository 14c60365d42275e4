"""Centralized combat enums and constants.

This module contains the enums shared by the catalogs, the combat resolver and
the training scorer, providing a single source of truth for symbolic values.
String values are the identifiers used by content files and by the rendering
and audio layers that consume combat results.
"""

from enum import Enum


class TrigramStance(Enum):
    """The eight trigram stances (팔괘) in traditional order."""
    GEON = "geon"   # ☰ Heaven
    TAE = "tae"     # ☱ Lake
    LI = "li"       # ☲ Fire
    JIN = "jin"     # ☳ Thunder
    SON = "son"     # ☴ Wind
    GAM = "gam"     # ☵ Water
    GAN = "gan"     # ☶ Mountain
    GON = "gon"     # ☷ Earth


class PlayerArchetype(Enum):
    """Character archetypes, each with a fixed damage modifier."""
    MUSA = "musa"                             # 무사 - Warrior
    AMSALJA = "amsalja"                       # 암살자 - Assassin
    HACKER = "hacker"                         # 해커 - Hacker
    JEONGBO_YOWON = "jeongbo_yowon"           # 정보요원 - Agent
    JOJIK_POKRYEOKBAE = "jojik_pokryeokbae"   # 조직폭력배 - Gangster


class AttackType(Enum):
    """Attack-type tags carried by techniques."""
    STRIKE = "strike"
    THRUST = "thrust"
    BLOCK = "block"
    COUNTER_ATTACK = "counter_attack"
    THROW = "throw"
    GRAPPLE = "grapple"
    PRESSURE_POINT = "pressure_point"
    NERVE_STRIKE = "nerve_strike"
    PUNCH = "punch"
    KICK = "kick"
    ELBOW = "elbow"
    KNEE = "knee"


class DamageType(Enum):
    """Kinds of damage a technique deals."""
    BLUNT = "blunt"
    PIERCING = "piercing"
    PRESSURE = "pressure"
    NERVE = "nerve"
    JOINT = "joint"
    INTERNAL = "internal"


class EffectType(Enum):
    """Status effect types that techniques and vital points can induce."""
    STUN = "stun"
    BLEEDING = "bleeding"
    WEAKENED = "weakened"
    PARALYSIS = "paralysis"
    CONFUSION = "confusion"
    STAMINA_DRAIN = "stamina_drain"
    VULNERABILITY = "vulnerability"
    UNCONSCIOUSNESS = "unconsciousness"
    BREATHLESSNESS = "breathlessness"
    PAIN = "pain"


class EffectIntensity(Enum):
    """Intensity tiers for status effects."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"


class VitalPointSeverity(Enum):
    """Severity tiers of vital points, mildest first."""
    MINOR = "minor"
    MODERATE = "moderate"
    MAJOR = "major"
    CRITICAL = "critical"
    LETHAL = "lethal"


class BodyRegion(Enum):
    """Body regions used to group vital points."""
    HEAD = "head"
    NECK = "neck"
    TORSO = "torso"
    ARMS = "arms"
    LEGS = "legs"


class CombatReadiness(Enum):
    """Discrete readiness tier derived purely from the health fraction."""
    READY = "ready"
    LIGHT = "light"
    MODERATE = "moderate"
    HEAVY = "heavy"
    CRITICAL = "critical"
    INCAPACITATED = "incapacitated"


class HitType(Enum):
    """Classification of a resolved action, mapped to visuals by the renderer."""
    REJECTED = "rejected"
    MISS = "miss"
    BLOCKED = "blocked"
    DIRECT_HIT = "direct_hit"
    CRITICAL_HIT = "critical_hit"
    VITAL_POINT_STRIKE = "vital_point_strike"


class ImpactIntensity(Enum):
    """Damage magnitude bucket, mapped to sound cues by the audio layer."""
    NONE = "none"
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    CRITICAL = "critical"


class ResolutionPhase(Enum):
    """Per-action states of the combat resolver."""
    IDLE = "idle"
    VALIDATING = "validating"
    RESOLVING = "resolving"
    APPLYING = "applying"
    DONE = "done"


class ImprovementArea(Enum):
    """Training feedback tags."""
    TARGETING_PRECISION = "targeting_precision"
    TECHNIQUE_EXECUTION = "technique_execution"
    STANCE_STABILITY = "stance_stability"


class TrainingTrend(Enum):
    """Direction of the rolling accuracy history."""
    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


# Traditional trigram order, used for stance distance and display
STANCE_ORDER: tuple[TrigramStance, ...] = (
    TrigramStance.GEON,
    TrigramStance.TAE,
    TrigramStance.LI,
    TrigramStance.JIN,
    TrigramStance.SON,
    TrigramStance.GAM,
    TrigramStance.GAN,
    TrigramStance.GON,
)

SEVERITY_ORDER: tuple[VitalPointSeverity, ...] = tuple(VitalPointSeverity)
