"""Static combat content.

This package contains the authored data the combat engine reads:
- stances.py: The eight trigram stances and the stance effectiveness matrix
- techniques.py: Per-stance technique definitions
- vital_points.py: Vital point registry loaded from YAML
- archetypes.py: Character archetypes and their modifiers
- effects.py: Status effect templates
"""

from .archetypes import ArchetypeData, ARCHETYPE_DATA, get_archetype_data, archetype_modifier, favored_stances
from .effects import EffectTemplate, EFFECT_NAMES, effect
from .stances import (
    StanceData,
    StanceModifiers,
    STANCE_DATA,
    EFFECTIVENESS_MATRIX,
    get_stance_data,
    effectiveness_of,
    stance_distance,
    stance_change_cost,
)
from .techniques import (
    Technique,
    TECHNIQUE_CATALOG,
    technique_for,
    techniques_for,
    techniques_for_archetype,
    by_id,
    get_technique,
    all_techniques,
    validate_technique_catalog,
)
from .vital_points import (
    VitalPoint,
    SeverityProfile,
    VITAL_POINTS,
    get_vital_point,
    all_vital_points,
    vital_points_in_region,
    vital_points_by_severity,
    severity_profile,
    find_vital_point_at,
    load_vital_point_registry,
    validate_vital_point_registry,
)

__all__ = [
    "ArchetypeData",
    "ARCHETYPE_DATA",
    "get_archetype_data",
    "archetype_modifier",
    "favored_stances",
    "EffectTemplate",
    "EFFECT_NAMES",
    "effect",
    "StanceData",
    "StanceModifiers",
    "STANCE_DATA",
    "EFFECTIVENESS_MATRIX",
    "get_stance_data",
    "effectiveness_of",
    "stance_distance",
    "stance_change_cost",
    "Technique",
    "TECHNIQUE_CATALOG",
    "technique_for",
    "techniques_for",
    "techniques_for_archetype",
    "by_id",
    "get_technique",
    "all_techniques",
    "validate_technique_catalog",
    "VitalPoint",
    "SeverityProfile",
    "VITAL_POINTS",
    "get_vital_point",
    "all_vital_points",
    "vital_points_in_region",
    "vital_points_by_severity",
    "severity_profile",
    "find_vital_point_at",
    "load_vital_point_registry",
    "validate_vital_point_registry",
]
