"""Vital point registry (급소).

Vital points are authored content loaded from YAML with (x, y) body-space
positions. An entry may omit its hit radius or required force; callers resolve
those through hit_radius() and force_threshold(), which fall back to the
configured defaults so malformed content degrades instead of failing a match.
"""

import os
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import yaml

from ...core.config import DEFAULT_CONFIG, CombatConfig
from ...core.data_structures import KoreanText, Vector2
from ...core.game_enums import BodyRegion, VitalPointSeverity
from .effects import EffectTemplate


@dataclass(frozen=True)
class SeverityProfile:
    """Per-severity consequences of a vital point strike."""
    severity: VitalPointSeverity
    damage_multiplier: float
    consciousness_loss: int
    balance_loss: int


@dataclass(frozen=True)
class VitalPoint:
    """Immutable anatomical target."""
    id: str
    name: KoreanText
    region: BodyRegion
    severity: VitalPointSeverity
    position: Vector2
    base_damage: int
    radius: Optional[float] = None
    required_force: Optional[float] = None
    effects: tuple[EffectTemplate, ...] = ()
    description: Optional[KoreanText] = None

    def hit_radius(self, config: CombatConfig = DEFAULT_CONFIG) -> float:
        """Hit radius, falling back to the configured default."""
        return self.radius if self.radius is not None else config.default_vital_radius

    def force_threshold(self, config: CombatConfig = DEFAULT_CONFIG) -> float:
        """Force needed to trigger effects, falling back to the configured default."""
        return self.required_force if self.required_force is not None else config.default_required_force

    @classmethod
    def from_dict(cls, data: dict) -> "VitalPoint":
        """Create a vital point from a registry entry.

        Raises:
            ValueError: If a required field is missing or a value is invalid
        """
        try:
            vp_id = data["id"]
            radius = data.get("radius")
            required_force = data.get("required_force")
            description = data.get("description")
            return cls(
                id=vp_id,
                name=KoreanText.from_dict(data["name"]),
                region=BodyRegion(data["region"]),
                severity=VitalPointSeverity(data["severity"]),
                position=Vector2.from_list([float(c) for c in data["position"]]),
                base_damage=int(data["base_damage"]),
                radius=float(radius) if radius is not None else None,
                required_force=float(required_force) if required_force is not None else None,
                effects=tuple(
                    EffectTemplate.from_dict(e, vp_id) for e in data.get("effects", []) or []
                ),
                description=KoreanText.from_dict(description) if description else None,
            )
        except KeyError as e:
            raise ValueError(f"Vital point entry {data.get('id', '?')} missing field: {e}")


def _default_registry_path() -> str:
    package_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(package_root, "assets", "data", "vital_points.yaml")


def load_vital_point_registry(
    path: Optional[str] = None,
) -> tuple[dict[str, VitalPoint], dict[VitalPointSeverity, SeverityProfile]]:
    """Load vital points and severity profiles from a YAML registry.

    Args:
        path: Registry file (defaults to the packaged vital_points.yaml)

    Returns:
        (vital points keyed by id in file order, severity profiles)

    Raises:
        FileNotFoundError: If the registry file does not exist
        ValueError: If the registry structure or an entry is invalid
    """
    yaml_path = path or _default_registry_path()

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Vital point registry not found: {yaml_path}")

    if not isinstance(data, dict) or "vital_points" not in data:
        raise ValueError(f"Invalid vital point registry structure in {yaml_path}")

    profiles: dict[VitalPointSeverity, SeverityProfile] = {}
    for severity_name, profile in (data.get("severity_profiles") or {}).items():
        try:
            severity = VitalPointSeverity(severity_name)
            profiles[severity] = SeverityProfile(
                severity=severity,
                damage_multiplier=float(profile["damage_multiplier"]),
                consciousness_loss=int(profile["consciousness_loss"]),
                balance_loss=int(profile["balance_loss"]),
            )
        except KeyError as e:
            raise ValueError(f"Severity profile {severity_name} in {yaml_path} missing field: {e}")

    points: dict[str, VitalPoint] = {}
    for entry in data["vital_points"]:
        vital_point = VitalPoint.from_dict(entry)
        if vital_point.id in points:
            raise ValueError(f"Duplicate vital point id in {yaml_path}: {vital_point.id}")
        points[vital_point.id] = vital_point

    return points, profiles


VITAL_POINTS, SEVERITY_PROFILES = load_vital_point_registry()


def get_vital_point(vital_point_id: str) -> VitalPoint:
    """Get a vital point by id.

    Raises:
        KeyError: If no vital point has that id
    """
    if vital_point_id not in VITAL_POINTS:
        raise KeyError(f"Unknown vital point: {vital_point_id}")
    return VITAL_POINTS[vital_point_id]


def all_vital_points() -> list[VitalPoint]:
    return list(VITAL_POINTS.values())


def vital_points_in_region(region: BodyRegion) -> list[VitalPoint]:
    return [vp for vp in VITAL_POINTS.values() if vp.region == region]


def vital_points_by_severity(severity: VitalPointSeverity) -> list[VitalPoint]:
    return [vp for vp in VITAL_POINTS.values() if vp.severity == severity]


def severity_profile(severity: VitalPointSeverity) -> SeverityProfile:
    """Get the strike consequences for a severity tier.

    Raises:
        KeyError: If the registry defines no profile for the tier
    """
    if severity not in SEVERITY_PROFILES:
        raise KeyError(f"No severity profile for: {severity}")
    return SEVERITY_PROFILES[severity]


def find_vital_point_at(
    impact: Vector2,
    points: Optional[Sequence[VitalPoint]] = None,
    config: CombatConfig = DEFAULT_CONFIG,
) -> Optional[VitalPoint]:
    """Find the nearest vital point whose hit radius contains an impact.

    Args:
        impact: Impact position in body space
        points: Candidates to search (defaults to the whole registry)
        config: Supplies the fallback radius for entries without one

    Returns:
        The closest containing vital point, or None. Ties go to the entry
        listed first.
    """
    candidates = list(VITAL_POINTS.values()) if points is None else list(points)
    if not candidates:
        return None

    positions = np.array([vp.position.to_tuple() for vp in candidates], dtype=float)
    radii = np.array([vp.hit_radius(config) for vp in candidates], dtype=float)
    distances = np.hypot(positions[:, 0] - impact.x, positions[:, 1] - impact.y)

    inside = distances <= radii
    if not inside.any():
        return None

    return candidates[int(np.argmin(np.where(inside, distances, np.inf)))]


def validate_vital_point(vital_point: VitalPoint) -> None:
    """Validate one vital point.

    Raises:
        ValueError: If a numeric field is out of range
    """
    if vital_point.radius is not None and vital_point.radius <= 0:
        raise ValueError(f"Vital point {vital_point.id} has non-positive radius: {vital_point.radius}")
    if vital_point.required_force is not None and vital_point.required_force <= 0:
        raise ValueError(
            f"Vital point {vital_point.id} has non-positive required force: {vital_point.required_force}"
        )
    if vital_point.base_damage <= 0:
        raise ValueError(f"Vital point {vital_point.id} must deal positive damage")


def validate_vital_point_registry(
    points: Optional[dict[str, VitalPoint]] = None,
    profiles: Optional[dict[VitalPointSeverity, SeverityProfile]] = None,
) -> None:
    """Validate the registry once at content-load time.

    Raises:
        ValueError: If an entry is malformed or a severity tier lacks a profile
    """
    points = VITAL_POINTS if points is None else points
    profiles = SEVERITY_PROFILES if profiles is None else profiles

    missing = [s.value for s in VitalPointSeverity if s not in profiles]
    if missing:
        raise ValueError(f"Severity profiles missing for: {missing}")

    for vp_id, vital_point in points.items():
        if vp_id != vital_point.id:
            raise ValueError(f"Vital point filed under {vp_id} has id {vital_point.id}")
        validate_vital_point(vital_point)


validate_vital_point_registry()
