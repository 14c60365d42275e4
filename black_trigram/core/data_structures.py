"""Shared data structures for the combat core.

KoreanText carries the bilingual strings every catalog entry and log line
uses. Vector2 holds body-space coordinates for impact points and vital point
positions.
"""

from dataclasses import dataclass
from typing import Optional
import math


@dataclass(frozen=True)
class KoreanText:
    """Bilingual display text (Korean first, English second)."""
    korean: str
    english: str
    romanized: Optional[str] = None

    def format(self, separator: str = " - ") -> str:
        """Format as a single display line."""
        return f"{self.korean}{separator}{self.english}"

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def from_dict(cls, data: dict) -> "KoreanText":
        """Create KoreanText from a content mapping."""
        return cls(
            korean=data["korean"],
            english=data["english"],
            romanized=data.get("romanized"),
        )


@dataclass(frozen=True)
class Vector2:
    """2D vector in body space.

    Uses (x, y) ordering: x grows to the defender's left-to-right, y grows
    downward from the crown of the head. Units are arbitrary body-space
    pixels; vital point radii are expressed in the same units.
    """
    x: float
    y: float

    def __add__(self, other: "Vector2") -> "Vector2":
        """Vector addition."""
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        """Vector subtraction."""
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        """Scalar multiplication."""
        return Vector2(self.x * scalar, self.y * scalar)

    def __iter__(self):
        """Make Vector2 iterable for unpacking (x, y order)."""
        yield self.x
        yield self.y

    def distance_to(self, other: "Vector2") -> float:
        """Calculate Euclidean distance to another vector."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def magnitude(self) -> float:
        """Calculate vector magnitude (distance from origin)."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    @classmethod
    def from_tuple(cls, coords: tuple[float, float]) -> "Vector2":
        """Create Vector2 from coordinate tuple (x, y order)."""
        return cls(coords[0], coords[1])

    @classmethod
    def from_list(cls, coords: list[float]) -> "Vector2":
        """Create Vector2 from coordinate list (x, y order)."""
        if len(coords) < 2:
            raise ValueError("List must contain at least 2 elements")
        return cls(coords[0], coords[1])

    def to_tuple(self) -> tuple[float, float]:
        """Convert to coordinate tuple (x, y order)."""
        return (self.x, self.y)


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into the closed range [low, high]."""
    return max(low, min(high, value))
