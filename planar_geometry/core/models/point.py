"""
Point class for planar geometry evaluation.

Conventions:
- Coordinates: X (easting), Y (northing) - right-handed Cartesian plane
- Units: whatever the caller uses; no coordinate reference system is implied
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..errors import InvalidInputError


def _coerce_coordinate(value: Any, axis: str) -> float:
    """Convert a coordinate to a finite float or raise InvalidInputError."""
    if isinstance(value, bool):
        raise InvalidInputError(f"{axis} coordinate must be numeric, got bool")
    try:
        coord = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{axis} coordinate must be numeric, got {value!r}") from None
    if not math.isfinite(coord):
        raise InvalidInputError(f"{axis} coordinate must be finite, got {coord}")
    return coord


@dataclass(frozen=True)
class Point:
    """
    An immutable point in the plane.

    Both coordinates are converted to float and must be finite
    (NaN and infinity are rejected).

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __post_init__(self):
        """Validate and normalize coordinates after initialization."""
        object.__setattr__(self, "x", _coerce_coordinate(self.x, "x"))
        object.__setattr__(self, "y", _coerce_coordinate(self.y, "y"))

    def as_tuple(self) -> Tuple[float, float]:
        """Return the point as an (x, y) tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize point to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point":
        """
        Create a Point from a dictionary.

        Accepts ``x``/``y`` keys, or ``easting``/``northing`` as used by
        survey data.

        Raises:
            InvalidInputError: If a coordinate is missing or invalid
        """
        x = data.get("x", data.get("easting"))
        y = data.get("y", data.get("northing"))
        if x is None or y is None:
            raise InvalidInputError("Point requires 'x' and 'y' coordinates")
        return cls(x=x, y=y)

    def __repr__(self) -> str:
        return f"Point(x={self.x:g}, y={self.y:g})"


def make_point(x: Any, y: Any) -> Point:
    """
    Construct a Point from two coordinates.

    Raises:
        InvalidInputError: If either coordinate is non-numeric or non-finite
    """
    return Point(x, y)
