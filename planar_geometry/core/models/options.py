"""
Evaluation options for planar geometry queries.

This module defines configuration options for the evaluator: how distance
is measured and how close a point must be to an edge to count as lying on
the boundary.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class DistanceMode(Enum):
    """
    How point-to-polygon distance is measured.

    Supported modes:
    - BOUNDARY: distance to the ring of edges, whether the point is inside or outside
    - REGION: distance to the filled polygon (zero for interior and boundary points)
    """
    BOUNDARY = "boundary"
    REGION = "region"

    @classmethod
    def parse(cls, value: "DistanceMode | str") -> "DistanceMode":
        """Return the mode for an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown distance mode: {value}")


@dataclass
class EvaluationOptions:
    """
    Configuration options for polygon evaluation.

    Attributes:
        distance_mode: How distance is measured (default: BOUNDARY)
        boundary_tolerance: Maximum distance from an edge at which a point
            still counts as on the boundary for containment (default: 0.0,
            exact test)
    """

    distance_mode: DistanceMode = DistanceMode.BOUNDARY
    boundary_tolerance: float = 0.0

    def __post_init__(self):
        """Validate options after initialization."""
        # Convert string to enum if needed
        self.distance_mode = DistanceMode.parse(self.distance_mode)

        self.boundary_tolerance = float(self.boundary_tolerance)
        if not math.isfinite(self.boundary_tolerance) or self.boundary_tolerance < 0:
            raise ValueError("boundary_tolerance must be finite and non-negative")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize options to dictionary."""
        return {
            "distance_mode": self.distance_mode.value,
            "boundary_tolerance": self.boundary_tolerance,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvaluationOptions":
        """
        Create EvaluationOptions from dictionary.

        Missing keys fall back to defaults.
        """
        return cls(
            distance_mode=data.get("distance_mode", DistanceMode.BOUNDARY.value),
            boundary_tolerance=data.get("boundary_tolerance", 0.0),
        )
