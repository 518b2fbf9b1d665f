"""
Evaluation result for planar geometry queries.

An EvaluationResult is a tagged value: either success carrying area,
distance and containment, or failure carrying a single error message.
There are no partial results.
"""

import json
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from ..._version import __version__ as LIBRARY_VERSION


def _iso_utc_now() -> str:
    """Return an ISO-8601 UTC timestamp ending with 'Z'."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


@dataclass
class EvaluationResult:
    """
    Outcome of evaluating a point against a polygon.

    Attributes:
        success: True if all three queries completed
        area: Polygon area (None on failure)
        distance: Point-to-polygon distance (None on failure)
        contains: True if the polygon contains the point (None on failure)
        distance_mode: How distance was measured ("boundary" or "region")
        num_vertices: Vertex count of the evaluated polygon
        messages: Informational messages
        error_message: Error description if success is False
    """

    success: bool = True
    area: Optional[float] = None
    distance: Optional[float] = None
    contains: Optional[bool] = None

    distance_mode: str = "boundary"
    num_vertices: int = 0

    messages: List[str] = field(default_factory=list)
    error_message: Optional[str] = None

    # Metadata
    timestamp: Optional[str] = None
    library_version: str = LIBRARY_VERSION

    def __post_init__(self):
        """Set timestamp if not provided."""
        if self.timestamp is None:
            self.timestamp = _iso_utc_now()

    @property
    def values(self) -> Tuple[float, float, bool]:
        """
        The (area, distance, contains) triple.

        Raises:
            ValueError: If the evaluation failed
        """
        if not self.success:
            raise ValueError(f"Evaluation failed: {self.error_message}")
        return (self.area, self.distance, self.contains)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize evaluation result to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "metadata": {
                "library_version": self.library_version,
                "timestamp": self.timestamp,
            },
            "evaluation": {
                "success": self.success,
                "distance_mode": self.distance_mode,
                "num_vertices": self.num_vertices,
                "error_message": self.error_message,
                "messages": self.messages,
            },
            "values": {
                "area": _json_safe_value(self.area),
                "distance": _json_safe_value(self.distance),
                "contains": self.contains,
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize evaluation result to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EvaluationResult":
        """Create EvaluationResult from dictionary."""
        metadata = data.get("metadata", {})
        evaluation = data.get("evaluation", {})
        values = data.get("values", {})

        return cls(
            success=evaluation.get("success", True),
            area=values.get("area"),
            distance=values.get("distance"),
            contains=values.get("contains"),
            distance_mode=evaluation.get("distance_mode", "boundary"),
            num_vertices=evaluation.get("num_vertices", 0),
            messages=evaluation.get("messages", []),
            error_message=evaluation.get("error_message"),
            timestamp=metadata.get("timestamp"),
            library_version=metadata.get("library_version", LIBRARY_VERSION),
        )

    @classmethod
    def failure(cls, error_message: str) -> "EvaluationResult":
        """
        Create a failed evaluation result.

        Args:
            error_message: Description of the failure

        Returns:
            EvaluationResult with success=False and no values
        """
        return cls(success=False, error_message=error_message)

    def __repr__(self) -> str:
        if not self.success:
            return f"EvaluationResult(failed, {self.error_message!r})"
        return (
            f"EvaluationResult(area={self.area}, distance={self.distance}, "
            f"contains={self.contains})"
        )
