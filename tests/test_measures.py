"""Tests for polygon measures (area, distance, containment).

These tests pin the boundary conventions: points on edges and vertices are
contained, and distance is measured to the boundary unless region mode is
requested.
"""

import math
import pytest

from planar_geometry.core.errors import ComputationError, InvalidInputError
from planar_geometry.core.geometry import (
    area,
    signed_area,
    perimeter,
    distance,
    contains,
    on_boundary,
    point_segment_distance,
)
from planar_geometry.core.models.options import DistanceMode
from planar_geometry.core.models.point import make_point
from planar_geometry.core.models.polygon import make_polygon


SQUARE = make_polygon([(0, 0), (0, 4), (4, 4), (4, 0)])
FIXTURE = make_polygon([(0, 0), (0, 2), (2, 2), (12, 20)])
# U-shaped, counter-clockwise, notch between x=1 and x=2 above y=1
U_SHAPE = make_polygon([(0, 0), (3, 0), (3, 3), (2, 3), (2, 1), (1, 1), (1, 3), (0, 3)])
# Edge whose float cross product rounds away from zero for ON_EDGE
EDGE_A = make_point(-5.033958566454655, -6.512527722199312)
EDGE_B = make_point(-34.28395856645466, 32.48747227780069)
ON_EDGE = make_point(-7.283958566454655, -3.5125277221993123)


class TestArea:
    """Tests for shoelace area."""

    def test_square_area(self):
        """A 4x4 square has area 16."""
        assert area(SQUARE) == 16.0

    def test_fixture_area_matches_shoelace(self):
        """Shoelace sum for the fixture is 0 - 4 + 16 + 0 = 12, so area is 6."""
        assert area(FIXTURE) == pytest.approx(6.0)

    def test_area_invariant_under_reversal(self):
        """Clockwise and counter-clockwise listings give the same area."""
        assert area(SQUARE.reversed()) == area(SQUARE)
        assert area(FIXTURE.reversed()) == pytest.approx(area(FIXTURE))
        assert area(U_SHAPE.reversed()) == pytest.approx(area(U_SHAPE))

    def test_signed_area_follows_winding(self):
        """Signed area is positive counter-clockwise, negative clockwise."""
        assert signed_area(SQUARE) == -16.0
        assert signed_area(SQUARE.reversed()) == 16.0

    def test_concave_area(self):
        """3x3 square minus the 1x2 notch."""
        assert area(U_SHAPE) == pytest.approx(7.0)

    def test_triangle_area(self):
        """Test a right triangle."""
        triangle = make_polygon([(0, 0), (3, 0), (0, 4)])
        assert area(triangle) == pytest.approx(6.0)

    def test_collinear_vertices_give_zero_area(self):
        """A degenerate (collinear) ring has zero area, not an error."""
        line = make_polygon([(0, 0), (1, 1), (2, 2)])
        assert area(line) == 0.0

    def test_overflow_raises_computation_error(self):
        """Coordinates whose products overflow give a ComputationError."""
        huge = make_polygon([(0, 0), (1e200, 0), (1e200, 1e200)])
        with pytest.raises(ComputationError, match="not finite"):
            area(huge)

    def test_perimeter(self):
        """Perimeter includes the closing edge."""
        assert perimeter(SQUARE) == 16.0
        assert perimeter(make_polygon([(0, 0), (3, 0), (0, 4)])) == pytest.approx(12.0)


class TestPointSegmentDistance:
    """Tests for point_segment_distance."""

    def test_perpendicular_foot_inside_segment(self):
        """Distance to the interior of a segment is perpendicular."""
        d = point_segment_distance(make_point(1, 1), make_point(0, 0), make_point(2, 0))
        assert d == 1.0

    def test_clamped_to_endpoint(self):
        """Beyond the segment the nearest endpoint is used."""
        d = point_segment_distance(make_point(5, 4), make_point(0, 0), make_point(2, 0))
        assert d == 5.0

    def test_on_slanted_segment_is_exactly_zero(self):
        """Collinear points within the segment give exactly 0."""
        d = point_segment_distance(make_point(1, 1), make_point(0, 0), make_point(2, 2))
        assert d == 0.0

    def test_degenerate_segment(self):
        """A zero-length segment is a point."""
        d = point_segment_distance(make_point(3, 4), make_point(0, 0), make_point(0, 0))
        assert d == 5.0

    def test_on_edge_despite_float_rounding(self):
        """Exactly collinear points are 0 even when float differences round."""
        assert point_segment_distance(ON_EDGE, EDGE_A, EDGE_B) == 0.0
        assert point_segment_distance(ON_EDGE, EDGE_B, EDGE_A) == 0.0

    def test_near_collinear_point_is_not_zero(self):
        """A point one rounding step off the line keeps a positive distance."""
        d = point_segment_distance(make_point(1, 1 + 1e-15), make_point(0, 0), make_point(2, 2))
        assert 0.0 < d < 1e-14


class TestDistance:
    """Tests for point-to-polygon distance."""

    def test_point_on_edge_is_zero(self):
        """A point exactly on an edge has distance 0."""
        assert distance(make_point(2, 0), SQUARE) == 0.0
        assert distance(make_point(0, 3), SQUARE) == 0.0

    def test_point_on_slanted_edge_is_zero(self):
        """Exactly 0 on a non-axis-aligned edge too."""
        triangle = make_polygon([(0, 0), (4, 0), (4, 4)])
        assert distance(make_point(2, 2), triangle) == 0.0

    def test_point_on_vertex_is_zero(self):
        """Vertices are part of the boundary."""
        assert distance(make_point(4, 4), SQUARE) == 0.0

    def test_outside_point(self):
        """Distance from an outside point to the nearest edge."""
        assert distance(make_point(5, 2), SQUARE) == 1.0
        assert distance(make_point(7, 8), SQUARE) == 5.0

    def test_interior_point_boundary_mode(self):
        """Default mode measures to the boundary even from inside."""
        assert distance(make_point(1, 1), SQUARE) == 1.0
        assert distance(make_point(2, 2), SQUARE, DistanceMode.BOUNDARY) == 2.0

    def test_interior_point_region_mode(self):
        """Region mode treats interior points as distance 0."""
        assert distance(make_point(1, 1), SQUARE, DistanceMode.REGION) == 0.0

    def test_outside_point_region_mode(self):
        """Region and boundary agree outside the polygon."""
        p = make_point(5, 2)
        assert distance(p, SQUARE, DistanceMode.REGION) == distance(p, SQUARE)

    def test_mode_accepts_string(self):
        """Test that mode may be given as its string value."""
        assert distance(make_point(1, 1), SQUARE, "region") == 0.0
        assert distance(make_point(1, 1), SQUARE, " REGION ") == 0.0

    def test_unknown_mode_string_raises_error(self):
        """Test that an unknown mode name is rejected."""
        with pytest.raises(ValueError, match="Unknown distance mode"):
            distance(make_point(1, 1), SQUARE, "filled")

    def test_point_on_edge_with_rounded_differences(self):
        """Exactly 0 for an on-edge point whose float cross product is not 0."""
        triangle = make_polygon([EDGE_A, EDGE_B, (EDGE_B.x, EDGE_A.y)])
        assert distance(ON_EDGE, triangle) == 0.0
        assert distance(ON_EDGE, triangle.reversed()) == 0.0

    def test_closing_edge_is_measured(self):
        """The edge from the last vertex to the first counts."""
        triangle = make_polygon([(0, 0), (0, 10), (10, 10)])
        # Nearest to the closing edge (10,10)->(0,0)
        p = make_point(6, 4)
        assert distance(p, triangle) == pytest.approx(math.sqrt(2))

    def test_fixture_distance(self):
        """Nearest edge of the fixture is (2,2)->(12,20)."""
        d = distance(make_point(10, 8), FIXTURE)
        assert d == pytest.approx(84 / math.sqrt(424))

    def test_notch_distance(self):
        """A point in the U notch is 0.5 from both notch walls."""
        assert distance(make_point(1.5, 2), U_SHAPE) == pytest.approx(0.5)

    def test_repeated_vertex_does_not_zero_distance(self):
        """A zero-length edge is not treated as passing through every point."""
        polygon = make_polygon([(0, 0), (4, 0), (4, 0), (4, 4), (0, 4)])
        assert distance(make_point(2, 1), polygon) == 1.0


class TestContains:
    """Tests for point-in-polygon containment."""

    def test_interior_point(self):
        """(1,1) is inside the 4x4 square."""
        assert contains(SQUARE, make_point(1, 1)) is True

    def test_far_outside_point(self):
        """A point far beyond the bounding box is outside."""
        assert contains(SQUARE, make_point(100, 100)) is False
        assert contains(SQUARE, make_point(-50, 2)) is False

    def test_edge_and_vertex_are_contained(self):
        """Boundary points count as contained."""
        assert contains(SQUARE, make_point(4, 2)) is True
        assert contains(SQUARE, make_point(2, 4)) is True
        assert contains(SQUARE, make_point(0, 0)) is True

    def test_edge_point_with_rounded_differences_is_contained(self):
        """On-edge detection is exact, so the ray cast is never consulted."""
        triangle = make_polygon([EDGE_A, EDGE_B, (EDGE_B.x, EDGE_A.y)])
        assert on_boundary(triangle, ON_EDGE) is True
        assert contains(triangle, ON_EDGE) is True

    def test_fixture_point_outside(self):
        """The demo point (10, 8) is outside the demo polygon."""
        assert contains(FIXTURE, make_point(10, 8)) is False

    def test_ray_through_vertex_counted_once(self):
        """A ray passing exactly through a vertex does not double count."""
        triangle = make_polygon([(0, 0), (4, 2), (0, 4)])
        assert contains(triangle, make_point(1, 2)) is True
        assert contains(triangle, make_point(-1, 2)) is False
        assert contains(triangle, make_point(5, 2)) is False

    def test_ray_along_horizontal_edge(self):
        """A ray collinear with a horizontal edge is handled."""
        # Point at the height of the top edge, left of the polygon
        assert contains(SQUARE, make_point(-1, 4)) is False
        # Point at the height of the bottom edge, right of the polygon
        assert contains(SQUARE, make_point(5, 0)) is False

    def test_concave_notch(self):
        """The notch of a U shape is outside; its arms are inside."""
        assert contains(U_SHAPE, make_point(1.5, 2)) is False
        assert contains(U_SHAPE, make_point(0.5, 2)) is True
        assert contains(U_SHAPE, make_point(2.5, 2)) is True
        assert contains(U_SHAPE, make_point(1.5, 0.5)) is True

    def test_winding_does_not_matter(self):
        """Test containment on a reversed ring."""
        assert contains(SQUARE.reversed(), make_point(1, 1)) is True
        assert contains(U_SHAPE.reversed(), make_point(1.5, 2)) is False

    def test_tolerance(self):
        """Points within tolerance of an edge count as on the boundary."""
        p = make_point(4.0000001, 2)
        assert contains(SQUARE, p) is False
        assert contains(SQUARE, p, tolerance=1e-6) is True

    def test_on_boundary(self):
        """Test on_boundary for edge, interior and exterior points."""
        assert on_boundary(SQUARE, make_point(4, 1)) is True
        assert on_boundary(SQUARE, make_point(1, 1)) is False
        assert on_boundary(SQUARE, make_point(5, 1)) is False
        assert on_boundary(SQUARE, make_point(5, 1), tolerance=1.0) is True


class TestQueryValidation:
    """All queries re-check their inputs."""

    def test_corrupted_polygon_rejected(self):
        """A polygon forced below 3 vertices is rejected by every query."""
        polygon = make_polygon([(0, 0), (1, 0), (0, 1)])
        object.__setattr__(polygon, "vertices", polygon.vertices[:2])
        p = make_point(0, 0)

        with pytest.raises(InvalidInputError):
            area(polygon)
        with pytest.raises(InvalidInputError):
            distance(p, polygon)
        with pytest.raises(InvalidInputError):
            contains(polygon, p)

    def test_wrong_types_rejected(self):
        """Raw tuples are not accepted in place of models."""
        with pytest.raises(InvalidInputError):
            area([(0, 0), (1, 0), (0, 1)])
        with pytest.raises(InvalidInputError):
            contains(SQUARE, (1, 1))
