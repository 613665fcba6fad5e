"""Tests for the geometry value types and helpers."""

import math

import pytest

from diagram_layout.geometry import Point, Rect, Size, bounding_box, rotate_point, segments_intersect


class TestPoint:

    def test_arithmetic(self):
        a = Point(1, 2)
        b = Point(3, 5)
        assert a + b == Point(4, 7)
        assert b - a == Point(2, 3)
        assert a * 2 == Point(2, 4)
        assert 2 * a == Point(2, 4)
        assert b / 2 == Point(1.5, 2.5)

    def test_distance_and_magnitude(self):
        assert Point(0, 0).distance_to(Point(3, 4)) == 5
        assert Point(3, 4).magnitude() == 5

    def test_normalize(self):
        unit = Point(3, 4).normalize()
        assert unit.x == pytest.approx(0.6)
        assert unit.y == pytest.approx(0.8)

    def test_normalize_zero_vector_stays_zero(self):
        assert Point(0, 0).normalize() == Point.zero()

    def test_dot(self):
        assert Point(1, 2).dot(Point(3, 4)) == 11

    def test_immutable(self):
        point = Point(1, 2)
        with pytest.raises(AttributeError):
            point.x = 5

    def test_unpacks(self):
        x, y = Point(7, 8)
        assert (x, y) == (7, 8)


class TestSize:

    def test_negative_values_clamped(self):
        size = Size(-10, -5)
        assert size.width == 0
        assert size.height == 0
        assert size.is_empty

    def test_area_and_aspect_ratio(self):
        size = Size(40, 20)
        assert size.area == 800
        assert size.aspect_ratio == 2

    def test_aspect_ratio_zero_height(self):
        assert Size(40, 0).aspect_ratio == 0

    def test_scale(self):
        assert Size(10, 20).scale(2) == Size(20, 40)
        assert Size(10, 20).scale(2, 0.5) == Size(20, 10)
        assert Size(10, 20) * 3 == Size(30, 60)

    def test_subtraction_clamps(self):
        assert Size(10, 10) - Size(20, 5) == Size(0, 5)


class TestRect:

    def test_edges_and_center(self):
        rect = Rect(10, 20, 100, 200)
        assert rect.left == 10
        assert rect.top == 20
        assert rect.right == 110
        assert rect.bottom == 220
        assert rect.center == Point(60, 120)
        assert rect.bottom_right == Point(110, 220)

    def test_from_point_size(self):
        rect = Rect.from_point_size(Point(1, 2), Size(3, 4))
        assert rect == Rect(1, 2, 3, 4)
        assert rect.size == Size(3, 4)

    def test_contains_point_includes_edges(self):
        rect = Rect(10, 20, 100, 200)
        assert rect.contains_point(Point(50, 100))
        assert rect.contains_point(Point(10, 20))
        assert not rect.contains_point(Point(5, 5))

    def test_contains_rect(self):
        outer = Rect(0, 0, 100, 100)
        assert outer.contains_rect(Rect(10, 10, 20, 20))
        assert not outer.contains_rect(Rect(90, 90, 20, 20))

    def test_intersects_excludes_touching(self):
        rect = Rect(0, 0, 10, 10)
        assert rect.intersects(Rect(5, 5, 10, 10))
        assert not rect.intersects(Rect(10, 0, 10, 10))

    def test_intersection(self):
        overlap = Rect(0, 0, 10, 10).intersection(Rect(5, 5, 10, 10))
        assert overlap == Rect(5, 5, 5, 5)
        assert Rect(0, 0, 1, 1).intersection(Rect(5, 5, 1, 1)) is None

    def test_union(self):
        assert Rect(0, 0, 10, 10).union(Rect(20, 5, 10, 10)) == Rect(0, 0, 30, 15)

    def test_inflate_and_offset(self):
        assert Rect(10, 10, 10, 10).inflate(5) == Rect(5, 5, 20, 20)
        assert Rect(10, 10, 10, 10).inflate(5, 1) == Rect(5, 9, 20, 12)
        assert Rect(10, 10, 10, 10).offset(-10, 5) == Rect(0, 15, 10, 10)


class TestHelpers:

    def test_rotate_quarter_turn(self):
        rotated = rotate_point(Point(1, 0), Point(0, 0), math.pi / 2)
        assert rotated.x == pytest.approx(0, abs=1e-12)
        assert rotated.y == pytest.approx(1)

    def test_bounding_box(self):
        box = bounding_box([Point(1, 5), Point(-2, 3), Point(4, -1)])
        assert box == Rect(-2, -1, 6, 6)
        assert bounding_box([]) == Rect()

    def test_segments_intersect(self):
        assert segments_intersect(Point(0, 0), Point(10, 10), Point(0, 10), Point(10, 0))
        assert not segments_intersect(Point(0, 0), Point(10, 0), Point(0, 5), Point(10, 5))
        assert not segments_intersect(Point(0, 0), Point(1, 1), Point(5, 0), Point(6, -1))
