"""
Geometry primitives used by the layout algorithms.

Provides immutable value types for the diagram plane:
- Point: a position or a 2D vector
- Size: a non-negative width/height pair
- Rect: an axis-aligned rectangle (top-left position + size)

The y axis grows downward, matching screen coordinates.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class Point:
    """A point (or vector) in the diagram plane."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Point":
        return cls(0.0, 0.0)

    def add(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    def distance_to(self, other: "Point") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> "Point":
        """Unit vector in the same direction; the zero vector stays zero."""
        mag = self.magnitude()
        if mag > 0:
            return Point(self.x / mag, self.y / mag)
        return Point.zero()

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def __add__(self, other: "Point") -> "Point":
        return self.add(other)

    def __sub__(self, other: "Point") -> "Point":
        return self.subtract(other)

    def __mul__(self, factor: float) -> "Point":
        return self.scale(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> "Point":
        return Point(self.x / divisor, self.y / divisor)

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Size:
    """Width and height, both clamped to >= 0."""
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "width", max(0.0, self.width))
        object.__setattr__(self, "height", max(0.0, self.height))

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        """Width / height, or 0 when height is 0."""
        return self.width / self.height if self.height > 0 else 0.0

    @property
    def is_empty(self) -> bool:
        return self.width == 0 and self.height == 0

    def scale(self, factor: float, height_factor: Optional[float] = None) -> "Size":
        if height_factor is None:
            height_factor = factor
        return Size(self.width * factor, self.height * height_factor)

    def swapped(self) -> "Size":
        return Size(self.height, self.width)

    def __add__(self, other: "Size") -> "Size":
        return Size(self.width + other.width, self.height + other.height)

    def __sub__(self, other: "Size") -> "Size":
        return Size(self.width - other.width, self.height - other.height)

    def __mul__(self, factor: float) -> "Size":
        return self.scale(factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "width", max(0.0, self.width))
        object.__setattr__(self, "height", max(0.0, self.height))

    @classmethod
    def from_point_size(cls, position: Point, size: Size) -> "Rect":
        return cls(position.x, position.y, size.width, size.height)

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 and self.height == 0

    def contains_point(self, point: Point) -> bool:
        """Edges count as inside."""
        return (self.left <= point.x <= self.right
                and self.top <= point.y <= self.bottom)

    def contains_rect(self, other: "Rect") -> bool:
        return (other.left >= self.left and other.right <= self.right
                and other.top >= self.top and other.bottom <= self.bottom)

    def intersects(self, other: "Rect") -> bool:
        """True if the interiors overlap; touching edges do not intersect."""
        return (self.left < other.right and self.right > other.left
                and self.top < other.bottom and self.bottom > other.top)

    def intersection(self, other: "Rect") -> Optional["Rect"]:
        if not self.intersects(other):
            return None
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)

    def union(self, other: "Rect") -> "Rect":
        left = min(self.left, other.left)
        top = min(self.top, other.top)
        right = max(self.right, other.right)
        bottom = max(self.bottom, other.bottom)
        return Rect(left, top, right - left, bottom - top)

    def inflate(self, amount: float, vertical: Optional[float] = None) -> "Rect":
        if vertical is None:
            vertical = amount
        return Rect(self.x - amount, self.y - vertical,
                    self.width + 2 * amount, self.height + 2 * vertical)

    def offset(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


def rotate_point(point: Point, center: Point, angle_radians: float) -> Point:
    """Rotate `point` around `center` (positive angles turn clockwise on screen)."""
    cos = math.cos(angle_radians)
    sin = math.sin(angle_radians)
    dx = point.x - center.x
    dy = point.y - center.y
    return Point(center.x + dx * cos - dy * sin, center.y + dx * sin + dy * cos)


def bounding_box(points: Iterable[Point]) -> Rect:
    """Smallest rectangle containing all points (empty rect for no points)."""
    points = list(points)
    if not points:
        return Rect()
    min_x = min(p.x for p in points)
    min_y = min(p.y for p in points)
    max_x = max(p.x for p in points)
    max_y = max(p.y for p in points)
    return Rect(min_x, min_y, max_x - min_x, max_y - min_y)


def segments_intersect(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """
    Check whether segment a1-a2 crosses segment b1-b2.

    Parallel (and collinear) segments are reported as not intersecting.
    """
    d = (a2.x - a1.x) * (b2.y - b1.y) - (a2.y - a1.y) * (b2.x - b1.x)
    if abs(d) < 1e-10:
        return False

    t = ((b1.x - a1.x) * (b2.y - b1.y) - (b1.y - a1.y) * (b2.x - b1.x)) / d
    u = ((b1.x - a1.x) * (a2.y - a1.y) - (b1.y - a1.y) * (a2.x - a1.x)) / d
    return 0 <= t <= 1 and 0 <= u <= 1
