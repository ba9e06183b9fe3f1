"""
Primitive shapes shared by the generator, the geometry builder and the navigation graph.

Provides:
- Box: axis-aligned integer cell of a generated layout
- WallSegment: axis-aligned wall edge with an integer normal
- Bounds: min/max extents of a room
"""

from dataclasses import dataclass
from typing import NamedTuple, Tuple


NORMAL_DOWN = (0, -1)
NORMAL_LEFT = (-1, 0)
NORMAL_UP = (0, 1)
NORMAL_RIGHT = (1, 0)

AXIS_NORMALS = (NORMAL_DOWN, NORMAL_LEFT, NORMAL_UP, NORMAL_RIGHT)


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle with integer edges, ``left < right`` and ``bottom < top``."""
    left: int
    right: int
    bottom: int
    top: int

    def __post_init__(self):
        if self.left >= self.right or self.bottom >= self.top:
            raise ValueError(f"Degenerate box: {self}")

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.top - self.bottom

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Tuple[float, float]:
        """Midpoint of the box in room coordinates."""
        return (self.left + self.right) / 2.0, (self.bottom + self.top) / 2.0

    def contains(self, x: float, y: float) -> bool:
        """Check the half-open range ``[left, right) x [bottom, top)``."""
        return self.left <= x < self.right and self.bottom <= y < self.top

    def to_dict(self) -> dict:
        return {'left': self.left, 'right': self.right, 'bottom': self.bottom, 'top': self.top}


@dataclass(frozen=True)
class WallSegment:
    """
    Axis-aligned wall edge between ``(x0, y0)`` and ``(x1, y1)``.

    Endpoints are kept ordered (``x0 <= x1`` and ``y0 <= y1``). Segments are
    immutable; the geometry builder trims by replacing them.
    """
    x0: int
    y0: int
    x1: int
    y1: int
    normal: Tuple[int, int]

    @property
    def is_degenerate(self) -> bool:
        return self.x0 == self.x1 and self.y0 == self.y1

    @property
    def is_horizontal(self) -> bool:
        return self.y0 == self.y1 and not self.is_degenerate

    @property
    def is_vertical(self) -> bool:
        return self.x0 == self.x1 and not self.is_degenerate

    @property
    def length(self) -> int:
        return (self.x1 - self.x0) + (self.y1 - self.y0)

    def to_dict(self) -> dict:
        return {
            'x0': self.x0, 'y0': self.y0, 'x1': self.x1, 'y1': self.y1,
            'normal': list(self.normal)
        }


class Bounds(NamedTuple):
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y
