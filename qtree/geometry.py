from enum import Enum
from typing import Iterable


class Point2D:
    __slots__ = ('x', 'y')

    def __init__(self, x: float=0.0, y: float=0.0):
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __str__(self) -> str:
        return f'<Point2D x:{self.x} y:{self.y}>'

    def __repr__(self) -> str:
        return f'Point2D({self.x!r}, {self.y!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def midpoint(self, other: 'Point2D') -> 'Point2D':
        return Point2D((self.x + other.x) / 2, (self.y + other.y) / 2)


class Corner(Enum):
    """Compass corners, in the order quadrants are created and probed.

    The origin is top-left and y grows downward, so north is the smaller y.
    """
    NE = 0
    NW = 1
    SW = 2
    SE = 3


class Rectangle2D:
    """An axis-aligned rectangle stored as a center point and half-extents."""
    __slots__ = ('center', 'half_width', 'half_height')

    def __init__(self, center: Point2D=Point2D(), half_width: float=0.0, half_height: float=0.0):
        if half_width < 0 or half_height < 0:
            raise ValueError(f'negative half-extent: {half_width}x{half_height}')
        object.__setattr__(self, 'center', center)
        object.__setattr__(self, 'half_width', half_width)
        object.__setattr__(self, 'half_height', half_height)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    @staticmethod
    def from_corner(x: float, y: float, width: float, height: float) -> 'Rectangle2D':
        """Builds a rectangle from its top-left corner and its dimensions."""
        center = Point2D((x + x + width) / 2, (y + y + height) / 2)
        return Rectangle2D(center, width / 2, height / 2)

    def __str__(self) -> str:
        return f'<Rectangle2D center:{self.center} half_width:{self.half_width} half_height:{self.half_height}>'

    def __repr__(self) -> str:
        return f'Rectangle2D({self.center!r}, {self.half_width!r}, {self.half_height!r})'

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rectangle2D):
            return NotImplemented
        return (self.center == other.center and self.half_width == other.half_width
                and self.half_height == other.half_height)

    def __hash__(self) -> int:
        return hash((self.center, self.half_width, self.half_height))

    def left(self) -> float:
        return self.center.x - self.half_width

    def right(self) -> float:
        return self.center.x + self.half_width

    def top(self) -> float:
        return self.center.y - self.half_height

    def bottom(self) -> float:
        return self.center.y + self.half_height

    def corner(self, which: Corner) -> Point2D:
        if which is Corner.NE:
            return Point2D(self.right(), self.top())
        if which is Corner.NW:
            return Point2D(self.left(), self.top())
        if which is Corner.SW:
            return Point2D(self.left(), self.bottom())
        if which is Corner.SE:
            return Point2D(self.right(), self.bottom())
        raise TypeError(f'expected a Corner, got {which!r}')

    def corners(self) -> Iterable[Point2D]:
        return [self.corner(c) for c in Corner]

    def contains_point(self, point: Point2D) -> bool:
        # Edges are inclusive
        return self.left() <= point.x <= self.right() and self.top() <= point.y <= self.bottom()

    def contains_rect(self, other: 'Rectangle2D') -> bool:
        return all(self.contains_point(c) for c in other.corners())

    def to_bounds(self) -> tuple[float, float, float, float]:
        """Returns (x, y, width, height) with (x, y) the top-left corner."""
        return (self.left(), self.top(), 2 * self.half_width, 2 * self.half_height)
