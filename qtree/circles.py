import logging
import random
import uuid
from typing import Hashable, Iterable, Optional

from qtree.geometry import Point2D, Rectangle2D
from qtree.quadtree import QuadTree, RectDoesNotFit


logger = logging.getLogger(__name__)


class Circle:
    def __init__(self, center: Point2D, radius: float, id: Optional[Hashable]=None):
        self.id = uuid.uuid4() if id is None else id
        self.center = center
        self.radius = radius

    def __str__(self) -> str:
        return f'<Circle id:{self.id} center:{self.center} radius:{self.radius}>'

    def duplicate(self) -> 'Circle':
        """Returns a copy of this circle under a new id."""
        return Circle(self.center, self.radius)

    def contains_point(self, point: Point2D) -> bool:
        return (point.x - self.center.x) ** 2 + (point.y - self.center.y) ** 2 <= self.radius ** 2

    def bounding_box(self) -> Rectangle2D:
        return Rectangle2D(self.center, self.radius, self.radius)


class CircleField:
    """Circles kept alongside a quadtree of their bounding boxes.

    The tree only narrows the candidates; hit tests against the circles
    themselves decide what is under a point. Resizing a circle rebuilds
    the tree from scratch since the tree has no deletion.
    """

    def __init__(self, boundary: Rectangle2D, capacity: int=4, min_radius: float=10.0):
        self.min_radius = min_radius
        self.circles = dict[Hashable, Circle]()
        self.tree = QuadTree(boundary, capacity)

    def __len__(self) -> int:
        return len(self.circles)

    @property
    def boundary(self) -> Rectangle2D:
        return self.tree.boundary

    def get_circles(self) -> Iterable[Circle]:
        return self.circles.values()

    def add_circle(self, circle: Circle) -> None:
        self.tree.insert(circle.bounding_box(), circle.id)
        self.circles[circle.id] = circle

    def scatter(self, count: int, rng: Optional[random.Random]=None) -> int:
        rng = rng or random.Random()
        b = self.boundary
        logger.info('Creating %d new circles', count)
        added = 0
        for i in range(count):
            x = rng.randint(int(b.left()), int(b.right()))
            y = rng.randint(int(b.top()), int(b.bottom()))
            circle = Circle(Point2D(x, y), self.min_radius)
            try:
                self.add_circle(circle)
            except RectDoesNotFit as e:
                logger.error('Could not add circle %s: %s', circle.id, e)
                continue
            added += 1
        return added

    def colliding(self, point: Point2D) -> set[Hashable]:
        candidates = self.tree.query_point(point)
        return {id for id in candidates if self.circles[id].contains_point(point)}

    def resize_at(self, point: Point2D, delta: float) -> bool:
        """Grows or shrinks the smallest circle under ``point`` by ``delta``.

        Returns True if a circle was resized and the tree rebuilt.
        """
        hits = [self.circles[id] for id in self.colliding(point)]
        if not hits:
            return False

        closest = min(hits, key=lambda c: c.radius)
        radius = max(closest.radius + delta, self.min_radius)
        resized = Circle(closest.center, radius, closest.id)
        if not self.boundary.contains_rect(resized.bounding_box()):
            logger.info('Circle %s would leave the boundary at radius %s', closest.id, radius)
            return False

        self.circles[resized.id] = resized
        self.tree = self.tree.rebuild((c.bounding_box(), c.id) for c in self.circles.values())
        return True

    def clear(self) -> None:
        logger.info('Purging all circles')
        self.circles = dict[Hashable, Circle]()
        self.tree = QuadTree(self.tree.boundary, self.tree.capacity)
