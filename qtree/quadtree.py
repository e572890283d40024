import logging
from enum import Enum
from types import MappingProxyType
from typing import Hashable, Iterable, Iterator, Mapping, Optional

from qtree.geometry import Corner, Point2D, Rectangle2D
from qtree.tree import NodeBase, RegionData


logger = logging.getLogger(__name__)


class QuadTreeError(Exception):
    pass


class RectDoesNotFit(QuadTreeError):
    def __init__(self, rect: Rectangle2D):
        QuadTreeError.__init__(self, "The supplied rectangle doesn't fit the boundary")
        self.rect = rect


class Fit(Enum):
    FITS = 'fits'
    DOES_NOT_FIT = 'does_not_fit'


class QuadNode(NodeBase):
    """A region quadtree node storing bounding boxes keyed by id.

    ``capacity`` is a soft threshold: once a node holds that many boxes it
    subdivides and hands new boxes to the first quadrant that fully encloses
    them. Boxes that fit no quadrant stay here, past capacity.
    """

    def __init__(self, boundary: Rectangle2D, capacity: int):
        if capacity < 1:
            raise ValueError(f'capacity must be at least 1, got {capacity}')
        NodeBase.__init__(self, boundary)
        self.capacity = capacity
        self._objects = dict[Hashable, Rectangle2D]()
        self._children: Optional[tuple['QuadNode', ...]] = None

    def __str__(self) -> str:
        return f'<QuadNode boundary:{self.boundary} objects:{len(self._objects)} divided:{self._children is not None}>'

    def __len__(self) -> int:
        return sum(len(node._objects) for _, node in self.walk())

    @property
    def boundary(self) -> Rectangle2D:
        return self.rectangle

    @property
    def objects(self) -> Mapping[Hashable, Rectangle2D]:
        return MappingProxyType(self._objects)

    @property
    def children(self) -> Optional[tuple['QuadNode', ...]]:
        return self._children

    def get_subnodes(self) -> Iterable['QuadNode']:
        return self._children or ()

    def get_items(self) -> Iterable[Hashable]:
        return list(self._objects)

    def subdivide(self) -> None:
        if self._children is not None:
            return
        b = self.boundary
        w_half = b.half_width / 2
        h_half = b.half_height / 2
        self._children = tuple(
            QuadNode(Rectangle2D(b.center.midpoint(b.corner(c)), w_half, h_half), self.capacity)
            for c in Corner
        )
        logger.debug('Subdivided %s', b)

    def insert(self, rect: Rectangle2D, id: Hashable) -> None:
        """Stores ``rect`` under ``id``.

        Raises RectDoesNotFit if ``rect`` is not fully enclosed by this
        node's boundary.
        """
        if self._probe(rect, id) is Fit.DOES_NOT_FIT:
            logger.debug('Rejected %s: outside %s', rect, self.boundary)
            raise RectDoesNotFit(rect)

    def _probe(self, rect: Rectangle2D, id: Hashable) -> Fit:
        if not self.boundary.contains_rect(rect):
            return Fit.DOES_NOT_FIT

        if len(self._objects) < self.capacity:
            self._objects[id] = rect
            return Fit.FITS

        if self._children is None:
            self.subdivide()

        for child in self._children:
            if child._probe(rect, id) is Fit.FITS:
                return Fit.FITS

        # Fits none of the quadrants, keep it here past capacity
        self._objects[id] = rect
        return Fit.FITS

    def query_point(self, point: Point2D, limit: Optional[int]=None) -> set[Hashable]:
        """Returns the ids of stored boxes containing ``point``.

        ``limit`` caps the number of matches across the whole traversal;
        None means unlimited.
        """
        if limit is not None and limit < 0:
            raise ValueError(f'limit must be non-negative, got {limit}')
        found = set[Hashable]()
        self._query(point, limit, found)
        return found

    def _query(self, point: Point2D, remaining: Optional[int], found: set[Hashable]) -> Optional[int]:
        # Returns the budget left after this subtree; it never drops below 0
        if not self.boundary.contains_point(point):
            return remaining

        if remaining is None or remaining > 0:
            for id, rect in self._objects.items():
                if rect.contains_point(point):
                    found.add(id)
                    if remaining is not None:
                        remaining -= 1
                        if remaining == 0:
                            break

        for child in self.get_subnodes():
            remaining = child._query(point, remaining, found)
        return remaining

    def enumerate_objects(self) -> Iterator[Rectangle2D]:
        for _, node in self.walk():
            yield from node._objects.values()

    def enumerate_regions(self) -> Iterator[Rectangle2D]:
        for _, node in self.walk():
            yield node.boundary

    def depth(self) -> int:
        return max(depth for depth, _ in self.walk()) + 1


class QuadTree:
    def __init__(self, boundary: Rectangle2D, capacity: int=4):
        self.main_node = QuadNode(boundary, capacity)

    def __len__(self) -> int:
        return len(self.main_node)

    @property
    def boundary(self) -> Rectangle2D:
        return self.main_node.boundary

    @property
    def capacity(self) -> int:
        return self.main_node.capacity

    # Raises RectDoesNotFit when the box escapes the tree's boundary
    def insert(self, rect: Rectangle2D, id: Hashable) -> None:
        self.main_node.insert(rect, id)

    def query_point(self, point: Point2D, limit: Optional[int]=None) -> set[Hashable]:
        return self.main_node.query_point(point, limit)

    def enumerate_objects(self) -> Iterator[Rectangle2D]:
        return self.main_node.enumerate_objects()

    def enumerate_regions(self) -> Iterator[Rectangle2D]:
        return self.main_node.enumerate_regions()

    # Returns every node's region, root first
    def get_regions(self) -> list[RegionData]:
        return self.main_node.get_regions()

    def depth(self) -> int:
        return self.main_node.depth()

    def rebuild(self, entries: Iterable[tuple[Rectangle2D, Hashable]]) -> 'QuadTree':
        """Returns a new tree over the same boundary holding ``entries``.

        Entries that do not fit the boundary are logged and skipped.
        """
        tree = QuadTree(self.boundary, self.capacity)
        for rect, id in entries:
            try:
                tree.insert(rect, id)
            except RectDoesNotFit as e:
                logger.error('Could not insert %s: %s', id, e)
        return tree
