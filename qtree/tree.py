import os
from typing import Hashable, Iterable, Iterator

from qtree.geometry import Rectangle2D


class RegionData:
    def __init__(self, rectangle: Rectangle2D, items: Iterable[Hashable], depth: int=0):
        self.rectangle = rectangle
        self.items = list(items)
        self.depth = depth

    def __str__(self) -> str:
        s = '<RegionData rectangle:{} depth:{} items:['.format(self.rectangle, self.depth)
        for item in self.items:
            s += os.linesep + '\t' + str(item)
        s += ']>'
        return s


class NodeBase:
    def __init__(self, rectangle: Rectangle2D):
        self.rectangle = rectangle

    def get_subnodes(self) -> Iterable['NodeBase']:
        return ()

    def get_items(self) -> Iterable[Hashable]:
        return ()

    def walk(self, depth: int=0) -> Iterator[tuple[int, 'NodeBase']]:
        """Yields (depth, node) for this node and every descendant, pre-order."""
        yield depth, self
        for node in self.get_subnodes():
            yield from node.walk(depth + 1)

    def get_regions(self) -> list[RegionData]:
        return [RegionData(node.rectangle, node.get_items(), depth) for depth, node in self.walk()]
