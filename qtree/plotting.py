from typing import Hashable, Iterable

from matplotlib import patches
from matplotlib import pyplot as plt

from qtree.circles import CircleField
from qtree.geometry import Rectangle2D
from qtree.quadtree import QuadTree


def plot_rectangles(rectangles: Iterable[Rectangle2D], ax, color):
    for rect in rectangles:
        x, y, w, h = rect.to_bounds()
        ax.add_patch(patches.Rectangle((x, y), w, h, fill=False, edgecolor=color, alpha=0.5))


def plot_regions(tree: QuadTree, ax, color='g'):
    plot_rectangles(tree.enumerate_regions(), ax, color)


def plot_boxes(tree: QuadTree, ax, color='r'):
    plot_rectangles(tree.enumerate_objects(), ax, color)


def plot_circles(field: CircleField, ax, highlight: Iterable[Hashable]=(), color='k', highlight_color='b'):
    highlight = set(highlight)
    for circle in field.get_circles():
        edge = highlight_color if circle.id in highlight else color
        ax.add_patch(patches.Circle((circle.center.x, circle.center.y), circle.radius,
                                    fill=False, edgecolor=edge, alpha=0.5))


def plot_field(field: CircleField, ax=None, highlight: Iterable[Hashable]=(),
               circles: bool=True, boxes: bool=False, regions: bool=False):
    """Draws the selected layers of ``field`` and returns the axes.

    The y axis is inverted so the top-left origin matches the geometry.
    """
    if ax is None:
        ax = plt.gca()
    if circles:
        plot_circles(field, ax, highlight)
    if boxes:
        plot_boxes(field.tree, ax)
    if regions:
        plot_regions(field.tree, ax)

    x, y, w, h = field.boundary.to_bounds()
    ax.set_xlim(x, x + w)
    ax.set_ylim(y + h, y)
    ax.set_aspect('equal')
    return ax
