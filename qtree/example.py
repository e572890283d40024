import logging
import os
import sys
from matplotlib import pyplot as plt

from qtree.circles import CircleField
from qtree.geometry import Point2D, Rectangle2D
from qtree.plotting import plot_field


logger = logging.getLogger('qtree.example')


def setup_logging():
    level_name = os.environ.get('QTREE_LOG', 'INFO').upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')


def main(argv: list[str]) -> int:
    setup_logging()

    show_plot = '--plot' in argv
    args = [a for a in argv[1:] if a != '--plot']
    if len(args) not in (4, 6):
        print(f'usage: {argv[0]} width height count capacity [query_x query_y] [--plot]', file=sys.stderr)
        return 2

    width = float(args[0])
    height = float(args[1])
    count = int(args[2])
    capacity = int(args[3])
    if len(args) == 6:
        query = Point2D(float(args[4]), float(args[5]))
    else:
        query = Point2D(width / 2, height / 2)

    field = CircleField(Rectangle2D.from_corner(0.0, 0.0, width, height), capacity)
    added = field.scatter(count)
    logger.info('Added %d circles, tree depth %d, %d regions',
                added, field.tree.depth(), len(field.tree.get_regions()))

    candidates = field.tree.query_point(query)
    colliding = field.colliding(query)
    logger.info('Colliding with %d bounding boxes, %d circles at %s', len(candidates), len(colliding), query)
    for id in sorted(colliding, key=str):
        print(field.circles[id])

    if show_plot:
        plot_field(field, highlight=colliding, boxes=True, regions=True)
        plt.plot([query.x], [query.y], 'x', color='m')
        plt.show()
    return 0


def cli():
    sys.exit(main(sys.argv))


if __name__ == '__main__':
    cli()
