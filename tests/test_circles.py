import random

import pytest

from qtree.circles import Circle, CircleField
from qtree.geometry import Point2D, Rectangle2D
from qtree.quadtree import RectDoesNotFit


def make_field(capacity=4):
    return CircleField(Rectangle2D.from_corner(0.0, 0.0, 800.0, 600.0), capacity)


def test_circle_contains_point_inclusively():
    c = Circle(Point2D(10.0, 10.0), 5.0)
    assert c.contains_point(Point2D(15.0, 10.0))
    assert c.contains_point(Point2D(10.0, 10.0))
    assert not c.contains_point(Point2D(14.0, 14.0))


def test_circle_bounding_box():
    c = Circle(Point2D(20.0, 30.0), 10.0)
    assert c.bounding_box() == Rectangle2D.from_corner(10.0, 20.0, 20.0, 20.0)


def test_duplicate_gets_new_id():
    c = Circle(Point2D(20.0, 30.0), 10.0)
    d = c.duplicate()
    assert d.id != c.id
    assert (d.center, d.radius) == (c.center, c.radius)


def test_add_circle_outside_boundary():
    field = make_field()
    with pytest.raises(RectDoesNotFit):
        field.add_circle(Circle(Point2D(5.0, 5.0), 10.0))
    assert len(field) == 0
    assert len(field.tree) == 0


def test_colliding_filters_bounding_box_hits():
    field = make_field()
    c = Circle(Point2D(100.0, 100.0), 10.0, 'c')
    field.add_circle(c)

    # Inside the box but outside the circle
    corner = Point2D(109.0, 109.0)
    assert field.tree.query_point(corner) == {'c'}
    assert field.colliding(corner) == set()
    assert field.colliding(Point2D(105.0, 100.0)) == {'c'}


def test_scatter_keeps_circles_and_tree_in_step():
    field = make_field()
    added = field.scatter(500, random.Random(7))

    assert 0 < added <= 500
    assert len(field) == added
    assert len(field.tree) == added
    for circle in field.get_circles():
        assert circle.id in field.tree.query_point(circle.center)


def test_resize_at_grows_smallest_circle():
    field = make_field()
    field.add_circle(Circle(Point2D(100.0, 100.0), 30.0, 'big'))
    field.add_circle(Circle(Point2D(100.0, 100.0), 10.0, 'small'))
    old_tree = field.tree

    assert field.resize_at(Point2D(100.0, 100.0), 5.0)
    assert field.circles['small'].radius == 15.0
    assert field.circles['big'].radius == 30.0
    assert field.tree is not old_tree
    assert len(field.tree) == 2


def test_resize_at_clamps_to_min_radius():
    field = make_field()
    field.add_circle(Circle(Point2D(100.0, 100.0), 12.0, 'c'))
    assert field.resize_at(Point2D(100.0, 100.0), -50.0)
    assert field.circles['c'].radius == field.min_radius


def test_resize_at_refuses_to_leave_boundary():
    field = make_field()
    field.add_circle(Circle(Point2D(20.0, 20.0), 10.0, 'c'))
    assert not field.resize_at(Point2D(20.0, 20.0), 20.0)
    assert field.circles['c'].radius == 10.0


def test_resize_at_misses():
    field = make_field()
    assert not field.resize_at(Point2D(400.0, 300.0), 10.0)


def test_clear():
    field = make_field(capacity=2)
    field.scatter(20, random.Random(1))
    field.clear()
    assert len(field) == 0
    assert len(field.tree) == 0
    assert field.tree.capacity == 2
