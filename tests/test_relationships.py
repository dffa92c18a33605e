import numpy as np

from geometric import relationships

SQUARE = [[0, 0], [2, 0], [2, 2], [0, 2]]
# U-shape open at the top between x=1 and x=2
U_SHAPE = [[0, 0], [3, 0], [3, 3], [2, 3], [2, 1], [1, 1], [1, 3], [0, 3]]


def test_bounds_overlap():
    box = [[0, 0], [1, 1]]
    assert relationships.bounds_overlap(box, [[0.5, 0.5], [2, 2]])
    assert relationships.bounds_overlap(box, [[1, 1], [2, 2]])
    assert not relationships.bounds_overlap(box, [[2, 2], [3, 3]])


def test_line_intersects_line_crossing():
    assert relationships.line_intersects_line([[0, 0], [2, 2]], [[0, 2], [2, 0]])


def test_line_intersects_line_parallel():
    assert not relationships.line_intersects_line([[0, 0], [1, 0]], [[0, 1], [1, 1]])


def test_line_intersects_line_collinear_overlap_not_reported():
    assert not relationships.line_intersects_line([[0, 0], [2, 0]], [[1, 0], [3, 0]])


def test_line_intersects_line_endpoint_touch_excluded():
    assert not relationships.line_intersects_line([[0, 0], [1, 1]], [[1, 1], [2, 0]])
    # T-junction: one endpoint lies on the other segment
    assert not relationships.line_intersects_line([[0, 0], [2, 0]], [[1, 0], [1, 1]])


def test_line_intersects_line_beyond_segment():
    assert not relationships.line_intersects_line([[0, 0], [1, 0]], [[2, -1], [2, 1]])


def test_line_intersects_polygon():
    assert relationships.line_intersects_polygon([[-1, 1], [3, 1]], SQUARE)
    assert relationships.line_intersects_polygon([[1, 1], [1, 5]], SQUARE)
    assert not relationships.line_intersects_polygon([[0.5, 0.5], [1.5, 1.5]], SQUARE)
    assert not relationships.line_intersects_polygon([[3, 0], [3, 2]], SQUARE)


def test_line_intersects_polygon_uses_closing_edge():
    # Only crosses the edge from the last vertex back to the first
    assert relationships.line_intersects_polygon([[-1, 1], [1, 1]], SQUARE)


def test_line_intersects_polygon_does_not_close_input():
    polygon = [list(v) for v in SQUARE]
    relationships.line_intersects_polygon([[-1, 1], [3, 1]], polygon)
    relationships.line_intersects_polygon([[5, 5], [6, 6]], polygon)
    assert polygon == SQUARE


def test_point_in_polygon():
    assert relationships.point_in_polygon([1, 1], SQUARE)
    assert not relationships.point_in_polygon([3, 1], SQUARE)
    assert not relationships.point_in_polygon([1, -0.5], SQUARE)


def test_point_in_concave_polygon():
    assert relationships.point_in_polygon([0.5, 2.5], U_SHAPE)
    assert relationships.point_in_polygon([2.5, 2.5], U_SHAPE)
    assert not relationships.point_in_polygon([1.5, 2.5], U_SHAPE)


def test_point_side_of_vertical_line():
    line = [[0, 0], [0, 2]]
    assert relationships.point_left_of_line([-1, 1], line)
    assert not relationships.point_right_of_line([-1, 1], line)
    assert relationships.point_right_of_line([1, 1], line)
    assert not relationships.point_left_of_line([1, 1], line)


def test_point_side_independent_of_endpoint_order():
    line = [[0, 0], [2, 2]]
    for candidate in (line, line[::-1]):
        assert relationships.point_left_of_line([0, 2], candidate)
        assert relationships.point_right_of_line([2, 0], candidate)


def test_point_on_line():
    line = [[0, 0], [2, 2]]
    assert relationships.point_on_line([1, 1], line)
    # The infinite line, not just the segment
    assert relationships.point_on_line([3, 3], line)
    assert not relationships.point_on_line([1, 1.5], line)
    assert not relationships.point_left_of_line([1, 1], line)
    assert not relationships.point_right_of_line([1, 1], line)


def test_polygon_in_polygon():
    inner = [[0.5, 0.5], [1.5, 0.5], [1.5, 1.5], [0.5, 1.5]]
    overlapping = [[0.5, 0.5], [2.5, 0.5], [2.5, 2.5], [0.5, 2.5]]
    assert relationships.polygon_in_polygon(inner, SQUARE)
    assert not relationships.polygon_in_polygon(SQUARE, inner)
    assert not relationships.polygon_in_polygon(overlapping, SQUARE)


def test_polygon_in_polygon_checks_vertices_only():
    # Both vertices sit in the arms of the U but the edge between them
    # crosses the gap
    bridge = [[0.5, 2.5], [2.5, 2.5], [2.5, 2.8]]
    assert relationships.polygon_in_polygon(bridge, U_SHAPE)
    assert relationships.polygon_intersects_polygon(bridge, U_SHAPE)


def test_polygon_intersects_polygon_contained():
    inner = [[.5, .5], [1.5, .5], [1.5, 1.5], [.5, 1.5]]
    assert not relationships.polygon_intersects_polygon(inner, SQUARE)
    assert not relationships.polygon_intersects_polygon(SQUARE, inner)


def test_polygon_intersects_polygon_partial_overlap():
    overlapping = [[.5, .5], [2.5, .5], [2.5, 2.5], [.5, 2.5]]
    assert relationships.polygon_intersects_polygon(overlapping, SQUARE)


def test_polygon_intersects_polygon_disjoint():
    assert not relationships.polygon_intersects_polygon([[3, 3], [3, 4], [4, 4]], SQUARE)


def test_polygon_intersects_polygon_no_vertices_inside():
    polygon_a = [[5, 3], [10, 3], [10, 8], [5, 8]]
    polygon_b = [[4, 6], [8, 2], [11, 6]]
    polygon_c = [[4, 6], [11, 6], [11, 9], [4, 9]]
    assert relationships.polygon_intersects_polygon(polygon_a, polygon_b)
    assert relationships.polygon_intersects_polygon(polygon_b, polygon_a)
    assert relationships.polygon_intersects_polygon(polygon_a, polygon_c)
    assert relationships.polygon_intersects_polygon(polygon_c, polygon_a)


def test_polygon_intersects_polygon_does_not_close_inputs():
    polygon_a = [[.5, .5], [2.5, .5], [2.5, 2.5], [.5, 2.5]]
    polygon_b = [list(v) for v in SQUARE]
    relationships.polygon_intersects_polygon(polygon_a, polygon_b)
    assert len(polygon_a) == 4
    assert polygon_b == SQUARE


def test_polygon_intersects_polygon_explicitly_closed():
    overlapping = np.array([[.5, .5], [2.5, .5], [2.5, 2.5], [.5, 2.5], [.5, .5]])
    assert relationships.polygon_intersects_polygon(overlapping, SQUARE)
