import numpy as np
import pytest

from geometric import lines
from geometric.errors import GeometryValidationError


def test_line_angle_axes():
    assert lines.line_angle([[0, 0], [1, 0]]) == 0.0
    assert lines.line_angle([[0, 0], [0, 1]]) == pytest.approx(90.0)
    assert lines.line_angle([[0, 0], [0, -1]]) == pytest.approx(-90.0)
    assert lines.line_angle([[1, 0], [0, 0]]) == pytest.approx(180.0)


def test_line_angle_reversed_differs_by_180():
    for line in ([[0, 0], [1, 2]], [[3, -1], [-2, 4]], [[1.5, 2.5], [1.5, -7.0]]):
        forward = lines.line_angle(line)
        backward = lines.line_angle(line[::-1])
        assert (forward - backward) % 360.0 == pytest.approx(180.0)


def test_line_length():
    assert lines.line_length([[0, 0], [3, 4]]) == 5.0
    assert lines.line_length([[2, 2], [2, 2]]) == 0.0


def test_line_length_symmetric():
    line = [[1.25, -3.0], [4.5, 7.75]]
    assert lines.line_length(line) == lines.line_length(line[::-1])


def test_line_midpoint():
    np.testing.assert_allclose(lines.line_midpoint([[0, 0], [2, 4]]), [1.0, 2.0])
    np.testing.assert_allclose(lines.line_midpoint(np.array([[-1.0, 3.0], [1.0, -3.0]])), [0.0, 0.0])


def test_line_rejects_wrong_arity():
    with pytest.raises(GeometryValidationError):
        lines.line_length([[0, 0], [1, 1], [2, 2]])
    with pytest.raises(ValueError):
        lines.line_angle([[0, 0, 0], [1, 1, 1]])
