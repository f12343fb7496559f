import numpy as np
import pytest

from orbitcam.render.meshes import (
    FLOATS_PER_VERTEX,
    build_axes_lines,
    build_cube_lines,
    build_grid_lines,
)


def test_grid_line_count_and_extent():
    lines = build_grid_lines(2.0, 1.0, (0.5, 0.5, 0.5))
    # 5 lines per direction, 2 vertices each
    assert lines.shape == (20, FLOATS_PER_VERTEX)
    assert lines.dtype == np.float32
    assert np.all(lines[:, 1] == 0.0)
    assert lines[:, 0].min() == -2.0 and lines[:, 0].max() == 2.0
    np.testing.assert_allclose(lines[:, 3:], 0.5)


def test_grid_rejects_bad_step():
    with pytest.raises(AssertionError):
        build_grid_lines(2.0, 0.0, (1.0, 1.0, 1.0))


def test_axes_colors():
    colors = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
    lines = build_axes_lines(2.0, colors)
    assert lines.shape == (6, FLOATS_PER_VERTEX)
    for axis in range(3):
        a, b = lines[2 * axis], lines[2 * axis + 1]
        assert (b[:3] - a[:3])[axis] == pytest.approx(2.0)
        np.testing.assert_allclose(a[3:], colors[axis])


def test_cube_has_twelve_unit_edges():
    lines = build_cube_lines((0.0, 0.5, 0.0), 1.0, (1.0, 1.0, 0.0))
    assert lines.shape == (24, FLOATS_PER_VERTEX)
    edges = lines[1::2, :3] - lines[0::2, :3]
    np.testing.assert_allclose(np.linalg.norm(edges, axis=1), 1.0)
    assert lines[:, 1].min() == pytest.approx(0.0)
    assert lines[:, 1].max() == pytest.approx(1.0)
