import math

import numpy as np
import pytest

from physviz.core.wells import displace_toward, well_depth, well_grid_lines, well_surface


def test_far_point_moves_slightly_toward_center():
    out = displace_toward(np.array([[300.0, 0.0]]), (0.0, 0.0), 15_000.0, 100.0)
    expected_offset = 300.0 * (15_000.0 / 90_100.0) / math.sqrt(90_001.0)
    assert out[0, 0] == pytest.approx(300.0 - expected_offset)
    assert out[0, 1] == pytest.approx(0.0)


def test_displacement_is_radial():
    center = np.array([300.0, 300.0])
    point = np.array([[400.0, 400.0]])
    out = displace_toward(point, center, 15_000.0)
    before = point[0] - center
    after = out[0] - center
    assert np.linalg.norm(after) < np.linalg.norm(before)
    assert after[0] == pytest.approx(after[1])


def test_grid_line_count_and_sampling():
    lines = well_grid_lines((600, 600), 20, (300, 300), 15_000.0)
    assert len(lines) == 62
    assert all(line.shape == (601, 2) for line in lines)


def test_grid_rejects_bad_spacing():
    with pytest.raises(ValueError):
        well_grid_lines((100, 100), 0, (50, 50), 1.0)


def test_well_depth_deepest_at_center():
    assert float(well_depth(0.0, 0.0)) == pytest.approx(-16.0)
    assert float(well_depth(100.0, 0.0)) == pytest.approx(-4000.0 / 10_250.0)
    assert float(well_depth(5.0, 5.0, center=(5.0, 5.0))) == pytest.approx(-16.0)


def test_well_surface_shape_and_offset():
    grid_x, grid_z, grid_y = well_surface(600.0, 600.0, 50, offset=-15.0)
    assert grid_x.shape == grid_z.shape == grid_y.shape == (51, 51)
    assert grid_x[0, 0] == -300.0
    assert grid_x[0, -1] == 300.0
    assert grid_y.min() == pytest.approx(-31.0)
    assert grid_y[25, 25] == pytest.approx(-31.0)
