import numpy as np
import pytest

from scattersim.geometry import ScatteringPoint
from scattersim.rho import Rho1D, Rho2D, ScatteringVector


def test_build_q_values():
    vec = ScatteringVector(dq=0.25, qmin=0.0, qmax=1.0)
    assert vec.build_q_values() == [0.0, 0.25, 0.5, 0.75]
    assert vec.qqmax == 4


def test_build_q_values_with_offset():
    vec = ScatteringVector(dq=0.5, qmin=1.0, qmax=3.0)
    values = vec.build_q_values()
    assert values[0] == 1.0
    assert len(values) == vec.qqmax
    assert all(v < 3.0 for v in values)


def test_single_point_at_origin_has_unit_amplitude():
    rho = Rho1D(ScatteringVector(dq=0.1, qmin=0.0, qmax=1.0), show_progress=False)
    result = rho.calculate_rho([ScatteringPoint((0.0, 0.0, 0.0))])
    assert np.allclose(result, 1.0)
    assert np.allclose(rho.intensity(1), 1.0)


def test_intensity_at_zero_q_equals_point_count():
    points = [ScatteringPoint((float(i), 0.5 * i, -i)) for i in range(7)]
    rho = Rho1D(ScatteringVector(dq=0.2, qmin=0.0, qmax=2.0), show_progress=False)
    rho.calculate_rho(points)
    assert rho.intensity(len(points))[0] == pytest.approx(len(points))


def test_symmetric_pair_gives_real_amplitude():
    points = [ScatteringPoint((1.5, 0.0, 0.0)), ScatteringPoint((-1.5, 0.0, 0.0))]
    vec = ScatteringVector(dq=0.3, qmin=0.0, qmax=3.0)
    rho = Rho1D(vec, show_progress=False)
    result = rho.calculate_rho(points)
    assert np.allclose(result.imag, 0.0)
    assert np.allclose(result.real, 2.0 * np.cos(1.5 * np.asarray(vec.q_values)))


def test_perpendicular_displacement_has_no_effect():
    vec_a = ScatteringVector(dq=0.1, qmin=0.0, qmax=2.0, q_axis=(0.0, 0.0, 1.0))
    vec_b = ScatteringVector(dq=0.1, qmin=0.0, qmax=2.0, q_axis=(0.0, 0.0, 1.0))
    a = Rho1D(vec_a, show_progress=False).calculate_rho([ScatteringPoint((0.0, 0.0, 0.7))])
    b = Rho1D(vec_b, show_progress=False).calculate_rho([ScatteringPoint((4.0, -2.0, 0.7))])
    assert np.allclose(a, b)


def test_calculate_rho_accumulates():
    points = [ScatteringPoint((0.3, 0.1, 0.0)), ScatteringPoint((-0.8, 0.0, 0.2))]
    rho = Rho1D(ScatteringVector(dq=0.5, qmin=0.0, qmax=5.0), show_progress=False)
    first = rho.calculate_rho(points).copy()
    second = rho.calculate_rho(points)
    assert np.allclose(second, 2.0 * first)


def test_calculate_rho_prints_progress(capsys):
    rho = Rho1D(ScatteringVector(dq=0.5, qmin=0.0, qmax=1.0))
    rho.calculate_rho([ScatteringPoint()])
    assert capsys.readouterr().out.startswith("[|")


def test_export_1d(tmp_path):
    rho = Rho1D(ScatteringVector(dq=0.25, qmin=0.0, qmax=1.0), show_progress=False)
    rho.calculate_rho([ScatteringPoint()])
    out = tmp_path / "axis_0.txt"
    rho.export_data(1, out)
    lines = out.read_text().splitlines()
    assert len(lines) == 4
    assert lines[0] == "0 1"
    assert [float(line.split()[0]) for line in lines] == rho.q_vector.q_values


def test_rho2d_initialize_shapes():
    rho = Rho2D()
    rho.initialize((0.1, 0.1, 0.1), (0.0, 0.0, 0.0), (2, 3, 4))
    for grid in (rho.pos_pos, rho.pos_neg, rho.neg_pos, rho.neg_neg):
        assert grid.shape == (2, 3)
        assert not grid.any()


def test_rho2d_conjugates():
    rho = Rho2D()
    rho.initialize((0.1, 0.1, 0.1), (0.0, 0.0, 0.0), (2, 2, 2))
    rho.pos_pos[0, 1] = 1 + 2j
    rho.pos_neg[1, 0] = -3 + 0.5j
    rho.calculate_conjugates()
    assert rho.neg_neg[0, 1] == 1 - 2j
    assert rho.neg_pos[1, 0] == -3 - 0.5j


def test_rho2d_export_layout(tmp_path):
    rho = Rho2D()
    rho.initialize((0.1, 0.1, 0.1), (0.0, 0.0, 0.0), (2, 3, 4))
    rho.pos_pos[:, :] = 2.0
    out = tmp_path / "plane.txt"
    rho.export_data(1, out)
    lines = out.read_text().splitlines()
    assert len(lines) == 4 * (2 * 3 + 2)
    data = [line for line in lines if line]
    assert len(data) == 4 * 2 * 3
    assert data[0] == "0 0 4"
    neg_block = data[3 * 6:]
    assert all(float(line.split()[0]) <= 0 and float(line.split()[1]) <= 0 for line in neg_block)