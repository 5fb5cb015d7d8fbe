from scattersim.geometry import Random, ScatteringPoint, Transform
from scattersim.particles import Particle
from scattersim.settings import ScattType
from scattersim.shapes import Box, Sphere
from scattersim.system import ScatteringSystem


def make_particle(shape, cm):
    return Particle(Transform(cm), shape)


def test_sq_uses_particle_centres():
    particles = [make_particle(Sphere(1.0), (1.0, 2.0, 3.0)), make_particle(Box(), (4.0, 5.0, 6.0))]
    system = ScatteringSystem(ScattType.SQ)
    system.generate_scattering_points(particles)
    assert system.nsp == 2
    assert [p.cm for p in system.scattering_points] == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]


def test_iq_fills_particles():
    particles = [make_particle(Box(2.0, 2.0, 2.0), (5.0, 5.0, 5.0)) for _ in range(2)]
    system = ScatteringSystem(ScattType.IQ, rng=Random(7))
    system.generate_scattering_points(particles)
    expected = 2 * int(system.rho_sp * Box(2.0, 2.0, 2.0).volume())
    assert system.nsp == expected
    assert len(system.scattering_points) == expected
    for point in system.scattering_points:
        assert all(4.0 <= c <= 6.0 for c in point.cm)


def test_iq_zero_density_gives_no_points():
    system = ScatteringSystem(ScattType.IQ, rho_sp=0.0)
    system.generate_scattering_points([make_particle(Sphere(3.0), (0.0, 0.0, 0.0))])
    assert system.nsp == 0
    assert system.scattering_points == []


def test_points_accumulate_over_calls():
    system = ScatteringSystem(ScattType.SQ)
    particles = [make_particle(Sphere(), (0.0, 0.0, 0.0))]
    system.generate_scattering_points(particles)
    system.generate_scattering_points(particles)
    assert system.nsp == 2
    assert len(system.scattering_points) == 2


def test_write_cogli2_limits_spheres(tmp_path):
    lbox = (10.0, 10.0, 10.0)
    points = [ScatteringPoint((float(i), 0.0, 0.0)) for i in range(5)]
    system = ScatteringSystem(scattering_points=list(points), nsp=5, cogli2_max_spheres=3)
    out = tmp_path / "points.mgl"
    system.write_cogli2(lbox, out)
    assert out.read_text(encoding="utf-8") == "".join(p.cogli2(lbox) for p in points[:3])


def test_write_cogli2_writes_all_when_fewer(tmp_path):
    lbox = (2.0, 2.0, 2.0)
    points = [ScatteringPoint((0.1, 0.2, 0.3)), ScatteringPoint((-0.1, 0.0, 0.5))]
    system = ScatteringSystem(scattering_points=list(points), nsp=2)
    out = tmp_path / "points.mgl"
    system.write_cogli2(lbox, out)
    assert out.read_text(encoding="utf-8").splitlines() == [p.cogli2(lbox).rstrip("\n") for p in points]


def test_write_cogli2_append_keeps_content(tmp_path):
    lbox = (1.0, 1.0, 1.0)
    out = tmp_path / "points.mgl"
    out.write_text("header\n", encoding="utf-8")
    point = ScatteringPoint((0.0, 0.0, 0.0))
    system = ScatteringSystem(scattering_points=[point], nsp=1)
    system.write_cogli2(lbox, out, True)
    assert out.read_text(encoding="utf-8") == "header\n" + point.cogli2(lbox)
    system.write_cogli2(lbox, out, False)
    assert out.read_text(encoding="utf-8") == point.cogli2(lbox)