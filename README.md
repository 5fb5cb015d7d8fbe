# scattersim

Compute one-dimensional scattering patterns of particle configurations.

`scattersim` reads configuration files that describe particles of several
shapes: spheres, cylinders, spherocylinders, boxes, ellipsoids and
superquadrics. Along each chosen direction `u` of the scattering vector it
computes

    rho(q) = sum_j exp(-i q (u . r_j))

over a set of scattering points `r_j`. It then writes `|rho(q)|^2 / N`, where
`N` is the number of scattering points. There are two modes:

- **`Sq`**: the structure factor. Each particle gives one scattering point at
  its centre of mass.
- **`Iq`**: the full intensity. Each particle is filled with scattering
  points drawn uniformly at random, about `rhoSP × volume` of them.
  Superquadrics are the exception: for them the count is based on the volume
  of their bounding box, and only the points inside the shape are kept.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
scattersim settings.json
```

The command exits with status 1 in these cases:

- no settings file is given;
- the settings file or a configuration file is invalid;
- a file or folder cannot be opened or created.

While it runs, it prints the number of configurations, each configuration's
name, the number of scattering points, and a progress bar.

### Settings file

```json
{
  "simType": "1D",
  "scattType": "Iq",
  "rhoSP": 10.0,
  "scattVectors": [
    {"direction": [1, 0, 0], "qmin": 0.0, "qmax": 10.0, "dq": 0.05},
    {"direction": [0, 0, 1]}
  ],
  "configurationsFolder": "Configurations",
  "outputFolder": "Data/rho1D/",
  "saveCogli2": true,
  "cogli2Folder": "Cogli2/"
}
```

- `simType` (required): only `"1D"` is accepted.
- `scattType` (required): `"Sq"` or `"Iq"`.
- `scattVectors`: a list of q directions. Each entry needs a `direction` of
  three numbers. It may also set `qmin`, `qmax` and `dq`, whose defaults are
  0, 1 and 0.01. The q values run from `qmin` in steps of `dq`, and there are
  `int((qmax - qmin) / dq)` of them. The direction is used as given; it is not
  normalised.
- `rhoSP`: the density of scattering points in `Iq` mode. The default is 1.
- `configurationsFolder`: every entry in this folder is processed, in sorted
  order.
- `outputFolder`: the default is `Data/rho1D/`. For each configuration, one
  file per direction is written to
  `<outputFolder><configuration name without extension>/axis_<n>.txt`. The
  folder name is joined to the configuration name as plain text, so
  `outputFolder` should end with `/`. Each line of these files holds `q` and
  the intensity.
- `saveCogli2` (a boolean) and `cogli2Folder` (default `Cogli2/`): when
  `saveCogli2` is true, a file `<cogli2Folder><name>.mgl` is also written for
  each configuration. It holds a `.Box:` line followed by up to 100000
  scattering points, drawn as spheres.

Folders are created when they are missing, but only one level deep. Their
parent folders must already exist.

### Configuration file

The first line gives the box lengths `Lx Ly Lz`. Each following non-blank
line describes one particle, in this order:

1. a type tag;
2. the shape parameters;
3. the centre of mass (3 numbers);
4. the 3×3 orientation matrix, row by row.

Missing trailing values take defaults. Shape parameters default to 1, and
superquadric exponents to 2. The centre defaults to the origin and the
orientation to the identity.

| Tag      | Parameters                  |
|----------|-----------------------------|
| `SPH`    | `D` (diameter)              |
| `CYL`    | `D L`                       |
| `SPHCYL` | `D L` (length of the cylindrical part) |
| `BOX`    | `a b c` (edge lengths)      |
| `ELL`    | `a b c` (semi-axes)         |
| `SQUAD`  | `a b c r s t` (semi-axes, exponents) |

Example:

```
10 10 10
SPH 1.0  0 0 0  1 0 0 0 1 0 0 0 1
BOX 1 2 3  2 2 2  1 0 0 0 1 0 0 0 1
```

An unknown tag or a value that is not a number raises
`scattersim.particles.ConfigurationError`.

## Library use

```python
from scattersim.particles import ParticleSystem
from scattersim.system import ScatteringSystem
from scattersim.settings import ScattType
from scattersim.rho import ScatteringVector, Rho1D
from scattersim.geometry import Random

particles = ParticleSystem("Configurations/conf_0.dat")

system = ScatteringSystem(ScattType.IQ, rho_sp=10.0, rng=Random(seed=1))
system.generate_scattering_points(particles.particles)

rho = Rho1D(ScatteringVector(q_axis=(1.0, 0.0, 0.0), qmin=0.0, qmax=5.0, dq=0.05))
rho.calculate_rho(system.scattering_points)
intensity = rho.intensity(system.nsp)       # numpy array
rho.export_data(system.nsp, "axis_0.txt")
```

The modules:

- `scattersim.geometry`: provides the following.
  - `Transform`, `ScatteringPoint` and `Random` (a seedable uniform source).
  - `sgn`, `vector_norm` and `dot_product`.
  - `write_box`, which writes a cogli2 box line.
- `scattersim.shapes`: the shape classes, each with three methods:
  - `volume()`;
  - `describe()`;
  - `generate_scattering_points(rho_sp, rng)`.

  `Spherocylinder` and `Box` also have a `molgl(tf)` method.
- `scattersim.particles`: provides the following.
  - `Particle`, a shape with a transform.
  - `parse_particle(line)`.
  - `ParticleSystem`, with the methods `load_system`, `add_particle` and
    `write_molgl`.
- `scattersim.rho`: `ScatteringVector`, `Rho1D` and `Rho2D`.
- `scattersim.settings`: provides the following.
  - `SimulationSettings.load_settings(path)`.
  - The `SimType` and `ScattType` enums.
  - `SettingsError`.
  - The folder helpers.
- `scattersim.system`: `ScatteringSystem`, with the methods
  `generate_scattering_points` and `write_cogli2`.
- `scattersim.simulation`: `ScatteringSimulation.start_simulation()`, which
  returns the paths it wrote, and `main(argv=None)`.

## Limitations

- Only one-dimensional scans along fixed directions are computed. A
  `simType` of `"2D"` is rejected.
- `Rho2D` holds four quadrant grids and can fill the negative quadrants by
  complex conjugation and export them. It has no method that computes the
  grids from scattering points.
- molgl output covers only spherocylinders and boxes. For other shapes it is
  an empty line.
- There is no logarithmic q spacing.