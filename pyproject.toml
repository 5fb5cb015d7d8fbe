[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scattersim"
version = "0.1.0"
description = "Monte Carlo scattering simulator: structure factor S(q) and intensity I(q) of particle configurations"
requires-python = ">=3.10"
keywords = ["scattering", "structure factor", "form factor", "SAXS", "SANS", "colloids", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scattersim = "scattersim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["scattersim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
