"""One-dimensional scattering patterns (S(q), I(q)) of particle configurations by Monte Carlo sampling."""

__version__ = "0.1.0"