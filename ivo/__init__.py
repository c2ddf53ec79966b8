"""Space-time (2+1D) building blocks: sparse matrices, GMRES, geometry, diagram files and problem data."""

__version__ = "0.1.0"