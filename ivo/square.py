"""Square domain test problem with a boundary layer at x = 1 and y = 1."""

from __future__ import annotations

import math

from .geometry import Point21, Polygon21

#: Diffusion coefficient.
DIFFUSION = 0.005

#: Boundary layer coefficient.
BOUNDARY = 0.05

#: Uniform convection field (x and y components).
CONVECTION = (1.0, 1.0)

#: Uniform reaction coefficient.
REACTION = 0.5

# Distance from a side under which a point counts as lying on it.
_EDGE_TOLERANCE = 1.0e-10


def domain() -> Polygon21:
    """The unit square, counterclockwise."""
    return Polygon21(
        [Point21(0.0, 0.0), Point21(1.0, 0.0), Point21(1.0, 1.0), Point21(0.0, 1.0)]
    )


def _coordinates(x: float, y: float, t: float) -> tuple[float, float, float]:
    """The space-time point as floats; raises TypeError for non-numbers."""
    return float(x), float(y), float(t)


def convection(x: float, y: float, t: float) -> tuple[float, float]:
    """Convection coefficient at (x, y, t); uniform over the domain."""
    _coordinates(x, y, t)
    c_x, c_y = CONVECTION
    return (c_x, c_y)


def reaction(x: float, y: float, t: float) -> float:
    """Reaction coefficient at (x, y, t); uniform over the domain."""
    _coordinates(x, y, t)
    return REACTION


def _layers(x: float, y: float, t: float) -> tuple[float, float, float, float]:
    c_x, c_y = convection(x, y, t)
    return (
        c_x / BOUNDARY,
        c_y / BOUNDARY,
        math.exp(c_x * (x - 1.0) / BOUNDARY),
        math.exp(c_y * (y - 1.0) / BOUNDARY),
    )


def _shape(x: float, y: float, t: float) -> float:
    _, _, e_x, e_y = _layers(x, y, t)
    return 2.0 * x + 2.0 * y - x * y * (1.0 - e_x) * (1.0 - e_y)


def u(x: float, y: float, t: float) -> float:
    """Exact solution."""
    return (1.0 - math.exp(-t)) * _shape(x, y, t)


def u_xy(x: float, y: float, t: float) -> tuple[float, float]:
    """Exact solution's gradient in space."""
    cb_x, cb_y, e_x, e_y = _layers(x, y, t)
    scale = 1.0 - math.exp(-t)
    return (
        scale * (2.0 - (1.0 - e_y) * (y * (1.0 - e_x) + x * y * (-cb_x * e_x))),
        scale * (2.0 - (1.0 - e_x) * (x * (1.0 - e_y) + x * y * (-cb_y * e_y))),
    )


def u_t(x: float, y: float, t: float) -> float:
    """Exact solution's time derivative."""
    return math.exp(-t) * _shape(x, y, t)


def u_xxyy(x: float, y: float, t: float) -> float:
    """Exact solution's Laplacian in space."""
    cb_x, cb_y, e_x, e_y = _layers(x, y, t)
    return (math.exp(-t) - 1.0) * (
        x * (1.0 - e_x) * (2.0 * (-cb_y * e_y) + y * (-cb_y * cb_y * e_y))
        + y * (1.0 - e_y) * (2.0 * (-cb_x * e_x) + x * (-cb_x * cb_x * e_x))
    )


def u0(x: float, y: float) -> float:
    """Initial condition."""
    return u(x, y, 0.0)


def gd(x: float, y: float, t: float) -> float:
    """Dirichlet boundary condition."""
    return u(x, y, t)


def gn(x: float, y: float, t: float) -> float:
    """Neumann boundary condition: diffusive flux through the nearest side."""
    du_x, du_y = u_xy(x, y, t)
    if x <= _EDGE_TOLERANCE:
        return -DIFFUSION * du_x
    if x >= 1.0 - _EDGE_TOLERANCE:
        return DIFFUSION * du_x
    if y <= _EDGE_TOLERANCE:
        return -DIFFUSION * du_y
    return DIFFUSION * du_y


def g(x: float, y: float, t: float) -> float:
    """Source term matching the exact solution."""
    du_x, du_y = u_xy(x, y, t)
    c_x, c_y = convection(x, y, t)
    return (
        u_t(x, y, t)
        - DIFFUSION * u_xxyy(x, y, t)
        + c_x * du_x
        + c_y * du_y
        + reaction(x, y, t) * u(x, y, t)
    )