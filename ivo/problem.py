"""Problem description: neighbourhoods, equation coefficients and data."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

import numpy as np

ScalarField = Callable[[float, float, float], float]
VectorField = Callable[[float, float, float], "tuple[float, float]"]


@dataclass(frozen=True)
class Neighbour21:
    """Neighbours of an element.

    ``top`` and ``bottom`` are the indices of the elements above and below in
    time, -1 where there is none. ``facing`` holds, for each edge, the index
    of the neighbouring element and of its matching edge, or (-1, -1) on the
    boundary.
    """

    top: int
    bottom: int
    facing: tuple[tuple[int, int], ...]

    def __init__(self, top: int, bottom: int, facing: Iterable[Iterable[int]]) -> None:
        pairs = tuple(tuple(int(i) for i in pair) for pair in facing)
        if any(len(pair) != 2 for pair in pairs):
            raise ValueError("each facing entry must be a pair")
        object.__setattr__(self, "top", int(top))
        object.__setattr__(self, "bottom", int(bottom))
        object.__setattr__(self, "facing", pairs)


@dataclass(frozen=True)
class Data:
    """Source term and Dirichlet and Neumann boundary data."""

    source: ScalarField
    dirichlet: ScalarField
    neumann: ScalarField


@dataclass(frozen=True)
class Equation:
    """Convection-diffusion-reaction coefficients."""

    convection: VectorField
    diffusion: float
    reaction: ScalarField


@dataclass(frozen=True)
class Initial:
    """Initial condition u0(x, y)."""

    condition: Callable[[float, float], float]

    def __call__(self, x, y):
        """Evaluate at a point, or entrywise at matching arrays of coordinates."""
        xs = np.asarray(x, dtype=float)
        ys = np.asarray(y, dtype=float)
        if xs.shape != ys.shape:
            raise ValueError(f"coordinate shapes {xs.shape} and {ys.shape} differ")
        if xs.ndim == 0:
            return float(self.condition(float(xs), float(ys)))
        values = [
            self.condition(float(a), float(b)) for a, b in zip(xs.ravel(), ys.ravel())
        ]
        return np.array(values, dtype=float).reshape(xs.shape)