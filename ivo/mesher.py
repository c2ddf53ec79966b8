"""Time partitions and reading and writing of space diagrams."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from .geometry import Point21, Polygon21

logger = logging.getLogger(__name__)


def mesher1(a: float, b: float, n: int) -> list[float]:
    """Uniform partition of [a, b] into ``n`` intervals: ``n + 1`` points."""
    if not a < b:
        raise ValueError("the interval start must precede its end")
    if n <= 0:
        raise ValueError("the number of intervals must be positive")
    logger.debug("building a diagram of %d cells for [%g, %g]", n, a, b)
    step = (b - a) / n
    return [a] + [a + j * step for j in range(1, n + 1)]


def _numbers(line: str) -> list[float]:
    values = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def read_diagram(path: str | os.PathLike) -> list[Polygon21]:
    """Read a space diagram: one polygon per line as ``x y t`` triplets.

    Lines starting with ``@`` are comments.
    """
    logger.debug("reading a diagram from %s", path)
    diagram = []
    with open(path, encoding="utf-8") as file:
        for line in file:
            line = line.rstrip("\n")
            if line.startswith("@"):
                continue
            values = iter(_numbers(line))
            diagram.append(Polygon21(Point21(x, y, t) for x, y, t in zip(values, values, values)))
    return diagram


def write_diagram(path: str | os.PathLike, diagram: Iterable[Polygon21]) -> None:
    """Write a space diagram in the format read by :func:`read_diagram`."""
    polygons = list(diagram)
    logger.debug("writing a diagram to %s", path)
    with open(path, "w", encoding="utf-8") as file:
        file.write("@ Readable space diagram.\n")
        file.write(f"@ {len(polygons)} cells.\n")
        for polygon in polygons:
            file.write(
                "".join(
                    f"{point.x:.14g} {point.y:.14g} {point.t:.14g} " for point in polygon
                )
            )
            file.write("\n")