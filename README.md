# ivo

Building blocks for space-time (2+1D) computations on polygonal space
diagrams: a sparse matrix type with compressed views, dense vector helpers
and restarted GMRES, 2+1D points, edges and polygons, reading and writing of
space diagrams, and the data of a convection-diffusion-reaction problem.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ivo.sparse`

`Sparse(rows, columns)` is a real sparse matrix stored as a dictionary keyed
by `row * columns + column`. Values whose magnitude is zero are not stored.

- `A[j, k]` reads one entry (zero when absent); `A[j, k] = value` stores a
  scalar. `A[rows, columns]` with two index sequences returns a dense NumPy
  array, and `A[rows, columns] = matrix` stores a dense block.
- `rows`, `columns`, `size()` (rows times columns), `copy()`,
  `submatrix(rows, columns)`, `transpose()`, `row(j)`, `column(k)`.
- `csr()` and `csc()` return the row- and column-compressed storage, built on
  demand and dropped whenever the matrix changes.
- Arithmetic: unary `+` and `-`; `+`, `-`, `*`, `/` with scalars, applied to
  the stored entries only (both sides, and in place); `+` and `-` between
  matrices of the same shape.
- Products with `@`: `A @ vector` and `vector @ A` return NumPy vectors,
  `A @ B` returns a new `Sparse`.
- `str(A)` lists the stored entries as `(row, column): value`, one per line.

Index errors raise `IndexError`, shape mismatches `ValueError`.

### `ivo.compressed`

`Compressed(inner, outer, entries)` is a named tuple for compressed storage,
with `major`, `nnz` and `segment(index)`. `compress_rows` and
`compress_columns` build it from dictionary-of-keys entries; `csr_matvec`
and `csc_vecmat` compute matrix-vector and vector-matrix products from it.

### `ivo.linalg`

- Vectors: `dot` (the second vector conjugated when complex), `cross`,
  `norm`, `flipped`, `stacked`, `stepped(a, b, step)` (from `a` to `b`
  inclusive), `kronecker` (two vectors or two matrices).
- Matrices: `r_scale(vector, matrix)` scales every row entrywise by the
  vector, `c_scale(vector, matrix)` every column.
- Solvers: `gmres(a, b, *, tolerance, restart, max_iterations)` solves
  `a x = b` with restarted GMRES whose Krylov size grows by one per
  iteration and falls back to one past `restart`. `a` may be a `Sparse` or a
  dense square matrix. Defaults are `TOLERANCE = 1e-12`, `RESTART = 50` and
  `MAX_ITERATIONS = 10000`. `solve(a, b)` calls `gmres` with the defaults.
  Progress is reported through the `ivo.linalg` logger at debug level.

### `ivo.geometry`

- `Point21(x, y, t=0.0)`: an immutable point with indexing, iteration,
  point addition and subtraction, and arithmetic with scalars.
  `unit_x`, `unit_y` and `unit_t` build points along one axis, and
  `distance(p, q)` is the Euclidean distance.
- `Edge21(a, b)`: a segment; edges compare equal whatever their orientation.
  `size()` is its length.
- `Polygon21(points)`: a polygon with `points`, `edges()` (closing back to
  the first point), indexing, `len()` and iteration.

### `ivo.mesher`

- `mesher1(a, b, n)`: the `n + 1` points of a uniform partition of `[a, b]`.
- `read_diagram(path)` and `write_diagram(path, diagram)`: space diagrams as
  plain text, one polygon per line as a sequence of `x y t` triples; lines
  starting with `@` are comments. Written coordinates keep 14 significant
  digits.

### `ivo.problem`

Frozen dataclasses describing a problem:

- `Equation(convection, diffusion, reaction)`: a convection field returning
  `(c_x, c_y)`, a constant diffusion and a reaction field.
- `Data(source, dirichlet, neumann)`: source term and boundary data.
- `Initial(condition)`: an initial condition `u0(x, y)`, callable on a point
  or entrywise on matching arrays.
- `Neighbour21(top, bottom, facing)`: an element's neighbours in time and,
  per edge, the facing element and edge index, `-1` where there is none.

### `ivo.square`

The unit-square benchmark with a boundary layer at `x = 1` and `y = 1`:
`domain()`, the coefficients `convection`, `reaction`, `DIFFUSION` and
`BOUNDARY`, the exact solution `u` with `u_xy`, `u_t` and `u_xxyy`, the
initial condition `u0`, the boundary data `gd` and `gn`, and the matching
source `g`.

## Example

```python
from ivo.linalg import solve
from ivo.mesher import mesher1, read_diagram, write_diagram
from ivo.problem import Data, Equation, Initial
from ivo.sparse import Sparse
from ivo import square

A = Sparse(2, 2)
A[0, 0] = 4.0
A[1, 1] = 2.0
x = solve(A, [8.0, 2.0])   # approximately [2.0, 1.0]

print(mesher1(0.0, 1.0, 4))  # [0.0, 0.25, 0.5, 0.75, 1.0]

write_diagram("square.p2", [square.domain()])
cells = read_diagram("square.p2")

equation = Equation(square.convection, square.DIFFUSION, square.reaction)
data = Data(square.g, square.gd, square.gn)
initial = Initial(square.u0)
```

## What the package does not do

The package provides the pieces listed above and nothing beyond them. It
does not build space-time meshes of elements, generate polygonal diagrams
(such as Voronoi meshes of a domain), evaluate basis functions or
quadrature rules, assemble stiffness matrices or forcing vectors, solve a
space-time problem slab by slab, compute error norms or write solution
visualizations. It has no command-line programs.