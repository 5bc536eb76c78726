# polymesher

Geometry building blocks for polyhedral mesh generation, in pure Python
with no dependencies outside the standard library.

## What it provides

- `polymesher.vec`: the immutable `Vec2` and `Vec3` vector types. They
  support `+`, `-`, unary `-`, multiplication and division by a scalar,
  indexing and iteration. They also offer `dot`, `cross`, `magnitude`,
  `sqr_magnitude`, `normalized` and `project`. `Vec3` adds
  `project_on_plane`. `Vec2.cross` returns the scalar z component.
- `polymesher.mat`: the immutable `Mat3` 3×3 matrix, stored as three `Vec3`
  rows. It provides `Mat3.identity()`, `Mat3.from_values(nine_values)`,
  `transposed()`, `inversed()`, `+`, `-`, and scaling by a scalar. The
  operator `a @ b` gives the product with another `Mat3`, or with a `Vec3`
  treated as a column vector.
- `polymesher.algs`: geometric predicates and queries.
  - Projections: `project_on_line` and `project_on_plane`.
  - Intersections of rays, lines and segments with planes and triangles.
    The functions that compute a point return `None` when there is no
    intersection.
  - Tests for a point on a triangle (`is_point_on_triangle`) and for a point
    strictly inside a tetrahedron (`is_point_in_tetrahedron`).
  - A triangle–sphere test (`does_triangle_intersect_sphere`).
  - Closest points and distances for points, lines and segments.
  - The closest point of approach of two moving points: `cpa_time` and
    `cpa_distance`.

  `distance_point_to_triangle_on_plane` returns the *squared* distance to
  the triangle's boundary.
- `polymesher.logger`: `Logger` collects description / value / ending
  triples and writes them as an aligned table. Values other than strings
  are formatted with the manipulators `setw` and `setprecision`, which apply
  to the next value only. Pushing a non-string value anywhere but in the
  value position raises `ValueError`. Used as a context manager, the logger
  flushes on exit when it has a stream.
- `polymesher.core`: holds the following.
  - `FileType`: an enum naming the Wavefront OBJ and LS-DYNA keyword formats.
  - The generation parameter dataclasses `SurfaceParams` (alias
    `ShellParams`), `VolumeParams` and `PolyhedronParams`.
  - The mesh `Vert` dataclass.
  - The constants `PI`, `E` and `DEG_IN_RAD`.
- `polymesher.polysgen`: `cuboids(n_x, n_y, n_z, d_x=1.0, d_y=1.0, d_z=1.0)`
  builds a `PolyShell` for a block of cuboids. The shell lists the vertices,
  the triangular faces as vertex-index triples, and the polyhedra as lists
  of twelve face indices each.

## What it does not do

The package has no mesh generator and does not read or write mesh files.
`FileType` and the parameter classes only describe such options; nothing in
the package acts on them. There is no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from polymesher.vec import Vec3
from polymesher import algs

a = Vec3(1.0, 0.0, 0.0)
b = Vec3(0.0, 1.0, 0.0)
print(a.cross(b))                  # Vec3(x=0.0, y=0.0, z=1.0)

hit = algs.does_ray_intersect_triangle(
    Vec3(0.2, 0.2, 1.0), Vec3(0.0, 0.0, -1.0),
    Vec3(0.0, 0.0, 0.0), Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0),
)
print(hit)                         # True
```

```python
from polymesher.mat import Mat3
from polymesher.vec import Vec3

m = Mat3.from_values([2, 0, 0, 0, 4, 0, 0, 0, 8])
print(m.inversed() @ Vec3(2.0, 4.0, 8.0))   # Vec3(x=1.0, y=1.0, z=1.0)
```

```python
from polymesher.polysgen import cuboids

shell = cuboids(2, 1, 1, 1.0, 1.0, 1.0)
print(len(shell.verts), len(shell.faces), len(shell.polyhs))  # 12 22 2
```

```python
import sys
from polymesher.logger import Logger, setprecision

with Logger(sys.stdout) as log:
    log << "Number of vertices" << 12 << "verts"
    log << "Time" << setprecision(3) << 0.25 << "s"
```

This writes:

```
>>  Number of vertices......>>  12 verts
>>  Time....................>>  0.25 s
```