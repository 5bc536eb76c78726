"""Generation of polyhedral shells made of axis-aligned cuboids."""

from __future__ import annotations

from dataclasses import dataclass, field

from polymesher.vec import Real, Vec3


@dataclass
class PolyShell:
    """Vertices, triangular faces and polyhedra given as lists of face indices."""

    verts: list[Vec3] = field(default_factory=list)
    faces: list[tuple[int, int, int]] = field(default_factory=list)
    polyhs: list[list[int]] = field(default_factory=list)


def cuboids(
    n_x: int,
    n_y: int,
    n_z: int,
    d_x: Real = 1.0,
    d_y: Real = 1.0,
    d_z: Real = 1.0,
) -> PolyShell:
    """Build an ``n_x`` by ``n_y`` by ``n_z`` grid of cuboids.

    Each cuboid has sides ``d_x``, ``d_y``, ``d_z``; each square side is split
    into two triangles, so every polyhedron refers to twelve faces.
    """
    if min(n_x, n_y, n_z) < 0:
        raise ValueError("cuboid counts must be non-negative")

    w, t, h = n_x, n_y, n_z
    row = w + 1
    layer = (w + 1) * (t + 1)

    verts = [
        Vec3(d_x * (i % row), d_y * ((i % layer) // row), d_z * (i // layer))
        for i in range(layer * (h + 1))
    ]

    faces: list[tuple[int, int, int]] = []

    for m in range(t * h * (w + 1)):
        a = m + row * (m // (row * t))
        faces.append((a, a + layer, a + layer + row))
        faces.append((a, a + row, a + row + layer))

    for m in range(w * h * (t + 1)):
        a = m + m // w
        faces.append((a, a + 1, a + 1 + layer))
        faces.append((a, a + layer, a + layer + 1))

    for m in range(w * t * (h + 1)):
        a = m + m // w + row * (m // (w * t))
        b = a + 1
        faces.append((a, b, b + w))
        faces.append((b, b + w, b + w + 1))

    x_faces = 2 * h * t * (w + 1)
    xy_faces = 2 * h * (w * (t + 1) + t * (w + 1))

    def polyhedron(i: int) -> list[int]:
        x0 = 2 * (i + i // w)
        y0 = x0 - 2 * (i + i // w) + 2 * (h * t * (w + 1) + i + w * (i // (w * t)))
        y1 = y0 + 2 * w
        z0 = 2 * (h * (w * (t + 1) + t * (w + 1)) + i)
        z1 = z0 + 2 * w * t
        return [
            x0, x0 + 1, x0 + 2, x0 + 3,
            y0, y0 + 1, y1, y1 + 1,
            z0, z0 + 1, z1, z1 + 1,
        ]

    polyhs = [polyhedron(i) for i in range(w * t * h)]
    assert len(faces) == xy_faces + 2 * w * t * (h + 1) and x_faces <= xy_faces

    return PolyShell(verts=verts, faces=faces, polyhs=polyhs)