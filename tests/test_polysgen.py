from collections import Counter

import pytest

from polymesher.polysgen import PolyShell, cuboids


def _polyh_points(shell, polyh):
    idxs = {v for f in polyh for v in shell.faces[f]}
    return idxs, [shell.verts[i] for i in idxs]


def test_unit_cube_counts():
    shell = cuboids(1, 1, 1)
    assert len(shell.verts) == 8
    assert len(shell.faces) == 12
    assert shell.polyhs == [list(range(12))]


def test_unit_cube_first_faces():
    shell = cuboids(1, 1, 1)
    assert shell.faces[0] == (0, 4, 6)
    assert shell.faces[1] == (0, 2, 6)


@pytest.mark.parametrize("n", [(1, 1, 1), (2, 3, 1), (3, 2, 2), (2, 2, 2)])
def test_counts_follow_grid(n):
    w, t, h = n
    shell = cuboids(w, t, h)
    assert len(shell.verts) == (w + 1) * (t + 1) * (h + 1)
    assert len(shell.faces) == 2 * (w * h * (t + 1) + t * h * (w + 1) + w * t * (h + 1))
    assert len(shell.polyhs) == w * t * h
    assert all(len(p) == 12 for p in shell.polyhs)


@pytest.mark.parametrize("n", [(3, 2, 2), (2, 3, 1), (1, 2, 3)])
def test_each_polyhedron_is_a_cuboid(n):
    d = (0.5, 2.0, 1.5)
    shell = cuboids(*n, *d)
    for polyh in shell.polyhs:
        idxs, points = _polyh_points(shell, polyh)
        assert len(idxs) == 8
        for axis in range(3):
            coords = [p[axis] for p in points]
            assert max(coords) - min(coords) == pytest.approx(d[axis])


@pytest.mark.parametrize("n", [(3, 2, 2), (2, 2, 2)])
def test_faces_shared_by_at_most_two_polyhedra(n):
    shell = cuboids(*n)
    usage = Counter(f for p in shell.polyhs for f in p)
    assert max(usage.values()) <= 2
    assert set(usage) == set(range(len(shell.faces)))


def test_faces_are_planar_axis_aligned_triangles():
    shell = cuboids(2, 2, 2)
    for face in shell.faces:
        assert len(set(face)) == 3
        points = [shell.verts[i] for i in face]
        assert any(len({p[axis] for p in points}) == 1 for axis in range(3))


def test_spacing_scales_vertices():
    shell = cuboids(2, 1, 3, 0.5, 2.0, 1.5)
    last = shell.verts[-1]
    assert tuple(last) == pytest.approx((1.0, 2.0, 4.5))
    assert tuple(shell.verts[0]) == (0.0, 0.0, 0.0)


def test_empty_grid():
    shell = cuboids(0, 0, 0)
    assert shell == PolyShell(verts=shell.verts, faces=[], polyhs=[])
    assert len(shell.verts) == 1


def test_negative_count_raises():
    with pytest.raises(ValueError):
        cuboids(-1, 1, 1)