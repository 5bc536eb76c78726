from polymesher.core import (
    FileType,
    PolyhedronParams,
    ShellParams,
    SurfaceParams,
    Vert,
    VolumeParams,
)
from polymesher.vec import Vec3


def test_file_types_are_distinct():
    assert len(set(FileType)) == 2
    assert FileType("wavefront_obj") is FileType.WAVEFRONT_OBJ


def test_shell_params_is_surface_params():
    assert ShellParams() == SurfaceParams()


def test_polyhedron_params_defaults_are_independent():
    a = PolyhedronParams()
    b = PolyhedronParams()
    a.shell.n_smooth_iters = 99
    assert b.shell.n_smooth_iters == SurfaceParams().n_smooth_iters
    assert a.volume == VolumeParams()


def test_vert_default_position_is_origin():
    v = Vert()
    assert tuple(v.pos) == (0.0, 0.0, 0.0)


def test_vert_volume_bounds_start_inverted():
    v = Vert(Vec3(1, 2, 3))
    assert v.min_adj_tetr_vol > v.max_adj_tetr_vol
    assert tuple(v.pos) == (1.0, 2.0, 3.0)


def test_vert_position_can_be_moved():
    v = Vert(Vec3(1, 1, 1))
    v.pos = v.pos + Vec3(1, 0, 0)
    assert tuple(v.pos) == (2.0, 1.0, 1.0)
    assert v.belongs_to_sface is None