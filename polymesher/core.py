"""Core mesh types: file formats, generation parameters and mesh vertices."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from polymesher.vec import Real, Vec3

PI: Real = 3.14159265358979323846
E: Real = 2.71828182845904523536
DEG_IN_RAD: Real = 0.01745329251994329576923


class FileType(Enum):
    """Supported mesh output formats."""

    WAVEFRONT_OBJ = "wavefront_obj"
    LSDYNA_KEYWORD = "lsdyna_keyword"


@dataclass
class SurfaceParams:
    """Parameters of surface (shell) mesh generation."""

    c_min_dis: Real = 0.2
    c_max_def: Real = 0.3
    c_def: Real = 0.5
    n_smooth_iters: int = 20
    n_delaunay_smooth_iters: int = 3


ShellParams = SurfaceParams


@dataclass
class VolumeParams:
    """Parameters of volume mesh generation."""

    c_min_dis: Real = 0.2
    c_max_def: Real = 0.3
    c_def: Real = 0.4
    n_smooth_iters: int = 20


@dataclass
class PolyhedronParams:
    """Parameters of polyhedron mesh generation."""

    shell: SurfaceParams = field(default_factory=SurfaceParams)
    volume: VolumeParams = field(default_factory=VolumeParams)


@dataclass(eq=False)
class Vert:
    """A mesh vertex with its position and bookkeeping data."""

    pos: Vec3 = field(default_factory=Vec3)
    global_idx: int = 0
    min_adj_tetr_vol: Real = sys.float_info.max
    max_adj_tetr_vol: Real = sys.float_info.min
    belongs_to_sface: Optional[object] = None
    belongs_to_sedge: Optional[object] = None
    belongs_to_svert: Optional[object] = None