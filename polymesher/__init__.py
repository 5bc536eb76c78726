"""Vector, matrix and geometry helpers with cuboid shell generation for polyhedral meshing."""

__version__ = "0.1.0"
__all__ = ["vec", "mat", "algs", "logger", "core", "polysgen"]