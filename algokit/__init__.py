"""Algorithms and data structures: flow, matching, geometry, graphs, hashing and segment trees."""

__version__ = "0.1.0"

__all__ = [
    "array_hash",
    "closure",
    "float_matrix",
    "graphs",
    "heavy_light",
    "hull_dp",
    "intmath",
    "manhattan_mst",
    "matching",
    "maxflow",
    "mincostflow",
    "point",
    "segment_tree",
    "sequences",
    "string_hash",
]