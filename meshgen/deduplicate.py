"""Merging of coincident mesh nodes."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Sequence

from .mesh import Mesh
from .vec3 import Vec3, vec3_equal, vec3_less


def _compare(a: Vec3, b: Vec3) -> int:
    if vec3_less(a, b):
        return -1
    if vec3_less(b, a):
        return 1
    return 0


def unique_points(points: Sequence[Vec3]) -> tuple[list[Vec3], list[int]]:
    """Merge points that coincide within tolerance.

    Returns the unique points in lexicographic order and, for every input
    point, the index of the unique point it was merged into.
    """
    key = cmp_to_key(_compare)
    order = sorted(range(len(points)), key=lambda i: key(points[i]))
    unique: list[Vec3] = []
    remap = [-1] * len(points)
    for i in order:
        point = points[i]
        if not unique or not vec3_equal(unique[-1], point):
            unique.append(point)
        remap[i] = len(unique) - 1
    return unique, remap


def deduplicate_points(mesh: Mesh) -> None:
    """Merge coincident nodes of ``mesh`` in place and renumber its elements."""
    unique, remap = unique_points(mesh.node_coords)
    mesh.element_nodes = [
        tuple(remap[node] for node in element)  # type: ignore[misc]
        for element in mesh.element_nodes
    ]
    mesh.node_coords = unique