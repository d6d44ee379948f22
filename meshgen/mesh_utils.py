"""Edge collection, integrity checks and summaries for six-node meshes."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from .mesh import Mesh

Edge = tuple[int, int]

DEFAULT_ORIENTATION_THRESHOLD = 1e-12


def _edge(a: int, b: int) -> Edge:
    return (a, b) if a <= b else (b, a)


def collect_edges(triangles: Iterable[Sequence[int]]) -> list[Edge]:
    """Return the unique undirected edges of a triangle list.

    Each edge is given as ``(low, high)``; edges appear in the order they are
    first met.
    """
    seen: dict[Edge, None] = {}
    for tri in triangles:
        a, b, c = tri[0], tri[1], tri[2]
        for edge in (_edge(a, b), _edge(b, c), _edge(c, a)):
            seen.setdefault(edge, None)
    return list(seen)


def check_mesh_integrity(mesh: Mesh) -> bool:
    """Return False if any element repeats a node index, reporting each one."""
    all_good = True
    for k, element in enumerate(mesh.element_nodes):
        seen: set[int] = set()
        for idx in element:
            if idx in seen:
                listing = " ".join(str(node) for node in element)
                print(
                    f"Duplicate node index {idx} in element {k}: [{listing} ]",
                    file=sys.stderr,
                )
                all_good = False
                break
            seen.add(idx)
    return all_good


def check_triangle_orientation_strict(
    mesh: Mesh, threshold: float = DEFAULT_ORIENTATION_THRESHOLD
) -> bool:
    """Check that every element's corner triangle faces away from the origin.

    The normal of corners 0, 1, 2 is compared with the radial direction of
    their centroid; a dot product at or below ``threshold`` marks the element
    as not counter-clockwise.
    """
    all_ccw = True
    for k, element in enumerate(mesh.element_nodes):
        a = mesh.node_coords[element[0]]
        b = mesh.node_coords[element[1]]
        c = mesh.node_coords[element[2]]
        normal = (b - a).cross(c - a).normalized()
        radial = ((a + b + c) / 3.0).normalized()
        dot = normal.dot(radial)
        if dot <= threshold:
            print(
                f"Triangle {k} is NOT counter-clockwise (dot = {dot:g}).",
                file=sys.stderr,
            )
            all_ccw = False

    if all_ccw:
        print("All triangles are correctly oriented (CCW).")
    else:
        print("Some triangles are not CCW. Please fix orientation errors.", file=sys.stderr)
    return all_ccw


def mesh_summary(mesh: Mesh, label: str) -> str:
    """Short multi-line description of a generated mesh."""
    return (
        f"Mesh generation complete ({label}).\n"
        f"Subdivision level (Ndiv): {mesh.subdivision_level}\n"
        f"Points: {mesh.num_nodes}, Elements: {mesh.num_elements}"
    )