"""Six-node triangle meshes of the unit sphere built by refining an icosahedron."""

from __future__ import annotations

import time
from typing import Sequence

from .connectivity import compute_element_neighbors, compute_node_adjacency_for_mesh
from .deduplicate import deduplicate_points
from .mesh import Mesh
from .mesh_utils import collect_edges, mesh_summary
from .vec3 import Vec3

Face = tuple[int, int, int]

_A = 0.5257311121191336
_B = 0.8506508083520399

_ICOSAHEDRON_VERTICES = (
    (-_A, 0.0, _B),
    (_A, 0.0, _B),
    (-_A, 0.0, -_B),
    (_A, 0.0, -_B),
    (0.0, _B, _A),
    (0.0, _B, -_A),
    (0.0, -_B, _A),
    (0.0, -_B, -_A),
    (_B, _A, 0.0),
    (-_B, _A, 0.0),
    (_B, -_A, 0.0),
    (-_B, -_A, 0.0),
)

_CCW_FACES: tuple[Face, ...] = (
    (0, 1, 4), (0, 4, 9), (9, 4, 5), (4, 8, 5), (4, 1, 8),
    (8, 1, 10), (8, 10, 3), (5, 8, 3), (5, 3, 2), (2, 3, 7),
    (7, 3, 10), (7, 10, 6), (7, 6, 11), (11, 6, 0), (0, 6, 1),
    (6, 10, 1), (9, 11, 0), (9, 2, 11), (9, 5, 2), (7, 11, 2),
)

_CW_FACES: tuple[Face, ...] = (
    (0, 4, 1), (0, 9, 4), (9, 5, 4), (4, 5, 8), (4, 8, 1), (8, 10, 1), (8, 3, 10),
    (5, 3, 8), (5, 2, 3), (2, 7, 3), (7, 10, 3), (7, 6, 10), (7, 11, 6), (11, 0, 6),
    (0, 1, 6), (6, 1, 10), (9, 0, 11), (9, 11, 2), (9, 2, 5), (7, 2, 11),
)


def _key(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a <= b else (b, a)


def _edge_midpoints(
    coords: Sequence[Vec3], faces: Sequence[Face]
) -> tuple[dict[tuple[int, int], int], list[Vec3]]:
    """Index every edge's new mid node and project the midpoints onto the sphere."""
    edges = collect_edges(faces)
    start = len(coords)
    index = {edge: start + i for i, edge in enumerate(edges)}
    midpoints = [((coords[a] + coords[b]) * 0.5).normalized() for a, b in edges]
    return index, midpoints


def initialize_icosahedron(ccw: bool = True) -> tuple[list[Vec3], list[Face]]:
    """Vertices on the unit sphere and faces of a regular icosahedron.

    With ``ccw`` the faces are wound counter-clockwise seen from outside.
    """
    coords = [Vec3(*vertex).normalized() for vertex in _ICOSAHEDRON_VERTICES]
    faces = list(_CCW_FACES if ccw else _CW_FACES)
    return coords, faces


def refine_triangles(
    coords: Sequence[Vec3], faces: Sequence[Sequence[int]], subdivision_level: int
) -> tuple[list[Vec3], list[Face]]:
    """Split every triangle into four, ``subdivision_level`` times.

    New vertices are edge midpoints pushed out to the unit sphere. The inputs
    are left unchanged; refined copies are returned.
    """
    coords = list(coords)
    current: list[Face] = [(f[0], f[1], f[2]) for f in faces]
    for level in range(subdivision_level):
        t0 = time.perf_counter()
        index, midpoints = _edge_midpoints(coords, current)
        t1 = time.perf_counter()
        coords.extend(midpoints)
        t2 = time.perf_counter()
        refined: list[Face] = []
        for a, b, c in current:
            ab = index[_key(a, b)]
            bc = index[_key(b, c)]
            ca = index[_key(c, a)]
            refined.extend(((a, ab, ca), (ab, b, bc), (ca, bc, c), (ab, bc, ca)))
        t3 = time.perf_counter()
        current = refined
        print(
            f"Level {level}: Midpoint compute = {t1 - t0:g} s, "
            f"Insertion = {t2 - t1:g} s, Triangle update = {t3 - t2:g} s"
        )
    return coords, current


def construct_elements(coords: Sequence[Vec3], faces: Sequence[Sequence[int]]) -> Mesh:
    """Turn three-node triangles into six-node elements with mid-edge nodes on the sphere."""
    node_coords = list(coords)
    index, midpoints = _edge_midpoints(node_coords, faces)
    node_coords.extend(midpoints)
    elements = []
    for face in faces:
        a, b, c = face[0], face[1], face[2]
        elements.append(
            (a, b, c, index[_key(a, b)], index[_key(b, c)], index[_key(c, a)])
        )
    return Mesh(node_coords=node_coords, element_nodes=elements)


def generate_icosphere(subdivision_level: int, ccw: bool = True) -> Mesh:
    """Build a six-node triangle mesh of the unit sphere with its connectivity."""
    coords, faces = initialize_icosahedron(ccw)
    coords, faces = refine_triangles(coords, faces, subdivision_level)
    mesh = construct_elements(coords, faces)
    mesh.subdivision_level = subdivision_level

    t_dedup_start = time.perf_counter()
    print(f"Before deduplicate: {mesh.num_nodes} points")
    deduplicate_points(mesh)
    print(f"After deduplicate: {mesh.num_nodes} points")
    t_dedup_end = time.perf_counter()

    t_conn_start = time.perf_counter()
    compute_node_adjacency_for_mesh(mesh)
    mesh.element_neighbors = compute_element_neighbors(mesh.element_nodes)
    t_conn_end = time.perf_counter()

    print(f"Deduplication time = {t_dedup_end - t_dedup_start:g} s")
    print(f"Connectivity time = {t_conn_end - t_conn_start:g} s")
    print(mesh_summary(mesh, "serial"))
    return mesh