from itertools import product

import pytest

from meshgen.mesh import Mesh
from meshgen.mesh_utils import (
    check_mesh_integrity,
    check_triangle_orientation_strict,
    collect_edges,
    mesh_summary,
)
from meshgen.vec3 import Vec3


def _octahedron() -> Mesh:
    axes = [Vec3(1, 0, 0), Vec3(-1, 0, 0), Vec3(0, 1, 0), Vec3(0, -1, 0), Vec3(0, 0, 1), Vec3(0, 0, -1)]
    coords = list(axes)
    faces = []
    for sx, sy, sz in product((1, -1), repeat=3):
        a = 0 if sx > 0 else 1
        b = 2 if sy > 0 else 3
        c = 4 if sz > 0 else 5
        faces.append((a, b, c) if sx * sy * sz > 0 else (a, c, b))
    mids: dict[tuple[int, int], int] = {}

    def mid(i, j):
        key = (min(i, j), max(i, j))
        if key not in mids:
            mids[key] = len(coords)
            coords.append(((coords[i] + coords[j]) * 0.5).normalized())
        return mids[key]

    elements = [(a, b, c, mid(a, b), mid(b, c), mid(c, a)) for a, b, c in faces]
    return Mesh(subdivision_level=0, node_coords=coords, element_nodes=elements)


def test_collect_edges_unique_and_ordered():
    edges = collect_edges([(0, 1, 2), (2, 1, 3)])
    assert set(edges) == {(0, 1), (1, 2), (0, 2), (1, 3), (2, 3)}
    assert len(edges) == len(set(edges))
    assert all(a < b for a, b in edges)


def test_collect_edges_octahedron_count_matches_euler():
    mesh = _octahedron()
    edges = collect_edges(mesh.element_nodes)
    vertices = {v for e in mesh.element_nodes for v in e[:3]}
    assert len(vertices) - len(edges) + mesh.num_elements == 2


def test_integrity_passes_for_valid_mesh():
    assert check_mesh_integrity(_octahedron()) is True


def test_integrity_detects_duplicate(capsys):
    mesh = _octahedron()
    mesh.element_nodes[3] = (0, 2, 0, 6, 7, 8)
    assert check_mesh_integrity(mesh) is False
    assert "Duplicate node index 0 in element 3" in capsys.readouterr().err


def test_orientation_passes_for_outward_mesh(capsys):
    assert check_triangle_orientation_strict(_octahedron()) is True
    assert "CCW" in capsys.readouterr().out


def test_orientation_detects_flipped_element(capsys):
    mesh = _octahedron()
    a, b, c, ab, bc, ca = mesh.element_nodes[0]
    mesh.element_nodes[0] = (a, c, b, ca, bc, ab)
    assert check_triangle_orientation_strict(mesh) is False
    assert "Triangle 0 is NOT counter-clockwise" in capsys.readouterr().err


def test_orientation_threshold_can_reject_everything():
    assert check_triangle_orientation_strict(_octahedron(), threshold=1.0) is False


def test_mesh_summary_contents():
    mesh = _octahedron()
    text = mesh_summary(mesh, "serial")
    assert text.splitlines()[0] == "Mesh generation complete (serial)."
    assert "Subdivision level (Ndiv): 0" in text
    assert f"Points: {mesh.num_nodes}, Elements: {mesh.num_elements}" in text


@pytest.mark.parametrize("tri", [(5, 3, 4), (4, 5, 3)])
def test_collect_edges_independent_of_rotation(tri):
    assert set(collect_edges([tri])) == {(3, 5), (3, 4), (4, 5)}