import math

import pytest

from meshgen.geometry_analyzer import GeometryAnalyzer
from meshgen.icosphere import generate_icosphere
from meshgen.writers import write_txt, write_vtk


@pytest.fixture(scope="module")
def sphere():
    mesh = generate_icosphere(0)
    analyzer = GeometryAnalyzer()
    analyzer.compute(mesh, 6)
    return mesh, analyzer


def _read(path):
    return path.read_text(encoding="utf-8").splitlines()


def _floats(line):
    return [float(v) for v in line.split()]


def test_write_txt_node_coords(sphere, tmp_path):
    mesh, analyzer = sphere
    write_txt(mesh, analyzer, tmp_path)
    lines = _read(tmp_path / "node_coords.txt")
    assert len(lines) == mesh.num_nodes
    for line, point in zip(lines, mesh.node_coords):
        values = _floats(line)
        assert all(math.isclose(v, p, abs_tol=1e-5) for v, p in zip(values, point))


def test_write_txt_connectivity(sphere, tmp_path):
    mesh, analyzer = sphere
    write_txt(mesh, analyzer, tmp_path)
    elements = [tuple(int(v) for v in line.split()) for line in _read(tmp_path / "element_nodes.txt")]
    assert elements == [tuple(e) for e in mesh.element_nodes]

    neighbors = [tuple(int(v) for v in line.split()) for line in _read(tmp_path / "element_neighbors.txt")]
    assert neighbors == [tuple(r) for r in mesh.element_neighbors]

    adjacency_lines = (tmp_path / "node_to_elements.txt").read_text().split("\n")[:-1]
    assert len(adjacency_lines) == mesh.num_nodes
    for line, row in zip(adjacency_lines, mesh.node_to_elements):
        assert line.endswith(" ")
        values = [int(v) for v in line.split()]
        assert values[0] == len(row)
        assert values[1:] == row


def test_write_txt_curvature_precision(sphere, tmp_path):
    mesh, analyzer = sphere
    write_txt(mesh, analyzer, tmp_path)
    for name, expected in (
        ("element_curvature.txt", analyzer.element_curvature),
        ("node_curvature.txt", analyzer.node_curvature),
    ):
        lines = _read(tmp_path / name)
        assert len(lines) == len(expected)
        for line, value in zip(lines, expected):
            assert len(line.split(".")[1]) == 12
            assert math.isclose(float(line), value, abs_tol=1e-11)


def test_write_txt_normals(sphere, tmp_path):
    mesh, analyzer = sphere
    write_txt(mesh, analyzer, tmp_path)
    node_lines = _read(tmp_path / "node_normals.txt")
    elem_lines = _read(tmp_path / "element_normals.txt")
    assert len(node_lines) == mesh.num_nodes
    assert len(elem_lines) == mesh.num_elements
    for line, normal in zip(elem_lines, analyzer.element_normals):
        assert all(math.isclose(v, n, abs_tol=1e-5) for v, n in zip(_floats(line), normal))


def test_write_txt_missing_directory_raises(sphere, tmp_path):
    mesh, analyzer = sphere
    with pytest.raises(OSError):
        write_txt(mesh, analyzer, tmp_path / "absent")


def test_write_vtk_structure(sphere, tmp_path):
    mesh, analyzer = sphere
    target = tmp_path / "mesh.vtk"
    write_vtk(mesh, analyzer, target)
    lines = _read(target)
    assert lines[:4] == [
        "# vtk DataFile Version 3.0",
        "Sphere Mesh with Geometry",
        "ASCII",
        "DATASET POLYDATA",
    ]
    n, e = mesh.num_nodes, mesh.num_elements
    points_at = lines.index(f"POINTS {n} float")
    polygons_at = lines.index(f"POLYGONS {e} {4 * e}")
    cells_at = lines.index(f"CELL_DATA {e}")
    nodes_at = lines.index(f"POINT_DATA {n}")
    assert points_at < polygons_at < cells_at < nodes_at
    assert polygons_at - points_at == n + 1

    triangles = lines[polygons_at + 1 : polygons_at + 1 + e]
    for line, element in zip(triangles, mesh.element_nodes):
        assert [int(v) for v in line.split()] == [3, *element[:3]]

    assert lines[cells_at + 1] == "VECTORS elem_normals float"
    assert lines[nodes_at + 1] == "SCALARS node_curvature float 1"
    assert lines.index("VECTORS node_normals float") == len(lines) - n - 1