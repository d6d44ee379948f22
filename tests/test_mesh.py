import pytest

from meshgen.mesh import Mesh
from meshgen.vec3 import Vec3


def _sample_mesh():
    coords = [Vec3(float(i), float(i * i), -float(i)) for i in range(8)]
    elements = [(0, 1, 2, 3, 4, 5), (2, 6, 7, 5, 1, 0)]
    return Mesh(subdivision_level=1, node_coords=coords, element_nodes=elements)


def test_empty_mesh_counts():
    mesh = Mesh()
    assert mesh.num_nodes == 0
    assert mesh.num_elements == 0


def test_counts_follow_contents():
    mesh = _sample_mesh()
    assert mesh.num_nodes == len(mesh.node_coords)
    assert mesh.num_elements == len(mesh.element_nodes)
    mesh.node_coords.append(Vec3(1.0, 1.0, 1.0))
    assert mesh.num_nodes == len(mesh.node_coords)


def test_element_points_in_element_order():
    mesh = _sample_mesh()
    points = mesh.element_points(1)
    assert points == tuple(mesh.node_coords[i] for i in mesh.element_nodes[1])
    assert points[0] == mesh.node_coords[2]


def test_element_points_out_of_range():
    mesh = _sample_mesh()
    with pytest.raises(IndexError):
        mesh.element_points(5)


def test_default_containers_are_independent():
    first, second = Mesh(), Mesh()
    first.node_coords.append(Vec3())
    assert second.node_coords == []