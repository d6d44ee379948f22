"""Element-to-element and node-to-element connectivity."""

from __future__ import annotations

from itertools import groupby
from operator import itemgetter
from typing import Sequence

from .mesh import Mesh

NO_NEIGHBOR = -1


def compute_element_neighbors(
    element_nodes: Sequence[Sequence[int]],
) -> list[tuple[int, int, int]]:
    """Find, for each element, the element across each of its three edges.

    Edge ``j`` joins corners ``j`` and ``(j + 1) % 3``. Edges without a
    partner get ``-1``.
    """
    records = []
    for k, element in enumerate(element_nodes):
        corners = (element[0], element[1], element[2])
        for j in range(3):
            a, b = corners[j], corners[(j + 1) % 3]
            records.append((min(a, b), max(a, b), k, j))
    records.sort()

    neighbors = [[NO_NEIGHBOR] * 3 for _ in element_nodes]
    for _, group in groupby(records, key=itemgetter(0, 1)):
        members = iter(group)
        for first, second in zip(members, members):
            _, _, k1, j1 = first
            _, _, k2, j2 = second
            neighbors[k1][j1] = k2
            neighbors[k2][j2] = k1
    return [tuple(row) for row in neighbors]  # type: ignore[misc]


def compute_node_adjacency(
    element_nodes: Sequence[Sequence[int]], num_nodes: int
) -> list[list[int]]:
    """List, for each node, the elements that reference it, in element order.

    Raises ValueError if an element refers to a node outside ``range(num_nodes)``.
    """
    adjacency: list[list[int]] = [[] for _ in range(num_nodes)]
    for k, element in enumerate(element_nodes):
        for node in element:
            if not 0 <= node < num_nodes:
                raise ValueError(f"Invalid node index {node} in element {k}")
            adjacency[node].append(k)
    return adjacency


def compute_node_adjacency_for_mesh(mesh: Mesh) -> None:
    """Fill ``mesh.node_to_elements`` from the mesh's elements."""
    mesh.node_to_elements = compute_node_adjacency(mesh.element_nodes, mesh.num_nodes)