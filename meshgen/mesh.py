"""Surface mesh of six-node triangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vec3 import Vec3

Element6 = tuple[int, int, int, int, int, int]


@dataclass
class Mesh:
    """A surface mesh made of curved six-node triangles.

    Each element lists its three vertices followed by the mid-edge nodes of
    edges (0,1), (1,2) and (2,0). ``node_to_elements[i]`` lists the elements
    touching node ``i``; ``element_neighbors[k][j]`` is the element across
    edge ``j`` of element ``k``, or -1 if there is none.
    """

    subdivision_level: int = 0
    node_coords: list[Vec3] = field(default_factory=list)
    element_nodes: list[Element6] = field(default_factory=list)
    node_to_elements: list[list[int]] = field(default_factory=list)
    element_neighbors: list[tuple[int, int, int]] = field(default_factory=list)
    element_normals: list[Vec3] = field(default_factory=list)
    element_curvature: list[float] = field(default_factory=list)
    node_normals: list[Vec3] = field(default_factory=list)

    @property
    def num_nodes(self) -> int:
        return len(self.node_coords)

    @property
    def num_elements(self) -> int:
        return len(self.element_nodes)

    def element_points(self, index: int) -> tuple[Vec3, ...]:
        """Coordinates of the six nodes of element ``index``."""
        return tuple(self.node_coords[node] for node in self.element_nodes[index])