"""Surface geometry of six-node triangle meshes: areas, normals, curvature, moments."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from typing import Iterator, Sequence

import numpy as np

from .geometry_utility import Interpolation, element_shape_parameters, interp_p
from .mesh import Mesh
from .quadrature import gauss_triangle
from .vec3 import Vec3

DEFAULT_QUAD_ORDER = 6
_NORMAL_EPS = 1e-12
_AREA_EPS = 1e-14

# Local coordinates of the six element nodes, given the mid-node parameters.
def _node_coordinates(al: float, be: float, ga: float) -> tuple[tuple[float, float], ...]:
    return (
        (0.0, 0.0),
        (1.0, 0.0),
        (0.0, 1.0),
        (al, 0.0),
        (ga, 1.0 - ga),
        (0.0, be),
    )


def _sum_vectors(vectors: Sequence[Vec3]) -> Vec3:
    return Vec3(
        sum(v.x for v in vectors),
        sum(v.y for v in vectors),
        sum(v.z for v in vectors),
    )


@dataclass(frozen=True)
class ElementQuality:
    """Quality statistics over all elements of a mesh.

    ``nonpositive_jacobians`` counts quadrature points where the surface
    metric is not positive.
    """

    min_area: float
    max_area: float
    min_aspect: float
    max_aspect: float
    nonpositive_jacobians: int

    def report(self) -> str:
        """Human-readable summary of the statistics."""
        lines = [
            "=== Element Quality Diagnostics ===",
            f"Min Element Area: {self.min_area:g}",
            f"Max Element Area: {self.max_area:g}",
            f"Min Aspect Ratio: {self.min_aspect:g}",
            f"Max Aspect Ratio: {self.max_aspect:g}",
        ]
        if self.nonpositive_jacobians > 0:
            lines.append(
                f"{self.nonpositive_jacobians} elements have non-positive "
                "Jacobians (inverted/degenerate)."
            )
        else:
            lines.append("All Jacobians are positive.")
        return "\n".join(lines)


@dataclass
class GeometryAnalyzer:
    """Geometric quantities of a closed surface mesh, filled by :meth:`compute`.

    ``mmat`` holds the inverse of the surface moment-of-inertia matrix about
    ``surface_centroid``.
    """

    element_normals: list[Vec3] = field(default_factory=list)
    element_curvature: list[float] = field(default_factory=list)
    node_normals: list[Vec3] = field(default_factory=list)
    element_area: list[float] = field(default_factory=list)
    element_centroids: list[Vec3] = field(default_factory=list)
    node_curvature: list[float] = field(default_factory=list)
    total_area: float = 0.0
    total_volume: float = 0.0
    surface_centroid: Vec3 = field(default_factory=Vec3)
    mmat: np.ndarray = field(default_factory=lambda: np.zeros((3, 3)))

    def compute(self, mesh: Mesh, quad_order: int = DEFAULT_QUAD_ORDER) -> None:
        """Compute every geometric quantity for ``mesh``.

        Raises ValueError for an unsupported quadrature order or a mesh
        without elements, and numpy.linalg.LinAlgError if the moment matrix
        is singular.
        """
        quad = gauss_triangle(quad_order)
        if mesh.num_elements == 0:
            raise ValueError("cannot analyse a mesh without elements")
        rule = list(zip(quad.xi, quad.eta, quad.triangle_weights))

        self._compute_element_geometry(mesh, rule)
        self._compute_node_curvature(mesh)
        self.mmat = self._compute_moment_matrix(mesh, rule)

    def _elements(self, mesh: Mesh) -> Iterator[tuple[tuple[Vec3, ...], float, float, float]]:
        for k in range(mesh.num_elements):
            nodes = mesh.element_points(k)
            al, be, ga = element_shape_parameters(nodes)
            yield nodes, al, be, ga

    def _compute_element_geometry(
        self, mesh: Mesh, rule: list[tuple[float, float, float]]
    ) -> None:
        normal_sums = [Vec3()] * mesh.num_nodes
        contributions = [0] * mesh.num_nodes
        self.element_area = []
        self.element_centroids = []
        self.element_normals = []
        self.element_curvature = []
        total_area = 0.0
        volume = 0.0
        moment = Vec3()

        for k, (nodes, al, be, ga) in enumerate(self._elements(mesh)):
            area = 0.0
            position_moment = Vec3()
            for xi, eta, weight in rule:
                point = interp_p(nodes, al, be, ga, xi, eta)
                cf = 0.5 * point.hs * weight
                area += cf
                position_moment = position_moment + cf * point.position
                volume += point.position.dot(point.normal) * cf

            total_area += area
            moment = moment + position_moment
            self.element_area.append(area)
            self.element_centroids.append(position_moment / area)

            at_nodes: list[Interpolation] = []
            for node, (xi, eta) in zip(mesh.element_nodes[k], _node_coordinates(al, be, ga)):
                point = interp_p(nodes, al, be, ga, xi, eta)
                at_nodes.append(point)
                normal_sums[node] = normal_sums[node] + point.normal
                contributions[node] += 1

            def cross_dx(i: int) -> Vec3:
                return at_nodes[i].normal.cross(at_nodes[i].dx_dxi)

            def cross_de(i: int) -> Vec3:
                return at_nodes[i].normal.cross(at_nodes[i].dx_deta)

            crv = _sum_vectors(
                [
                    al * cross_dx(0), cross_dx(3), (1.0 - al) * cross_dx(1),
                    -(1.0 - ga) * cross_dx(1), -cross_dx(4), -ga * cross_dx(2),
                    (1.0 - ga) * cross_de(1), cross_de(4), ga * cross_de(2),
                    -be * cross_de(0), -cross_de(5), -(1.0 - be) * cross_de(2),
                ]
            )

            centre = interp_p(nodes, al, be, ga, 1.0 / 3.0, 1.0 / 3.0)
            self.element_normals.append(centre.normal)
            self.element_curvature.append(0.25 * crv.dot(centre.normal) / area)

        self.total_area = total_area
        self.total_volume = volume / 3.0
        self.surface_centroid = moment / total_area
        self.node_normals = [
            _average_normal(total, count) for total, count in zip(normal_sums, contributions)
        ]

    def _compute_node_curvature(self, mesh: Mesh) -> None:
        weighted = [0.0] * mesh.num_nodes
        areas = [0.0] * mesh.num_nodes
        for element, curvature, area in zip(
            mesh.element_nodes, self.element_curvature, self.element_area
        ):
            for node in element:
                weighted[node] += curvature * area
                areas[node] += area
        self.node_curvature = [
            value / area if area > _AREA_EPS else 0.0 for value, area in zip(weighted, areas)
        ]

    def _compute_moment_matrix(
        self, mesh: Mesh, rule: list[tuple[float, float, float]]
    ) -> np.ndarray:
        moment = np.zeros((3, 3))
        identity = np.eye(3)
        centroid = self.surface_centroid
        for nodes, al, be, ga in self._elements(mesh):
            for xi, eta, weight in rule:
                point = interp_p(nodes, al, be, ga, xi, eta)
                cf = 0.5 * point.hs * weight
                xhat = np.array(tuple(point.position - centroid))
                moment += (xhat.dot(xhat) * identity - np.outer(xhat, xhat)) * cf
        return np.linalg.inv(moment)

    def print_summary(self, mesh: Mesh, num_print: int = 5) -> None:
        """Print totals and the first ``num_print`` node and element values."""
        c = self.surface_centroid
        print(f"Total Surface Area: {self.total_area:g}")
        print(f"Total Volume: {self.total_volume:g}")
        print(f"Centroid: ({c.x:g}, {c.y:g}, {c.z:g})")
        print("Inverse of Mmat:")
        for row in self.mmat:
            print(" ".join(f"{value:>12g}" for value in row))

        print(f"\nFirst {num_print} Node Normals (averaged):")
        for i, (p, n) in enumerate(zip(mesh.node_coords[:num_print], self.node_normals)):
            print(
                f"Node {i}: Pos ({p.x:g}, {p.y:g}, {p.z:g}), "
                f"Normal ({n.x:g}, {n.y:g}, {n.z:g})"
            )

        print(f"\nFirst {num_print} Element Normals and Centroids:")
        for i, (cen, n) in enumerate(
            zip(self.element_centroids, self.element_normals[:num_print])
        ):
            print(
                f"Element {i}: Centroid ({cen.x:g}, {cen.y:g}, {cen.z:g}), "
                f"Normal ({n.x:g}, {n.y:g}, {n.z:g})"
            )

        print(f"\nFirst {num_print} Element Curvatures:")
        for i, curvature in enumerate(self.element_curvature[:num_print]):
            print(f"Element {i}: Curvature = {curvature:g}")

    def check_element_quality(
        self, mesh: Mesh, quad_order: int = DEFAULT_QUAD_ORDER
    ) -> ElementQuality:
        """Measure element areas, aspect ratios and Jacobian signs, and print them.

        Requires :meth:`compute` to have been run on the same mesh.
        """
        quad = gauss_triangle(quad_order)
        if len(self.element_area) != mesh.num_elements:
            raise ValueError("element areas are not available; run compute() on this mesh first")

        min_area = sys.float_info.max
        max_area = 0.0
        min_aspect = sys.float_info.max
        max_aspect = 0.0
        flipped = 0

        for k, (nodes, al, be, ga) in enumerate(self._elements(mesh)):
            a_pt, b_pt, c_pt = nodes[0], nodes[1], nodes[2]
            a = (b_pt - a_pt).norm()
            b = (c_pt - b_pt).norm()
            c = (a_pt - c_pt).norm()
            s = 0.5 * (a + b + c)
            tri_area = math.sqrt(max(s * (s - a) * (s - b) * (s - c), 0.0))
            longest = max(a, b, c)
            height = 2.0 * tri_area / longest if tri_area > _AREA_EPS else _AREA_EPS
            aspect = longest / height
            min_aspect = min(min_aspect, aspect)
            max_aspect = max(max_aspect, aspect)

            area = self.element_area[k]
            min_area = min(min_area, area)
            max_area = max(max_area, area)

            for xi, eta in zip(quad.xi, quad.eta):
                if interp_p(nodes, al, be, ga, xi, eta).hs <= 0.0:
                    flipped += 1

        quality = ElementQuality(min_area, max_area, min_aspect, max_aspect, flipped)
        print()
        print(quality.report())
        return quality


def _average_normal(total: Vec3, count: int) -> Vec3:
    if count == 0:
        return total
    mean = total / float(count)
    return mean.normalized() if mean.norm() > _NORMAL_EPS else mean