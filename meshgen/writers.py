"""Text and legacy VTK output of meshes and their geometry."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from .geometry_analyzer import GeometryAnalyzer
from .mesh import Mesh
from .vec3 import Vec3


def _vec(v: Vec3) -> str:
    return f"{v[0]:g} {v[1]:g} {v[2]:g}"


def _write_lines(path: Path, lines: Iterable[str]) -> None:
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def write_txt(mesh: Mesh, analyzer: GeometryAnalyzer, outdir: str | os.PathLike[str]) -> None:
    """Write node, element, connectivity and geometry tables as text files in ``outdir``."""
    out = Path(outdir)
    _write_lines(out / "node_coords.txt", (_vec(p) for p in mesh.node_coords))
    _write_lines(
        out / "element_nodes.txt",
        (" ".join(str(node) for node in element) for element in mesh.element_nodes),
    )
    _write_lines(
        out / "node_to_elements.txt",
        (
            f"{len(row)} " + "".join(f"{element} " for element in row)
            for row in mesh.node_to_elements
        ),
    )
    _write_lines(
        out / "element_neighbors.txt",
        (" ".join(str(n) for n in row) for row in mesh.element_neighbors),
    )
    _write_lines(out / "element_normals.txt", (_vec(n) for n in analyzer.element_normals))
    _write_lines(
        out / "element_curvature.txt", (f"{c:.12f}" for c in analyzer.element_curvature)
    )
    _write_lines(out / "node_normals.txt", (_vec(n) for n in analyzer.node_normals))
    _write_lines(out / "node_curvature.txt", (f"{c:.12f}" for c in analyzer.node_curvature))
    print(f"TXT files written to: {outdir}")


def _vtk_lines(mesh: Mesh, analyzer: GeometryAnalyzer) -> Iterable[str]:
    yield "# vtk DataFile Version 3.0"
    yield "Sphere Mesh with Geometry"
    yield "ASCII"
    yield "DATASET POLYDATA"

    yield f"POINTS {mesh.num_nodes} float"
    yield from (_vec(p) for p in mesh.node_coords)

    yield f"POLYGONS {mesh.num_elements} {mesh.num_elements * 4}"
    yield from (f"3 {e[0]} {e[1]} {e[2]}" for e in mesh.element_nodes)

    yield f"CELL_DATA {mesh.num_elements}"
    yield "VECTORS elem_normals float"
    yield from (_vec(n) for n in analyzer.element_normals)
    yield "SCALARS curvature float 1"
    yield "LOOKUP_TABLE default"
    yield from (f"{c:g}" for c in analyzer.element_curvature)

    yield f"POINT_DATA {mesh.num_nodes}"
    yield "SCALARS node_curvature float 1"
    yield "LOOKUP_TABLE default"
    yield from (f"{c:g}" for c in analyzer.node_curvature)
    yield "VECTORS node_normals float"
    yield from (_vec(n) for n in analyzer.node_normals)


def write_vtk(mesh: Mesh, analyzer: GeometryAnalyzer, filename: str | os.PathLike[str]) -> None:
    """Write the mesh with element and node geometry as a legacy ASCII VTK file."""
    _write_lines(Path(filename), _vtk_lines(mesh, analyzer))
    print("VTK file written successfully.")