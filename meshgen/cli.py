"""Command line entry point: generate a sphere mesh, analyse it and report."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .connectivity import compute_node_adjacency_for_mesh
from .geometry_analyzer import GeometryAnalyzer
from .icosphere import generate_icosphere
from .mesh_utils import check_mesh_integrity, check_triangle_orientation_strict
from .writers import write_txt, write_vtk

USAGE = "Usage: meshgen --ndiv N [--write] [--threads N] [--log path]"
OUTPUT_DIR = "../output/"
QUAD_ORDER = 6


class UsageError(Exception):
    """Raised for an unknown, incomplete or malformed command line flag."""


@dataclass
class Options:
    ndiv: int = -1
    write_files: bool = False
    threads: int = 8
    log_path: str = ""


def _int_value(flag: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise UsageError(f"Invalid integer for {flag}: {value}") from None


def _parse(argv: Sequence[str]) -> Options:
    options = Options()
    args = iter(argv)
    for arg in args:
        if arg == "--write":
            options.write_files = True
            continue
        if arg not in ("--ndiv", "--threads", "--log"):
            raise UsageError(f"Unknown or incomplete flag: {arg}")
        value = next(args, None)
        if value is None:
            raise UsageError(f"Unknown or incomplete flag: {arg}")
        if arg == "--ndiv":
            options.ndiv = _int_value(arg, value)
        elif arg == "--threads":
            options.threads = _int_value(arg, value)
        else:
            options.log_path = value
    return options


def _append_log(path: str, options: Options, mesh, analyzer, mesh_time, geom_time) -> None:
    log_file = Path(path)
    if log_file.parent != Path("") and not log_file.parent.exists():
        log_file.parent.mkdir(parents=True)
    c = analyzer.surface_centroid
    line = (
        f"Ndiv={options.ndiv}, Mode=serial, Threads={options.threads}"
        f", MeshTime={mesh_time:e}, GeometryTime={geom_time:e}"
        f", Npts={mesh.num_nodes}, Nelm={mesh.num_elements}"
        f", SurfaceArea={analyzer.total_area:f}, Volume={analyzer.total_volume:f}"
        f", Centroid=[{c.x:e} {c.y:e} {c.z:e}]\n"
    )
    try:
        with open(log_file, "a", encoding="utf-8") as handle:
            handle.write(line)
    except OSError:
        print(f"Warning: could not open {path} for writing.", file=sys.stderr)
        return
    print(f"Log written to: {path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run mesh generation and analysis; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = _parse(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    if options.ndiv < 0:
        print("Error: Subdivision level (--ndiv) must be specified.", file=sys.stderr)
        return 1

    print(
        f"Running mesh generation with Ndiv = {options.ndiv}, "
        f"using {options.threads} threads..."
    )

    t_mesh_start = time.perf_counter()
    mesh = generate_icosphere(options.ndiv, True)
    mesh_time = time.perf_counter() - t_mesh_start

    t_geom_start = time.perf_counter()
    analyzer = GeometryAnalyzer()
    analyzer.compute(mesh, QUAD_ORDER)
    geom_time = time.perf_counter() - t_geom_start

    print("\n=== Mesh Statistics ===")
    print(f"Subdivision level (Ndiv): {options.ndiv}")
    print(f"Points: {mesh.num_nodes}, Elements: {mesh.num_elements}")

    print("\n=== Timing ===")
    print(f"Mesh generation took {mesh_time:g} seconds.")
    print(f"Compute Mesh took {geom_time:g} seconds.")

    print("\n=== Geometry Summary ===")
    analyzer.print_summary(mesh, 5)
    analyzer.check_element_quality(mesh, QUAD_ORDER)

    print("\n=== Mesh Integrity Check ===")
    if not check_mesh_integrity(mesh):
        print("Mesh integrity check FAILED.", file=sys.stderr)
        return 1
    print("Mesh integrity check passed.")

    print("\n=== Triangle Orientation Check ===")
    if not check_triangle_orientation_strict(mesh):
        print("Orientation check FAILED: Some triangles are not CCW.", file=sys.stderr)
        return 1
    print("All triangles are properly counter-clockwise (CCW).")

    if options.log_path:
        _append_log(options.log_path, options, mesh, analyzer, mesh_time, geom_time)

    print(
        f"Ndiv = {options.ndiv}, Threads = {options.threads}, "
        f"Mesh Time = {mesh_time:e} s, Geometry Time = {geom_time:e} s"
    )

    if options.write_files:
        outdir = Path(OUTPUT_DIR)
        if not outdir.exists():
            try:
                outdir.mkdir()
            except OSError:
                print(f"Failed to create output directory: {OUTPUT_DIR}", file=sys.stderr)
                return 1
            print(f"Created output directory at {OUTPUT_DIR}")

        compute_node_adjacency_for_mesh(mesh)
        write_txt(mesh, analyzer, outdir)

        vtk_path = OUTPUT_DIR + "mesh.vtk"
        print(f"Writing VTK to: {vtk_path}")
        print(
            f"Number of elements = {mesh.num_elements}, "
            f"Number of vnc = {len(analyzer.element_normals)}, "
            f"Number of crvmel = {len(analyzer.element_curvature)}"
        )
        write_vtk(mesh, analyzer, vtk_path)
        print("Mesh written to output/ directory.")

    return 0


if __name__ == "__main__":
    sys.exit(main())