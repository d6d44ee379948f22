# meshgen

Generate a surface mesh of the unit sphere made of six-node (quadratic)
triangles by repeatedly subdividing an icosahedron, and analyse its geometry.
For a mesh it computes:

- node-to-element and element-to-element connectivity,
- element areas, centroids, normals and mean curvature,
- averaged node normals and area-weighted node curvature,
- total surface area, enclosed volume, surface centroid and the inverse of
  the surface moment-of-inertia matrix.

The results can be written as plain text files or as a legacy ASCII VTK file.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Command line

```
meshgen --ndiv N [--write] [--threads N] [--log path]
```

- `--ndiv N`: the number of subdivision levels. Required. Level 0 is the
  icosahedron itself (20 elements); each level splits every triangle into
  four.
- `--write`: write the text files and `mesh.vtk` into `../output/`
  (relative to the current directory), creating that directory if needed.
- `--threads N`: a number recorded in the report and the log (default 8).
- `--log path`: append a one-line summary of timings, mesh size, area,
  volume and centroid to `path`. Missing parent directories are created.

The command prints mesh statistics, timings, a geometry summary and element
quality diagnostics, then checks that no element repeats a node and that all
triangles are counter-clockwise seen from outside. It exits with status 1 on
an unknown or incomplete flag, a missing `--ndiv`, or a failed check, and 0
otherwise.

### Output files

With `--write`, or by calling `meshgen.writers.write_txt`, these files are
written:

- `node_coords.txt`, `element_nodes.txt`
- `node_to_elements.txt` (each line: count, then element indices)
- `element_neighbors.txt` (`-1` where an edge has no neighbour)
- `element_normals.txt`, `element_curvature.txt`
- `node_normals.txt`, `node_curvature.txt`

`meshgen.writers.write_vtk` writes points, the corner triangles of each
element, element normals and curvature as cell data, and node curvature and
normals as point data.

## Library use

```python
from meshgen.icosphere import generate_icosphere
from meshgen.geometry_analyzer import GeometryAnalyzer
from meshgen.writers import write_vtk

mesh = generate_icosphere(2, True)
analyzer = GeometryAnalyzer()
analyzer.compute(mesh, 6)

print(analyzer.total_area, analyzer.total_volume)
quality = analyzer.check_element_quality(mesh, 6)
print(quality.max_aspect)
write_vtk(mesh, analyzer, "sphere.vtk")
```

`GeometryAnalyzer.compute` raises `ValueError` for an unsupported
quadrature order or a mesh without elements.

The lower-level pieces:

- `meshgen.vec3`: the immutable `Vec3` vector with `dot`, `cross`, `norm`
  and `normalized`, plus `vec3_less`, `vec3_equal` and `dist`.
- `meshgen.quadrature`: `gauss_legendre` (1–6, 8, 12, 20 points) and
  `gauss_triangle` (1, 3, 4, 6, 7, 9, 12, 13 points) rules as
  `QuadratureData`.
- `meshgen.geometry_utility`: `interp_p` interpolates a six-node triangle at
  local coordinates and returns an `Interpolation`;
  `element_shape_parameters` gives the mid-node parameters.
- `meshgen.mesh`: the `Mesh` dataclass.
- `meshgen.icosphere`: `initialize_icosahedron`, `refine_triangles`,
  `construct_elements` and `generate_icosphere`.
- `meshgen.connectivity`: `compute_element_neighbors`,
  `compute_node_adjacency` and `compute_node_adjacency_for_mesh`.
- `meshgen.deduplicate`: `unique_points` and `deduplicate_points`, which
  merge nodes that coincide within 1e-12.
- `meshgen.mesh_utils`: `collect_edges`, `check_mesh_integrity`,
  `check_triangle_orientation_strict` and `mesh_summary`.

## Limitations

- All work runs in a single thread; `--threads` is only recorded in the
  output, it does not change how the mesh is computed.
- Only spheres built from an icosahedron are generated; there is no reader
  for meshes stored in files.