"""Six-node triangle meshes of the unit sphere, with connectivity, geometry analysis and text/VTK output."""

__version__ = "0.1.0"