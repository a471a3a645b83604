#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


class MeshError(ValueError):
    """Base class for malformed mesh input."""


class VertexIndexError(MeshError, IndexError):
    """A triangle references a vertex index outside the vertex list."""

    def __init__(self, triangle: int, index: int, vertex_count: int):
        self.triangle = triangle
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(
            f"triangle {triangle} references vertex index {index} out of bounds "
            f"(mesh has {vertex_count} vertices)")


class MissingTexcoordsError(MeshError):
    """UV overlay requested for vertices that carry no texture coordinate."""

    def __init__(self, triangle: int, index: int, texcoord_count: int):
        self.triangle = triangle
        self.index = index
        self.texcoord_count = texcoord_count
        super().__init__(
            f"triangle {triangle} references vertex {index} which has no texture "
            f"coordinate (mesh has {texcoord_count} texcoords)")


class ObjParseError(MeshError):
    """A record in a Wavefront OBJ file could not be parsed."""

    def __init__(self, filename, lineno: int, reason: str):
        self.filename = str(filename)
        self.lineno = lineno
        super().__init__(f"{self.filename}:{lineno}: {reason}")
