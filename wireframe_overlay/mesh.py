#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .errors import MissingTexcoordsError, ObjParseError, VertexIndexError

logger = logging.getLogger(__name__)


class Mesh:
    """
    Triangle mesh as consumed by the renderers.

    vertices:  list of (x, y, z) or homogeneous (x, y, z, w) positions
    triangles: list of (i0, i1, i2) vertex indices
    texcoords: None, or one (u, v) per vertex; u grows right, v grows down.
               Entries for vertices no triangle references may be None.
    """

    def __init__(self, vertices=None, triangles=None, texcoords=None):
        self.vertices = [tuple(float(c) for c in v) for v in ([] if vertices is None else vertices)]
        self.triangles = [tuple(int(i) for i in t) for t in ([] if triangles is None else triangles)]
        if texcoords is None:
            self.texcoords = None
        else:
            self.texcoords = [None if uv is None else (float(uv[0]), float(uv[1]))
                              for uv in texcoords]
        for n, tri in enumerate(self.triangles):
            if len(tri) != 3:
                raise ValueError(f"triangle {n} has {len(tri)} indices, expected 3")

    def __repr__(self):
        uv = "uv" if self.texcoords is not None else "no uv"
        return f"Mesh({len(self.vertices)} vertices, {len(self.triangles)} triangles, {uv})"

    def validate(self):
        """Raise VertexIndexError if any triangle index is out of range."""
        count = len(self.vertices)
        for n, tri in enumerate(self.triangles):
            for idx in tri:
                if idx < 0 or idx >= count:
                    raise VertexIndexError(n, idx, count)

    def validate_texcoords(self):
        """Raise MissingTexcoordsError unless every referenced vertex has a UV."""
        texcoords = self.texcoords or []
        count = len(texcoords)
        for n, tri in enumerate(self.triangles):
            for idx in tri:
                if idx < 0 or idx >= count or texcoords[idx] is None:
                    raise MissingTexcoordsError(n, idx, count)

    @classmethod
    def cube(cls):
        """Unit cube centered at origin, outward faces wound counter-clockwise."""
        vertices = [
            [-1, -1, -1], [ 1, -1, -1], [ 1,  1, -1], [-1,  1, -1],
            [-1, -1,  1], [ 1, -1,  1], [ 1,  1,  1], [-1,  1,  1],
        ]
        quads = [
            [4, 5, 6, 7],  # +z
            [0, 3, 2, 1],  # -z
            [0, 4, 7, 3],  # -x
            [1, 2, 6, 5],  # +x
            [3, 7, 6, 2],  # +y
            [0, 1, 5, 4],  # -y
        ]
        triangles = []
        for a, b, c, d in quads:
            triangles.append((a, b, c))
            triangles.append((a, c, d))
        # Planar UVs, projected along z
        texcoords = [((x + 1) / 2, (1 - y) / 2) for x, y, _z in vertices]
        return cls(vertices, triangles, texcoords)

    @classmethod
    def from_obj(cls, filename):
        """
        Load a Wavefront OBJ file.

        Reads 'v', 'vt' and 'f' records; other records are ignored. The file
        is read as UTF-8; undecodable bytes only matter if they land in a
        record, where they fail to parse like any other garbage. Polygons
        are fan-triangulated. OBJ texture space has v pointing up, so it is
        flipped to image orientation. A vertex used with two different
        texture coordinates is duplicated so every vertex has exactly one UV.
        """
        positions = []
        uvs = []
        faces = []  # list of [(v_idx, vt_idx or None), ...]

        with open(filename, 'r', encoding='utf-8', errors='replace') as f:
            for lineno, line in enumerate(f, start=1):
                parts = line.split()
                if not parts:
                    continue
                tag = parts[0]
                try:
                    if tag == 'v':
                        if len(parts) < 4:
                            raise ValueError("vertex needs 3 coordinates")
                        positions.append(tuple(float(x) for x in parts[1:4]))
                    elif tag == 'vt':
                        u = float(parts[1])
                        v = float(parts[2]) if len(parts) > 2 else 0.0
                        uvs.append((u, 1.0 - v))
                    elif tag == 'f':
                        face = [_parse_face_vertex(tok, len(positions), len(uvs))
                                for tok in parts[1:]]
                        if len(face) < 3:
                            raise ValueError("face needs at least 3 vertices")
                        faces.append(face)
                except (ValueError, IndexError) as e:
                    raise ObjParseError(filename, lineno, str(e)) from e

        mesh = cls._from_obj_records(positions, uvs, faces)
        logger.debug("loaded %s: %d vertices, %d triangles", filename,
                     len(mesh.vertices), len(mesh.triangles))
        return mesh

    @classmethod
    def _from_obj_records(cls, positions, uvs, faces):
        vertices = list(positions)
        texcoords = [None] * len(positions)
        split = {}  # (v_idx, vt_idx) -> vertex index, for seam duplicates
        has_uv = False

        def resolve(v_idx, vt_idx):
            nonlocal has_uv
            if vt_idx is None:
                return v_idx
            has_uv = True
            uv = uvs[vt_idx]
            if texcoords[v_idx] is None or texcoords[v_idx] == uv:
                texcoords[v_idx] = uv
                return v_idx
            key = (v_idx, vt_idx)
            if key not in split:
                split[key] = len(vertices)
                vertices.append(positions[v_idx])
                texcoords.append(uv)
            return split[key]

        triangles = []
        for face in faces:
            idx = [resolve(v, vt) for v, vt in face]
            for i in range(1, len(idx) - 1):
                triangles.append((idx[0], idx[i], idx[i + 1]))

        return cls(vertices, triangles, texcoords if has_uv else None)


def _resolve_obj_index(token: str, count: int, kind: str) -> int:
    """OBJ indices are 1-based; negative ones count back from the end."""
    i = int(token)
    if i > 0:
        idx = i - 1
    elif i < 0:
        idx = count + i
    else:
        raise ValueError(f"{kind} index 0 is not valid")
    if idx < 0 or idx >= count:
        raise ValueError(f"{kind} index {i} out of range ({count} defined)")
    return idx


def _parse_face_vertex(token: str, n_positions: int, n_uvs: int):
    """Parse 'v', 'v/vt', 'v/vt/vn' or 'v//vn' into (v_idx, vt_idx or None)."""
    fields = token.split('/')
    v_idx = _resolve_obj_index(fields[0], n_positions, "vertex")
    vt_idx = None
    if len(fields) > 1 and fields[1]:
        vt_idx = _resolve_obj_index(fields[1], n_uvs, "texcoord")
    return v_idx, vt_idx
