#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from typing import Optional

from .canvas import Canvas
from .config import TEXCOORD_COLOR, TexcoordConfig, WireframeConfig
from .culling import is_ccw
from .math_utils import Mat4, Viewport
from .mesh import Mesh
from .projection import project
from .rasterizer import draw_line

logger = logging.getLogger(__name__)


def draw_wireframe(canvas: Canvas, mesh: Mesh, modelview: Mat4, projection: Mat4,
                   viewport: Viewport, config: Optional[WireframeConfig] = None) -> None:
    """
    Draw the mesh as a wireframe into `canvas`, in place.

    Pipeline per triangle, in mesh order:
      1. Project the three vertices to screen space
      2. Backface cull: only triangles wound counter-clockwise on screen
         are kept
      3. Draw edges p1-p2, p2-p3, p3-p1 in config.color

    Later triangles overwrite earlier ones where edges overlap. Raises
    VertexIndexError before drawing anything if a triangle index is out of
    range.
    """
    if config is None:
        config = WireframeConfig()
    mesh.validate()

    color = config.color
    vertices = mesh.vertices
    drawn = 0

    for tri in mesh.triangles:
        p1 = project(vertices[tri[0]], modelview, projection, viewport)
        p2 = project(vertices[tri[1]], modelview, projection, viewport)
        p3 = project(vertices[tri[2]], modelview, projection, viewport)

        if not is_ccw(p1.xy, p2.xy, p3.xy):
            continue

        draw_line(canvas, p1, p2, color)
        draw_line(canvas, p2, p3, color)
        draw_line(canvas, p3, p1, color)
        drawn += 1

    logger.debug("wireframe: %d triangles drawn, %d culled",
                 drawn, len(mesh.triangles) - drawn)


def draw_texcoords(mesh: Mesh, config: Optional[TexcoordConfig] = None) -> Canvas:
    """
    Draw the texture-coordinate layout of the mesh.

    Every triangle is drawn (UV space has no facing). A UV of (u, v) lands
    on pixel (u * width, v * height). Returns the canvas drawn into: the
    one in config.canvas, or a new one (512x512 opaque black by default).
    Raises MissingTexcoordsError before drawing if a referenced vertex has
    no texture coordinate.
    """
    if config is None:
        config = TexcoordConfig()
    mesh.validate()
    mesh.validate_texcoords()

    canvas = config.target_canvas()
    w, h = canvas.width, canvas.height
    texcoords = mesh.texcoords

    for tri in mesh.triangles:
        pts = [(texcoords[i][0] * w, texcoords[i][1] * h) for i in tri]
        for i in range(3):
            draw_line(canvas, pts[i], pts[(i + 1) % 3], TEXCOORD_COLOR)

    logger.debug("texcoords: %d triangles drawn on %r", len(mesh.triangles), canvas)
    return canvas
