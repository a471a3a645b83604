#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Mat4, Viewport
from .color import parse_hex_color
from .canvas import Canvas
from .config import WireframeConfig, TexcoordConfig
from .errors import MeshError, VertexIndexError, MissingTexcoordsError, ObjParseError
from .mesh import Mesh
from .projection import project
from .culling import is_ccw, signed_area
from .rasterizer import draw_line
from .renderer import draw_wireframe, draw_texcoords
from .log import configure_logging
