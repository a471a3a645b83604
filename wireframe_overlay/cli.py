#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import math
import sys

from PIL import Image

from .canvas import Canvas
from .color import BLACK, GREEN, parse_hex_color
from .config import TexcoordConfig, WireframeConfig
from .errors import MeshError
from .log import configure_logging
from .math_utils import Mat4, Viewport
from .mesh import Mesh
from .renderer import draw_texcoords, draw_wireframe

logger = logging.getLogger(__name__)


def _parse_size(text):
    try:
        w, h = (int(v) for v in text.lower().split('x'))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {text!r}")
    return w, h


def _parse_color(text):
    rgba = parse_hex_color(text)
    if rgba is None:
        raise argparse.ArgumentTypeError(f"expected #RRGGBB or #RRGGBBAA, got {text!r}")
    return rgba


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s -o cube.png                                 Demo cube (no model needed)
  %(prog)s head.obj -o head.png --yaw 30 --pitch 10    Orbit the camera
  %(prog)s head.obj -o head.png --ortho --size 1024x768
  %(prog)s head.obj -o uv.png --uv                     Texture layout
"""
    parser = argparse.ArgumentParser(
        prog="wireframe-overlay",
        description="Render a mesh wireframe or its UV layout to a PNG",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to .obj file")
    parser.add_argument("-o", "--output", required=True,
                        help="PNG file to write")
    parser.add_argument("--uv", action="store_true",
                        help="Draw the texture coordinates instead of the wireframe")
    parser.add_argument("--size", type=_parse_size, default=None,
                        help="Canvas size WIDTHxHEIGHT (default: 640x480, 512x512 with --uv)")
    parser.add_argument("--color", type=_parse_color, default=GREEN,
                        help="Wireframe color in hex #RRGGBB[AA] (default: #00FF00)")
    parser.add_argument("--bg-color", type=_parse_color, default=BLACK,
                        help="Background color in hex #RRGGBB[AA] (default: #000000)")
    parser.add_argument("--yaw", type=float, default=0.0,
                        help="Camera rotation around the Y axis in degrees")
    parser.add_argument("--pitch", type=float, default=0.0,
                        help="Camera rotation around the X axis in degrees")
    parser.add_argument("--fov", type=float, default=60.0,
                        help="Vertical field of view in degrees (default: 60)")
    parser.add_argument("--ortho", action="store_true",
                        help="Orthographic instead of perspective projection")
    parser.add_argument("--log-level", default="WARNING",
                        help="Logging level (default: WARNING)")
    return parser.parse_args(argv)


def orbit_camera(mesh: Mesh, yaw_deg: float, pitch_deg: float, aspect: float,
                 fov: float = 60.0, ortho: bool = False):
    """
    Model-view and projection matrices framing the whole mesh.

    The mesh is centered on its bounding box, rotated by yaw then pitch and
    pushed back along -z far enough to fit the vertical field of view.
    """
    if mesh.vertices:
        lo = [min(v[i] for v in mesh.vertices) for i in range(3)]
        hi = [max(v[i] for v in mesh.vertices) for i in range(3)]
    else:
        lo, hi = [-1.0] * 3, [1.0] * 3
    center = [(a + b) / 2 for a, b in zip(lo, hi)]
    radius = max(math.dist(lo, hi) / 2, 1e-6)

    distance = radius / math.sin(math.radians(fov) / 2.0)
    modelview = (Mat4.translation(0, 0, -distance)
                 @ Mat4.rotation_x(math.radians(pitch_deg))
                 @ Mat4.rotation_y(math.radians(yaw_deg))
                 @ Mat4.translation(-center[0], -center[1], -center[2]))

    near = max(distance - radius, 1e-3)
    far = distance + radius
    if ortho:
        projection = Mat4.ortho(-radius * aspect, radius * aspect, -radius, radius, near, far)
    else:
        projection = Mat4.perspective(fov, aspect, near, far)
    return modelview, projection


def run(args) -> int:
    try:
        mesh = Mesh.from_obj(args.model) if args.model else Mesh.cube()
    except (OSError, MeshError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.uv:
            w, h = args.size or (512, 512)
            canvas = draw_texcoords(mesh, TexcoordConfig(width=w, height=h, background=args.bg_color))
        else:
            w, h = args.size or (640, 480)
            canvas = Canvas(w, h, fill=args.bg_color)
            modelview, projection = orbit_camera(
                mesh, args.yaw, args.pitch, w / h, fov=args.fov, ortho=args.ortho)
            draw_wireframe(canvas, mesh, modelview, projection,
                           Viewport.for_canvas(canvas), WireframeConfig(color=args.color))
    except MeshError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    Image.fromarray(canvas.pixels).save(args.output)
    logger.info("wrote %s (%dx%d)", args.output, canvas.width, canvas.height)
    return 0


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
