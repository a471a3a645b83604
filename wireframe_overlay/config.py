#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from dataclasses import dataclass
from typing import Optional, Tuple

from .canvas import Canvas
from .color import BLACK, BLUE, GREEN

# Edge color of the UV overlay. Fixed, not part of TexcoordConfig.
TEXCOORD_COLOR = BLUE

DEFAULT_TEXCOORD_SIZE = 512


@dataclass
class WireframeConfig:
    """Options for draw_wireframe."""
    color: Tuple[int, int, int, int] = GREEN


@dataclass
class TexcoordConfig:
    """
    Options for draw_texcoords.

    canvas: draw into this canvas (it is also what gets returned). When None
            a fresh width x height canvas filled with `background` is used.
    """
    canvas: Optional[Canvas] = None
    width: int = DEFAULT_TEXCOORD_SIZE
    height: int = DEFAULT_TEXCOORD_SIZE
    background: Tuple[int, int, int, int] = BLACK

    def target_canvas(self) -> Canvas:
        if self.canvas is not None:
            return self.canvas
        return Canvas(self.width, self.height, fill=self.background)
