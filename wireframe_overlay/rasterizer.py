#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

import numpy as np

from .canvas import Canvas


def _round_px(v: float) -> int:
    return math.floor(v + 0.5)


def clip_segment(x1, y1, x2, y2, x_max, y_max):
    """
    Liang-Barsky clip of a segment against the box [0, x_max] x [0, y_max].
    Returns the clipped (x1, y1, x2, y2) or None if nothing is left.
    """
    dx = x2 - x1
    dy = y2 - y1
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x1), (dx, x_max - x1), (-dy, y1), (dy, y_max - y1)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1: return None
            if t > t0: t0 = t
        else:
            if t < t0: return None
            if t < t1: t1 = t
    return (x1 + t0 * dx, y1 + t0 * dy, x1 + t1 * dx, y1 + t1 * dy)


def draw_line(canvas: Canvas, p1, p2, color):
    """
    Draws a line using the DDA algorithm.
    p1, p2 are (x, y[, ...]) in pixel space; only x and y are used. Endpoints
    are rounded to the nearest pixel and both are included. The segment is
    clipped to the canvas first, so finite endpoints may lie anywhere;
    non-finite ones (a vertex on the eye plane) draw nothing.
    """
    if not all(math.isfinite(v) for v in (p1[0], p1[1], p2[0], p2[1])):
        return
    x1, y1 = _round_px(p1[0]), _round_px(p1[1])
    x2, y2 = _round_px(p2[0]), _round_px(p2[1])

    clipped = clip_segment(x1, y1, x2, y2, canvas.width - 1, canvas.height - 1)
    if clipped is None:
        return
    x1, y1, x2, y2 = (_round_px(v) for v in clipped)

    dx = x2 - x1
    dy = y2 - y1
    step = max(abs(dx), abs(dy))
    if step == 0:
        canvas.set_pixel(x1, y1, color)
        return

    xs = np.rint(np.linspace(x1, x2, step + 1)).astype(np.intp)
    ys = np.rint(np.linspace(y1, y2, step + 1)).astype(np.intp)
    canvas.pixels[ys, xs] = color
