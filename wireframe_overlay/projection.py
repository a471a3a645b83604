#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/projection.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Mat4, Vec3, Viewport


def project(point, modelview: Mat4, projection: Mat4, viewport: Viewport) -> Vec3:
    """
    Map an object-space point to screen space.

    The point is (x, y, z) with an implicit w of 1, or a full homogeneous
    (x, y, z, w). It goes through modelview then projection, is divided by
    clip-space w and the resulting NDC is mapped onto the viewport with y
    flipped (screen origin is top-left, NDC y points up). Depth is mapped
    from [-1, 1] to [0, 1].

    Nothing is validated: w == 0 or singular matrices yield inf / NaN.
    """
    w = point[3] if len(point) > 3 else 1.0
    clip = (projection @ modelview).transform(point[0], point[1], point[2], w)
    ndc = clip[:3] / clip[3]

    vx, vy, vw, vh = viewport
    return Vec3(
        vx + (ndc[0] + 1.0) * 0.5 * vw,
        vy + (1.0 - ndc[1]) * 0.5 * vh,
        (ndc[2] + 1.0) * 0.5,
    )
