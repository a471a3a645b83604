#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/culling.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#


def signed_area(p1, p2, p3) -> float:
    """Cross product of (p2 - p1) and (p3 - p1); twice the signed triangle area."""
    return ((p2[0] - p1[0]) * (p3[1] - p1[1]) -
            (p2[1] - p1[1]) * (p3[0] - p1[0]))


def is_ccw(p1, p2, p3) -> bool:
    """
    True if the screen-space points wind counter-clockwise as seen on screen.

    Screen y grows downwards, which flips the sign of the cross product:
    counter-clockwise on screen is a negative signed area. Collinear points
    (and NaN coordinates) are not counter-clockwise.
    """
    return signed_area(p1, p2, p3) < 0
