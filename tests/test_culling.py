"""Tests for the screen-space orientation test."""

import itertools
import math

from wireframe_overlay.culling import is_ccw, signed_area

# Screen space, y down: top-left -> bottom-left -> top-right turns counter-clockwise.
CCW = ((0.0, 0.0), (0.0, 10.0), (10.0, 0.0))
CW = ((0.0, 0.0), (10.0, 0.0), (0.0, 10.0))


def test_counter_clockwise_on_screen_is_front_facing() -> None:
    assert is_ccw(*CCW)
    assert signed_area(*CCW) == -100.0


def test_clockwise_on_screen_is_back_facing() -> None:
    assert not is_ccw(*CW)
    assert signed_area(*CW) == 100.0


def test_collinear_points_are_culled() -> None:
    assert not is_ccw((0, 0), (1, 1), (2, 2))
    assert not is_ccw((3, 3), (3, 3), (3, 3))


def test_nan_points_are_culled() -> None:
    assert not is_ccw((math.nan, 0), (0, 10), (10, 0))


def test_cyclic_permutations_keep_orientation() -> None:
    p1, p2, p3 = CCW
    assert is_ccw(p1, p2, p3)
    assert is_ccw(p2, p3, p1)
    assert is_ccw(p3, p1, p2)


def test_single_swap_flips_orientation() -> None:
    for order in itertools.permutations(CCW):
        swaps = sum(1 for a, b in itertools.combinations(range(3), 2)
                    if CCW.index(order[a]) > CCW.index(order[b]))
        assert is_ccw(*order) == (swaps % 2 == 0)


def test_accepts_extra_components() -> None:
    # Depth is ignored when a 3D screen point is passed.
    assert is_ccw((0, 0, 0.3), (0, 10, 0.9), (10, 0, 0.1))
