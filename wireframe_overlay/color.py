#
# PROJECT: wireframe-overlay
# MODULE: wireframe_overlay/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

# RGBA, 0-255 per channel
BLACK = (0, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b, a) tuple.
    Accepts: '#RRGGBB', '#RRGGBBAA' or the same without '#' (case-insensitive).
    Alpha defaults to 255 (opaque).
    Returns: (r, g, b, a) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) not in (6, 8):
        return None
    try:
        channels = [int(val[i:i + 2], 16) for i in range(0, len(val), 2)]
    except ValueError:
        return None
    if len(channels) == 3:
        channels.append(255)
    return tuple(channels)
