"""Named RGB colors and the gradient used to tint sampled surfaces."""
from __future__ import annotations

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 128, 0)
BLUE: Color = (0, 0, 255)
YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)
MAGENTA: Color = (255, 0, 255)

# Softer tones used for families of edges / vertices
SOFT_RED: Color = (255, 100, 100)
SOFT_GREEN: Color = (100, 255, 100)
SOFT_BLUE: Color = (100, 100, 255)
SOFT_YELLOW: Color = (255, 255, 100)
SOFT_MAGENTA: Color = (255, 100, 255)

SOFT_PALETTE: tuple[Color, ...] = (SOFT_RED, SOFT_GREEN, SOFT_BLUE, SOFT_YELLOW, SOFT_MAGENTA)


def gradient(t: float) -> Color:
    """
    Map ``t`` in [0, 1] onto a blue -> green -> red ramp.

    Values outside the range are clamped.
    """
    t = min(1.0, max(0.0, t))
    r = int(255 * min(1.0, t * 2))
    g = int(255 * (1.0 - abs(t - 0.5) * 2))
    b = int(255 * min(1.0, (1.0 - t) * 2))
    return r, g, b
