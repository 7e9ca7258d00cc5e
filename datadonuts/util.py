"""Various small utilities for working with color tokens"""
import colorsys
import re

import numpy as np

__all__ = ["hex_to_color", "color_to_hex", "srgb_to_linear", "linear_to_srgb",
           "relative_luminance", "lighten", "darken", "desaturate"]

_HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")

# Rec. 709 coefficients of relative luminance in linear RGB
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def color_to_hex(color):
    if len(color) != 3 or any(not 0 <= c <= 255 for c in color):
        raise ValueError(f"invalid RGB color {tuple(color)!r}")
    return "#{:02X}{:02X}{:02X}".format(*(int(c) for c in color))


def hex_to_color(s):
    """
    Convert a hex color token to an RGB triplet of ints in range 0 to 255.

    Accepts `#RGB`, `#RRGGBB` and `#RRGGBBAA`; alpha is ignored.
    """
    match = isinstance(s, str) and _HEX_RE.fullmatch(s)
    if not match:
        raise ValueError(f"invalid hex color {s!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(d * 2 for d in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def srgb_to_linear(rgb):
    """Linearize sRGB values in range 0 to 255; returns floats in [0, 1]"""
    c = np.asarray(rgb, dtype=float) / 255
    return np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)


def linear_to_srgb(lin):
    """Inverse of `srgb_to_linear`; values are clipped and rounded"""
    c = np.clip(np.asarray(lin, dtype=float), 0, 1)
    c = np.where(c <= 0.0031308, 12.92 * c, 1.055 * c ** (1 / 2.4) - 0.055)
    return np.round(255 * c).astype(int)


def relative_luminance(color):
    return float(srgb_to_linear(hex_to_color(color)) @ LUMINANCE_WEIGHTS)


def _check_amount(amount):
    if not 0 <= amount <= 1:
        raise ValueError(f"amount must be between 0 and 1, not {amount!r}")


def _adjust_lightness(color, target, amount):
    _check_amount(amount)
    r, g, b = (c / 255 for c in hex_to_color(color))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    l += (target - l) * amount
    return color_to_hex([round(255 * c) for c in colorsys.hls_to_rgb(h, l, s)])


def lighten(color, amount=0.1):
    """
    Move the lightness of `color` toward white by a relative `amount`;
    0 returns the same color and 1 gives white.
    """
    return _adjust_lightness(color, 1, amount)


def darken(color, amount=0.1):
    """
    Move the lightness of `color` toward black by a relative `amount`;
    0 returns the same color and 1 gives black.
    """
    return _adjust_lightness(color, 0, amount)


def desaturate(color, amount=1):
    """
    Blend `color` toward the grey with the same relative luminance.

    With `amount=1`, the result is a grey that keeps the perceived
    brightness of the color, which is what black-and-white printing shows.
    """
    _check_amount(amount)
    lin = srgb_to_linear(hex_to_color(color))
    grey = np.full(3, lin @ LUMINANCE_WEIGHTS)
    return color_to_hex(linear_to_srgb(lin + (grey - lin) * amount))
