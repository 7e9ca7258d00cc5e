"""
Simulation of color vision deficiencies

Palettes can be checked for readers with color vision deficiency by
transforming their colors as they would be seen with deuteranomaly,
protanomaly or tritanomaly. The transformations use the matrices from
Machado, Oliveira and Fernandes (2009), "A Physiologically-based Model for
Simulation of Color Vision Deficiency", applied to linear RGB. Partial
severities are a linear blend between the identity and the full matrix.
"""
from collections import OrderedDict

import numpy as np

from datadonuts.util import hex_to_color, color_to_hex, srgb_to_linear, \
    linear_to_srgb, desaturate

__all__ = ["DEFICIENCIES", "simulate_cvd", "deutan", "protan", "tritan",
           "cvd_grid"]

# Machado et al. (2009), severity 1.0
DEFICIENCIES = {
    "deutan": np.array([[0.367322, 0.860646, -0.227968],
                        [0.280085, 0.672501, 0.047413],
                        [-0.011820, 0.042940, 0.968881]]),
    "protan": np.array([[0.152286, 1.052583, -0.204868],
                        [0.114503, 0.786281, 0.099216],
                        [-0.003882, -0.048116, 1.051998]]),
    "tritan": np.array([[1.255528, -0.076749, -0.178779],
                        [-0.078411, 0.930809, 0.147602],
                        [0.004733, 0.691367, 0.303900]]),
}


def _transform(deficiency, severity):
    try:
        full = DEFICIENCIES[deficiency]
    except KeyError:
        raise ValueError(
            f"unknown deficiency {deficiency!r}; expected one of "
            + ", ".join(map(repr, DEFICIENCIES))) from None
    if not 0 <= severity <= 1:
        raise ValueError(f"severity must be between 0 and 1, not {severity!r}")
    return (1 - severity) * np.eye(3) + severity * full


def simulate_cvd(colors, deficiency, severity=1.0):
    """
    Return colors as seen by a person with the given deficiency.

    Args:
        colors (sequence of str): hex color tokens
        deficiency (str): "deutan", "protan" or "tritan"
        severity (float): between 0 (normal vision) and 1 (dichromacy)

    Returns:
        list of hex color tokens
    """
    matrix = _transform(deficiency, severity)
    if not len(colors):
        return []
    lin = srgb_to_linear([hex_to_color(color) for color in colors])
    return [color_to_hex(rgb) for rgb in linear_to_srgb(lin @ matrix.T)]


def deutan(colors, severity=1.0):
    return simulate_cvd(colors, "deutan", severity)


def protan(colors, severity=1.0):
    return simulate_cvd(colors, "protan", severity)


def tritan(colors, severity=1.0):
    return simulate_cvd(colors, "tritan", severity)


def cvd_grid(colors, severity=1.0):
    """
    Return the palette as seen with each deficiency and in greyscale, in the
    order of panels in `colorblindr::cvd_grid`.
    """
    grid = OrderedDict()
    grid["original"] = list(colors)
    for deficiency in DEFICIENCIES:
        grid[deficiency] = simulate_cvd(colors, deficiency, severity)
    grid["desaturated"] = [desaturate(color) for color in colors]
    return grid
