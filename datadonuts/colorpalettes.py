import numbers
from collections.abc import Mapping
from enum import Enum

import numpy as np

from datadonuts.util import hex_to_color, color_to_hex

__all__ = ["PaletteType", "Palette", "PaletteRegistry",
           "PaletteError", "PaletteNotFound", "InvalidMode", "InvalidCount",
           "CountExceedsDiscretePalette", "InvalidColor",
           "MY_COLORS", "my_colors", "resolve", "my_palettes"]


class PaletteType(Enum):
    """
    The kind of palette requested from `resolve`

    - Discrete: a prefix of the stored colors, for categorical values
      (`scale_*_manual`)
    - Continuous: colors interpolated between the stored control colors,
      for numeric values (`scale_*_gradientn`)
    """
    Discrete = "discrete"
    Continuous = "continuous"


class PaletteError(Exception):
    """Base class for errors in palette lookup"""


class PaletteNotFound(PaletteError, KeyError):
    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"no palette named {self.name!r}"


class InvalidMode(PaletteError, ValueError):
    def __init__(self, mode):
        super().__init__(mode)
        self.mode = mode

    def __str__(self):
        modes = ", ".join(repr(t.value) for t in PaletteType)
        return f"invalid palette type {self.mode!r}; expected one of {modes}"


class InvalidCount(PaletteError, ValueError):
    def __init__(self, count, reason="must be a positive integer"):
        super().__init__(count)
        self.count = count
        self.reason = reason

    def __str__(self):
        return f"invalid number of colors {self.count!r}: {self.reason}"


class CountExceedsDiscretePalette(InvalidCount):
    def __init__(self, count, name, available):
        super().__init__(
            count,
            f"palette {name!r} has only {available} discrete colors")
        self.name = name
        self.available = available


class InvalidColor(PaletteError, ValueError):
    def __init__(self, color, name=None):
        super().__init__(color)
        self.color = color
        self.name = name

    def __str__(self):
        where = f" in palette {self.name!r}" if self.name is not None else ""
        return f"cannot interpolate color {self.color!r}{where}"


class Palette(tuple):
    """
    A sequence of color tokens returned by `resolve`.

    Behaves as a tuple of strings that can be passed to plotting functions
    directly; it also remembers the name of the palette it was made from
    and its kind (`PaletteType`).
    """
    def __new__(cls, colors, name=None, kind=None):
        self = super().__new__(cls, colors)
        self.name = name
        self.kind = kind
        return self

    def __getnewargs__(self):
        return tuple(self), self.name, self.kind

    def __repr__(self):
        kind = self.kind.value if self.kind is not None else None
        return f"Palette({self.name!r}, {kind!r}, {tuple(self)!r})"


class PaletteRegistry(Mapping):
    """
    Read-only mapping from palette names to tuples of color tokens.

    The registry is filled once, at construction; there is no way to add,
    remove or change palettes afterwards. Create a new registry to use
    different palettes, e.g. `PaletteRegistry({**MY_COLORS, "mine": [...]})`.

    Args:
        palettes (Mapping or iterable of pairs): names and their colors
    """
    def __init__(self, palettes=()):
        self._palettes = {
            name: self._checked(name, colors)
            for name, colors in dict(palettes).items()}

    @staticmethod
    def _checked(name, colors):
        if not isinstance(name, str):
            raise TypeError(f"palette name must be a string, not {name!r}")
        if isinstance(colors, str):
            raise TypeError(
                f"palette {name!r} must be a sequence of colors, not a string")
        colors = tuple(colors)
        if not colors:
            raise ValueError(f"palette {name!r} is empty")
        for color in colors:
            if not isinstance(color, str) or not color:
                raise ValueError(
                    f"palette {name!r} contains an invalid color {color!r}")
        return colors

    def __getitem__(self, name):
        try:
            return self._palettes[name]
        except (KeyError, TypeError):
            raise PaletteNotFound(name) from None

    def __iter__(self):
        return iter(self._palettes)

    def __len__(self):
        return len(self._palettes)

    def __repr__(self):
        return f"{type(self).__name__}({self._palettes!r})"


MY_COLORS = PaletteRegistry({
    # ggpubfigs, https://github.com/JLSteenwyk/ggpubfigs
    "contrast_three": ("#004488", "#BB5566", "#DDAA33"),
    # MetBrewer, https://github.com/BlakeRMills/MetBrewer
    "veronese": ("#67322e", "#99610a", "#c38f16", "#6e948c",
                 "#2c6b67", "#175449", "#122c43"),
    # UT brand book
    "ut_pop": ("#f8971f", "#005f86", "#00a9b7"),
})
my_colors = MY_COLORS


def _palette_type(mode):
    try:
        return PaletteType(mode)
    except (ValueError, TypeError):
        raise InvalidMode(mode) from None


def _color_count(count):
    if isinstance(count, bool) or not isinstance(count, numbers.Integral) \
            or count < 1:
        raise InvalidCount(count)
    return int(count)


def _control_colors(name, colors):
    rgb = []
    for color in colors:
        try:
            rgb.append(hex_to_color(color))
        except ValueError:
            raise InvalidColor(color, name) from None
    return np.array(rgb, dtype=float)


def _interpolate(name, colors, n):
    """
    Return `n` colors evenly spaced along the piecewise linear path through
    `colors` in RGB; samples that coincide with a control color return the
    original token.
    """
    rgb = _control_colors(name, colors)
    knots = np.arange(len(colors))
    x = np.linspace(0, len(colors) - 1, n)
    samples = np.column_stack(
        [np.interp(x, knots, rgb[:, i]) for i in range(3)])
    # truncated like R's rgb(maxColorValue=255); the offset absorbs float error
    samples = np.floor(samples + 1e-7).astype(int)
    ramp = []
    for pos, color in zip(x, samples):
        knot = int(round(pos))
        if np.isclose(pos, knot):
            ramp.append(colors[knot])
        else:
            ramp.append(color_to_hex(color))
    return ramp


def resolve(name, mode, count=None, registry=None):
    """
    Return colors of a named palette, prepared for a discrete or a continuous
    scale.

    Use discrete palettes for categorical values, e.g.
    `scale_manual(resolve("ut_pop", "discrete", 3), levels)`, and continuous
    ones as control colors of a gradient, e.g.
    `scale_gradientn(resolve("ut_pop", "continuous"))`.

    Discrete palettes are the first `count` stored colors; asking for more
    colors than the palette has raises `CountExceedsDiscretePalette`.
    Continuous palettes are interpolated linearly in RGB, like R's
    `colorRampPalette`: the first and the last color are the first and the
    last control color, and a single requested color is the first control
    color.

    Args:
        name (str): palette name
        mode (PaletteType or str): "discrete" or "continuous"
        count (int or None): number of colors; if None, the number of colors
            stored in the palette
        registry (Mapping or None): palettes to choose from; defaults to
            `MY_COLORS`

    Returns:
        Palette: a tuple of color tokens, tagged with `name` and `kind`
    """
    if registry is None:
        registry = MY_COLORS
    elif not isinstance(registry, PaletteRegistry):
        registry = PaletteRegistry(registry)
    colors = registry[name]
    kind = _palette_type(mode)
    n = len(colors) if count is None else _color_count(count)

    if kind is PaletteType.Discrete:
        if n > len(colors):
            raise CountExceedsDiscretePalette(n, name, len(colors))
        out = colors[:n]
    elif len(colors) == 1:
        out = colors * n
    else:
        out = _interpolate(name, colors, n)
    return Palette(out, name, kind)


my_palettes = resolve
