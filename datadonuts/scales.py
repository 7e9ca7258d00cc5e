"""
Adapters between palettes and matplotlib/seaborn color arguments.

The functions are named after the ggplot2 scales they stand in for in the
workshop scripts: `scale_manual` maps categories to colors and
`scale_gradientn` builds a gradient through control colors.
"""
from matplotlib.colors import LinearSegmentedColormap, ListedColormap, \
    TwoSlopeNorm

__all__ = ["scale_manual", "listed_colormap", "scale_gradientn",
           "scale_gradient", "scale_gradient2", "diverging_norm"]


def _cmap_name(colors, name, default):
    return name or getattr(colors, "name", None) or default


def scale_manual(colors, levels):
    """
    Assign colors to categories in order, for seaborn's `palette` argument
    or matplotlib's `color`.

    Args:
        colors (sequence of str): colors, e.g. a discrete `Palette`
        levels (iterable): categories; for pandas categoricals pass
            `series.cat.categories` to keep their order

    Returns:
        dict from level to color
    """
    levels = list(levels)
    colors = list(colors)
    if len(levels) > len(colors):
        raise ValueError(
            f"insufficient values in manual scale: {len(levels)} needed "
            f"but only {len(colors)} provided")
    return dict(zip(levels, colors))


def listed_colormap(colors, name=None):
    """A colormap with one entry per color, for categorical `c=` values."""
    return ListedColormap(list(colors), name=_cmap_name(colors, name, "manual"))


def scale_gradientn(colors, name=None, n=256):
    """
    A continuous colormap passing evenly through the given colors.

    Typically used with a continuous `Palette`, whose name becomes the name
    of the colormap.
    """
    if not len(colors):
        raise ValueError("at least one color is required")
    name = _cmap_name(colors, name, "gradientn")
    colors = list(colors)
    if len(colors) == 1:
        colors *= 2
    return LinearSegmentedColormap.from_list(name, colors, N=n)


def scale_gradient(low, high, name="gradient", n=256):
    """A two-color sequential colormap"""
    return scale_gradientn([low, high], name, n)


def scale_gradient2(low, mid, high, name="gradient2", n=256):
    """
    A diverging colormap; use with `diverging_norm` to put `mid` at a value
    other than the middle of the data range.
    """
    return scale_gradientn([low, mid, high], name, n)


def diverging_norm(midpoint, vmin=None, vmax=None):
    return TwoSlopeNorm(midpoint, vmin=vmin, vmax=vmax)
