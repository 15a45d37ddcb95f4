"""
Color mode definitions for escape-index rendering.

Each color mode function returns a numpy array of shape (3,) (uint8)
selecting which RGB channels receive the single-channel ramp
floor(255 * escape_index / sharpness). Points that never escape are
always opaque black, whatever the mode.

To add a new color mode:
1. Define a create_colormap_xxx() function that returns the channel mask
2. Add it to the COLORMAPS dictionary at the bottom of this file
"""

import numpy as np


SELECTION_COLOR = (192, 192, 192, 255)


def create_colormap_red():
    """
    Red colormap: black -> red.

    Ramp written into the red channel only.
    """
    return np.array([1, 0, 0], dtype=np.uint8)


def create_colormap_grayscale():
    """Grayscale colormap: black -> white."""
    return np.array([1, 1, 1], dtype=np.uint8)


# Registry of all available color modes.
# Keys are config names, values are factory functions.
COLORMAPS = {
    'red': create_colormap_red,
    'grayscale': create_colormap_grayscale,
}


def get_colormap(name):
    """
    Get a color mode channel mask by name.

    Raises:
        KeyError if name not found
    """
    try:
        return COLORMAPS[name.lower()]()
    except KeyError:
        raise KeyError(
            f"Unknown color mode {name!r}; expected one of {list_colormap_names()}"
        ) from None


def get_default_colormap():
    """Get the default color mode (red)."""
    return create_colormap_red()


def list_colormap_names():
    """Get list of available color mode names."""
    return list(COLORMAPS.keys())
