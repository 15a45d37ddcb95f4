"""
Zoom-to-fit for a rectangle dragged on the canvas.
"""

from .viewport import pixel_to_complex


def _check_corner(corner, width, height):
    x, y = corner
    # The far edge (x == width) is a valid rectangle corner.
    if not (0 <= x <= width and 0 <= y <= height):
        raise ValueError(f"Corner {corner} is outside the {width}x{height} canvas")
    return int(x), int(y)


def selection_size(corner1, corner2):
    """Width and height in pixels of the rectangle spanned by two corners."""
    (x1, y1), (x2, y2) = corner1, corner2
    return abs(x1 - x2), abs(y1 - y2)


def zoom_box(corner1, corner2, canvas, viewport):
    """
    Center on the dragged rectangle and zoom so it fills the canvas.

    The zoom factor is the smaller of the two axis ratios, so the whole
    selection stays visible. A selection with zero width or height only
    recenters.

    Args:
        corner1, corner2: (x, y) pixel corners, in any order
        canvas: (width, height) in pixels
        viewport: The current Viewport

    Returns:
        The new Viewport

    Raises:
        ValueError if a corner is off the canvas or the canvas is empty
    """
    width, height = canvas
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")
    x1, y1 = _check_corner(corner1, width, height)
    x2, y2 = _check_corner(corner2, width, height)

    selected_width, selected_height = selection_size((x1, y1), (x2, y2))
    midpoint = (min((x1 + x2) // 2, width - 1), min((y1 + y2) // 2, height - 1))
    new_center = pixel_to_complex(viewport, canvas, midpoint)

    if selected_width == 0 or selected_height == 0:
        return viewport.center_on(new_center)

    zoom_factor = min(width / selected_width, height / selected_height)
    return viewport.center_on(new_center).zoom_by(zoom_factor)
