"""Spacing axes and alignment modes."""

from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray


class Axis(Enum):
    """World direction along which children are spaced.

    - HORIZONTAL: +X, extent read from the bounding-box width
    - VERTICAL: +Y, extent read from the height
    - DEPTH: +Z, extent read from the depth
    """
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DEPTH = "depth"


class Alignment(Enum):
    """Where the arranged row sits relative to the anchor."""
    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


# Mapping from axis to the component index of a position/size vector
AXIS_INDICES: dict[Axis, int] = {
    Axis.HORIZONTAL: 0,
    Axis.VERTICAL: 1,
    Axis.DEPTH: 2,
}


def direction_vector(axis: Axis | str) -> NDArray[np.float64]:
    """Unit vector pointing along the given axis."""
    if isinstance(axis, str):
        axis = Axis(axis)

    direction = np.zeros(3, dtype=np.float64)
    direction[AXIS_INDICES[axis]] = 1.0
    return direction


def axis_component(size: ArrayLike, axis: Axis | str) -> float:
    """Pick the component of a size vector that lies along the axis."""
    if isinstance(axis, str):
        axis = Axis(axis)
    return float(np.asarray(size, dtype=np.float64)[AXIS_INDICES[axis]])


def alignment_offset(alignment: Alignment | str, total_space: float) -> float:
    """Shift applied to every item so the row lands on its alignment.

    Args:
        alignment: Alignment mode (enum or string name)
        total_space: Length of the row to align

    Returns:
        Offset along the axis: -total/2 for center, 0 for left, -total for right
    """
    if isinstance(alignment, str):
        alignment = Alignment(alignment)

    if alignment is Alignment.CENTER:
        return -total_space / 2
    elif alignment is Alignment.RIGHT:
        return -total_space
    return 0.0
