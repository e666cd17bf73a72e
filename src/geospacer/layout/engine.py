"""Pure layout routine that spaces items along one axis."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from .axes import Alignment, Axis, alignment_offset, direction_vector


@dataclass
class LayoutRequest:
    """Everything the layout needs for one pass.

    Attributes:
        anchor: World point the row originates from
        axis: Direction to space along
        alignment: Where the row sits relative to the anchor
        spacing: Gap inserted between adjacent items (negative overlaps)
        extents: Size of each item along the axis, in sibling order
    """

    anchor: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros(3, dtype=np.float64)
    )
    axis: Axis = Axis.HORIZONTAL
    alignment: Alignment = Alignment.CENTER
    spacing: float = 0.0
    extents: Sequence[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.anchor = np.asarray(self.anchor, dtype=np.float64)
        if isinstance(self.axis, str):
            self.axis = Axis(self.axis)
        if isinstance(self.alignment, str):
            self.alignment = Alignment(self.alignment)


def compute_positions(request: LayoutRequest) -> list[NDArray[np.float64]]:
    """Compute the center of every item in the request.

    Walks the items in order from the anchor. Each item is centered half
    its extent past the current position, then the position advances by
    the extent plus the spacing.

    The alignment offset is derived from the spacing alone,
    ``spacing * (count - 1)``; item extents do not shift the row.

    Args:
        request: Layout parameters and item extents

    Returns:
        One world point per extent, in the same order. Empty for no items.
    """
    count = len(request.extents)
    if count == 0:
        return []

    direction = direction_vector(request.axis)
    total_space = (count - 1) * request.spacing
    offset = alignment_offset(request.alignment, total_space)

    positions = []
    current = request.anchor.copy()
    for extent in request.extents:
        aligned = current + offset * direction
        positions.append(aligned + direction * (extent / 2))
        current = current + direction * (extent + request.spacing)

    return positions
