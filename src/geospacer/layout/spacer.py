"""Spacer component that lays out a node's children along an axis."""

import logging
from dataclasses import dataclass, field
from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..core.node import SceneNode
from .axes import Alignment, Axis, axis_component
from .engine import LayoutRequest, compute_positions

logger = logging.getLogger(__name__)

ExtentFn = Callable[[SceneNode, Axis], float]

# Fields an edit through ObjectSpacer.configure may touch
EDITABLE_SETTINGS = frozenset(
    {"target", "spacing", "spacing_direction", "horizontal_alignment", "extent_of"}
)


def mesh_extent(node: SceneNode, axis: Axis) -> float:
    """Size of a node's world-space mesh bounds along the axis.

    Nodes without a mesh have nothing to measure; they count as zero-width.
    """
    world_mesh = node.world_mesh()
    if world_mesh is None:
        logger.warning("Child object does not have a mesh renderer.")
        return 0.0
    return axis_component(world_mesh.size, axis)


@dataclass
class ObjectSpacer:
    """Places the children of a target node in a row.

    The row starts at the target's world position and runs along
    ``spacing_direction``. Children are measured with ``extent_of`` and
    moved in world space, in sibling order.

    Two entry points trigger a layout: ``on_parameter_changed`` reacts to
    edits and only runs when ``spacing`` changed since it was last seen,
    ``space_objects`` always runs.

    Attributes:
        target: Node whose children are arranged
        spacing: Gap between adjacent children
        spacing_direction: Axis to arrange along
        horizontal_alignment: Where the row sits relative to the target
        extent_of: Measures a child along an axis
    """

    target: SceneNode | None = None
    spacing: float = 0.0
    spacing_direction: Axis = Axis.HORIZONTAL
    horizontal_alignment: Alignment = Alignment.CENTER
    extent_of: ExtentFn = field(default=mesh_extent, repr=False)
    _previous_spacing: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.spacing_direction, str):
            self.spacing_direction = Axis(self.spacing_direction)
        if isinstance(self.horizontal_alignment, str):
            self.horizontal_alignment = Alignment(self.horizontal_alignment)

    def get_items(self) -> list[SceneNode]:
        """Children of the target in sibling order."""
        if self.target is None:
            return []
        return list(self.target.children)

    def get_extent(self, node: SceneNode) -> float:
        """Extent of a child along the spacing direction."""
        return float(self.extent_of(node, self.spacing_direction))

    def apply_position(self, node: SceneNode, point: ArrayLike) -> bool:
        """Move a child so its origin sits at a world point.

        Returns:
            False if the child could not be placed (its parent is collapsed)
        """
        try:
            node.set_world_position(point)
        except ValueError as e:
            logger.warning(f"{e}; leaving it where it is.")
            return False
        logger.debug(f"Placed '{node.name}' at {np.round(point, 6).tolist()}")
        return True

    def space_objects(self) -> list[NDArray[np.float64]]:
        """Lay out the target's children now.

        Returns:
            The world points applied to each child, in sibling order.
            Empty when there is no target or it has no children.
        """
        if self.target is None:
            logger.warning("No game objects parent assigned.")
            return []

        items = self.get_items()
        if not items:
            logger.warning("No child objects found in the game objects parent.")
            return []

        request = LayoutRequest(
            anchor=self.target.world_position,
            axis=self.spacing_direction,
            alignment=self.horizontal_alignment,
            spacing=self.spacing,
            extents=[self.get_extent(item) for item in items],
        )
        positions = compute_positions(request)

        for item, point in zip(items, positions):
            self.apply_position(item, point)

        logger.debug(
            f"Spaced {len(items)} children of '{self.target.name}' "
            f"({self.spacing_direction.value}, {self.horizontal_alignment.value}, "
            f"spacing={self.spacing})"
        )
        return positions

    def on_parameter_changed(self) -> bool:
        """React to a configuration edit.

        Re-lays out only when ``spacing`` differs from the value seen on the
        previous call (0.0 initially).

        Returns:
            True if a layout ran
        """
        if self.spacing == self._previous_spacing:
            return False

        self._previous_spacing = self.spacing
        self.space_objects()
        return True

    def configure(self, **changes) -> bool:
        """Edit configuration fields, then notify ``on_parameter_changed``.

        Args:
            **changes: Any of spacing, spacing_direction, horizontal_alignment,
                target or extent_of

        Returns:
            True if the edit triggered a layout

        Raises:
            ValueError: If any setting is unknown or has a bad value. No
                setting is applied in that case.
        """
        converted = {}
        for name, value in changes.items():
            if name not in EDITABLE_SETTINGS:
                raise ValueError(f"Unknown spacer setting: {name}")
            if name == "spacing":
                try:
                    value = float(value)
                except (TypeError, ValueError):
                    raise ValueError(f"'spacing' must be a number, got {value!r}") from None
            elif name == "spacing_direction" and isinstance(value, str):
                value = Axis(value)
            elif name == "horizontal_alignment" and isinstance(value, str):
                value = Alignment(value)
            converted[name] = value

        for name, value in converted.items():
            setattr(self, name, value)

        return self.on_parameter_changed()
