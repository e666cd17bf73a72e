"""Layout system for spacing a node's children along an axis."""

from .axes import Alignment, Axis, alignment_offset, axis_component, direction_vector
from .engine import LayoutRequest, compute_positions
from .loader import SpacerLoader, parse_spacer_config
from .spacer import ObjectSpacer, mesh_extent

__all__ = [
    "Alignment",
    "Axis",
    "alignment_offset",
    "axis_component",
    "direction_vector",
    "LayoutRequest",
    "compute_positions",
    "SpacerLoader",
    "parse_spacer_config",
    "ObjectSpacer",
    "mesh_extent",
]
