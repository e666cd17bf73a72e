"""YAML loader for spaced rows of objects."""

from pathlib import Path
from typing import Any

import numpy as np
import yaml

from ..core.node import SceneNode
from ..generators.base import MeshGenerator
from ..generators.primitives import CubeGenerator, CylinderGenerator
from .axes import Alignment, Axis
from .spacer import ObjectSpacer


# Registry of primitives a child may be built from
PRIMITIVE_REGISTRY = {
    "cube": CubeGenerator,
    "cylinder": CylinderGenerator,
}


def parse_spacer_config(data: dict[str, Any] | None) -> ObjectSpacer:
    """Build an unbound spacer from the ``spacer:`` section.

    Args:
        data: Mapping with optional spacing, direction and alignment keys

    Returns:
        ObjectSpacer with no target, defaults for any missing key
    """
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"'spacer' must be a mapping, got {type(data).__name__}")

    direction = data.get("direction", Axis.HORIZONTAL.value)
    alignment = data.get("alignment", Alignment.CENTER.value)

    try:
        axis = Axis(str(direction).lower())
    except ValueError:
        choices = ", ".join(a.value for a in Axis)
        raise ValueError(f"Unknown spacing direction '{direction}' (expected one of: {choices})") from None

    try:
        align = Alignment(str(alignment).lower())
    except ValueError:
        choices = ", ".join(a.value for a in Alignment)
        raise ValueError(f"Unknown alignment '{alignment}' (expected one of: {choices})") from None

    spacing = data.get("spacing", 0.0)
    try:
        spacing = float(spacing)
    except (TypeError, ValueError):
        raise ValueError(f"'spacing' must be a number, got {spacing!r}") from None

    return ObjectSpacer(
        spacing=spacing,
        spacing_direction=axis,
        horizontal_alignment=align,
    )


class SpacerLoader:
    """Loads a parent node, its children and a spacer from YAML.

    YAML format:
        name: crates
        position: [0, 0, 0]      # world position of the parent (the anchor)
        rotation: [0, 0, 0]      # degrees, optional
        scale: [1, 1, 1]         # optional
        spacer:
          spacing: 0.5
          direction: horizontal  # horizontal | vertical | depth
          alignment: center      # center | left | right
        children:
          crate_a:
            primitive: cube      # cube | cylinder, omit for an empty node
            size: [1, 1, 1]
            position: [0, 0, 0]  # optional starting local position
          marker: {}

    Children keep the order they are listed in.
    """

    def load(self, path: str | Path) -> tuple[SceneNode, ObjectSpacer]:
        """Load a row definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            Tuple of (parent node, spacer bound to it)
        """
        path = Path(path)
        with open(path) as f:
            return self.load_string(f.read())

    def load_string(self, yaml_string: str) -> tuple[SceneNode, ObjectSpacer]:
        """Load a row definition from a YAML string."""
        try:
            data = yaml.safe_load(yaml_string)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {e}") from e
        return self._build(data)

    def _build(self, data: Any) -> tuple[SceneNode, ObjectSpacer]:
        """Build the parent node and spacer from parsed YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Row definition must be a YAML mapping")

        root = SceneNode(data.get("name", "spacer"))
        root.transform.translation = self._vector(data, "position", [0, 0, 0])
        root.transform.rotation = np.radians(self._vector(data, "rotation", [0, 0, 0]))
        root.transform.scale = self._vector(data, "scale", [1, 1, 1])

        children = data.get("children") or {}
        if not isinstance(children, dict):
            raise ValueError("'children' must be a mapping of name -> definition")

        for child_name, child_def in children.items():
            if child_def is None:
                child_def = {}
            if not isinstance(child_def, dict):
                raise ValueError(f"Child '{child_name}' must be a mapping, got {child_def!r}")
            root.add_child(self._create_child(str(child_name), child_def))

        spacer = parse_spacer_config(data.get("spacer"))
        spacer.target = root
        return root, spacer

    def _create_child(self, name: str, child_def: dict[str, Any]) -> SceneNode:
        """Create one child node, with a mesh when a primitive is given."""
        primitive_type = child_def.get("primitive")
        if primitive_type is None:
            node = SceneNode(name)
        else:
            if "size" not in child_def:
                raise ValueError(f"Child '{name}' has a primitive but no size")
            size = self._vector(child_def, "size", None)
            node = self._create_generator(primitive_type, size).to_node(name)

        node.transform.translation = self._vector(child_def, "position", [0, 0, 0])
        return node

    def _create_generator(self, primitive_type: str, size: np.ndarray) -> MeshGenerator:
        """Create a generator instance with the given size.

        Args:
            primitive_type: Type of primitive (cube, cylinder)
            size: Actual size [width, height, depth]
        """
        if not isinstance(primitive_type, str) or primitive_type not in PRIMITIVE_REGISTRY:
            raise ValueError(f"Unknown primitive type: {primitive_type}")

        if primitive_type == "cube":
            return CubeGenerator(size_x=size[0], size_y=size[1], size_z=size[2])
        # Cylinder uses radius (half of x/z) and height
        radius = min(size[0], size[2]) / 2
        return CylinderGenerator(radius=radius, height=size[1])

    def _vector(self, data: dict[str, Any], key: str, default: list[float] | None) -> np.ndarray:
        """Read a 3-component vector, raising ValueError when malformed."""
        value = data.get(key, default)
        try:
            vector = np.array(value, dtype=np.float64)
        except (TypeError, ValueError):
            vector = None
        if vector is None or vector.shape != (3,):
            raise ValueError(f"'{key}' must be a list of 3 numbers, got {value!r}")
        return vector
