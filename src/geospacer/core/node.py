"""SceneNode class for the hierarchy the spacer arranges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .mesh import Mesh
from .transform import Transform


@dataclass
class SceneNode:
    """A node in the scene hierarchy.

    Each node has a local transform, an optional mesh and an ordered list of
    children. Child transforms are relative to their parent, and the order
    of ``children`` is the sibling order used for layout.

    Example:
        row = SceneNode("row")
        for i in range(3):
            row.add_child(CubeGenerator().to_node(f"crate_{i}"))
        row.children[1].set_world_position([2.0, 0.0, 0.0])
    """

    name: str
    transform: Transform = field(default_factory=Transform)
    mesh: Mesh | None = None
    children: list[SceneNode] = field(default_factory=list)
    parent: SceneNode | None = field(default=None, repr=False)

    def add_child(self, node: SceneNode) -> SceneNode:
        """Add a child node.

        Args:
            node: The node to add as a child

        Returns:
            The added node (for chaining)
        """
        node.parent = self
        self.children.append(node)
        return node

    def remove_child(self, node: SceneNode) -> bool:
        """Remove a child node.

        Returns:
            True if the node was found and removed
        """
        if node in self.children:
            node.parent = None
            self.children.remove(node)
            return True
        return False

    def world_transform(self) -> NDArray[np.float64]:
        """Compute the 4x4 world transformation matrix."""
        if self.parent is None:
            return self.transform.to_matrix()
        return self.parent.world_transform() @ self.transform.to_matrix()

    @property
    def world_position(self) -> NDArray[np.float64]:
        """Position of this node's origin in world space."""
        return self.world_transform()[:3, 3].copy()

    def set_world_position(self, point: ArrayLike) -> None:
        """Move this node so its origin sits at a world-space point.

        The local translation is solved through the parent's world matrix,
        so rotated or scaled parents are handled. Setting the same point
        twice leaves the node unchanged.

        Raises:
            ValueError: If the parent's world matrix is singular (a zero scale)
        """
        point = np.asarray(point, dtype=np.float64)
        if self.parent is None:
            self.transform.translation = point.copy()
            return

        try:
            parent_inverse = np.linalg.inv(self.parent.world_transform())
        except np.linalg.LinAlgError:
            raise ValueError(
                f"Cannot place '{self.name}': parent '{self.parent.name}' has a singular transform"
            ) from None
        local = parent_inverse @ np.append(point, 1.0)
        self.transform.translation = local[:3]

    def world_mesh(self) -> Mesh | None:
        """Get the mesh transformed to world space, or None without a mesh."""
        if self.mesh is None:
            return None
        return self.mesh.transform(self.world_transform())

    def iter_nodes(self, include_self: bool = True) -> Iterator[SceneNode]:
        """Iterate over this node and all descendants (depth-first)."""
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_nodes(include_self=True)

    def find(self, name: str) -> SceneNode | None:
        """Find the first descendant node with the given name."""
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    @property
    def depth(self) -> int:
        """Get the depth of this node in the hierarchy (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.depth + 1

    def __repr__(self) -> str:
        mesh_str = f", mesh={self.mesh.face_count}f" if self.mesh else ""
        children_str = f", children={len(self.children)}" if self.children else ""
        return f"SceneNode({self.name!r}{mesh_str}{children_str})"
