"""Base class for geometry generators."""

from abc import ABC, abstractmethod

from ..core.mesh import Mesh
from ..core.node import SceneNode


class MeshGenerator(ABC):
    """Abstract base class for mesh generators."""

    @abstractmethod
    def generate(self) -> Mesh:
        """Generate and return mesh geometry."""
        pass

    def to_node(self, name: str | None = None) -> SceneNode:
        """Generate geometry and wrap it in a SceneNode.

        Args:
            name: Optional name for the node. Defaults to generator class name.
        """
        node_name = name or self.__class__.__name__
        return SceneNode(name=node_name, mesh=self.generate())
