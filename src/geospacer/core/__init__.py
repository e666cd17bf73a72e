"""Scene graph components."""

from .transform import Transform
from .mesh import Mesh
from .node import SceneNode

__all__ = ["Transform", "Mesh", "SceneNode"]
