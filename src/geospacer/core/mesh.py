"""Mesh class for renderable geometry."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    import trimesh


class Mesh:
    """Container for triangle mesh geometry.

    Plays the part of a node's renderer: its bounding box is what the
    spacer measures when it needs an item's extent.
    """

    def __init__(
        self,
        vertices: NDArray[np.float64],
        faces: NDArray[np.int64],
    ) -> None:
        """Create a mesh from geometry data.

        Args:
            vertices: Nx3 array of vertex positions
            faces: Mx3 array of triangle indices
        """
        self.vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
        self.faces = np.asarray(faces, dtype=np.int64).reshape(-1, 3)

        self._trimesh_cache: trimesh.Trimesh | None = None

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the mesh."""
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        """Number of faces (triangles) in the mesh."""
        return len(self.faces)

    @property
    def bounds(self) -> NDArray[np.float64]:
        """Axis-aligned bounding box as a 2x3 array of [min, max].

        An empty mesh has zero-size bounds at the origin.
        """
        if self.vertex_count == 0:
            return np.zeros((2, 3), dtype=np.float64)
        return np.array(
            [self.vertices.min(axis=0), self.vertices.max(axis=0)],
            dtype=np.float64,
        )

    @property
    def size(self) -> NDArray[np.float64]:
        """Size of the bounding box [width, height, depth]."""
        lo, hi = self.bounds
        return hi - lo

    def to_trimesh(self) -> trimesh.Trimesh:
        """Convert to a trimesh.Trimesh object for export."""
        import trimesh as tm

        if self._trimesh_cache is None:
            self._trimesh_cache = tm.Trimesh(
                vertices=self.vertices,
                faces=self.faces,
                process=False,  # Don't modify our geometry
            )
        return self._trimesh_cache

    def transform(self, matrix: NDArray[np.float64]) -> Mesh:
        """Apply a 4x4 transformation matrix, returning a new mesh."""
        ones = np.ones((len(self.vertices), 1))
        homogeneous = np.hstack([self.vertices, ones])
        transformed = (matrix @ homogeneous.T).T
        return Mesh(vertices=transformed[:, :3], faces=self.faces.copy())
