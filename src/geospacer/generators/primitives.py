"""Primitive geometry generators used to populate spaced rows."""

from dataclasses import dataclass

import numpy as np

from ..core.mesh import Mesh
from .base import MeshGenerator


@dataclass
class CubeGenerator(MeshGenerator):
    """Generates a box mesh centered at the origin.

    Attributes:
        size_x: Width of the box (X axis)
        size_y: Height of the box (Y axis)
        size_z: Depth of the box (Z axis)
    """

    size_x: float = 1.0
    size_y: float = 1.0
    size_z: float = 1.0

    def generate(self) -> Mesh:
        hx, hy, hz = self.size_x / 2, self.size_y / 2, self.size_z / 2

        # Corner i has bit 0 -> +X, bit 1 -> +Y, bit 2 -> +Z
        vertices = [
            [hx if i & 1 else -hx, hy if i & 2 else -hy, hz if i & 4 else -hz]
            for i in range(8)
        ]

        # Two CCW triangles per face, viewed from outside
        faces = [
            [0, 2, 3], [0, 3, 1],  # back (-Z)
            [4, 5, 7], [4, 7, 6],  # front (+Z)
            [0, 4, 6], [0, 6, 2],  # left (-X)
            [1, 3, 7], [1, 7, 5],  # right (+X)
            [0, 1, 5], [0, 5, 4],  # bottom (-Y)
            [2, 6, 7], [2, 7, 3],  # top (+Y)
        ]

        return Mesh(
            vertices=np.array(vertices, dtype=np.float64),
            faces=np.array(faces, dtype=np.int64),
        )


@dataclass
class CylinderGenerator(MeshGenerator):
    """Generates a Y-up cylinder mesh centered at the origin.

    Attributes:
        radius: Radius of the cylinder
        height: Height of the cylinder
        segments: Number of segments around the circumference
    """

    radius: float = 0.5
    height: float = 1.0
    segments: int = 32

    def generate(self) -> Mesh:
        if self.segments < 3:
            raise ValueError(f"Cylinder needs at least 3 segments, got {self.segments}")

        n = self.segments
        half_height = self.height / 2
        theta = 2 * np.pi * np.arange(n) / n
        ring_x = self.radius * np.cos(theta)
        ring_z = self.radius * np.sin(theta)

        # 0: top center, 1: bottom center, then the top ring, then the bottom ring
        top_ring = np.column_stack([ring_x, np.full(n, half_height), ring_z])
        bottom_ring = np.column_stack([ring_x, np.full(n, -half_height), ring_z])
        vertices = np.vstack([
            [[0.0, half_height, 0.0], [0.0, -half_height, 0.0]],
            top_ring,
            bottom_ring,
        ])

        faces = []
        for i in range(n):
            j = (i + 1) % n
            top_i, top_j = 2 + i, 2 + j
            bot_i, bot_j = 2 + n + i, 2 + n + j
            faces.append([0, top_j, top_i])
            faces.append([1, bot_i, bot_j])
            faces.append([top_i, top_j, bot_i])
            faces.append([top_j, bot_j, bot_i])

        return Mesh(vertices=vertices, faces=np.array(faces, dtype=np.int64))
