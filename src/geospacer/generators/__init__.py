"""Geometry generators."""

from .base import MeshGenerator
from .primitives import CubeGenerator, CylinderGenerator

__all__ = [
    "MeshGenerator",
    "CubeGenerator",
    "CylinderGenerator",
]
