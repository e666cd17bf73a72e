"""Geospacer - space a scene node's children along an axis."""

__version__ = "0.1.0"
