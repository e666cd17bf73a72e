"""Pre-built rows shipped with geospacer."""

from pathlib import Path

from ..core.node import SceneNode
from ..layout import ObjectSpacer, SpacerLoader


def _get_assets_dir() -> Path:
    """Get the bundled assets directory path."""
    return Path(__file__).parent.parent / "assets"


def _load_row(asset_name: str) -> tuple[SceneNode, ObjectSpacer]:
    """Load a row definition from the bundled assets."""
    return SpacerLoader().load(_get_assets_dir() / f"{asset_name}.yaml")


def create_crate_row_scene() -> tuple[SceneNode, ObjectSpacer]:
    """Crates and a barrel spaced along X, centered on the origin."""
    return _load_row("crate_row")


def create_tower_scene() -> tuple[SceneNode, ObjectSpacer]:
    """Cylinders stacked upward from the origin."""
    return _load_row("tower")


def create_shelf_scene() -> tuple[SceneNode, ObjectSpacer]:
    """Boxes on a rotated shelf, right-aligned along Z.

    The ``label`` child has no mesh and takes up no room.
    """
    return _load_row("shelf")


# Scene registry - maps scene names to factory functions
SCENES = {
    "crate_row": create_crate_row_scene,
    "tower": create_tower_scene,
    "shelf": create_shelf_scene,
}

__all__ = ["SCENES", "create_crate_row_scene", "create_shelf_scene", "create_tower_scene"]
