"""Main entry point for geospacer."""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from .core.node import SceneNode
from .layout import Alignment, Axis, ObjectSpacer, SpacerLoader
from .scenes import SCENES

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Geospacer - space a node's children along an axis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "file",
        nargs="?",
        metavar="ROW.yaml",
        help="Row definition to load",
    )
    source.add_argument(
        "-s", "--scene",
        choices=list(SCENES.keys()),
        help="Bundled row to load instead of a file (default: crate_row)",
    )
    parser.add_argument(
        "--spacing",
        type=float,
        help="Override the gap between children",
    )
    parser.add_argument(
        "--direction",
        choices=[axis.value for axis in Axis],
        help="Override the spacing direction",
    )
    parser.add_argument(
        "--alignment",
        choices=[alignment.value for alignment in Alignment],
        help="Override the row alignment",
    )
    parser.add_argument(
        "-e", "--export",
        metavar="PATH",
        help="Export the spaced scene (format from the extension, e.g. .glb, .obj)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every placement",
    )
    return parser.parse_args(argv)


def load_row(args: argparse.Namespace) -> tuple[SceneNode, ObjectSpacer]:
    """Load the row named on the command line."""
    if args.file:
        return SpacerLoader().load(args.file)
    return SCENES[args.scene or "crate_row"]()


def apply_overrides(spacer: ObjectSpacer, args: argparse.Namespace) -> None:
    """Feed command line overrides through the spacer like inspector edits."""
    changes = {}
    if args.spacing is not None:
        changes["spacing"] = args.spacing
    if args.direction is not None:
        changes["spacing_direction"] = args.direction
    if args.alignment is not None:
        changes["horizontal_alignment"] = args.alignment
    if changes:
        spacer.configure(**changes)


def export_scene(root: SceneNode, path: Path) -> None:
    """Export every mesh in world space through trimesh."""
    import trimesh

    scene = trimesh.Scene()
    for node in root.iter_nodes():
        world_mesh = node.world_mesh()
        if world_mesh is not None:
            scene.add_geometry(world_mesh.to_trimesh(), node_name=node.name, geom_name=node.name)
    scene.export(str(path))


def format_tree(root: SceneNode) -> list[str]:
    """One line per node with its world position."""
    lines = []
    for node in root.iter_nodes():
        indent = "  " * node.depth
        x, y, z = np.round(node.world_position, 4) + 0.0
        mesh_info = f" ({node.mesh.face_count} faces)" if node.mesh else ""
        lines.append(f"{indent}- {node.name}{mesh_info} at ({x:g}, {y:g}, {z:g})")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Run geospacer on a row definition."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        root, spacer = load_row(args)
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    apply_overrides(spacer, args)
    spacer.space_objects()

    print("Geospacer")
    print("=" * 40)
    print(
        f"Spacing {spacer.spacing:g} along {spacer.spacing_direction.value}, "
        f"aligned {spacer.horizontal_alignment.value}"
    )
    for line in format_tree(root):
        print(line)

    if args.export:
        output_path = Path(args.export)
        export_scene(root, output_path)
        print(f"\nExported scene to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
