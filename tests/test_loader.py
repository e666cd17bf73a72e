"""Tests for loading rows from YAML."""

import numpy as np
import pytest

from geospacer.layout import Alignment, Axis, SpacerLoader, parse_spacer_config

ROW_YAML = """
name: crates
position: [1, 0, 0]
spacer:
  spacing: 0.5
  direction: vertical
  alignment: right
children:
  crate_b:
    primitive: cube
    size: [1, 2, 1]
  crate_a:
    primitive: cylinder
    size: [1, 1, 1]
    position: [0, 0, 3]
  marker: {}
"""


def test_load_string_builds_row():
    root, spacer = SpacerLoader().load_string(ROW_YAML)

    assert root.name == "crates"
    np.testing.assert_allclose(root.world_position, [1, 0, 0])
    assert [child.name for child in root.children] == ["crate_b", "crate_a", "marker"]
    assert root.children[2].mesh is None
    np.testing.assert_allclose(root.children[1].transform.translation, [0, 0, 3])

    assert spacer.target is root
    assert spacer.spacing == 0.5
    assert spacer.spacing_direction is Axis.VERTICAL
    assert spacer.horizontal_alignment is Alignment.RIGHT


def test_loaded_row_can_be_spaced():
    root, spacer = SpacerLoader().load_string(ROW_YAML)

    spacer.space_objects()

    # Right: offset -1.0, heights 2, 1, 0
    ys = [float(child.world_position[1]) for child in root.children]
    assert ys == pytest.approx([0.0, 2.0, 3.0])


def test_load_from_file(tmp_path):
    path = tmp_path / "row.yaml"
    path.write_text(ROW_YAML)

    root, spacer = SpacerLoader().load(path)

    assert len(root.children) == 3
    assert spacer.spacing == 0.5


def test_rotation_is_in_degrees():
    root, _ = SpacerLoader().load_string("name: r\nrotation: [0, 90, 0]\n")

    np.testing.assert_allclose(root.transform.rotation, [0, np.pi / 2, 0])


def test_spacer_defaults():
    spacer = parse_spacer_config(None)

    assert spacer.target is None
    assert spacer.spacing == 0.0
    assert spacer.spacing_direction is Axis.HORIZONTAL
    assert spacer.horizontal_alignment is Alignment.CENTER


def test_enum_names_are_case_insensitive():
    spacer = parse_spacer_config({"direction": "Depth", "alignment": "LEFT"})

    assert spacer.spacing_direction is Axis.DEPTH
    assert spacer.horizontal_alignment is Alignment.LEFT


@pytest.mark.parametrize(
    "data,message",
    [
        ({"direction": "diagonal"}, "Unknown spacing direction"),
        ({"alignment": "justify"}, "Unknown alignment"),
    ],
)
def test_unknown_enum_names_raise(data, message):
    with pytest.raises(ValueError, match=message):
        parse_spacer_config(data)


@pytest.mark.parametrize(
    "yaml_string,message",
    [
        ("- not\n- a mapping\n", "must be a YAML mapping"),
        ("children:\n  a:\n    primitive: pyramid\n    size: [1, 1, 1]\n", "Unknown primitive type"),
        ("children:\n  a:\n    primitive: cube\n", "no size"),
        ("position: [1, 2]\n", "'position' must be a list of 3 numbers"),
        ("children: [a, b]\n", "'children' must be a mapping"),
        ("spacer: 3\n", "'spacer' must be a mapping"),
        ("children: [a, b\n", "Invalid YAML"),
        ("children:\n  a: 5\n", "Child 'a' must be a mapping"),
        ("spacer:\n  spacing:\n", "'spacing' must be a number"),
        ("spacer:\n  spacing: [1, 2]\n", "'spacing' must be a number"),
        ("scale: {x: 1}\n", "'scale' must be a list of 3 numbers"),
        ("children:\n  a:\n    primitive: [cube]\n    size: [1, 1, 1]\n", "Unknown primitive type"),
    ],
)
def test_malformed_definitions_raise(yaml_string, message):
    with pytest.raises(ValueError, match=message):
        SpacerLoader().load_string(yaml_string)
