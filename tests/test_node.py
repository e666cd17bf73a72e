"""Tests for the scene graph the spacer moves."""

import numpy as np
import pytest

from geospacer.core import Mesh, SceneNode, Transform
from geospacer.generators import CubeGenerator, CylinderGenerator


def test_root_world_position_is_its_translation():
    node = SceneNode("root")
    node.set_world_position([1.0, 2.0, 3.0])

    np.testing.assert_allclose(node.transform.translation, [1, 2, 3])
    np.testing.assert_allclose(node.world_position, [1, 2, 3])


def test_set_world_position_through_rotated_parent():
    parent = SceneNode("parent", transform=Transform(translation=[5, 0, 0], rotation=[0, 0, np.pi / 2]))
    child = parent.add_child(SceneNode("child"))

    child.set_world_position([5.0, 3.0, 0.0])

    np.testing.assert_allclose(child.world_position, [5, 3, 0], atol=1e-12)
    # Parent's local +X points along world +Y
    np.testing.assert_allclose(child.transform.translation, [3, 0, 0], atol=1e-12)


def test_set_world_position_is_idempotent():
    parent = SceneNode("parent", transform=Transform(translation=[1, 1, 1], scale=[2, 3, 4]))
    child = parent.add_child(SceneNode("child"))

    child.set_world_position([4.0, 4.0, 4.0])
    first = child.transform.translation.copy()
    child.set_world_position([4.0, 4.0, 4.0])

    np.testing.assert_allclose(child.transform.translation, first)


def test_world_mesh_follows_hierarchy():
    parent = SceneNode("parent", transform=Transform(translation=[10, 0, 0]))
    child = parent.add_child(CubeGenerator().to_node("cube"))

    bounds = child.world_mesh().bounds

    np.testing.assert_allclose(bounds, [[9.5, -0.5, -0.5], [10.5, 0.5, 0.5]])
    assert parent.world_mesh() is None


def test_iteration_find_and_depth():
    root = SceneNode("root")
    row = root.add_child(SceneNode("row"))
    leaf = row.add_child(SceneNode("leaf"))

    assert [n.name for n in root.iter_nodes()] == ["root", "row", "leaf"]
    assert [n.name for n in root.iter_nodes(include_self=False)] == ["row", "leaf"]
    assert root.find("leaf") is leaf
    assert root.find("missing") is None
    assert leaf.depth == 2


def test_remove_child_detaches():
    root = SceneNode("root")
    child = root.add_child(SceneNode("child"))

    assert root.remove_child(child) is True
    assert child.parent is None
    assert root.remove_child(child) is False


def test_cube_size():
    mesh = CubeGenerator(size_x=2.0, size_y=3.0, size_z=4.0).generate()

    np.testing.assert_allclose(mesh.size, [2, 3, 4])
    assert mesh.vertex_count == 8
    assert mesh.face_count == 12


def test_cylinder_size():
    mesh = CylinderGenerator(radius=0.4, height=1.2, segments=32).generate()

    np.testing.assert_allclose(mesh.size, [0.8, 1.2, 0.8])
    assert mesh.face_count == 4 * 32


def test_cylinder_needs_three_segments():
    with pytest.raises(ValueError):
        CylinderGenerator(segments=2).generate()


def test_empty_mesh_has_zero_bounds():
    mesh = Mesh(vertices=np.empty((0, 3)), faces=np.empty((0, 3), dtype=np.int64))

    np.testing.assert_array_equal(mesh.size, [0, 0, 0])


def test_set_world_position_under_collapsed_parent_raises():
    parent = SceneNode("flat", transform=Transform(scale=[0, 1, 1]))
    child = parent.add_child(SceneNode("child", transform=Transform(translation=[0, 2, 0])))

    with pytest.raises(ValueError, match="singular transform"):
        child.set_world_position([1.0, 0.0, 0.0])

    np.testing.assert_array_equal(child.transform.translation, [0, 2, 0])
