import itertools

import pytest

from enginecore.debug_draw import (
    BLUE,
    BOX_EDGES,
    IDENTITY,
    DebugDrawManager,
    LineVertex,
)

RED = (1.0, 0.0, 0.0, 1.0)


def translation(x, y, z):
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (x, y, z, 1.0),
    )


def positions(vertices):
    return {v.position for v in vertices}


def box_corners(lo, hi):
    return set(itertools.product(*zip(lo, hi)))


def test_draw_line_appends_two_vertices_and_indices():
    manager = DebugDrawManager()
    manager.draw_line((0, 0, 0), (1, 2, 3), RED)
    manager.draw_line((4, 5, 6), (7, 8, 9), RED)
    assert manager.indices == [0, 1, 2, 3]
    assert manager.vertices[1] == LineVertex((1.0, 2.0, 3.0), RED)
    assert len(manager) == 4


def test_aabb_box_has_twelve_edges_on_the_corners():
    manager = DebugDrawManager()
    lo, hi = (-1.0, -2.0, -3.0), (1.0, 2.0, 3.0)
    manager.draw_aabb_box(lo, hi, RED)
    vertices, indices = manager.take_batch()
    assert len(vertices) == 2 * len(BOX_EDGES)
    assert indices == list(range(2 * len(BOX_EDGES)))
    assert positions(vertices) == box_corners(lo, hi)
    assert all(v.color == RED for v in vertices)


def test_aabb_edges_are_axis_aligned():
    manager = DebugDrawManager()
    manager.draw_aabb_box((0, 0, 0), (2, 3, 4), RED)
    vertices = manager.vertices
    for start, end in zip(vertices[0::2], vertices[1::2]):
        differing = sum(a != b for a, b in zip(start.position, end.position))
        assert differing == 1


def test_take_batch_empties_the_manager():
    manager = DebugDrawManager()
    manager.draw_line((0, 0, 0), (1, 1, 1), RED)
    vertices, indices = manager.take_batch()
    assert len(vertices) == 2
    assert manager.take_batch() == ([], [])


def test_clear_drops_everything():
    manager = DebugDrawManager()
    manager.draw_aabb_box((0, 0, 0), (1, 1, 1), RED)
    manager.clear()
    assert manager.vertices == []
    assert manager.indices == []


def test_obb_with_identity_matches_aabb():
    obb = DebugDrawManager()
    aabb = DebugDrawManager()
    obb.draw_obb_box((-1, -1, -1), (1, 2, 3), IDENTITY, RED)
    aabb.draw_aabb_box((-1, -1, -1), (1, 2, 3), RED)
    assert obb.vertices == aabb.vertices


def test_obb_ignores_translation():
    plain = DebugDrawManager()
    moved = DebugDrawManager()
    plain.draw_obb_box((0, 0, 0), (1, 1, 1), None, RED)
    moved.draw_obb_box((0, 0, 0), (1, 1, 1), translation(5, 6, 7), RED)
    assert plain.vertices == moved.vertices


def test_bounding_box_draws_blue_bounds_then_box():
    manager = DebugDrawManager()
    manager.draw_bounding_box((0, 0, 0), (1, 1, 1), translation(5, 0, 0), RED)
    vertices = manager.vertices
    edges = 2 * len(BOX_EDGES)
    assert len(vertices) == 2 * edges
    assert all(v.color == BLUE for v in vertices[:edges])
    assert all(v.color == RED for v in vertices[edges:])
    assert positions(vertices[edges:]) == box_corners((5, 0, 0), (6, 1, 1))
    assert positions(vertices[:edges]) == positions(vertices[edges:])


def test_bounding_box_of_rotated_box_encloses_corners():
    rotate_z = (
        (0.0, 1.0, 0.0, 0.0),
        (-1.0, 0.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    manager = DebugDrawManager()
    manager.draw_bounding_box((0, 0, 0), (2, 1, 1), rotate_z, RED)
    vertices = manager.vertices
    edges = 2 * len(BOX_EDGES)
    box = positions(vertices[edges:])
    bounds = positions(vertices[:edges])
    for axis in range(3):
        assert min(p[axis] for p in bounds) == min(p[axis] for p in box)
        assert max(p[axis] for p in bounds) == max(p[axis] for p in box)


def test_bad_matrix_shape_is_rejected():
    manager = DebugDrawManager()
    with pytest.raises(ValueError):
        manager.draw_obb_box((0, 0, 0), (1, 1, 1), ((1, 0, 0), (0, 1, 0), (0, 0, 1)), RED)
    assert manager.vertices == []


def test_shared_instance():
    DebugDrawManager.destroy()
    first = DebugDrawManager.get()
    assert DebugDrawManager.get() is first
    DebugDrawManager.destroy()
    assert DebugDrawManager.get() is not first