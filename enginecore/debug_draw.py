"""Batched debug line drawing: lines, axis-aligned and oriented boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from enginecore.singleton import Singleton

Vector3 = tuple[float, float, float]
Color = tuple[float, float, float, float]
Matrix = Sequence[Sequence[float]]

BLUE: Color = (0.0, 0.0, 1.0, 1.0)
DEFAULT_LIFETIME = 1.0

IDENTITY: tuple[tuple[float, float, float, float], ...] = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

# Corner pairs joined by the twelve edges of a box: bottom face, top face,
# then the vertical edges.
BOX_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)

# Corner signs in the order used by BOX_EDGES.
_CORNER_SIGNS: tuple[Vector3, ...] = (
    (-1.0, -1.0, -1.0),
    (1.0, -1.0, -1.0),
    (1.0, 1.0, -1.0),
    (-1.0, 1.0, -1.0),
    (-1.0, -1.0, 1.0),
    (1.0, -1.0, 1.0),
    (1.0, 1.0, 1.0),
    (-1.0, 1.0, 1.0),
)


@dataclass(frozen=True)
class LineVertex:
    """One end of a debug line."""

    position: Vector3
    color: Color


def _vec3(value: Sequence[float]) -> Vector3:
    x, y, z = (float(c) for c in value)
    return (x, y, z)


def _color(value: Sequence[float]) -> Color:
    r, g, b, a = (float(c) for c in value)
    return (r, g, b, a)


def _check_matrix(matrix: Optional[Matrix]) -> Matrix:
    if matrix is None:
        return IDENTITY
    rows = [list(row) for row in matrix]
    if len(rows) != 4 or any(len(row) != 4 for row in rows):
        raise ValueError("transform must be a 4x4 matrix")
    return rows


def _transform(matrix: Matrix, point: Vector3, w: float) -> Vector3:
    """Multiply the row vector ``(point, w)`` by ``matrix`` and drop w."""
    vec = (*point, w)
    x, y, z = (sum(vec[k] * matrix[k][col] for k in range(4)) for col in range(3))
    return (x, y, z)


def _local_corners(local_min: Sequence[float], local_max: Sequence[float]) -> list[Vector3]:
    lo, hi = _vec3(local_min), _vec3(local_max)
    center = tuple((a + b) * 0.5 for a, b in zip(lo, hi))
    extent = tuple((b - a) * 0.5 for a, b in zip(lo, hi))
    return [
        (
            center[0] + sx * extent[0],
            center[1] + sy * extent[1],
            center[2] + sz * extent[2],
        )
        for sx, sy, sz in _CORNER_SIGNS
    ]


class DebugDrawManager(Singleton):
    """Collects debug lines into one vertex and index batch per frame."""

    def __init__(self) -> None:
        self._vertices: list[LineVertex] = []
        self._indices: list[int] = []

    @property
    def vertices(self) -> list[LineVertex]:
        return list(self._vertices)

    @property
    def indices(self) -> list[int]:
        return list(self._indices)

    def draw_line(
        self,
        start: Sequence[float],
        end: Sequence[float],
        color: Sequence[float],
        lifetime: float = DEFAULT_LIFETIME,
    ) -> None:
        """Add one line from ``start`` to ``end``."""
        rgba = _color(color)
        first = len(self._vertices)
        self._vertices.append(LineVertex(_vec3(start), rgba))
        self._vertices.append(LineVertex(_vec3(end), rgba))
        self._indices.extend((first, first + 1))

    def _draw_box(self, corners: Sequence[Vector3], color: Sequence[float], lifetime: float) -> None:
        for a, b in BOX_EDGES:
            self.draw_line(corners[a], corners[b], color, lifetime)

    def draw_aabb_box(
        self,
        box_min: Sequence[float],
        box_max: Sequence[float],
        color: Sequence[float],
        lifetime: float = DEFAULT_LIFETIME,
    ) -> None:
        """Add the twelve edges of the axis-aligned box from ``box_min`` to ``box_max``."""
        lo, hi = _vec3(box_min), _vec3(box_max)
        corners = [
            (
                hi[0] if sx > 0 else lo[0],
                hi[1] if sy > 0 else lo[1],
                hi[2] if sz > 0 else lo[2],
            )
            for sx, sy, sz in _CORNER_SIGNS
        ]
        self._draw_box(corners, color, DEFAULT_LIFETIME)

    def draw_obb_box(
        self,
        local_min: Sequence[float],
        local_max: Sequence[float],
        transform: Optional[Matrix],
        color: Sequence[float],
        lifetime: float = DEFAULT_LIFETIME,
    ) -> None:
        """Add a local box whose corners go through ``transform`` as directions.

        ``transform`` is a 4x4 row-vector matrix; its translation row is not
        applied here.
        """
        matrix = _check_matrix(transform)
        corners = [_transform(matrix, c, 0.0) for c in _local_corners(local_min, local_max)]
        self._draw_box(corners, color, lifetime)

    def draw_bounding_box(
        self,
        local_min: Sequence[float],
        local_max: Sequence[float],
        transform: Optional[Matrix],
        color: Sequence[float],
        lifetime: float = DEFAULT_LIFETIME,
    ) -> None:
        """Add a transformed local box and, first, its world-space bounds in blue."""
        matrix = _check_matrix(transform)
        corners = [_transform(matrix, c, 1.0) for c in _local_corners(local_min, local_max)]
        world_min = tuple(min(c[axis] for c in corners) for axis in range(3))
        world_max = tuple(max(c[axis] for c in corners) for axis in range(3))
        self.draw_aabb_box(world_min, world_max, BLUE, lifetime)
        self._draw_box(corners, color, lifetime)

    def take_batch(self) -> tuple[list[LineVertex], list[int]]:
        """Return the collected vertices and indices and start a new batch."""
        batch = (self._vertices, self._indices)
        self._vertices = []
        self._indices = []
        return batch

    def clear(self) -> None:
        """Drop everything collected so far."""
        self._vertices.clear()
        self._indices.clear()

    def __len__(self) -> int:
        return len(self._vertices)