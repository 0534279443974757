"""Bounding-volume hierarchy over walls for fast ray intersection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from galaxysim.particle import Vec2
from galaxysim.walls import LightRay, Wall

FLT_MAX = 3.4028234663852886e38
_RAY_EPSILON = 1e-8
_INV_DIR_LIMIT = 1e8
_MAX_DEPTH = 20


@dataclass
class AABB2D:
    """Axis-aligned box given by its lower and upper corners."""

    min: Vec2 = Vec2()
    max: Vec2 = Vec2()

    @classmethod
    def from_points(cls, a: Vec2, b: Vec2) -> AABB2D:
        """The smallest box containing both points."""
        return cls(Vec2(min(a.x, b.x), min(a.y, b.y)), Vec2(max(a.x, b.x), max(a.y, b.y)))

    def expand(self, other: AABB2D) -> None:
        """Grow this box in place so that it also contains ``other``."""
        self.min = Vec2(min(self.min.x, other.min.x), min(self.min.y, other.min.y))
        self.max = Vec2(max(self.max.x, other.max.x), max(self.max.y, other.max.y))

    def intersects_ray(self, origin: Vec2, direction: Vec2, max_dist: float = FLT_MAX) -> bool:
        """Slab test: whether the ray meets the box no further than ``max_dist``."""

        def inverse(component: float) -> float:
            if abs(component) < _RAY_EPSILON:
                return _INV_DIR_LIMIT if component >= 0 else -_INV_DIR_LIMIT
            return 1.0 / component

        inv_x = inverse(direction.x)
        inv_y = inverse(direction.y)
        tx0 = (self.min.x - origin.x) * inv_x
        tx1 = (self.max.x - origin.x) * inv_x
        ty0 = (self.min.y - origin.y) * inv_y
        ty1 = (self.max.y - origin.y) * inv_y
        t_entry = max(min(tx0, tx1), min(ty0, ty1))
        t_exit = min(max(tx0, tx1), max(ty0, ty1))
        return t_exit >= 0 and t_entry <= t_exit and t_entry <= max_dist


@dataclass
class BVHNode:
    """A node of the hierarchy; leaves hold exactly one wall."""

    bounds: AABB2D
    left: BVHNode | None = None
    right: BVHNode | None = None
    wall: Wall | None = None

    def is_leaf(self) -> bool:
        return self.wall is not None


@dataclass
class RayHit:
    """The nearest intersection of a ray with a wall."""

    t: float
    wall: Wall
    point: Vec2


def intersect_wall(ray: LightRay, wall: Wall) -> tuple[float, Vec2] | None:
    """Distance along the ray and hit point on the wall segment, or None."""
    p = ray.source
    r = ray.direction
    q = wall.va
    s = wall.vb - wall.va

    rxs = r.x * s.y - r.y * s.x
    if abs(rxs) < _RAY_EPSILON:
        return None

    qp = q - p
    t1 = (qp.x * s.y - qp.y * s.x) / rxs
    t2 = (qp.x * r.y - qp.y * r.x) / rxs
    if 0 <= t1 <= ray.max_length and 0.0 <= t2 <= 1.0:
        return t1, p + r * t1
    return None


def _midpoint(wall: Wall, axis: int) -> float:
    if axis == 0:
        return (wall.va.x + wall.vb.x) * 0.5
    return (wall.va.y + wall.vb.y) * 0.5


class BVH:
    """Binary hierarchy of wall bounding boxes split at the median along the longer axis."""

    def __init__(self) -> None:
        self.root: BVHNode | None = None

    def build(self, walls: Iterable[Wall]) -> None:
        """Rebuild the hierarchy over the given walls."""
        items = list(walls)
        self.root = self._build(items, 0) if items else None

    def _build(self, walls: list[Wall], depth: int) -> BVHNode:
        bounds = AABB2D.from_points(walls[0].va, walls[0].vb)
        for wall in walls[1:]:
            bounds.expand(AABB2D.from_points(wall.va, wall.vb))
        node = BVHNode(bounds)

        count = len(walls)
        if count <= 1 or depth >= _MAX_DEPTH:
            node.wall = walls[0]
            return node

        extent_x = bounds.max.x - bounds.min.x
        extent_y = bounds.max.y - bounds.min.y
        axis = 0 if extent_x > extent_y else 1
        ordered = sorted(walls, key=lambda w: _midpoint(w, axis))

        mid = max(1, min(count // 2, count - 1))
        node.left = self._build(ordered[:mid], depth + 1)
        node.right = self._build(ordered[mid:], depth + 1)
        return node

    def traverse(self, ray: LightRay) -> RayHit | None:
        """The closest wall hit by the ray, or None when nothing is hit."""
        if self.root is None:
            return None

        closest_t = FLT_MAX
        best: RayHit | None = None
        stack = [self.root]
        while stack:
            node = stack.pop()
            if not node.bounds.intersects_ray(ray.source, ray.direction, closest_t):
                continue
            if node.is_leaf():
                found = intersect_wall(ray, node.wall)
                if found is not None and found[0] < closest_t:
                    closest_t = found[0]
                    best = RayHit(found[0], node.wall, found[1])
            else:
                if node.right is not None:
                    stack.append(node.right)
                if node.left is not None:
                    stack.append(node.left)
        return best