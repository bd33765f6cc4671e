"""Circular layout of nodes inside a fixed-size viewport.

Positions depend only on the order and length of the node sequence, never
on edges or components, and are recomputed in full on every render.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from forestviz.model.types import NodeId


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in viewport coordinates.

    Example:
        >>> Point(1, 2) + Point(3, 4)
        Point(x=4, y=6)
    """

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}


def circle_point(center: Point, radius: float, index: int, count: int) -> Point:
    """Position of item ``index`` of ``count`` spaced evenly on a circle.

    Angles start at 0 (3 o'clock) and grow clockwise in screen space,
    because the y axis points down.
    """
    angle = 2 * math.pi * index / count
    return Point(
        center.x + radius * math.cos(angle),
        center.y + radius * math.sin(angle),
    )


def circular_layout(
    nodes: Sequence[NodeId],
    *,
    center: Point,
    radius: float,
) -> dict[NodeId, Point]:
    """Place each node on a circle, in input order.

    Duplicate identifiers overwrite earlier positions (last write wins),
    so a duplicated node is drawn at its last slot.

    Args:
        nodes: Node identifiers in input order
        center: Circle center in viewport coordinates
        radius: Circle radius

    Returns:
        Dict mapping node identifiers to positions (empty for no nodes)

    Example:
        >>> layout = circular_layout([1, 2], center=Point(250, 150), radius=100)
        >>> layout[1]
        Point(x=350.0, y=150.0)
    """
    count = len(nodes)
    positions: dict[NodeId, Point] = {}
    for index, node_id in enumerate(nodes):
        positions[node_id] = circle_point(center, radius, index, count)
    return positions
