"""Styling for node markers and edge lines.

Component colors come from the configured palette by index, wrapping
around with modulo. The starting node always takes the highlight color.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from forestviz.model.types import NodeId


@dataclass(frozen=True)
class StrokeStyle:
    """Outline style shared by SVG shapes."""

    color: str = "black"
    width: int = 2
    dasharray: str | None = None


# ============================================================
# SHAPE DEFINITIONS
# ============================================================

NODE_STROKE = StrokeStyle()
EDGE_STROKE = StrokeStyle(dasharray="5,5")
LABEL_COLOR = "black"


def component_color(index: int, palette: Sequence[str]) -> str:
    """Fill color for the component at ``index`` in discovery order.

    Example:
        >>> component_color(7, ["a", "b", "c", "d", "e", "f"])
        'b'
    """
    return palette[index % len(palette)]


def marker_fill(
    node_id: NodeId,
    component_index: int,
    *,
    starting_node: NodeId | None,
    palette: Sequence[str],
    highlight_color: str,
) -> str:
    """Fill color for one node marker."""
    if starting_node is not None and node_id == starting_node:
        return highlight_color
    return component_color(component_index, palette)
