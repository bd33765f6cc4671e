"""Project computed graph state into a drawable scene.

The renderer performs lookups and formatting only:

    components + edges + positions + starting node  ->  Scene

A ``Scene`` holds one line segment per drawable edge, one marker per node
in some component, and the forest count caption. Elements that cannot be
placed are omitted with a logged diagnostic; the rest of the scene is
still drawn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from forestviz.config import ForestvizConfig
from forestviz.graph.components import Component, find_components, forest_count
from forestviz.model.types import Edge, GraphModel, NodeId
from forestviz.viz.coordinates import Point, circular_layout
from forestviz.viz.styles import marker_fill

logger = logging.getLogger(__name__)

CAPTION_TEMPLATE = "Number of Unique Forests: {count}"


def format_node_id(node_id: NodeId) -> str:
    """Label text for a node marker."""
    return str(node_id)


@dataclass(frozen=True)
class EdgeSegment:
    """A straight line drawn between two placed nodes."""

    source: NodeId
    destination: NodeId
    start: Point
    end: Point

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "destination": self.destination,
            "x1": self.start.x,
            "y1": self.start.y,
            "x2": self.end.x,
            "y2": self.end.y,
        }


@dataclass(frozen=True)
class NodeMarker:
    """A circular node marker with a centered label."""

    node_id: NodeId
    center: Point
    fill: str
    label: str
    component_index: int
    highlighted: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.node_id,
            "cx": self.center.x,
            "cy": self.center.y,
            "fill": self.fill,
            "label": self.label,
            "component": self.component_index,
            "highlighted": self.highlighted,
        }


@dataclass
class Scene:
    """Complete drawing for one render pass.

    Attributes:
        width: Viewport width
        height: Viewport height
        node_radius: Radius of every node marker
        font_size: Label font size
        segments: Edge lines, in edge order
        markers: Node markers, grouped by component in discovery order
        components: The components the markers were built from
    """

    width: int
    height: int
    node_radius: float
    font_size: int
    segments: list[EdgeSegment] = field(default_factory=list)
    markers: list[NodeMarker] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)

    @property
    def forest_count(self) -> int:
        return forest_count(self.components)

    @property
    def caption(self) -> str:
        return CAPTION_TEMPLATE.format(count=self.forest_count)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready mapping for the browser client."""
        return {
            "width": self.width,
            "height": self.height,
            "nodeRadius": self.node_radius,
            "fontSize": self.font_size,
            "segments": [s.to_dict() for s in self.segments],
            "markers": [m.to_dict() for m in self.markers],
            "components": [list(c) for c in self.components],
            "forestCount": self.forest_count,
            "caption": self.caption,
        }


def render_segments(
    edges: Sequence[Edge],
    positions: Mapping[NodeId, Point],
) -> list[EdgeSegment]:
    """One segment per edge whose endpoints both have a position."""
    segments: list[EdgeSegment] = []
    for edge in edges:
        start = positions.get(edge.source)
        end = positions.get(edge.destination)
        if start is None or end is None:
            logger.warning(
                "Undefined position for nodes: source(%s) or destination(%s)",
                edge.source,
                edge.destination,
            )
            continue
        segments.append(EdgeSegment(edge.source, edge.destination, start, end))
    return segments


def render_markers(
    components: Sequence[Component],
    positions: Mapping[NodeId, Point],
    starting_node: NodeId | None,
    config: ForestvizConfig,
) -> list[NodeMarker]:
    """One marker per component member, colored by component index."""
    markers: list[NodeMarker] = []
    for index, component in enumerate(components):
        for node_id in component:
            center = positions.get(node_id)
            if center is None:
                logger.warning("Undefined position for node %s", node_id)
                continue
            fill = marker_fill(
                node_id,
                index,
                starting_node=starting_node,
                palette=config.palette,
                highlight_color=config.highlight_color,
            )
            markers.append(
                NodeMarker(
                    node_id=node_id,
                    center=center,
                    fill=fill,
                    label=format_node_id(node_id),
                    component_index=index,
                    highlighted=starting_node is not None and node_id == starting_node,
                )
            )
    return markers


def render_scene(
    components: Sequence[Component],
    edges: Sequence[Edge],
    positions: Mapping[NodeId, Point],
    starting_node: NodeId | None = None,
    *,
    config: ForestvizConfig | None = None,
) -> Scene:
    """Project already-computed graph state into a Scene.

    Args:
        components: Components from find_components, in discovery order
        edges: Parsed edges, in input order
        positions: Node positions from circular_layout
        starting_node: Node to highlight (need not exist)
        config: Drawing configuration (defaults when None)

    Returns:
        Scene with segments, markers and the component count
    """
    config = config or ForestvizConfig()
    return Scene(
        width=config.width,
        height=config.height,
        node_radius=config.node_radius,
        font_size=config.font_size,
        segments=render_segments(edges, positions),
        markers=render_markers(components, positions, starting_node, config),
        components=[list(c) for c in components],
    )


def build_scene(model: GraphModel, *, config: ForestvizConfig | None = None) -> Scene:
    """Run the full pipeline: components, layout, then rendering."""
    config = config or ForestvizConfig()
    components = find_components(model.nodes, model.edges)
    positions = circular_layout(
        model.nodes,
        center=Point(*config.center),
        radius=config.layout_radius,
    )
    logger.debug("Node positions: %s", positions)
    return render_scene(
        components,
        model.edges,
        positions,
        model.starting_node,
        config=config,
    )
