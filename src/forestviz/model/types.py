"""Graph data model: numeric node identifiers, edges and parsed form state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

# Node identifiers are numbers; integral values are normalised to int.
NodeId = Union[int, float]


@dataclass(frozen=True)
class Edge:
    """A connection between two node identifiers.

    Edges are undirected for connectivity purposes. ``source`` and
    ``destination`` only record the order in which the user typed them.
    Either endpoint may be absent from the node sequence.
    """

    source: NodeId
    destination: NodeId

    @property
    def endpoints(self) -> tuple[NodeId, NodeId]:
        return (self.source, self.destination)

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "destination": self.destination}


@dataclass(frozen=True)
class GraphModel:
    """The last valid graph state produced from the input form.

    Attributes:
        nodes: Node identifiers in input order (duplicates tolerated)
        edges: Parsed edges in input order
        starting_node: Highlighted node, or None when unset
    """

    nodes: tuple[NodeId, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)
    starting_node: NodeId | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": list(self.nodes),
            "edges": [edge.to_dict() for edge in self.edges],
            "starting_node": self.starting_node,
        }
