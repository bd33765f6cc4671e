"""Graph model types and the text parser that produces them."""

from forestviz.model.parser import (
    parse_edges,
    parse_node_id,
    parse_nodes,
    parse_starting_node,
)
from forestviz.model.types import Edge, GraphModel, NodeId

__all__ = [
    "Edge",
    "GraphModel",
    "NodeId",
    "parse_edges",
    "parse_node_id",
    "parse_nodes",
    "parse_starting_node",
]
