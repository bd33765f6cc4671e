"""Parse raw form text into node identifiers, edges and a starting node.

Formats:
    nodes:          "2,6,7,1,5,3,9"       (integers or decimals)
    edges:          "2-7,3-5,1-9,9-6"     (hyphen-separated pairs)
    starting node:  "1"

The node list is parsed strictly: one bad token rejects the whole list,
since it would shift every position in the layout. The edge list is
parsed leniently: malformed tokens are dropped and only logged.
"""

from __future__ import annotations

import logging
import math
import re

from forestviz.exceptions import InvalidNodeListError, InvalidStartingNodeError
from forestviz.model.types import Edge, NodeId

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

LIST_SEPARATOR = ","
EDGE_SEPARATOR = "-"


def parse_node_id(token: str) -> NodeId | None:
    """Convert one token to a node identifier, or None if it is not a number.

    Surrounding whitespace is ignored. Integral values come back as int so
    that "2" and "2.0" name the same node.

    Example:
        >>> parse_node_id(" 7 ")
        7
        >>> parse_node_id("2.5")
        2.5
        >>> parse_node_id("a") is None
        True
    """
    token = token.strip()
    if not _NUMBER_RE.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def parse_nodes(text: str) -> list[NodeId]:
    """Parse a comma-separated node list.

    Args:
        text: Raw node field, e.g. "1, 2, 3"

    Returns:
        Node identifiers in input order. A blank field yields an empty list.

    Raises:
        InvalidNodeListError: If any token is not a number
    """
    if not text.strip():
        return []

    tokens = text.split(LIST_SEPARATOR)
    nodes: list[NodeId] = []
    invalid: list[str] = []
    for token in tokens:
        value = parse_node_id(token)
        if value is None:
            invalid.append(token.strip())
        else:
            nodes.append(value)

    if invalid:
        raise InvalidNodeListError(text, invalid_tokens=invalid)
    return nodes


def _parse_edge(token: str) -> Edge | None:
    parts = token.split(EDGE_SEPARATOR)
    if len(parts) != 2:
        return None
    source, destination = (parse_node_id(part) for part in parts)
    if source is None or destination is None:
        return None
    return Edge(source, destination)


def parse_edges(text: str) -> list[Edge]:
    """Parse a comma-separated list of "a-b" edges.

    Malformed tokens (no hyphen, more than one hyphen, a non-numeric side)
    are dropped from the result. A token such as "1-2-3" is dropped as a
    whole rather than read as its first two parts, and a negative endpoint
    cannot be written. Never raises.

    Example:
        >>> parse_edges("1-2,x-y,3-4")
        [Edge(source=1, destination=2), Edge(source=3, destination=4)]
    """
    edges: list[Edge] = []
    for token in text.split(LIST_SEPARATOR):
        edge = _parse_edge(token)
        if edge is None:
            if token.strip():
                logger.debug("Dropped malformed edge token %r", token)
            continue
        edges.append(edge)
    return edges


def parse_starting_node(text: str) -> NodeId | None:
    """Parse the starting-node field.

    Returns:
        The node identifier, or None when the field is blank (unset)

    Raises:
        InvalidStartingNodeError: If the field holds anything but one number
    """
    if not text.strip():
        return None
    value = parse_node_id(text)
    if value is None:
        raise InvalidStartingNodeError(text)
    return value
