"""Input form records and the session that applies them.

``GraphForm`` is a plain collection point for raw field text. The
``GraphSession`` owns the current valid ``GraphModel`` and is the
input-handling boundary: parse errors never escape it. A rejected strict
field (nodes, starting node) keeps its previous value and yields a
user-facing ``Notification``; an edge list with no valid edges is a no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any

from forestviz.config import ForestvizConfig
from forestviz.exceptions import InvalidNodeListError, InvalidStartingNodeError, ParseError
from forestviz.model.parser import parse_edges, parse_nodes, parse_starting_node
from forestviz.model.types import GraphModel
from forestviz.viz.renderer import Scene, build_scene

logger = logging.getLogger(__name__)

# User-facing messages, keyed by notification kind
MESSAGES = {
    "InvalidNodeList": "Please enter only numbers separated by commas for nodes.",
    "InvalidStartingNode": "Please enter a valid number for the starting node.",
}


@dataclass(frozen=True)
class GraphForm:
    """Raw values of the three input fields. No validation happens here."""

    nodes: str = ""
    edges: str = ""
    starting_node: str = ""


@dataclass(frozen=True)
class Notification:
    """A transient warning to show the user."""

    kind: str
    message: str
    level: str = "error"

    @classmethod
    def from_error(cls, error: ParseError) -> Notification:
        if isinstance(error, InvalidNodeListError):
            kind = "InvalidNodeList"
        elif isinstance(error, InvalidStartingNodeError):
            kind = "InvalidStartingNode"
        else:
            kind = type(error).__name__
        return cls(kind=kind, message=MESSAGES.get(kind, error.message))

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message, "level": self.level}


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of applying a form: the resulting state and any warnings."""

    model: GraphModel
    notifications: list[Notification] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.notifications


class GraphSession:
    """Current graph state for one rendering surface.

    Every update is synchronous: parse, then replace the model. Callers
    can apply fields one at a time (live editing) or all at once through
    ``submit`` (explicit submission).

    Example:
        >>> session = GraphSession()
        >>> session.submit(GraphForm(nodes="1,2,3", edges="1-2")).ok
        True
        >>> session.scene().forest_count
        2
    """

    def __init__(
        self,
        model: GraphModel | None = None,
        *,
        config: ForestvizConfig | None = None,
    ) -> None:
        self.model = model or GraphModel()
        self.config = config or ForestvizConfig()

    def update_nodes(self, text: str) -> Notification | None:
        """Replace the node list, or keep it and warn if any token is invalid."""
        try:
            nodes = parse_nodes(text)
        except InvalidNodeListError as e:
            logger.info("Rejected node list %r: %s", text, e.message)
            return Notification.from_error(e)
        self.model = replace(self.model, nodes=tuple(nodes))
        return None

    def update_edges(self, text: str) -> None:
        """Replace the edge list unless no valid edge was found."""
        edges = parse_edges(text)
        if not edges:
            logger.debug("No valid edges in %r; keeping previous edges", text)
            return
        self.model = replace(self.model, edges=tuple(edges))

    def update_starting_node(self, text: str) -> Notification | None:
        """Replace the starting node, or keep it and warn if not a number."""
        try:
            starting_node = parse_starting_node(text)
        except InvalidStartingNodeError as e:
            logger.info("Rejected starting node %r: %s", text, e.message)
            return Notification.from_error(e)
        self.model = replace(self.model, starting_node=starting_node)
        return None

    def submit(self, form: GraphForm) -> SubmitResult:
        """Apply all three fields. Each field succeeds or fails on its own."""
        notifications: list[Notification] = []

        notification = self.update_nodes(form.nodes)
        if notification is not None:
            notifications.append(notification)

        self.update_edges(form.edges)

        notification = self.update_starting_node(form.starting_node)
        if notification is not None:
            notifications.append(notification)

        return SubmitResult(model=self.model, notifications=notifications)

    def reset(self) -> None:
        """Drop all state back to the empty graph."""
        self.model = GraphModel()

    def scene(self) -> Scene:
        """Render the current state."""
        return build_scene(self.model, config=self.config)
