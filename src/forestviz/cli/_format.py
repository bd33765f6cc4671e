"""Output helpers for ``forestviz render``."""

from __future__ import annotations

import json
from typing import Any, Sequence

from forestviz.graph.components import Component
from forestviz.model.types import GraphModel
from forestviz.viz.renderer import Scene

TABLE_HEADERS = ("Forest", "Size", "Members")


def format_members(members: Sequence[Any], max_chars: int = 60) -> str:
    """Join component members for a table cell, truncating long lists."""
    text = ", ".join(str(m) for m in members)
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1] + "…"


def components_table(components: Sequence[Component], indent: int = 2) -> list[str]:
    """One row per component: its 1-based number, size and members.

    Returns an empty list when there are no components.
    """
    if not components:
        return []

    rows = [
        (str(index), str(len(component)), format_members(component))
        for index, component in enumerate(components, start=1)
    ]
    widths = [max(len(cell) for cell in column) for column in zip(TABLE_HEADERS, *rows)]
    prefix = " " * indent

    def _line(cells: Sequence[str]) -> str:
        return prefix + "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    return [
        _line(TABLE_HEADERS),
        _line(["─" * width for width in widths]),
        *(_line(row) for row in rows),
    ]


def render_document(model: GraphModel, scene: Scene) -> str:
    """JSON document with the parsed state and the rendered scene."""
    return json.dumps({"state": model.to_dict(), "scene": scene.to_dict()}, indent=2)
