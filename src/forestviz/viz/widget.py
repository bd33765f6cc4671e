"""Jupyter widget and HTML file output for graph scenes."""

from __future__ import annotations

import html as html_module

from forestviz.config import ForestvizConfig
from forestviz.model.types import GraphModel
from forestviz.viz.renderer import build_scene
from forestviz.viz.svg import generate_scene_html

# Room for the caption below the drawing
CAPTION_HEIGHT = 80


class GraphWidget:
    """Widget for showing a rendered graph in Jupyter/VSCode notebooks.

    The scene is embedded as an iframe ``srcdoc`` with explicit sizing so
    the notebook does not add its own scrollbars.
    """

    def __init__(self, html_content: str, width: int, height: int):
        self.html_content = html_content
        self.width = width
        self.height = height

    def _repr_html_(self) -> str:
        """Return HTML representation for Jupyter display."""
        escaped_html = html_module.escape(self.html_content, quote=True)
        return (
            f'<iframe srcdoc="{escaped_html}" '
            f'width="{self.width}" height="{self.height}" frameborder="0" '
            f'style="border: none; width: {self.width}px; max-width: 100%; '
            f'height: {self.height}px; display: block; margin: 0 auto; border-radius: 8px;">'
            f"</iframe>"
        )


def visualize(
    model: GraphModel,
    *,
    config: ForestvizConfig | None = None,
    filepath: str | None = None,
) -> GraphWidget | None:
    """Render a graph model as a notebook widget or an HTML file.

    Args:
        model: Parsed nodes, edges and starting node
        config: Drawing configuration (defaults when None)
        filepath: Path to save an HTML file instead of returning a widget

    Returns:
        GraphWidget if filepath is None, otherwise None (saves to file)

    Example:
        >>> from forestviz import Edge, GraphModel
        >>> model = GraphModel(nodes=(1, 2, 3), edges=(Edge(1, 2),), starting_node=1)
        >>> widget = visualize(model)  # Display in notebook
        >>> visualize(model, filepath="graph.html")  # Save to HTML file
    """
    config = config or ForestvizConfig()
    scene = build_scene(model, config=config)
    html_content = generate_scene_html(scene)

    if filepath is not None:
        if not filepath.endswith(".html"):
            filepath = filepath + ".html"
        with open(filepath, "w") as f:
            f.write(html_content)
        return None

    return GraphWidget(html_content, config.width + 48, config.height + CAPTION_HEIGHT + 48)
