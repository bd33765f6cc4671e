"""Forestviz - draw small graphs in a circle and count their connected components."""

from forestviz.config import ForestvizConfig, load_config
from forestviz.exceptions import (
    ConfigError,
    InvalidNodeListError,
    InvalidStartingNodeError,
    ParseError,
)
from forestviz.form import GraphForm, GraphSession, Notification, SubmitResult
from forestviz.graph import find_components, forest_count
from forestviz.model import (
    Edge,
    GraphModel,
    parse_edges,
    parse_nodes,
    parse_starting_node,
)
from forestviz.viz import (
    Point,
    Scene,
    build_scene,
    circular_layout,
    render_scene,
    scene_to_svg,
    visualize,
)

__all__ = [
    # Model
    "Edge",
    "GraphModel",
    "parse_nodes",
    "parse_edges",
    "parse_starting_node",
    # Connectivity
    "find_components",
    "forest_count",
    # Layout and rendering
    "Point",
    "Scene",
    "circular_layout",
    "render_scene",
    "build_scene",
    "scene_to_svg",
    "visualize",
    # Form
    "GraphForm",
    "GraphSession",
    "Notification",
    "SubmitResult",
    # Config
    "ForestvizConfig",
    "load_config",
    # Errors
    "ParseError",
    "InvalidNodeListError",
    "InvalidStartingNodeError",
    "ConfigError",
]
