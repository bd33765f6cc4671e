"""Visualization: circular layout, scene rendering and SVG/HTML output.

Usage:
    from forestviz.viz import build_scene, scene_to_svg

    scene = build_scene(model)
    scene.caption       # "Number of Unique Forests: 2"
    scene_to_svg(scene)  # <svg class="graph-svg" ...>

    visualize(model)  # Returns a Jupyter widget
"""

from forestviz.viz.coordinates import Point, circle_point, circular_layout
from forestviz.viz.renderer import (
    EdgeSegment,
    NodeMarker,
    Scene,
    build_scene,
    render_scene,
)
from forestviz.viz.svg import generate_app_html, generate_scene_html, scene_to_svg
from forestviz.viz.widget import GraphWidget, visualize

__all__ = [
    "EdgeSegment",
    "GraphWidget",
    "NodeMarker",
    "Point",
    "Scene",
    "build_scene",
    "circle_point",
    "circular_layout",
    "generate_app_html",
    "generate_scene_html",
    "render_scene",
    "scene_to_svg",
    "visualize",
]
