"""Serialize a Scene to SVG and HTML documents.

``scene_to_svg`` is the drawing itself. ``generate_scene_html`` wraps it in
a standalone page (used by the notebook widget and ``forestviz render``),
and ``generate_app_html`` builds the interactive page served by the
browser app, with the input form and toast notifications.
"""

from __future__ import annotations

import html
import json

from forestviz.viz.renderer import Scene
from forestviz.viz.styles import EDGE_STROKE, LABEL_COLOR, NODE_STROKE

PAGE_TITLE = "GRAPH GENERATOR"

NODES_PLACEHOLDER = "Enter nodes (e.g., 2,6,7,1,5,3,9)"
EDGES_PLACEHOLDER = "Enter edges (e.g., 2-7,3-5,1-9,9-6)"
START_PLACEHOLDER = "Enter starting node (e.g., 1)"

_BASE_CSS = """
body { margin: 0; font-family: system-ui, -apple-system, sans-serif; background: #1e293b; color: #f8fafc; }
section { max-width: 720px; margin: 0 auto; padding: 24px; text-align: center; }
h2 { color: white; font-size: 4rem; margin: 16px 0; }
.graph-svg { width: 100%; max-width: 500px; background: #f8fafc; border-radius: 8px; }
.animated-line { animation: dash 1s linear infinite; }
@keyframes dash { to { stroke-dashoffset: -10; } }
.node-text { pointer-events: none; }
.forest-count h3 { margin: 12px 0; }
"""

_APP_CSS = """
.input-container { display: flex; flex-direction: column; gap: 8px; margin-bottom: 16px; }
.input-container input { padding: 8px; border-radius: 4px; border: 1px solid #94a3b8; font-size: 1rem; }
.input-container button { padding: 8px; border-radius: 4px; border: none; background: #6366f1; color: white; font-size: 1rem; cursor: pointer; }
#toasts { position: fixed; top: 16px; right: 16px; display: flex; flex-direction: column; gap: 8px; }
.toast { background: #dc2626; color: white; padding: 10px 14px; border-radius: 6px; box-shadow: 0 2px 8px rgba(0,0,0,.3); max-width: 320px; text-align: left; }
"""


def _num(value: float) -> str:
    """Format a coordinate compactly (two decimals, trailing zeros trimmed)."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _stroke_attrs(dasharray: str | None, color: str, width: int) -> str:
    attrs = f'stroke="{color}" stroke-width="{width}"'
    if dasharray:
        attrs += f' stroke-dasharray="{dasharray}"'
    return attrs


def scene_to_svg(scene: Scene) -> str:
    """Render a Scene as an SVG element.

    Edges are drawn first so node markers sit on top of them.
    """
    edge_attrs = _stroke_attrs(EDGE_STROKE.dasharray, EDGE_STROKE.color, EDGE_STROKE.width)
    node_attrs = _stroke_attrs(NODE_STROKE.dasharray, NODE_STROKE.color, NODE_STROKE.width)

    parts = [
        f'<svg class="graph-svg" xmlns="http://www.w3.org/2000/svg" '
        f'viewBox="0 0 {scene.width} {scene.height}">'
    ]
    for segment in scene.segments:
        parts.append(
            f'<line x1="{_num(segment.start.x)}" y1="{_num(segment.start.y)}" '
            f'x2="{_num(segment.end.x)}" y2="{_num(segment.end.y)}" '
            f'{edge_attrs} class="animated-line"/>'
        )
    for marker in scene.markers:
        cx, cy = _num(marker.center.x), _num(marker.center.y)
        label = html.escape(marker.label)
        parts.append(
            f'<g class="node-group" data-node="{label}">'
            f'<circle cx="{cx}" cy="{cy}" r="{_num(scene.node_radius)}" '
            f'fill="{html.escape(marker.fill, quote=True)}" {node_attrs} class="node-circle"/>'
            f'<text x="{cx}" y="{cy}" text-anchor="middle" alignment-baseline="middle" '
            f'dominant-baseline="middle" font-size="{scene.font_size}" fill="{LABEL_COLOR}" '
            f'class="node-text">{label}</text>'
            f"</g>"
        )
    parts.append("</svg>")
    return "".join(parts)


def _caption_html(scene: Scene) -> str:
    return f'<div class="forest-count"><h3>{html.escape(scene.caption)}</h3></div>'


def generate_scene_html(scene: Scene, *, title: str = PAGE_TITLE) -> str:
    """Generate a standalone HTML document showing one scene."""
    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{html.escape(title)}</title>
    <style>{_BASE_CSS}</style>
</head>
<body>
<section>
    <div class="graph-output">
        {scene_to_svg(scene)}
        {_caption_html(scene)}
    </div>
</section>
</body>
</html>
"""


def generate_app_html(scene: Scene, form_values: dict[str, str] | None = None, *, api_path: str = "api/graph") -> str:
    """Generate the interactive page served by the browser app.

    The form is applied on explicit submission: the "Generate Graph" button
    posts all three raw field values to ``api_path`` and swaps in the
    returned drawing. Rejected fields show a toast and keep the previous
    drawing state.
    """
    values = form_values or {}

    def _value(name: str) -> str:
        return html.escape(values.get(name, ""), quote=True)

    return f"""<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>{PAGE_TITLE}</title>
    <style>{_BASE_CSS}{_APP_CSS}</style>
</head>
<body>
<section>
    <h2>{PAGE_TITLE}</h2>
    <div class="graph-container">
        <form id="graph-form" class="input-container">
            <input type="text" name="nodes" placeholder="{NODES_PLACEHOLDER}" value="{_value("nodes")}">
            <input type="text" name="edges" placeholder="{EDGES_PLACEHOLDER}" value="{_value("edges")}">
            <input type="text" inputmode="decimal" name="starting_node" placeholder="{START_PLACEHOLDER}" value="{_value("starting_node")}">
            <button type="submit">Generate Graph</button>
        </form>
        <div class="graph-output">
            <div id="drawing">{scene_to_svg(scene)}</div>
            <div class="forest-count"><h3 id="caption">{html.escape(scene.caption)}</h3></div>
        </div>
        <div id="toasts"></div>
    </div>
</section>
<script>
(function () {{
    const API_PATH = {json.dumps(api_path)};
    const form = document.getElementById("graph-form");

    function toast(message) {{
        const el = document.createElement("div");
        el.className = "toast";
        el.textContent = message;
        document.getElementById("toasts").appendChild(el);
        setTimeout(() => el.remove(), 5000);
    }}

    form.addEventListener("submit", async (event) => {{
        event.preventDefault();
        const data = new FormData(form);
        const body = {{
            nodes: data.get("nodes") || "",
            edges: data.get("edges") || "",
            starting_node: data.get("starting_node") || "",
        }};
        try {{
            const resp = await fetch(API_PATH, {{
                method: "POST",
                headers: {{ "Content-Type": "application/json" }},
                body: JSON.stringify(body),
            }});
            if (!resp.ok) {{
                toast("Request failed: " + resp.status);
                return;
            }}
            const result = await resp.json();
            document.getElementById("drawing").innerHTML = result.svg;
            document.getElementById("caption").textContent = result.scene.caption;
            (result.notifications || []).forEach((n) => toast(n.message));
        }} catch (err) {{
            toast("Request failed: " + err);
        }}
    }});
}})();
</script>
</body>
</html>
"""
