"""CLI commands: render, serve."""

from __future__ import annotations

from typing import Annotated

import typer

from forestviz.cli._format import components_table, render_document
from forestviz.config import load_config
from forestviz.exceptions import ParseError
from forestviz.model.parser import parse_edges, parse_nodes, parse_starting_node
from forestviz.model.types import GraphModel
from forestviz.viz.renderer import build_scene
from forestviz.viz.svg import generate_scene_html, scene_to_svg


def _parse_model(nodes: str, edges: str, start: str) -> GraphModel:
    """Parse CLI options strictly: an invalid node list or start node exits 1."""
    try:
        return GraphModel(
            nodes=tuple(parse_nodes(nodes)),
            edges=tuple(parse_edges(edges)),
            starting_node=parse_starting_node(start),
        )
    except ParseError as e:
        print(f"Error: {e.message}")
        raise typer.Exit(1) from e


def render(
    nodes: Annotated[str, typer.Option("--nodes", "-n", help="Comma-separated nodes, e.g. 2,6,7,1,5,3,9")] = "",
    edges: Annotated[str, typer.Option("--edges", "-e", help="Comma-separated edges, e.g. 2-7,3-5,1-9,9-6")] = "",
    start: Annotated[str, typer.Option("--start", "-s", help="Starting node to highlight")] = "",
    as_json: Annotated[bool, typer.Option("--json", help="Print (or with --output, write) state and scene as JSON")] = False,
    output: Annotated[str | None, typer.Option("--output", "-o", help="Write the drawing (HTML, or SVG with --svg) to a file")] = None,
    svg: Annotated[bool, typer.Option("--svg", help="With --output, write bare SVG instead of an HTML page")] = False,
):
    """Find connected components and draw the graph.

    Prints a table of components. With --output the drawing is also
    written as HTML, or as SVG when --svg is given. --json prints a JSON
    document of the parsed state and scene instead, written to --output
    when one is given.
    """
    if svg and (output is None or as_json):
        print("Error: --svg needs --output and cannot be combined with --json")
        raise typer.Exit(1)

    model = _parse_model(nodes, edges, start)
    scene = build_scene(model, config=load_config())

    if as_json:
        document = render_document(model, scene)
        if output is None:
            print(document)
        else:
            with open(output, "w") as f:
                f.write(document)
            print(f"Wrote JSON to {output}")
        return

    if output is not None:
        content = scene_to_svg(scene) if svg else generate_scene_html(scene)
        with open(output, "w") as f:
            f.write(content)
        print(f"Wrote drawing to {output}")

    print(f"\nGraph: {len(model.nodes)} nodes | {len(model.edges)} edges\n")
    for line in components_table(scene.components):
        print(line)
    print(f"\n  {scene.caption}")
    if model.starting_node is not None:
        highlighted = any(m.highlighted for m in scene.markers)
        suffix = "" if highlighted else " (not in node list)"
        print(f"  Starting node: {model.starting_node}{suffix}")


def serve(
    host: Annotated[str, typer.Option("--host", help="Bind address")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", help="Port")] = 8000,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
    log_level: Annotated[str, typer.Option("--log-level", help="Server log level")] = "info",
):
    """Serve the interactive graph page."""
    import uvicorn

    print(f"Serving forestviz at http://{host}:{port}")
    uvicorn.run(
        "forestviz.server.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


def register_commands(app: typer.Typer) -> None:
    """Register render and serve as top-level commands."""
    app.command("render")(render)
    app.command("serve")(serve)
