"""FastAPI application serving the interactive graph page.

Usage:
    uvicorn forestviz.server.app:create_app --factory --reload
    forestviz serve --port 8000

Endpoints:
- GET    /           -> Interactive page (form + drawing)
- GET    /api/graph  -> Current state, scene and SVG
- POST   /api/graph  -> Submit the form, returns the new drawing and warnings
- DELETE /api/graph  -> Reset to the empty graph
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import HTMLResponse

from forestviz.config import ForestvizConfig, load_config
from forestviz.form.session import GraphForm, GraphSession, Notification
from forestviz.server.models import GraphFormRequest, GraphResponse
from forestviz.viz.svg import generate_app_html, scene_to_svg

router = APIRouter(prefix="/api", tags=["api"])


def _session(request: Request) -> GraphSession:
    return request.app.state.session


def _graph_response(session: GraphSession, notifications: list[Notification] | None = None) -> GraphResponse:
    scene = session.scene()
    return GraphResponse(
        state=session.model.to_dict(),
        scene=scene.to_dict(),
        svg=scene_to_svg(scene),
        forest_count=scene.forest_count,
        notifications=[n.to_dict() for n in notifications or []],
    )


@router.get("/graph", response_model=GraphResponse)
async def api_get_graph(request: Request):
    """Current graph state and drawing."""
    return _graph_response(_session(request))


@router.post("/graph", response_model=GraphResponse)
async def api_submit_graph(body: GraphFormRequest, request: Request):
    """Submit raw form values. Rejected fields keep their previous value."""
    session = _session(request)
    result = session.submit(
        GraphForm(nodes=body.nodes, edges=body.edges, starting_node=body.starting_node)
    )
    return _graph_response(session, result.notifications)


@router.delete("/graph", response_model=GraphResponse)
async def api_reset_graph(request: Request):
    """Reset to the empty graph."""
    session = _session(request)
    session.reset()
    return _graph_response(session)


def create_app(config: ForestvizConfig | None = None) -> FastAPI:
    """Create the app with a single graph session.

    Args:
        config: Drawing configuration; loaded from pyproject.toml when None
    """
    app = FastAPI(
        title="Forestviz",
        description="Draw a small graph and count its connected components",
        version="0.1.0",
    )
    app.state.session = GraphSession(config=config or load_config())
    app.include_router(router)

    @app.get("/", response_class=HTMLResponse)
    async def root(request: Request):
        return generate_app_html(_session(request).scene())

    return app

