"""Pydantic models for API request/response."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field

Number = Union[int, float]


class GraphFormRequest(BaseModel):
    nodes: str = ""
    edges: str = ""
    starting_node: str = ""


class EdgeModel(BaseModel):
    source: Number
    destination: Number


class GraphStateModel(BaseModel):
    nodes: list[Number] = Field(default_factory=list)
    edges: list[EdgeModel] = Field(default_factory=list)
    starting_node: Number | None = None


class NotificationModel(BaseModel):
    kind: str
    message: str
    level: str = "error"


class GraphResponse(BaseModel):
    state: GraphStateModel
    scene: dict[str, Any]
    svg: str
    forest_count: int
    notifications: list[NotificationModel] = Field(default_factory=list)
