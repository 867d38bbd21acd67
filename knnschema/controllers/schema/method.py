"""Request/response schemas for the /methods endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class CompileRequest(BaseModel):
    """POST /methods/compile request body."""

    method: str | dict[str, Any] = Field(
        ...,
        description="Profile name (e.g. hnsw_default), 'active', or inline {name, engine, space_type, parameters}",
    )


class MethodInfo(BaseModel):
    """GET /methods/{name} response body."""

    name: str
    engine: str
    supported_spaces: list[str] = Field(..., description="Space types this method can be paired with")
    parameters: dict[str, Any] = Field(..., description="Declared parameters: kind, default, alternatives")
