"""Method configuration models. Read-only; no business logic."""

from typing import Any

from pydantic import BaseModel, Field

from knnschema.config.settings import Settings
from knnschema.engine.context import MethodComponentContext


class HNSWDefaults(BaseModel):
    """Default HNSW algorithm parameters injected into the method schema."""

    m: int = Field(default=16, ge=1)
    ef_construction: int = Field(default=100, ge=1)
    ef_search: int = Field(default=100, ge=1)

    @classmethod
    def from_settings(cls, settings: Settings) -> "HNSWDefaults":
        return cls(
            m=settings.knn_default_m,
            ef_construction=settings.knn_default_ef_construction,
            ef_search=settings.knn_default_ef_search,
        )


class MethodDefinition(BaseModel):
    """A method definition document: which method, on which engine, for which space."""

    name: str = Field(..., min_length=1, description="Method name, e.g. hnsw")
    engine: str = Field(default="faiss", description="Native engine")
    space_type: str = Field(default="l2", description="undefined|l2|innerproduct|hamming|...")
    parameters: dict[str, Any] = Field(default_factory=dict)

    def context(self) -> MethodComponentContext:
        """Top-level context to validate against the method schema."""
        return MethodComponentContext(name=self.name, parameters=self.parameters)
