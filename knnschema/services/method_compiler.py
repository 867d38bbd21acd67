"""
Method compiler: resolves a method definition to its registered method, enforces
space compatibility, validates parameters and compiles the index description.
"""

from typing import Any

from pydantic import BaseModel, Field

from knnschema.config.logging import get_logger
from knnschema.config.method.models import MethodDefinition
from knnschema.engine.errors import UnknownMethodError, UnsupportedSpaceError
from knnschema.engine.faiss import get_knn_method
from knnschema.engine.knn_method import KNNMethod
from knnschema.engine.space_type import SpaceType

logger = get_logger(__name__)

ENGINE_METHODS = {"faiss": get_knn_method}


class CompiledMethod(BaseModel):
    """Validated method ready for the native engine."""

    name: str
    engine: str
    space_type: str
    index_description: str = Field(..., description="Native index factory descriptor, e.g. HNSW32,SQfp16")
    parameters: dict[str, Any] = Field(..., description="Effective (fully defaulted) parameters")
    requires_training: bool = False


def resolve_method(engine: str, name: str) -> KNNMethod:
    """Return the registered method for engine/name. Raises UnknownMethodError."""
    lookup = ENGINE_METHODS.get(engine)
    method = lookup(name) if lookup is not None else None
    if method is None:
        raise UnknownMethodError(f"{engine}/{name}")
    return method


def compile_method_definition(definition: MethodDefinition) -> CompiledMethod:
    """
    Validate and compile a method definition. Raises ValueError (MethodValidationError
    or space parsing) on the first problem found.
    """
    method = resolve_method(definition.engine, definition.name)
    space = SpaceType.from_value(definition.space_type)
    if not method.is_space_supported(space):
        raise UnsupportedSpaceError(space.value, method.name)
    effective = method.validate(definition.context())
    compiled = CompiledMethod(
        name=method.name,
        engine=method.engine,
        space_type=space.value,
        index_description=method.compile(effective),
        parameters=effective.to_dict(),
        requires_training=method.requires_training(effective),
    )
    logger.info(
        "Method compiled",
        extra={
            "method": compiled.name,
            "engine": compiled.engine,
            "space_type": compiled.space_type,
            "index_description": compiled.index_description,
        },
    )
    return compiled
