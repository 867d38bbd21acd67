"""Method schema endpoints: introspect a method and compile method definitions."""

from fastapi import APIRouter, HTTPException

from knnschema.config.method.static import resolve_method_definition
from knnschema.controllers.schema.method import CompileRequest, MethodInfo
from knnschema.engine.errors import UnknownMethodError
from knnschema.services.method_compiler import CompiledMethod, compile_method_definition, resolve_method

router = APIRouter(prefix="/methods", tags=["methods"])


@router.post("/compile", response_model=CompiledMethod)
async def compile_method(body: CompileRequest) -> CompiledMethod:
    """
    Resolve a profile or inline method definition, validate it against the method
    schema and return the compiled index description with effective parameters.
    """
    try:
        definition = resolve_method_definition(body.method)
        return compile_method_definition(definition)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@router.get("/{name}", response_model=MethodInfo)
async def get_method(name: str, engine: str = "faiss") -> MethodInfo:
    """Declared parameters and supported space types of a registered method."""
    try:
        method = resolve_method(engine, name)
    except UnknownMethodError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return MethodInfo(
        name=method.name,
        engine=method.engine,
        supported_spaces=sorted(s.value for s in method.supported_metrics()),
        parameters=method.component.parameter_schema(),
    )
