"""
MethodComponent: the immutable parameter schema of one algorithm or sub-algorithm
variant (hnsw, flat, sq, pq). Validates contexts and renders validated values.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from knnschema.config.logging import get_logger
from knnschema.engine.context import EffectiveValues, MethodComponentContext, sealed_values
from knnschema.engine.description import DescriptionGenerator
from knnschema.engine.errors import (
    DuplicateParameterError,
    InvalidParameterValueError,
    MethodDefinitionError,
    UnknownMethodError,
    UnknownParameterError,
)
from knnschema.engine.parameter import MethodComponentContextParameter, Parameter

logger = get_logger(__name__)

INDEX_DESCRIPTION_KEY = "index_description"


class MethodComponent:
    """
    Ordered, immutable mapping of parameter name -> Parameter plus an optional
    description generator. Parameter order drives rendering order.
    """

    def __init__(
        self,
        name: str,
        parameters: Sequence[Parameter] = (),
        generator: DescriptionGenerator | None = None,
        requires_training: bool = False,
    ):
        declared: dict[str, Parameter] = {}
        for parameter in parameters:
            if parameter.name in declared:
                raise DuplicateParameterError(
                    f"Parameter {parameter.name!r} declared twice on component {name!r}"
                )
            declared[parameter.name] = parameter
        if generator is not None:
            missing = [p for p in generator.parameter_names if p not in declared]
            if missing:
                raise MethodDefinitionError(
                    f"Description of component {name!r} renders undeclared parameters: {missing}"
                )
        self._name = name
        self._parameters: Mapping[str, Parameter] = MappingProxyType(declared)
        self._generator = generator
        self._requires_training = requires_training

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> Mapping[str, Parameter]:
        return self._parameters

    @property
    def generator(self) -> DescriptionGenerator | None:
        return self._generator

    def __repr__(self) -> str:
        return f"MethodComponent(name={self._name!r}, parameters={list(self._parameters)})"

    def validate(self, context: MethodComponentContext) -> EffectiveValues:
        """
        Validate `context` against this schema. Missing parameters take their defaults;
        nested choices are validated recursively against the chosen alternative.
        Fail-fast: raises the first MethodValidationError encountered.
        """
        if context.name != self._name:
            raise UnknownMethodError(context.name, expected=self._name)
        supplied = context.parameters
        effective: dict[str, Any] = {}
        for name, parameter in self._parameters.items():
            value = supplied[name] if name in supplied else parameter.default
            if isinstance(parameter, MethodComponentContextParameter):
                effective[name] = parameter.resolve(value, component=self._name)
            elif parameter.validate(value):
                effective[name] = value
            else:
                logger.debug(
                    "Parameter validation failed",
                    extra={"component": self._name, "parameter": name, "value": repr(value)},
                )
                raise InvalidParameterValueError(name, value, self._name)
        for name in supplied:
            if name not in self._parameters:
                raise UnknownParameterError(name, self._name)
        return sealed_values(self._name, effective)

    def describe(self, effective: EffectiveValues) -> str | None:
        """Index description for validated values, or None when the component adds no syntax."""
        if self._generator is None:
            return None
        return self._generator(self, effective)

    def as_map(self, effective: EffectiveValues) -> dict[str, Any]:
        """
        Engine-facing map: name, effective parameters (nested choices as their own maps)
        and, when a generator is attached, the index description.
        """
        parameters: dict[str, Any] = {}
        for name, parameter in self._parameters.items():
            value = effective[name]
            if isinstance(parameter, MethodComponentContextParameter):
                parameters[name] = parameter.alternatives[value.name].as_map(value)
            else:
                parameters[name] = value
        out: dict[str, Any] = {"name": self._name, "parameters": parameters}
        description = self.describe(effective)
        if description is not None:
            out[INDEX_DESCRIPTION_KEY] = description
        return out

    def requires_training(self, effective: EffectiveValues) -> bool:
        """True if this component or any selected nested alternative needs a training step."""
        if self._requires_training:
            return True
        for name, parameter in self._parameters.items():
            if isinstance(parameter, MethodComponentContextParameter):
                value = effective[name]
                if parameter.alternatives[value.name].requires_training(value):
                    return True
        return False

    def parameter_schema(self) -> dict[str, Any]:
        """Introspection view of declared parameters: kind, default and alternatives."""
        return {name: parameter.to_schema() for name, parameter in self._parameters.items()}
