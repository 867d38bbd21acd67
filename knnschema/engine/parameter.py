"""
Typed method parameters. Each parameter has a name, a default and a validator
predicate; values that fail the predicate are rejected, never clamped or coerced.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from knnschema.engine.context import EffectiveValues, MethodComponentContext
from knnschema.engine.errors import (
    EmptyAlternativeSetError,
    InvalidDefaultError,
    InvalidParameterValueError,
    MethodValidationError,
    UnknownAlternativeError,
)

if TYPE_CHECKING:
    from knnschema.engine.method_component import MethodComponent


class ParameterKind(str, Enum):
    INTEGER = "integer"
    STRING = "string"
    BOOLEAN = "boolean"
    METHOD_COMPONENT_CONTEXT = "method_component_context"


class Parameter(ABC):
    """Named, typed slot with a default and a pure validator predicate."""

    kind: ParameterKind

    def __init__(self, name: str, default: Any, validator: Callable[[Any], bool] | None = None):
        self._name = name
        self._default = default
        self._validator = validator
        if not self.validate(default):
            raise InvalidDefaultError(f"Default {default!r} of parameter {name!r} fails its own validator")

    @property
    def name(self) -> str:
        return self._name

    @property
    def default(self) -> Any:
        return self._default

    @abstractmethod
    def _is_instance(self, value: Any) -> bool:
        ...

    def validate(self, value: Any) -> bool:
        """True when value has the parameter's type and passes the predicate."""
        if not self._is_instance(value):
            return False
        return self._validator is None or bool(self._validator(value))

    def to_schema(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "default": self._default}


class IntegerParameter(Parameter):
    kind = ParameterKind.INTEGER

    def _is_instance(self, value: Any) -> bool:
        # bool is an int subclass but never a valid integer parameter
        return isinstance(value, int) and not isinstance(value, bool)


class StringParameter(Parameter):
    kind = ParameterKind.STRING

    def _is_instance(self, value: Any) -> bool:
        return isinstance(value, str)


class BooleanParameter(Parameter):
    kind = ParameterKind.BOOLEAN

    def _is_instance(self, value: Any) -> bool:
        return isinstance(value, bool)


class MethodComponentContextParameter(Parameter):
    """
    Nested choice: the value is itself a MethodComponentContext that selects one of a
    closed set of alternative components by name and is validated against it.
    """

    kind = ParameterKind.METHOD_COMPONENT_CONTEXT

    def __init__(
        self,
        name: str,
        default: MethodComponentContext,
        alternatives: Mapping[str, MethodComponent],
    ):
        if not alternatives:
            raise EmptyAlternativeSetError(f"Parameter {name!r} declares no alternatives")
        self._alternatives: Mapping[str, MethodComponent] = MappingProxyType(dict(alternatives))
        super().__init__(name, default)

    @property
    def alternatives(self) -> Mapping[str, MethodComponent]:
        return self._alternatives

    def _is_instance(self, value: Any) -> bool:
        return isinstance(value, MethodComponentContext)

    def resolve(self, value: Any, component: str | None = None) -> EffectiveValues:
        """Validate a nested context against its chosen alternative. Raises on the first violation."""
        if not self._is_instance(value):
            raise InvalidParameterValueError(self._name, value, component or self._name)
        alternative = self._alternatives.get(value.name)
        if alternative is None:
            raise UnknownAlternativeError(self._name, value.name, sorted(self._alternatives))
        return alternative.validate(value)

    def validate(self, value: Any) -> bool:
        try:
            self.resolve(value)
        except MethodValidationError:
            return False
        return True

    def to_schema(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "default": self._default.to_dict(),
            "alternatives": {
                alt_name: alternative.parameter_schema()
                for alt_name, alternative in self._alternatives.items()
            },
        }
