"""Method contexts: raw user-supplied configurations and their validated, fully-defaulted form."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_VALIDATED = object()


class MethodComponentContext(BaseModel):
    """
    A concrete, possibly partial configuration of one method component.
    `name` selects the component (or the alternative, for nested choices); `parameters`
    holds raw values as a read-only mapping. Mapping values are parsed into nested contexts.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Component name, e.g. hnsw, flat, sq, pq")
    parameters: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("parameters", mode="before")
    @classmethod
    def _parse_nested_contexts(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            return value
        return {
            key: cls.model_validate(item) if isinstance(item, Mapping) else item
            for key, item in value.items()
        }

    @field_validator("parameters", mode="after")
    @classmethod
    def _freeze_parameters(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form; nested contexts become {name, parameters}."""
        parameters = {
            key: item.to_dict() if isinstance(item, MethodComponentContext) else item
            for key, item in self.parameters.items()
        }
        return {"name": self.name, "parameters": parameters}


@dataclass(frozen=True)
class EffectiveValues:
    """
    Output of a successful validation: every declared parameter is present, nested
    choices are themselves EffectiveValues. The only accepted input to compilation;
    built through `sealed_values` by MethodComponent.validate, never directly.
    """

    name: str
    values: Mapping[str, Any]
    _seal: object = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self._seal is not _VALIDATED:
            raise TypeError("EffectiveValues are produced by MethodComponent.validate only")
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form; nested choices become {name, parameters}."""
        out: dict[str, Any] = {}
        for key, value in self.values.items():
            if isinstance(value, EffectiveValues):
                out[key] = {"name": value.name, "parameters": value.to_dict()}
            else:
                out[key] = value
        return out


def sealed_values(name: str, values: Mapping[str, Any]) -> EffectiveValues:
    """Wrap fully validated values. Called by MethodComponent.validate once every check passed."""
    return EffectiveValues(name, values, _VALIDATED)
