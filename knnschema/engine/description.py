"""
Index description generation: renders validated values into the flat descriptor
string the native engine parses, e.g. "HNSW32,SQfp16".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple

from knnschema.engine.context import EffectiveValues
from knnschema.engine.parameter import MethodComponentContextParameter

if TYPE_CHECKING:
    from knnschema.engine.method_component import MethodComponent


class Decoration(NamedTuple):
    """A parameter included in the description, wrapped in literal prefix/suffix text."""

    parameter: str
    prefix: str = ""
    suffix: str = ""


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass(frozen=True)
class DescriptionGenerator:
    """
    Emits `keyword` followed by each decorated parameter in order. A nested choice is
    rendered by its chosen alternative; an alternative without a generator contributes
    nothing, including its decoration.
    """

    keyword: str
    decorations: tuple[Decoration, ...] = ()

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return tuple(d.parameter for d in self.decorations)

    def __call__(self, component: MethodComponent, effective: EffectiveValues) -> str:
        parts = [self.keyword]
        for decoration in self.decorations:
            parameter = component.parameters[decoration.parameter]
            value = effective[decoration.parameter]
            if isinstance(parameter, MethodComponentContextParameter):
                rendered = parameter.alternatives[value.name].describe(value)
                if rendered is None:
                    continue
            else:
                rendered = _format_scalar(value)
            parts.append(f"{decoration.prefix}{rendered}{decoration.suffix}")
        return "".join(parts)


def description_generator(keyword: str, *decorations: Decoration) -> DescriptionGenerator:
    """Build a generator for `keyword` rendering the given decorations in order."""
    return DescriptionGenerator(keyword=keyword, decorations=tuple(decorations))
