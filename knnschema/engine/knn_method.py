"""
KNNMethod: a top-level method descriptor pairing a MethodComponent with the fixed
set of space types it supports.
"""

from collections.abc import Iterable
from typing import Any

from knnschema.engine.context import EffectiveValues, MethodComponentContext
from knnschema.engine.method_component import MethodComponent
from knnschema.engine.space_type import SpaceType


class KNNMethod:
    """Entry point used by callers: declared metrics, validation and compilation."""

    def __init__(self, component: MethodComponent, supported_spaces: Iterable[SpaceType], engine: str):
        self._component = component
        self._supported_spaces = frozenset(supported_spaces)
        self._engine = engine

    @property
    def name(self) -> str:
        return self._component.name

    @property
    def engine(self) -> str:
        return self._engine

    @property
    def component(self) -> MethodComponent:
        return self._component

    def supported_metrics(self) -> frozenset[SpaceType]:
        return self._supported_spaces

    def is_space_supported(self, space: SpaceType) -> bool:
        return space in self._supported_spaces

    def validate(self, context: MethodComponentContext) -> EffectiveValues:
        """Validate a user context; see MethodComponent.validate."""
        return self._component.validate(context)

    def _check_validated(self, effective: Any) -> EffectiveValues:
        if not isinstance(effective, EffectiveValues) or effective.name != self.name:
            raise TypeError(f"{self.name} compiles only values returned by its own validate()")
        return effective

    def compile(self, effective: EffectiveValues) -> str:
        """Native index description for validated values, e.g. 'HNSW32,SQfp16'."""
        effective = self._check_validated(effective)
        return self._component.describe(effective) or ""

    def as_map(self, effective: EffectiveValues) -> dict[str, Any]:
        return self._component.as_map(self._check_validated(effective))

    def requires_training(self, effective: EffectiveValues) -> bool:
        return self._component.requires_training(self._check_validated(effective))
