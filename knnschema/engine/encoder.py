"""Base encoder contract: a named alternative for a nested encoder parameter."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from knnschema.engine.method_component import MethodComponent


class Encoder(ABC):
    """
    An encoder is one alternative of a method's `encoder` parameter. It exposes its
    own MethodComponent, selected by name from the user's nested context.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Encoder name for registration and contexts, e.g. 'flat', 'sq'."""
        ...

    @property
    @abstractmethod
    def method_component(self) -> MethodComponent:
        """Schema of this encoder's own parameters and description syntax."""
        ...


def encoder_alternatives(encoders: Iterable[Encoder]) -> dict[str, MethodComponent]:
    """Closed name -> component mapping for a nested choice parameter."""
    return {encoder.name: encoder.method_component for encoder in encoders}
