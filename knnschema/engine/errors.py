"""
Errors raised while building method schemas and validating method contexts.

Validation errors are ValueErrors so callers can map them to client errors the
same way as any other invalid input. Definition errors are programming defects
in a schema and surface when the schema is constructed.
"""

from typing import Any


class MethodValidationError(ValueError):
    """A method context does not satisfy its schema."""


class UnknownMethodError(MethodValidationError):
    """The context (or a lookup) names a method that is not registered."""

    def __init__(self, name: str, expected: str | None = None):
        self.name = name
        self.expected = expected
        if expected is None:
            message = f"Unknown method: {name!r}"
        else:
            message = f"Context names method {name!r} but schema is {expected!r}"
        super().__init__(message)


class UnknownParameterError(MethodValidationError):
    """The context supplies a parameter the schema does not declare."""

    def __init__(self, name: str, component: str):
        self.name = name
        self.component = component
        super().__init__(f"Unknown parameter {name!r} for method {component!r}")


class InvalidParameterValueError(MethodValidationError):
    """A parameter value fails its validator."""

    def __init__(self, parameter: str, value: Any, component: str):
        self.parameter = parameter
        self.value = value
        self.component = component
        super().__init__(f"Invalid value for parameter {parameter!r} of method {component!r}: {value!r}")


class UnknownAlternativeError(MethodValidationError):
    """A nested choice selects an alternative that is not registered."""

    def __init__(self, parameter: str, name: str, allowed: list[str]):
        self.parameter = parameter
        self.name = name
        self.allowed = allowed
        super().__init__(
            f"Unknown {parameter!r} alternative {name!r}. Use one of: {', '.join(allowed)}"
        )


class UnsupportedSpaceError(MethodValidationError):
    """The requested space type cannot be paired with the method."""

    def __init__(self, space_type: str, method: str):
        self.space_type = space_type
        self.method = method
        super().__init__(f"Space type {space_type!r} is not supported by method {method!r}")


class MethodDefinitionError(Exception):
    """A method schema is malformed. Raised at construction, never during validation."""


class EmptyAlternativeSetError(MethodDefinitionError):
    """A nested choice parameter was declared with no alternatives."""


class DuplicateParameterError(MethodDefinitionError):
    """Two parameters with the same name were declared on one component."""


class InvalidDefaultError(MethodDefinitionError):
    """A parameter's default value does not satisfy its own validator."""
