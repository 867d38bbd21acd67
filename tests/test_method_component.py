import pytest

from knnschema.engine.context import MethodComponentContext
from knnschema.engine.description import Decoration, description_generator
from knnschema.engine.errors import (
    DuplicateParameterError,
    InvalidParameterValueError,
    MethodDefinitionError,
    UnknownMethodError,
    UnknownParameterError,
)
from knnschema.engine.method_component import MethodComponent
from knnschema.engine.parameter import (
    BooleanParameter,
    IntegerParameter,
    MethodComponentContextParameter,
)


@pytest.fixture
def outer() -> MethodComponent:
    """Two-level schema: 'plain' child has no generator, 'tagged' renders T<flag>."""
    plain = MethodComponent("plain")
    tagged = MethodComponent(
        "tagged",
        parameters=[BooleanParameter("flag", False)],
        generator=description_generator("T", Decoration("flag")),
        requires_training=True,
    )
    return MethodComponent(
        "outer",
        parameters=[
            IntegerParameter("n", 3, lambda v: v > 0),
            IntegerParameter("hidden", 7, lambda v: v > 0),
            MethodComponentContextParameter(
                "child", MethodComponentContext(name="plain"), {"plain": plain, "tagged": tagged}
            ),
        ],
        generator=description_generator("OUT", Decoration("n"), Decoration("child", prefix=",", suffix="!")),
    )


def test_duplicate_parameter_names_rejected() -> None:
    with pytest.raises(DuplicateParameterError):
        MethodComponent(
            "dup",
            parameters=[IntegerParameter("m", 1, lambda v: v > 0), IntegerParameter("m", 2, lambda v: v > 0)],
        )


def test_generator_must_reference_declared_parameters() -> None:
    with pytest.raises(MethodDefinitionError):
        MethodComponent("x", generator=description_generator("X", Decoration("missing")))


def test_parameters_mapping_is_read_only(outer: MethodComponent) -> None:
    assert list(outer.parameters) == ["n", "hidden", "child"]
    with pytest.raises(TypeError):
        outer.parameters["extra"] = IntegerParameter("extra", 1)


def test_leaf_alternative_contributes_no_delimiter(outer: MethodComponent) -> None:
    effective = outer.validate(MethodComponentContext(name="outer"))
    assert outer.describe(effective) == "OUT3"


def test_alternative_with_generator_uses_decoration(outer: MethodComponent) -> None:
    ctx = MethodComponentContext.model_validate(
        {"name": "outer", "parameters": {"n": 5, "child": {"name": "tagged", "parameters": {"flag": True}}}}
    )
    effective = outer.validate(ctx)
    assert outer.describe(effective) == "OUT5,Ttrue!"


def test_component_without_generator_describes_none() -> None:
    leaf = MethodComponent("plain")
    assert leaf.describe(leaf.validate(MethodComponentContext(name="plain"))) is None


def test_context_name_must_match(outer: MethodComponent) -> None:
    with pytest.raises(UnknownMethodError):
        outer.validate(MethodComponentContext(name="inner"))


def test_declared_parameters_checked_before_unknown_keys(outer: MethodComponent) -> None:
    ctx = MethodComponentContext(name="outer", parameters={"bogus": 1, "hidden": 0})
    with pytest.raises(InvalidParameterValueError) as exc_info:
        outer.validate(ctx)
    assert exc_info.value.parameter == "hidden"
    assert exc_info.value.value == 0


def test_unknown_key_rejected(outer: MethodComponent) -> None:
    with pytest.raises(UnknownParameterError) as exc_info:
        outer.validate(MethodComponentContext(name="outer", parameters={"bogus": 1}))
    assert exc_info.value.name == "bogus"
    assert exc_info.value.component == "outer"


def test_as_map_and_training(outer: MethodComponent) -> None:
    plain = outer.validate(MethodComponentContext(name="outer"))
    tagged = outer.validate(
        MethodComponentContext.model_validate({"name": "outer", "parameters": {"child": {"name": "tagged"}}})
    )

    assert outer.as_map(plain) == {
        "name": "outer",
        "index_description": "OUT3",
        "parameters": {"n": 3, "hidden": 7, "child": {"name": "plain", "parameters": {}}},
    }
    assert not outer.requires_training(plain)
    assert outer.requires_training(tagged)


def test_parameter_schema(outer: MethodComponent) -> None:
    schema = outer.parameter_schema()
    assert schema["n"] == {"kind": "integer", "default": 3}
    assert schema["child"]["default"] == {"name": "plain", "parameters": {}}
    assert schema["child"]["alternatives"]["tagged"] == {"flag": {"kind": "boolean", "default": False}}
