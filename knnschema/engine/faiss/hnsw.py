"""Faiss HNSW method: graph parameters plus a nested encoder choice."""

from knnschema.config.method.models import HNSWDefaults
from knnschema.engine.constants import (
    ENCODER_FLAT,
    ENGINE_FAISS,
    FAISS_HNSW_DESCRIPTION,
    METHOD_ENCODER_PARAMETER,
    METHOD_HNSW,
    METHOD_PARAMETER_EF_CONSTRUCTION,
    METHOD_PARAMETER_EF_SEARCH,
    METHOD_PARAMETER_M,
)
from knnschema.engine.context import MethodComponentContext
from knnschema.engine.description import Decoration, description_generator
from knnschema.engine.encoder import encoder_alternatives
from knnschema.engine.faiss.encoders import FaissFlatEncoder, FaissHNSWPQEncoder, FaissSQEncoder
from knnschema.engine.knn_method import KNNMethod
from knnschema.engine.method_component import MethodComponent
from knnschema.engine.parameter import IntegerParameter, MethodComponentContextParameter
from knnschema.engine.space_type import SpaceType

SUPPORTED_SPACES = frozenset({
    SpaceType.UNDEFINED,
    SpaceType.HAMMING,
    SpaceType.L2,
    SpaceType.INNER_PRODUCT,
})

DEFAULT_ENCODER_CONTEXT = MethodComponentContext(name=ENCODER_FLAT, parameters={})

SUPPORTED_ENCODERS = (FaissFlatEncoder(), FaissSQEncoder(), FaissHNSWPQEncoder())


def _positive(v: int) -> bool:
    return v > 0


def _hnsw_component(defaults: HNSWDefaults) -> MethodComponent:
    # ef_construction and ef_search reach the engine as parameters, not in the description
    return MethodComponent(
        METHOD_HNSW,
        parameters=[
            IntegerParameter(METHOD_PARAMETER_M, defaults.m, _positive),
            IntegerParameter(METHOD_PARAMETER_EF_CONSTRUCTION, defaults.ef_construction, _positive),
            IntegerParameter(METHOD_PARAMETER_EF_SEARCH, defaults.ef_search, _positive),
            MethodComponentContextParameter(
                METHOD_ENCODER_PARAMETER,
                DEFAULT_ENCODER_CONTEXT,
                encoder_alternatives(SUPPORTED_ENCODERS),
            ),
        ],
        generator=description_generator(
            FAISS_HNSW_DESCRIPTION,
            Decoration(METHOD_PARAMETER_M),
            Decoration(METHOD_ENCODER_PARAMETER, prefix=","),
        ),
    )


def faiss_hnsw_method(defaults: HNSWDefaults) -> KNNMethod:
    """Build the Faiss HNSW method with the given algorithm defaults."""
    return KNNMethod(_hnsw_component(defaults), SUPPORTED_SPACES, engine=ENGINE_FAISS)
