"""Faiss encoders available to the HNSW method: flat, scalar quantization, product quantization."""

from knnschema.engine.constants import (
    ENCODER_FLAT,
    ENCODER_PARAMETER_PQ_CODE_SIZE,
    ENCODER_PARAMETER_PQ_CODE_SIZE_DEFAULT,
    ENCODER_PARAMETER_PQ_M,
    ENCODER_PARAMETER_PQ_M_DEFAULT,
    ENCODER_PARAMETER_PQ_M_LIMIT,
    ENCODER_PQ,
    ENCODER_SQ,
    FAISS_PQ_DESCRIPTION,
    FAISS_SQ_CLIP,
    FAISS_SQ_DESCRIPTION,
    FAISS_SQ_ENCODER_FP16,
    FAISS_SQ_ENCODER_TYPES,
    FAISS_SQ_TYPE,
)
from knnschema.engine.description import Decoration, description_generator
from knnschema.engine.encoder import Encoder
from knnschema.engine.method_component import MethodComponent
from knnschema.engine.parameter import BooleanParameter, IntegerParameter, StringParameter


class FaissFlatEncoder(Encoder):
    """Vectors stored uncompressed. Adds nothing to the index description."""

    def __init__(self):
        self._component = MethodComponent(ENCODER_FLAT)

    @property
    def name(self) -> str:
        return ENCODER_FLAT

    @property
    def method_component(self) -> MethodComponent:
        return self._component


class FaissSQEncoder(Encoder):
    """Scalar quantization. Renders as SQ<type>, e.g. SQfp16."""

    def __init__(self):
        self._component = MethodComponent(
            ENCODER_SQ,
            parameters=[
                StringParameter(FAISS_SQ_TYPE, FAISS_SQ_ENCODER_FP16, lambda v: v in FAISS_SQ_ENCODER_TYPES),
                BooleanParameter(FAISS_SQ_CLIP, False),
            ],
            generator=description_generator(FAISS_SQ_DESCRIPTION, Decoration(FAISS_SQ_TYPE)),
        )

    @property
    def name(self) -> str:
        return ENCODER_SQ

    @property
    def method_component(self) -> MethodComponent:
        return self._component


class FaissHNSWPQEncoder(Encoder):
    """
    Product quantization for HNSW graphs. Renders as PQ<m>x<code_size>, e.g. PQ8x8.
    Only 8-bit codes are supported with HNSW, and the index must be trained.
    """

    def __init__(self):
        self._component = MethodComponent(
            ENCODER_PQ,
            parameters=[
                IntegerParameter(
                    ENCODER_PARAMETER_PQ_M,
                    ENCODER_PARAMETER_PQ_M_DEFAULT,
                    lambda v: 0 < v < ENCODER_PARAMETER_PQ_M_LIMIT,
                ),
                IntegerParameter(
                    ENCODER_PARAMETER_PQ_CODE_SIZE,
                    ENCODER_PARAMETER_PQ_CODE_SIZE_DEFAULT,
                    lambda v: v == ENCODER_PARAMETER_PQ_CODE_SIZE_DEFAULT,
                ),
            ],
            generator=description_generator(
                FAISS_PQ_DESCRIPTION,
                Decoration(ENCODER_PARAMETER_PQ_M),
                Decoration(ENCODER_PARAMETER_PQ_CODE_SIZE, prefix="x"),
            ),
            requires_training=True,
        )

    @property
    def name(self) -> str:
        return ENCODER_PQ

    @property
    def method_component(self) -> MethodComponent:
        return self._component
