"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from knnschema.config.method.models import HNSWDefaults
from knnschema.engine.context import MethodComponentContext
from knnschema.engine.faiss.hnsw import faiss_hnsw_method
from knnschema.engine.knn_method import KNNMethod
from knnschema.main import app


@pytest.fixture
def defaults() -> HNSWDefaults:
    """HNSW defaults distinct from each other so tests can tell them apart."""
    return HNSWDefaults(m=16, ef_construction=128, ef_search=64)


@pytest.fixture
def hnsw_method(defaults: HNSWDefaults) -> KNNMethod:
    return faiss_hnsw_method(defaults)


@pytest.fixture
def hnsw_context():
    """Build an hnsw context from keyword parameters."""

    def _build(**parameters) -> MethodComponentContext:
        return MethodComponentContext.model_validate({"name": "hnsw", "parameters": parameters})

    return _build


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
