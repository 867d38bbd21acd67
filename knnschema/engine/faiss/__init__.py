"""Faiss method implementations, registered by method name."""

from functools import lru_cache
from typing import Callable

from knnschema.config.method.models import HNSWDefaults
from knnschema.config.settings import get_settings
from knnschema.engine.constants import METHOD_HNSW
from knnschema.engine.faiss.hnsw import faiss_hnsw_method
from knnschema.engine.knn_method import KNNMethod

METHOD_REGISTRY: dict[str, Callable[[HNSWDefaults], KNNMethod]] = {
    METHOD_HNSW: faiss_hnsw_method,
}


@lru_cache
def _default_method(name: str) -> KNNMethod:
    return METHOD_REGISTRY[name](HNSWDefaults.from_settings(get_settings()))


def get_knn_method(name: str, defaults: HNSWDefaults | None = None) -> KNNMethod | None:
    """
    Return the method registered under `name`, or None. Without explicit defaults the
    method is built once from Settings and reused.
    """
    factory = METHOD_REGISTRY.get(name)
    if factory is None:
        return None
    if defaults is None:
        return _default_method(name)
    return factory(defaults)
