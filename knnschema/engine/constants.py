"""Parameter names, encoder names and description tokens shared by the Faiss methods."""

METHOD_HNSW = "hnsw"
ENGINE_FAISS = "faiss"

METHOD_PARAMETER_M = "m"
METHOD_PARAMETER_EF_CONSTRUCTION = "ef_construction"
METHOD_PARAMETER_EF_SEARCH = "ef_search"
METHOD_ENCODER_PARAMETER = "encoder"

ENCODER_FLAT = "flat"
ENCODER_SQ = "sq"
ENCODER_PQ = "pq"

FAISS_SQ_TYPE = "type"
FAISS_SQ_CLIP = "clip"
FAISS_SQ_ENCODER_FP16 = "fp16"
FAISS_SQ_ENCODER_TYPES = frozenset({FAISS_SQ_ENCODER_FP16})

ENCODER_PARAMETER_PQ_M = "m"
ENCODER_PARAMETER_PQ_CODE_SIZE = "code_size"
ENCODER_PARAMETER_PQ_M_DEFAULT = 1
ENCODER_PARAMETER_PQ_M_LIMIT = 1024
ENCODER_PARAMETER_PQ_CODE_SIZE_DEFAULT = 8

# Native Faiss index factory tokens
FAISS_HNSW_DESCRIPTION = "HNSW"
FAISS_SQ_DESCRIPTION = "SQ"
FAISS_PQ_DESCRIPTION = "PQ"
