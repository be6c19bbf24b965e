"""Pydantic data models for the texthash digest engine."""

from texthash.models.algorithm import AlgorithmIdentifier, AlgorithmInfo, get_algorithm_info
from texthash.models.batch_result import BatchResult
from texthash.models.config import Config
from texthash.models.hash_result import AllHashesResult, HashComputationResult

__all__ = [
    "AlgorithmIdentifier",
    "AlgorithmInfo",
    "AllHashesResult",
    "BatchResult",
    "Config",
    "HashComputationResult",
    "get_algorithm_info",
]
