"""Batch result model for multi-input hashing runs."""

from __future__ import annotations

from pydantic import BaseModel

from texthash.models.algorithm import AlgorithmIdentifier
from texthash.models.hash_result import HashComputationResult


class BatchResult(BaseModel):
    """Per-input results and statistics from hashing many texts."""

    algorithm: AlgorithmIdentifier
    processed: int
    successful: int
    failed: int
    skipped: int
    duration_seconds: float
    errors: list[str] = []
    results: list[HashComputationResult] = []
