"""Shared test fixtures for the texthash digest engine."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

import pytest
import structlog

from texthash.domains.hashing.services.crypto_adapter import PlatformPrimitiveError
from texthash.domains.hashing.services.hash_facade import HashFacade
from texthash.models.algorithm import AlgorithmIdentifier

if TYPE_CHECKING:
    from collections.abc import Iterator


class SelectiveFailureAdapter:
    """SHA adapter stand-in that rejects a chosen set of algorithms."""

    def __init__(self, failing: set[AlgorithmIdentifier]) -> None:
        self.failing = failing
        self.calls: list[AlgorithmIdentifier] = []

    def digest(self, data: bytes, algorithm: AlgorithmIdentifier) -> bytes:
        self.calls.append(algorithm)
        if algorithm in self.failing:
            msg = f"{algorithm.value} is not available on this platform"
            raise PlatformPrimitiveError(msg)
        return hashlib.new(str(algorithm.hashlib_name), data).digest()


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI commands between tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def facade() -> Iterator[HashFacade]:
    """Provide a facade backed by the real platform primitives."""
    with HashFacade(max_workers=4) as instance:
        yield instance


@pytest.fixture
def sha384_failing_adapter() -> SelectiveFailureAdapter:
    """Adapter whose SHA-384 primitive always rejects."""
    return SelectiveFailureAdapter({AlgorithmIdentifier.SHA384})


@pytest.fixture
def sample_texts() -> list[str]:
    """Inputs covering ASCII, accented Latin, CJK and astral-plane characters."""
    return [
        "a",
        "abc",
        "Hello, World!",
        "café",
        "naïve résumé",
        "日本語テスト",
        "emoji \U0001f600 and \U0001f4a9",
        "x" * 1000,
        "line one\nline two\r\n\ttabbed",
    ]


@pytest.fixture(params=list(AlgorithmIdentifier), ids=lambda algorithm: algorithm.value)
def algorithm(request: pytest.FixtureRequest) -> AlgorithmIdentifier:
    """Parametrize a test over every supported algorithm."""
    return request.param  # type: ignore[no-any-return]
