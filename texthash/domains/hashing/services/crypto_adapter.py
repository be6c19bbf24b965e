"""Adapter over the platform's SHA-family digest primitives (hashlib)."""

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING

import structlog

from texthash.models.algorithm import AlgorithmIdentifier

if TYPE_CHECKING:
    from collections.abc import Callable

    from texthash.services.protocols import HashObjectProtocol

logger = structlog.get_logger(__name__)


class PlatformPrimitiveError(Exception):
    """Raised when the platform digest primitive rejects an algorithm or input."""


class CryptoHashAdapter:
    """Computes SHA-1/256/384/512 digests through a trusted external primitive.

    The primitive defaults to ``hashlib.new``; any callable with the same
    ``(name, data)`` signature can be injected.
    """

    def __init__(
        self,
        hash_factory: Callable[[str, bytes], HashObjectProtocol] | None = None,
    ) -> None:
        self.hash_factory = hash_factory or hashlib.new

    def digest(self, data: bytes, algorithm: AlgorithmIdentifier) -> bytes:
        """Return the digest of ``data`` under a SHA-family algorithm.

        Raises:
            PlatformPrimitiveError: the algorithm is not provided by the
                platform, or the primitive failed or returned a digest of the
                wrong size.
        """
        name = algorithm.hashlib_name
        if name is None:
            msg = f"{algorithm.value} is not provided by the platform adapter"
            raise PlatformPrimitiveError(msg)

        try:
            digest = self.hash_factory(name, data).digest()
        except Exception as exc:
            logger.warning("platform_digest_failed", algorithm=algorithm.value, error=str(exc))
            msg = f"{algorithm.value} digest failed: {exc}"
            raise PlatformPrimitiveError(msg) from exc

        if len(digest) != algorithm.digest_size:
            msg = (
                f"{algorithm.value} primitive returned {len(digest)} bytes, "
                f"expected {algorithm.digest_size}"
            )
            raise PlatformPrimitiveError(msg)

        return digest
