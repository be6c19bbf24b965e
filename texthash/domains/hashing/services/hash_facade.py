"""Single entry point for hashing text under any supported algorithm."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Any, Self, assert_never

import structlog

from texthash.domains.hashing.core.hex_format import to_hex
from texthash.domains.hashing.core.md5 import md5_digest
from texthash.domains.hashing.core.utf8 import encode_text
from texthash.domains.hashing.services.crypto_adapter import CryptoHashAdapter
from texthash.models.algorithm import AlgorithmIdentifier
from texthash.models.batch_result import BatchResult
from texthash.models.hash_result import AllHashesResult, HashComputationResult
from texthash.services.batch_processor import process_batch

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from texthash.models.config import Config
    from texthash.services.protocols import DigestRoutineProtocol

logger = structlog.get_logger(__name__)


class FacadeClosedError(RuntimeError):
    """Raised when a closed HashFacade is asked for more work."""


class Md5Routine:
    """Digest routine backed by the in-house MD5 implementation."""

    def digest(self, data: bytes, algorithm: AlgorithmIdentifier) -> bytes:
        return md5_digest(data)


class HashFacade:
    """Dispatches hash requests to MD5 or the platform SHA primitives.

    Empty text short-circuits to an empty hash without touching any digest
    routine. Primitive failures are reported in the returned result rather
    than raised. The facade owns a thread pool used for fan-out and for
    offloading large inputs; close it with ``close()`` or a ``with`` block.
    Closing is final: every compute method raises ``FacadeClosedError``
    afterwards.
    """

    def __init__(
        self,
        crypto_adapter: DigestRoutineProtocol | None = None,
        md5_routine: DigestRoutineProtocol | None = None,
        max_workers: int = 4,
        offload_threshold_bytes: int = 1_048_576,
    ) -> None:
        self.crypto_adapter = crypto_adapter or CryptoHashAdapter()
        self.md5_routine = md5_routine or Md5Routine()
        self.max_workers = max_workers
        self.offload_threshold_bytes = offload_threshold_bytes
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="texthash"
        )
        self._closed = False

    @classmethod
    def from_config(cls, config: Config) -> HashFacade:
        return cls(
            max_workers=config.max_workers,
            offload_threshold_bytes=config.offload_threshold_bytes,
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Shut down the worker pool, waiting for running computations."""
        self._closed = True
        self._executor.shutdown(wait=True)

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            msg = "hash facade is closed"
            raise FacadeClosedError(msg)

    def _routine_for(self, algorithm: AlgorithmIdentifier) -> DigestRoutineProtocol:
        match algorithm:
            case AlgorithmIdentifier.MD5:
                return self.md5_routine
            case (
                AlgorithmIdentifier.SHA1
                | AlgorithmIdentifier.SHA256
                | AlgorithmIdentifier.SHA384
                | AlgorithmIdentifier.SHA512
            ):
                return self.crypto_adapter
            case _:
                assert_never(algorithm)

    def _digest_hex(self, data: bytes, algorithm: AlgorithmIdentifier) -> str:
        digest = self._routine_for(algorithm).digest(data, algorithm)
        return to_hex(digest)

    def _compute_encoded(self, data: bytes, algorithm: AlgorithmIdentifier) -> HashComputationResult:
        try:
            hash_hex = self._digest_hex(data, algorithm)
        except Exception as exc:
            logger.warning(
                "hash_failed",
                algorithm=algorithm.value,
                input_bytes=len(data),
                error=str(exc),
            )
            return HashComputationResult.failed(str(exc))

        logger.debug("hash_computed", algorithm=algorithm.value, input_bytes=len(data))
        return HashComputationResult.ok(hash_hex)

    def compute_one(self, text: str, algorithm: AlgorithmIdentifier) -> HashComputationResult:
        """Hash ``text`` under one algorithm on the calling thread."""
        self._ensure_open()
        if not text:
            return HashComputationResult.ok("")
        return self._compute_encoded(encode_text(text), algorithm)

    def submit_one(
        self, text: str, algorithm: AlgorithmIdentifier
    ) -> Future[HashComputationResult]:
        """Hash ``text`` without blocking the caller on large inputs.

        Inputs below the offload threshold are hashed immediately and come
        back as an already completed future.
        """
        self._ensure_open()
        if not text:
            return _completed(HashComputationResult.ok(""))

        data = encode_text(text)
        if len(data) < self.offload_threshold_bytes:
            return _completed(self._compute_encoded(data, algorithm))

        logger.debug("hash_offloaded", algorithm=algorithm.value, input_bytes=len(data))
        return self._executor.submit(self._compute_encoded, data, algorithm)

    def compute_all(self, text: str) -> AllHashesResult:
        """Hash ``text`` under every supported algorithm.

        The per-algorithm computations run concurrently. A failing algorithm
        leaves its entry empty and records its error; the others still report.
        """
        self._ensure_open()
        if not text:
            return AllHashesResult()

        data = encode_text(text)
        hashes: dict[str, str] = {}
        errors: dict[str, str] = {}

        futures = {
            self._executor.submit(self._digest_hex, data, algorithm): algorithm
            for algorithm in AlgorithmIdentifier
        }
        for future in as_completed(futures):
            algorithm = futures[future]
            try:
                hashes[algorithm.result_key] = future.result()
            except Exception as exc:
                logger.warning("hash_failed", algorithm=algorithm.value, error=str(exc))
                errors[algorithm.result_key] = str(exc) or "Hash generation failed"

        logger.debug("all_hashes_computed", input_bytes=len(data), failed=len(errors))
        return AllHashesResult(**hashes, errors=errors)

    def compute_many(self, texts: Sequence[str], algorithm: AlgorithmIdentifier) -> BatchResult:
        """Hash each text as an independent message, keeping input order.

        Empty texts are not hashed; they count as skipped and get an empty hash.
        The work runs on the facade's own pool.
        """
        self._ensure_open()
        summary: dict[str, Any] = process_batch(
            [encode_text(text) for text in texts],
            lambda data: self._digest_hex(data, algorithm),
            executor=self._executor,
            skip=lambda data: not data,
            size_of=len,
        )

        results: list[HashComputationResult] = []
        for outcome in summary["results"]:
            if outcome is None:
                results.append(HashComputationResult.ok(""))
            elif isinstance(outcome, Exception):
                results.append(HashComputationResult.failed(str(outcome)))
            else:
                results.append(HashComputationResult.ok(outcome))

        return BatchResult(
            algorithm=algorithm,
            processed=summary["processed"],
            successful=summary["successful"],
            failed=summary["failed"],
            skipped=summary["skipped"],
            duration_seconds=summary["duration_seconds"],
            errors=summary["errors"],
            results=results,
        )


def _completed(result: HashComputationResult) -> Future[HashComputationResult]:
    future: Future[HashComputationResult] = Future()
    future.set_result(result)
    return future
