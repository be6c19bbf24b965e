"""Service protocols defining interfaces for dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from texthash.models.algorithm import AlgorithmIdentifier


class DigestRoutineProtocol(Protocol):
    """Anything that turns a complete message into digest bytes.

    Implementations are synchronous; callers that must not block hand the
    call to a worker thread instead.
    """

    def digest(self, data: bytes, algorithm: AlgorithmIdentifier) -> bytes: ...


class HashObjectProtocol(Protocol):
    """The subset of a ``hashlib`` hash object the platform adapter relies on."""

    @property
    def digest_size(self) -> int: ...

    def digest(self) -> bytes: ...
