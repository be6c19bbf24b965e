"""Algorithm identifiers and their fixed digest geometry."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class AlgorithmIdentifier(StrEnum):
    """Closed set of supported digest algorithms."""

    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        """Length of the canonical lowercase hex rendering."""
        return self.digest_size * 2

    @property
    def bits(self) -> int:
        return self.digest_size * 8

    @property
    def result_key(self) -> str:
        """Key used for this algorithm in all-algorithm result maps."""
        return self.value.replace("-", "").lower()

    @property
    def hashlib_name(self) -> str | None:
        """Name of the platform primitive, or None for the in-house MD5."""
        if self is AlgorithmIdentifier.MD5:
            return None
        return self.result_key

    @classmethod
    def parse(cls, value: str) -> AlgorithmIdentifier:
        """Resolve a display name ("SHA-256") or result key ("sha256"), any case."""
        normalized = value.strip().upper().replace("_", "-")
        for member in cls:
            if normalized in (member.value, member.value.replace("-", "")):
                return member
        valid = ", ".join(member.value for member in cls)
        msg = f"unsupported algorithm {value!r}; expected one of {valid}"
        raise ValueError(msg)


_DIGEST_SIZES: dict[AlgorithmIdentifier, int] = {
    AlgorithmIdentifier.MD5: 16,
    AlgorithmIdentifier.SHA1: 20,
    AlgorithmIdentifier.SHA256: 32,
    AlgorithmIdentifier.SHA384: 48,
    AlgorithmIdentifier.SHA512: 64,
}

_DESCRIPTIONS: dict[AlgorithmIdentifier, str] = {
    AlgorithmIdentifier.MD5: "Fast but cryptographically broken. Use for checksums only.",
    AlgorithmIdentifier.SHA1: "Deprecated for security. Use SHA-256 or higher.",
    AlgorithmIdentifier.SHA256: "Recommended. Part of SHA-2 family, widely used.",
    AlgorithmIdentifier.SHA384: "Truncated SHA-512. Higher security than SHA-256.",
    AlgorithmIdentifier.SHA512: "Highest security in SHA-2 family. Best for sensitive data.",
}


class AlgorithmInfo(BaseModel):
    """Human-facing facts about one algorithm."""

    model_config = ConfigDict(frozen=True)

    algorithm: AlgorithmIdentifier
    bits: int
    hex_length: int
    description: str


def get_algorithm_info(algorithm: AlgorithmIdentifier) -> AlgorithmInfo:
    """Return bit size, hex length and a short usage note for an algorithm."""
    return AlgorithmInfo(
        algorithm=algorithm,
        bits=algorithm.bits,
        hex_length=algorithm.hex_length,
        description=_DESCRIPTIONS[algorithm],
    )
