"""Result models returned by the hash facade."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from texthash.models.algorithm import AlgorithmIdentifier


class HashComputationResult(BaseModel):
    """Outcome of hashing one text under one algorithm.

    ``hash`` is empty when the computation failed or the input was empty.
    Callers must check ``success`` before trusting ``hash``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    success: bool
    hash: str = ""
    error: str | None = None

    @model_validator(mode="after")
    def validate_consistency(self) -> Self:
        """A result carries an error exactly when it failed, and no hash then."""
        if self.success and self.error is not None:
            msg = "successful result must not carry an error"
            raise ValueError(msg)
        if not self.success:
            if self.error is None:
                msg = "failed result must carry an error message"
                raise ValueError(msg)
            if self.hash:
                msg = "failed result must have an empty hash"
                raise ValueError(msg)
        return self

    @classmethod
    def ok(cls, hash_hex: str) -> HashComputationResult:
        return cls(success=True, hash=hash_hex)

    @classmethod
    def failed(cls, message: str) -> HashComputationResult:
        return cls(success=False, hash="", error=message or "Hash generation failed")


class AllHashesResult(BaseModel):
    """One hex digest per supported algorithm.

    Algorithms whose primitive failed keep an empty string and have their
    error message recorded in ``errors`` under the same key.
    """

    model_config = ConfigDict(frozen=True)

    md5: str = ""
    sha1: str = ""
    sha256: str = ""
    sha384: str = ""
    sha512: str = ""
    errors: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_error_keys(self) -> Self:
        """Errors may only be reported for known algorithms that have no hash."""
        known = {algorithm.result_key for algorithm in AlgorithmIdentifier}
        for key in self.errors:
            if key not in known:
                msg = f"unknown algorithm key in errors: {key}"
                raise ValueError(msg)
            if getattr(self, key):
                msg = f"{key} has both a hash and an error"
                raise ValueError(msg)
        return self

    @property
    def success(self) -> bool:
        return not self.errors

    def get(self, algorithm: AlgorithmIdentifier) -> str:
        """Return the hex digest stored for an algorithm."""
        return str(getattr(self, algorithm.result_key))

    def as_dict(self) -> dict[str, str]:
        """Return the fixed five-key map of result key to hex digest."""
        return {algorithm.result_key: self.get(algorithm) for algorithm in AlgorithmIdentifier}
