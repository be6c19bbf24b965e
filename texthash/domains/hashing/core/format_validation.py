"""Structural checks for hex digest strings."""

from __future__ import annotations

import re

from texthash.models.algorithm import AlgorithmIdentifier

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]+")


def looks_like_hash(candidate: str, algorithm: AlgorithmIdentifier) -> bool:
    """Check whether a string has the shape of a digest for the given algorithm.

    Only length and alphabet are checked; upper-case hex digits are accepted.
    The empty string never matches.
    """
    if not candidate:
        return False
    return len(candidate) == algorithm.hex_length and bool(_HEX_PATTERN.fullmatch(candidate))


def matching_algorithms(candidate: str) -> list[AlgorithmIdentifier]:
    """Return every algorithm whose digest format the candidate matches."""
    return [algorithm for algorithm in AlgorithmIdentifier if looks_like_hash(candidate, algorithm)]
