"""Running tally of a batch of independent messages.

Inputs are numbered from 1 in error labels, the way ``hash-lines`` numbers
the lines of a file.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from texthash.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ProgressTracker:
    """Outcome counters and byte throughput for one ``process_batch`` run."""

    total: int
    successful: int = 0
    failed: int = 0
    skipped: int = 0
    bytes_hashed: int = 0
    failures: dict[int, str] = field(default_factory=dict)
    start_time: float = field(default_factory=time.monotonic)

    @property
    def processed(self) -> int:
        return self.successful + self.failed + self.skipped

    def record_success(self, input_bytes: int = 0) -> None:
        self.successful += 1
        self.bytes_hashed += input_bytes

    def record_failure(self, position: int, error: str) -> None:
        """Record that the input at zero-based ``position`` failed."""
        self.failed += 1
        self.failures[position] = error

    def record_skip(self, position: int) -> None:
        self.skipped += 1
        logger.debug("batch_item_skipped", input_number=position + 1)

    @property
    def errors(self) -> list[str]:
        """Error labels in input order, whatever order the inputs finished in."""
        return [
            f"input {position + 1}: {self.failures[position]}"
            for position in sorted(self.failures)
        ]

    @property
    def elapsed_seconds(self) -> float:
        return time.monotonic() - self.start_time

    @property
    def is_complete(self) -> bool:
        return self.processed >= self.total

    @property
    def bytes_per_second(self) -> float:
        elapsed = self.elapsed_seconds
        if elapsed <= 0:
            return 0.0
        return self.bytes_hashed / elapsed

    def log_progress(self, every_n: int = 100) -> None:
        """Emit ``batch_progress`` every ``every_n`` outcomes and on completion."""
        if self.processed % every_n and not self.is_complete:
            return
        logger.info(
            "batch_progress",
            processed=self.processed,
            total=self.total,
            failed=self.failed,
            skipped=self.skipped,
            bytes_hashed=self.bytes_hashed,
            throughput=f"{self.bytes_per_second / 1024:.1f} KiB/s",
        )

    def summary(self) -> dict[str, int | float | list[str]]:
        return {
            "processed": self.processed,
            "successful": self.successful,
            "failed": self.failed,
            "skipped": self.skipped,
            "bytes_hashed": self.bytes_hashed,
            "duration_seconds": round(self.elapsed_seconds, 2),
            "errors": self.errors,
        }
