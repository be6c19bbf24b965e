"""Generic batch processor for parallel hash computations."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING, Any

import structlog

from texthash.utils.progress import ProgressTracker

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from concurrent.futures import Executor

logger = structlog.get_logger(__name__)


def process_batch(
    items: Sequence[Any],
    process_fn: Callable[[Any], Any],
    max_workers: int = 4,
    log_every: int = 100,
    *,
    executor: Executor | None = None,
    skip: Callable[[Any], bool] | None = None,
    size_of: Callable[[Any], int] | None = None,
) -> dict[str, Any]:
    """Apply ``process_fn`` to every item on a thread pool.

    Items for which ``skip`` returns true are not submitted; their result
    entry stays ``None`` and they count as skipped. ``size_of`` feeds the
    tracker's byte throughput. When ``executor`` is given the work runs on
    it and it is left open; otherwise a pool of ``max_workers`` threads is
    created for this call.

    Returns summary stats with an additional 'results' key holding one entry
    per item, in input order. Entries of failed items hold the raised
    exception instead of a return value.
    """
    tracker = ProgressTracker(total=len(items))
    results: list[Any] = [None] * len(items)

    owned = executor is None
    pool = executor or ThreadPoolExecutor(max_workers=max_workers)
    try:
        futures = {}
        for index, item in enumerate(items):
            if skip is not None and skip(item):
                tracker.record_skip(index)
                continue
            futures[pool.submit(process_fn, item)] = index

        for future in as_completed(futures):
            index = futures[future]
            try:
                results[index] = future.result()
                tracker.record_success(size_of(items[index]) if size_of else 0)
            except Exception as exc:
                logger.error(
                    "batch_item_failed",
                    index=index,
                    item=str(items[index])[:100],
                    error=str(exc),
                )
                results[index] = exc
                tracker.record_failure(index, str(exc))

            tracker.log_progress(every_n=log_every)
    finally:
        if owned:
            pool.shutdown(wait=True)

    summary = tracker.summary()
    summary["results"] = results
    return summary
