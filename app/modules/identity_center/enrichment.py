"""Bounded-concurrency batch enrichment.

Runs an enrichment function against every record of a listing with a hard
ceiling on concurrently running units, and returns the results in listing
order no matter in which order the units finish.

Each record becomes an `EnrichmentTask` addressed by its listing index. A
unit only ever writes the outcome of its own task, so the tasks list doubles
as the index-addressed result slots and needs no locking. Failures of single
units are folded into their slot and never abort the batch.

Two scheduling strategies share the same guarantees:

- "pool": a worker pool of max_concurrency threads, refilled as soon as a
  unit finishes.
- "batch": consecutive groups of max_concurrency units; a group must finish
  completely before the next one starts, so one slow unit delays its whole
  group.
"""

import contextvars
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, List, Optional, Sequence

from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from modules.identity_center.domain.errors import PartialEnrichmentWarning
from modules.identity_center.domain.models import (
    EnrichedResult,
    EnrichmentTask,
    Failure,
    Record,
    Success,
)

logger = get_module_logger()

EnrichFn = Callable[[Record], OperationResult]

SCHEDULING_STRATEGIES = ("pool", "batch")


class BoundedBatchEnricher:
    """Enriches records concurrently under a concurrency ceiling.

    Args:
        max_concurrency: Maximum units running at the same time
        scheduling: "pool" (default) or "batch"
    """

    def __init__(self, max_concurrency: int = 30, scheduling: str = "pool") -> None:
        if max_concurrency <= 0:
            raise ValueError("max_concurrency must be greater than zero")
        if scheduling not in SCHEDULING_STRATEGIES:
            raise ValueError(
                f"scheduling must be one of {', '.join(SCHEDULING_STRATEGIES)}"
            )
        self.max_concurrency = max_concurrency
        self.scheduling = scheduling

    def enrich(self, items: Sequence[Record], fn: EnrichFn) -> List[EnrichedResult]:
        """Run fn against every item and return results in item order.

        Args:
            items: Records in listing order
            fn: Enrichment function returning an OperationResult; its data
                becomes the derived value on success

        Returns:
            One EnrichedResult per item, index i for items[i]. Failed items
            have derived=None and error set.
        """
        tasks = [EnrichmentTask(index=i, input=item) for i, item in enumerate(items)]
        if not tasks:
            return []

        log = logger.bind(
            total=len(tasks),
            max_concurrency=self.max_concurrency,
            scheduling=self.scheduling,
        )
        log.debug("enrichment_started")

        if self.scheduling == "batch":
            self._run_batches(tasks, fn)
        else:
            self._run_pool(tasks, fn)

        results = [_fold(task) for task in tasks]
        for result in results:
            if not result.is_enriched:
                log.warning(
                    "enrichment_failed",
                    index=result.index,
                    record_id=result.base_record.id,
                    error=result.error,
                    partial=result.partial,
                )

        log.debug(
            "enrichment_completed",
            failed=sum(1 for r in results if not r.is_enriched),
        )
        return results

    def _run_pool(self, tasks: List[EnrichmentTask], fn: EnrichFn) -> None:
        workers = min(self.max_concurrency, len(tasks))
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="enrich"
        ) as executor:
            futures = [self._submit(executor, task, fn) for task in tasks]
            wait(futures)

    def _run_batches(self, tasks: List[EnrichmentTask], fn: EnrichFn) -> None:
        workers = min(self.max_concurrency, len(tasks))
        with ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="enrich"
        ) as executor:
            for start in range(0, len(tasks), self.max_concurrency):
                group = tasks[start : start + self.max_concurrency]
                logger.debug("enrichment_group_started", start=start, size=len(group))
                wait([self._submit(executor, task, fn) for task in group])

    @staticmethod
    def _submit(
        executor: ThreadPoolExecutor, task: EnrichmentTask, fn: EnrichFn
    ) -> Future:
        # each unit runs in a copy of the caller's logging context
        ctx = contextvars.copy_context()
        return executor.submit(ctx.run, _run_unit, task, fn)


def _run_unit(task: EnrichmentTask, fn: EnrichFn) -> None:
    try:
        result = fn(task.input)
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("enrichment_unit_exception", index=task.index)
        task.outcome = Failure(reason=f"{type(exc).__name__}: {exc}")
        return

    if result.is_success:
        task.outcome = Success(value=result.data)
    else:
        task.outcome = Failure(reason=result.message, partial=result.data)


def _fold(task: EnrichmentTask) -> EnrichedResult:
    outcome = task.outcome
    if isinstance(outcome, Success):
        return EnrichedResult(
            index=task.index, base_record=task.input, derived=outcome.value
        )
    if isinstance(outcome, Failure):
        return EnrichedResult(
            index=task.index,
            base_record=task.input,
            error=outcome.reason,
            partial=outcome.partial,
        )
    return EnrichedResult(
        index=task.index, base_record=task.input, error="enrichment did not run"
    )


def partial_enrichment_warning(
    results: Sequence[EnrichedResult],
) -> Optional[PartialEnrichmentWarning]:
    """Describe the failed items of a batch, or None when all succeeded."""
    failed = [r.index for r in results if not r.is_enriched]
    if not failed:
        return None
    return PartialEnrichmentWarning(failed, total=len(results))
