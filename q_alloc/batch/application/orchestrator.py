"""BatchOrchestrator — allocates an assignment for every student of a roster."""

import asyncio
import time
import uuid

from q_alloc.allocation.application.allocation_store import AllocationStore
from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.batch.domain.observer import BatchObserver
from q_alloc.batch.domain.report import BatchReport, StudentFailure
from q_alloc.config.domain.execution import ExecutionConfig
from q_alloc.core.errors import QAllocError


class BatchOrchestrator:
    """Runs get-or-create for each student in turn, collecting failures instead of raising.

    Students are processed strictly in the caller's order; one student's
    allocation is finished (or has failed) before the next one starts. Each
    student is bounded by an overall deadline covering every retry, so a hung
    collaborator costs that student only.
    """

    def __init__(
        self,
        store: AllocationStore,
        execution: ExecutionConfig,
        observer: BatchObserver,
    ) -> None:
        self._store = store
        self._execution = execution
        self._observer = observer

    def _student_deadline(self) -> float:
        retry = self._execution.retry
        backoff_total = 0.0
        backoff = retry.initial_backoff_seconds
        for _ in range(retry.max_attempts - 1):
            backoff_total += backoff
            backoff *= retry.backoff_multiplier
        # Pool query and insert are each bounded per attempt.
        return 2 * self._execution.timeout_seconds * retry.max_attempts + backoff_total

    async def run(self, assignment: Assignment, student_ids: list[str]) -> BatchReport:
        """Allocate assignment for every id in student_ids and return a BatchReport.

        Duplicate ids are processed once. ``assignment.students`` is filled in
        place; persisting the assignment document is the caller's concern.
        """
        batch_id = str(uuid.uuid4())
        roster = list(dict.fromkeys(student_ids))
        self._observer.batch_started(
            batch_id=batch_id,
            assignment_id=assignment.id,
            total_students=len(roster),
        )
        started_at = time.monotonic()
        deadline = self._student_deadline()

        allocated: list[str] = []
        failures: list[StudentFailure] = []

        for student_id in roster:
            self._observer.student_started(batch_id=batch_id, student_id=student_id)
            try:
                async with asyncio.timeout(deadline):
                    await self._store.get_or_create(
                        assignment=assignment, student_id=student_id
                    )
            except QAllocError as exc:
                self._record_failure(
                    batch_id=batch_id,
                    failures=failures,
                    student_id=student_id,
                    reason=str(exc),
                    error_type=type(exc).__name__,
                )
                continue
            except TimeoutError:
                self._record_failure(
                    batch_id=batch_id,
                    failures=failures,
                    student_id=student_id,
                    reason=f"Failed to allocate questions: timed out after {deadline}s",
                    error_type="TimeoutError",
                )
                continue

            allocated.append(student_id)
            self._observer.student_completed(batch_id=batch_id, student_id=student_id)

        self._observer.batch_completed(
            batch_id=batch_id,
            assignment_id=assignment.id,
            total_allocated=len(allocated),
            total_failed=len(failures),
            elapsed_seconds=time.monotonic() - started_at,
        )
        return BatchReport(
            batch_id=batch_id,
            assignment_id=assignment.id,
            allocated=allocated,
            failures=failures,
        )

    def _record_failure(
        self,
        batch_id: str,
        failures: list[StudentFailure],
        student_id: str,
        reason: str,
        error_type: str,
    ) -> None:
        failures.append(
            StudentFailure(student_id=student_id, reason=reason, error_type=error_type)
        )
        self._observer.student_failed(
            batch_id=batch_id, student_id=student_id, reason=reason
        )
