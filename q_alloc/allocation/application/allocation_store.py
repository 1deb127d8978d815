"""AllocationStore — get-or-create access to a student's allocation."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from q_alloc.allocation.application.keyed_lock import KeyedLock
from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.allocation.domain.clock import Clock
from q_alloc.allocation.domain.errors import RaceConflictError
from q_alloc.allocation.domain.observer import AllocationObserver
from q_alloc.allocation.domain.pool import QuestionPool
from q_alloc.allocation.domain.repository import AssignmentRepository
from q_alloc.allocation.domain.resolver import resolve_quota
from q_alloc.allocation.domain.seed import derive_base_seed
from q_alloc.config.domain.execution import ExecutionConfig
from q_alloc.core.errors import QAllocError
from q_alloc.core.retry import call_with_retry, call_with_timeout
from q_alloc.question.domain.repository import QuestionRepository

T = TypeVar("T")


class AllocationStore:
    """Returns the existing allocation for a student or creates it exactly once.

    Two guards keep an allocation from ever being replaced: a per-(assignment,
    student) lock serializes callers inside this process, and the repository's
    insert-if-absent rejects a second writer from any other process. A rejected
    insert is answered by re-reading the winner's allocation.

    Share one instance between every flow that allocates (batch creation,
    preview, email) so that they also share the lock table.
    """

    def __init__(
        self,
        questions: QuestionRepository,
        assignments: AssignmentRepository,
        clock: Clock,
        execution: ExecutionConfig,
        observer: AllocationObserver,
    ) -> None:
        self._questions = questions
        self._assignments = assignments
        self._clock = clock
        self._execution = execution
        self._observer = observer
        self._locks = KeyedLock()

    async def get_or_create(self, assignment: Assignment, student_id: str) -> Allocation:
        """Return student_id's allocation, resolving and persisting it on first use.

        On first creation ``assignment.students`` is updated in place.

        Raises:
            InsufficientPoolError: if any difficulty pool is smaller than the quota.
            DuplicateQuestionError: if the pool repeats a question id.
            UpstreamError: if the pool query or the insert keeps failing or timing out.
        """
        existing = assignment.allocation_for(student_id)
        if existing is not None:
            self._observer.allocation_reused(
                assignment_id=assignment.id, student_id=student_id
            )
            return existing

        async with self._locks.hold((assignment.id, student_id)):
            existing = assignment.allocation_for(student_id)
            if existing is not None:
                self._observer.allocation_reused(
                    assignment_id=assignment.id, student_id=student_id
                )
                return existing
            return await self._create(assignment=assignment, student_id=student_id)

    async def _create(self, assignment: Assignment, student_id: str) -> Allocation:
        base_seed = derive_base_seed(base=self._clock.now_millis(), student_id=student_id)

        pool = await self._io(
            assignment=assignment,
            student_id=student_id,
            description="query question pool",
            operation=lambda: QuestionPool.fetch(
                repository=self._questions, teacher_id=assignment.teacher_id
            ),
        )
        selected = resolve_quota(pool=pool, quota=assignment.quota, base_seed=base_seed)
        allocation = Allocation(
            question_ids=tuple(q.id for q in selected),
            seed=base_seed,
        )

        try:
            stored = await self._io(
                assignment=assignment,
                student_id=student_id,
                description="insert allocation",
                operation=lambda: self._assignments.insert_allocation_if_absent(
                    assignment_id=assignment.id,
                    student_id=student_id,
                    allocation=allocation,
                ),
            )
        except RaceConflictError:
            stored = await self._reread(assignment=assignment, student_id=student_id)
            self._observer.allocation_race_resolved(
                assignment_id=assignment.id, student_id=student_id
            )
            return assignment.add_allocation(student_id=student_id, allocation=stored)

        self._observer.allocation_created(
            assignment_id=assignment.id,
            student_id=student_id,
            seed=stored.seed,
            num_questions=len(stored.question_ids),
        )
        return assignment.add_allocation(student_id=student_id, allocation=stored)

    async def _reread(self, assignment: Assignment, student_id: str) -> Allocation:
        fresh = await self._io(
            assignment=assignment,
            student_id=student_id,
            description="reload assignment",
            operation=lambda: self._assignments.load(assignment_id=assignment.id),
        )
        stored = fresh.allocation_for(student_id)
        if stored is None:
            raise RaceConflictError(assignment_id=assignment.id, student_id=student_id)
        return stored

    async def _io(
        self,
        assignment: Assignment,
        student_id: str,
        description: str,
        operation: Callable[[], Awaitable[T]],
    ) -> T:
        """Run one storage or pool call with the configured timeout and retry policy."""

        def _on_retry(attempt: int, exc: QAllocError, backoff: float) -> None:
            self._observer.allocation_retry(
                assignment_id=assignment.id,
                student_id=student_id,
                attempt=attempt,
                reason=str(exc),
                backoff_seconds=backoff,
            )

        return await call_with_retry(
            operation=lambda: call_with_timeout(
                operation=operation,
                timeout_seconds=self._execution.timeout_seconds,
                description=description,
            ),
            retry=self._execution.retry,
            on_retry=_on_retry,
        )
