"""AssignmentService — create, preview and email personalized assignments."""

import uuid
from collections.abc import Awaitable, Callable
from typing import TypeVar

from q_alloc.allocation.application.allocation_store import AllocationStore
from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.allocation.domain.repository import AssignmentRepository
from q_alloc.batch.application.orchestrator import BatchOrchestrator
from q_alloc.config.domain.execution import ExecutionConfig
from q_alloc.core.errors import QAllocError
from q_alloc.core.retry import call_with_retry, call_with_timeout
from q_alloc.delivery.domain.draft import AssignmentDraft, CreateAssignmentResult
from q_alloc.delivery.domain.errors import (
    MissingQuestionsError,
    NotAuthorizedError,
    NotifierUnavailableError,
    StudentNotEnrolledError,
)
from q_alloc.delivery.domain.message import compose_assignment_email
from q_alloc.delivery.domain.notifier import Notifier
from q_alloc.delivery.domain.observer import DeliveryObserver
from q_alloc.delivery.domain.renderer import DocumentRenderer
from q_alloc.delivery.domain.report import DeliveryReport, DeliveryResult, DeliveryStatus
from q_alloc.question.domain.question import Question
from q_alloc.question.domain.repository import QuestionRepository
from q_alloc.roster.domain.models import Course, Student, Teacher
from q_alloc.roster.domain.repository import RosterRepository

T = TypeVar("T")


def _new_assignment_id() -> str:
    return uuid.uuid4().hex


class AssignmentService:
    """The three teacher-facing flows built on the allocation engine.

    Free of transport concerns: an HTTP layer maps QAllocError subclasses to
    status codes (not found, not authorized, not enrolled) and the returned
    reports to response bodies.
    """

    def __init__(
        self,
        assignments: AssignmentRepository,
        roster: RosterRepository,
        questions: QuestionRepository,
        store: AllocationStore,
        orchestrator: BatchOrchestrator,
        renderer: DocumentRenderer,
        notifier: Notifier | None,
        execution: ExecutionConfig,
        observer: DeliveryObserver,
        id_factory: Callable[[], str] = _new_assignment_id,
    ) -> None:
        self._assignments = assignments
        self._roster = roster
        self._questions = questions
        self._store = store
        self._orchestrator = orchestrator
        self._renderer = renderer
        self._notifier = notifier
        self._execution = execution
        self._observer = observer
        self._id_factory = id_factory

    async def create_assignment(
        self, teacher_id: str, draft: AssignmentDraft
    ) -> CreateAssignmentResult:
        """Create an assignment and allocate questions for the whole course roster.

        Raises:
            CourseNotFoundError: if draft.course_id is unknown.
            NotAuthorizedError: if the course belongs to another teacher.
        """
        course = await self._roster.load_course(course_id=draft.course_id)
        _check_owner(course=course, teacher_id=teacher_id)

        assignment = Assignment(
            id=self._id_factory(),
            name=draft.name,
            description=draft.description,
            due_date=draft.due_date,
            course_id=course.id,
            teacher_id=teacher_id,
            total_marks=draft.total_marks,
            quota=draft.quota,
        )
        # Stored before allocating: allocations are inserted into an existing document.
        await self._save(assignment)
        report = await self._orchestrator.run(
            assignment=assignment, student_ids=list(course.student_ids)
        )
        await self._save(assignment)

        self._observer.assignment_created(
            assignment_id=assignment.id,
            course_id=course.id,
            total_students=len(course.student_ids),
        )
        return CreateAssignmentResult(assignment=assignment, report=report)

    async def preview_for_student(
        self, teacher_id: str, assignment_id: str, student_id: str
    ) -> bytes:
        """Render student_id's assignment, allocating it first if needed.

        Raises:
            AssignmentNotFoundError, CourseNotFoundError, StudentNotFoundError:
                if a referenced entity does not exist.
            NotAuthorizedError: if the course belongs to another teacher.
            StudentNotEnrolledError: if the student is not on the course roster.
            InsufficientPoolError: if the student has no allocation and the pool
                cannot satisfy the quota.
            UpstreamError: if storage or rendering keeps failing.
        """
        assignment, course = await self._load_owned(
            teacher_id=teacher_id, assignment_id=assignment_id
        )
        if not course.is_enrolled(student_id):
            raise StudentNotEnrolledError(student_id=student_id, course_id=course.id)
        student = await self._roster.load_student(student_id=student_id)

        allocation = await self._store.get_or_create(
            assignment=assignment, student_id=student_id
        )
        document = await self._render(
            assignment=assignment, course=course, student=student, allocation=allocation
        )
        self._observer.preview_rendered(
            assignment_id=assignment.id, student_id=student_id, num_bytes=len(document)
        )
        return document

    async def email_all(self, teacher_id: str, assignment_id: str) -> DeliveryReport:
        """Allocate every unallocated student, then render and email each one.

        One student's failure (allocation, rendering or sending) is recorded in
        the report and never stops the others.

        Raises:
            NotifierUnavailableError: if no notifier is configured.
            AssignmentNotFoundError, CourseNotFoundError, TeacherNotFoundError:
                if a referenced entity does not exist.
            NotAuthorizedError: if the course belongs to another teacher.
            UpstreamError: if loading or saving the assignment keeps failing.
        """
        if self._notifier is None:
            raise NotifierUnavailableError()
        assignment, course = await self._load_owned(
            teacher_id=teacher_id, assignment_id=assignment_id
        )
        teacher = await self._roster.load_teacher(teacher_id=teacher_id)

        batch = await self._orchestrator.run(
            assignment=assignment, student_ids=list(course.student_ids)
        )
        await self._save(assignment)
        allocation_failures = {f.student_id: f.reason for f in batch.failures}
        if allocation_failures:
            # A timed-out insert may still have landed in storage.
            stored = await self._load(assignment_id=assignment.id)
            for student_id in list(allocation_failures):
                allocation = stored.allocation_for(student_id)
                if allocation is not None:
                    assignment.add_allocation(student_id=student_id, allocation=allocation)
                    del allocation_failures[student_id]

        results: list[DeliveryResult] = []
        for student_id in dict.fromkeys(course.student_ids):
            results.append(
                await self._deliver_one(
                    assignment=assignment,
                    course=course,
                    teacher=teacher,
                    student_id=student_id,
                    allocation_failure=allocation_failures.get(student_id),
                )
            )
        return DeliveryReport(assignment_id=assignment.id, results=results)

    async def _deliver_one(
        self,
        assignment: Assignment,
        course: Course,
        teacher: Teacher,
        student_id: str,
        allocation_failure: str | None,
    ) -> DeliveryResult:
        try:
            student = await self._roster.load_student(student_id=student_id)
        except QAllocError as exc:
            return self._failed(
                assignment=assignment, student_id=student_id, name="", email="", reason=str(exc)
            )

        if allocation_failure is not None:
            return self._failed(
                assignment=assignment,
                student_id=student_id,
                name=student.name,
                email=student.email,
                reason=allocation_failure,
            )

        try:
            allocation = await self._store.get_or_create(
                assignment=assignment, student_id=student_id
            )
            document = await self._render(
                assignment=assignment,
                course=course,
                student=student,
                allocation=allocation,
            )
            await self._send(
                assignment=assignment,
                course=course,
                teacher=teacher,
                student=student,
                document=document,
            )
        except QAllocError as exc:
            return self._failed(
                assignment=assignment,
                student_id=student_id,
                name=student.name,
                email=student.email,
                reason=str(exc),
            )

        self._observer.email_sent(
            assignment_id=assignment.id, student_id=student_id, email=student.email
        )
        return DeliveryResult(
            student_id=student_id,
            student_name=student.name,
            email=student.email,
            status=DeliveryStatus.SUCCESS,
        )

    def _failed(
        self,
        assignment: Assignment,
        student_id: str,
        name: str,
        email: str,
        reason: str,
    ) -> DeliveryResult:
        self._observer.email_failed(
            assignment_id=assignment.id, student_id=student_id, email=email, reason=reason
        )
        return DeliveryResult(
            student_id=student_id,
            student_name=name,
            email=email,
            status=DeliveryStatus.FAILED,
            error=reason,
        )

    async def _load_owned(
        self, teacher_id: str, assignment_id: str
    ) -> tuple[Assignment, Course]:
        assignment = await self._load(assignment_id=assignment_id)
        course = await self._roster.load_course(course_id=assignment.course_id)
        _check_owner(course=course, teacher_id=teacher_id)
        return assignment, course

    async def _load(self, assignment_id: str) -> Assignment:
        return await self._guarded(
            assignment_id=assignment_id,
            description="load assignment",
            operation=lambda: self._assignments.load(assignment_id=assignment_id),
        )

    async def _save(self, assignment: Assignment) -> None:
        await self._guarded(
            assignment_id=assignment.id,
            description="save assignment",
            operation=lambda: self._assignments.save(assignment),
        )

    async def _resolve_questions(
        self, assignment: Assignment, student_id: str, allocation: Allocation
    ) -> list[Question]:
        ids = list(allocation.question_ids)
        found = await self._guarded(
            assignment_id=assignment.id,
            student_id=student_id,
            description="resolve questions",
            operation=lambda: self._questions.find_by_ids(question_ids=ids),
        )
        by_id = {q.id: q for q in found}
        missing = [qid for qid in ids if qid not in by_id]
        if missing:
            raise MissingQuestionsError(student_id=student_id, question_ids=missing)
        return [by_id[qid] for qid in ids]

    async def _render(
        self,
        assignment: Assignment,
        course: Course,
        student: Student,
        allocation: Allocation,
    ) -> bytes:
        questions = await self._resolve_questions(
            assignment=assignment, student_id=student.id, allocation=allocation
        )
        return await self._guarded(
            assignment_id=assignment.id,
            student_id=student.id,
            description="render assignment",
            operation=lambda: self._renderer.render(
                assignment=assignment,
                course=course,
                student=student,
                questions=questions,
            ),
        )

    async def _send(
        self,
        assignment: Assignment,
        course: Course,
        teacher: Teacher,
        student: Student,
        document: bytes,
    ) -> None:
        notifier = self._notifier
        if notifier is None:
            raise NotifierUnavailableError()
        email = compose_assignment_email(
            assignment=assignment, course=course, student=student, teacher=teacher
        )
        # A send cut off by the timeout may still complete in its worker thread.
        await self._guarded(
            assignment_id=assignment.id,
            student_id=student.id,
            description="send email",
            retry_on_timeout=False,
            operation=lambda: notifier.send(
                recipient=student.email,
                subject=email.subject,
                body=email.body,
                attachment_name=email.attachment_name,
                document=document,
            ),
        )

    async def _guarded(
        self,
        assignment_id: str,
        description: str,
        operation: Callable[[], Awaitable[T]],
        student_id: str | None = None,
        retry_on_timeout: bool = True,
    ) -> T:
        def _on_retry(attempt: int, exc: QAllocError, backoff: float) -> None:
            self._observer.delivery_retry(
                assignment_id=assignment_id,
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
                retry_on_timeout=retry_on_timeout,
            ),
            retry=self._execution.retry,
            on_retry=_on_retry,
        )


def _check_owner(course: Course, teacher_id: str) -> None:
    if course.teacher_id != teacher_id:
        raise NotAuthorizedError(teacher_id=teacher_id, course_id=course.id)
