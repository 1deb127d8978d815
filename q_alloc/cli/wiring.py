"""Builds an AssignmentService from an AllocatorConfig using production adapters."""

from q_alloc.allocation.application.allocation_store import AllocationStore
from q_alloc.allocation.domain.clock import SystemClock
from q_alloc.allocation.infrastructure.json_repository import JsonFileAssignmentRepository
from q_alloc.allocation.infrastructure.observer import StructlogAllocationObserver
from q_alloc.batch.application.orchestrator import BatchOrchestrator
from q_alloc.batch.domain.observer import BatchObserver
from q_alloc.batch.infrastructure.composite_observer import CompositeBatchObserver
from q_alloc.batch.infrastructure.observer import StructlogBatchObserver
from q_alloc.batch.infrastructure.progress_observer import ProgressBatchObserver
from q_alloc.config.domain.config import AllocatorConfig
from q_alloc.delivery.application.service import AssignmentService
from q_alloc.delivery.infrastructure.observer import StructlogDeliveryObserver
from q_alloc.delivery.infrastructure.reportlab_renderer import ReportlabDocumentRenderer
from q_alloc.delivery.infrastructure.smtp_notifier import SmtpNotifier
from q_alloc.question.infrastructure.jsonl_loader import JsonlQuestionBankLoader
from q_alloc.question.infrastructure.memory_repository import InMemoryQuestionRepository
from q_alloc.question.infrastructure.observer import StructlogQuestionBankObserver
from q_alloc.roster.infrastructure.yaml_loader import load_roster


def build_service(config: AllocatorConfig, show_progress: bool) -> AssignmentService:
    """Wire every port of AssignmentService to its production adapter.

    Raises:
        QuestionBankLoadError: if the question bank cannot be loaded.
        RosterLoadError: if the roster cannot be loaded.
    """
    questions = InMemoryQuestionRepository(
        questions=JsonlQuestionBankLoader(observer=StructlogQuestionBankObserver()).load(
            path=config.question_bank.path
        )
    )
    roster = load_roster(path=config.roster.path)
    assignments = JsonFileAssignmentRepository(data_dir=config.storage.data_dir)

    store = AllocationStore(
        questions=questions,
        assignments=assignments,
        clock=SystemClock(),
        execution=config.execution,
        observer=StructlogAllocationObserver(),
    )
    batch_observers: list[BatchObserver] = [StructlogBatchObserver()]
    if show_progress:
        batch_observers.append(ProgressBatchObserver())
    orchestrator = BatchOrchestrator(
        store=store,
        execution=config.execution,
        observer=CompositeBatchObserver(observers=batch_observers),
    )

    return AssignmentService(
        assignments=assignments,
        roster=roster,
        questions=questions,
        store=store,
        orchestrator=orchestrator,
        renderer=ReportlabDocumentRenderer(),
        notifier=SmtpNotifier(config=config.smtp) if config.smtp is not None else None,
        execution=config.execution,
        observer=StructlogDeliveryObserver(),
    )
