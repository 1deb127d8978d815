"""CLI entrypoint for q-alloc — typer app with create, preview and email commands."""

import asyncio
import sys
from datetime import date, datetime
from pathlib import Path

import structlog
import typer
from pydantic import ValidationError

from q_alloc.allocation.domain.quota import QuotaRequest
from q_alloc.batch.domain.report import BatchReport
from q_alloc.cli.wiring import build_service
from q_alloc.config.infrastructure.observer import StructlogConfigObserver
from q_alloc.config.infrastructure.yaml_loader import YamlConfigLoader
from q_alloc.core.errors import QAllocError
from q_alloc.delivery.application.service import AssignmentService
from q_alloc.delivery.domain.draft import AssignmentDraft
from q_alloc.delivery.domain.report import DeliveryReport, DeliveryStatus

app = typer.Typer(add_completion=False, help="Personalized assignment allocation.")

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_CYAN = "\033[36m"

_CONFIG_ARG = typer.Argument(..., help="Path to q-alloc config YAML")
_TEACHER_OPT = typer.Option(..., "--teacher", "-t", help="Acting teacher id")
_LOG_FORMAT_OPT = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _service(config_path: Path, log_format: str) -> AssignmentService:
    _configure_structlog(log_format=log_format)
    config = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)
    return build_service(config=config, show_progress=log_format != "json")


def _parse_due(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}") from exc


def _rule(color: str = _DIM, width: int = 64) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _print_batch(assignment_id: str, report: BatchReport) -> None:
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  Assignment {assignment_id}{_RESET}")
    _rule(color=_CYAN)
    typer.echo(f"  {_DIM}Allocated{_RESET}  {_GREEN}{len(report.allocated)}{_RESET}")
    typer.echo(f"  {_DIM}Failed   {_RESET}  {_RED}{len(report.failures)}{_RESET}")
    for failure in report.failures:
        typer.echo(f"  {_RED}✗{_RESET} {failure.student_id}  {_DIM}{failure.reason}{_RESET}")
    typer.echo("")


def _print_delivery(report: DeliveryReport) -> None:
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(
        f"{_CYAN}{_BOLD}  Emails for {report.assignment_id}: "
        f"{len(report.sent)} sent, {len(report.failed)} failed{_RESET}"
    )
    _rule(color=_CYAN)
    for result in report.results:
        if result.status is DeliveryStatus.SUCCESS:
            typer.echo(f"  {_GREEN}✓{_RESET} {result.student_name} <{result.email}>")
        else:
            typer.echo(
                f"  {_RED}✗{_RESET} {result.student_name or result.student_id}"
                f" <{result.email}>  {_DIM}{result.error}{_RESET}"
            )
    typer.echo("")


@app.command()
def create(
    config_path: Path = _CONFIG_ARG,
    teacher_id: str = _TEACHER_OPT,
    course_id: str = typer.Option(..., "--course", "-c", help="Course id"),
    name: str = typer.Option(..., "--name", help="Assignment name"),
    description: str = typer.Option(..., "--description", help="Assignment description"),
    due: str = typer.Option(..., "--due", help="Due date, YYYY-MM-DD"),
    total_marks: int = typer.Option(..., "--total-marks", help="Total marks"),
    easy: int = typer.Option(0, "--easy", min=0, help="Number of easy questions"),
    medium: int = typer.Option(0, "--medium", min=0, help="Number of medium questions"),
    hard: int = typer.Option(0, "--hard", min=0, help="Number of hard questions"),
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Create an assignment and allocate questions for every enrolled student."""
    try:
        service = _service(config_path=config_path, log_format=log_format)
        draft = AssignmentDraft(
            name=name,
            description=description,
            due_date=_parse_due(due),
            course_id=course_id,
            total_marks=total_marks,
            quota=QuotaRequest(easy=easy, medium=medium, hard=hard),
        )
        result = asyncio.run(service.create_assignment(teacher_id=teacher_id, draft=draft))
    except QAllocError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    except ValidationError as exc:
        typer.echo(f"Invalid assignment: {exc}")
        raise typer.Exit(code=1) from exc

    _print_batch(assignment_id=result.assignment.id, report=result.report)


@app.command()
def preview(
    config_path: Path = _CONFIG_ARG,
    assignment_id: str = typer.Argument(..., help="Assignment id"),
    student_id: str = typer.Argument(..., help="Student id"),
    teacher_id: str = _TEACHER_OPT,
    out: Path = typer.Option(
        Path("preview.pdf"), "--out", "-o", help="Where to write the PDF"
    ),
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Render one student's assignment PDF, allocating it first if needed."""
    try:
        service = _service(config_path=config_path, log_format=log_format)
        document = asyncio.run(
            service.preview_for_student(
                teacher_id=teacher_id,
                assignment_id=assignment_id,
                student_id=student_id,
            )
        )
    except QAllocError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    out.write_bytes(document)
    typer.echo(f"Wrote {out} ({len(document)} bytes)")


@app.command()
def email(
    config_path: Path = _CONFIG_ARG,
    assignment_id: str = typer.Argument(..., help="Assignment id"),
    teacher_id: str = _TEACHER_OPT,
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Email every enrolled student their personalized assignment PDF."""
    try:
        service = _service(config_path=config_path, log_format=log_format)
        report = asyncio.run(
            service.email_all(teacher_id=teacher_id, assignment_id=assignment_id)
        )
    except QAllocError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    _print_delivery(report=report)
    if report.failed:
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
