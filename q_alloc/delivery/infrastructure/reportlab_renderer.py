"""ReportlabDocumentRenderer — renders a student's assignment as a PDF with ReportLab."""

import asyncio
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import PageBreak, Paragraph, Preformatted, SimpleDocTemplate, Spacer

from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.core.errors import UpstreamError
from q_alloc.question.domain.question import Question
from q_alloc.roster.domain.models import Course, Student


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("Title", parent=base["Title"], fontSize=20),
        "subtitle": ParagraphStyle(
            "Subtitle", parent=base["Heading2"], alignment=TA_CENTER
        ),
        "meta": ParagraphStyle("Meta", parent=base["Normal"], fontSize=12, leading=16),
        "section": ParagraphStyle("Section", parent=base["Heading2"], fontSize=14),
        "question": ParagraphStyle("Question", parent=base["Heading3"], fontSize=12),
        "label": ParagraphStyle(
            "Label", parent=base["Normal"], fontName="Helvetica-Bold", fontSize=10
        ),
        "body": ParagraphStyle("Body", parent=base["Normal"], fontSize=11, leading=14),
        "sample": ParagraphStyle("Sample", parent=base["Code"], fontSize=9),
        "total": ParagraphStyle(
            "Total", parent=base["Normal"], fontSize=12, alignment=TA_RIGHT
        ),
    }


def _text(value: str) -> str:
    """Escape value for a Paragraph and keep its line breaks."""
    return escape(value).replace("\n", "<br/>")


def build_assignment_pdf(
    assignment: Assignment,
    course: Course,
    student: Student,
    questions: list[Question],
) -> bytes:
    """Build the PDF synchronously and return its bytes.

    Layout: header, course and student details, then one page per question
    with its formats, constraints and sample cases, and the summed marks at
    the end.
    """
    styles = _styles()
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=2 * cm,
        rightMargin=2 * cm,
        topMargin=2 * cm,
        bottomMargin=2 * cm,
        title=f"{course.name}: {assignment.name}",
        author=course.teacher_id,
    )

    story: list = [
        Paragraph("Assignment", styles["title"]),
        Paragraph(_text(assignment.name), styles["subtitle"]),
        Spacer(1, 0.4 * cm),
        Paragraph(f"Course: {_text(course.name)}", styles["meta"]),
        Paragraph(f"Due Date: {assignment.due_date.isoformat()}", styles["meta"]),
        Paragraph(f"Total Marks: {assignment.total_marks}", styles["meta"]),
        Spacer(1, 0.3 * cm),
        Paragraph(f"Student Name: {_text(student.name)}", styles["meta"]),
        Paragraph(f"Roll Number: {_text(student.roll_number)}", styles["meta"]),
        Spacer(1, 0.5 * cm),
        Paragraph("Questions", styles["section"]),
    ]

    for index, question in enumerate(questions):
        story.append(
            Paragraph(
                f"Question {index + 1} ({question.difficulty.value} - {question.marks} marks)",
                styles["question"],
            )
        )
        story.append(Paragraph(_text(question.description), styles["body"]))
        for label, value in (
            ("Input Format:", question.input_format),
            ("Output Format:", question.output_format),
            ("Constraints:", question.constraints),
        ):
            story.append(Spacer(1, 0.2 * cm))
            story.append(Paragraph(label, styles["label"]))
            story.append(Paragraph(_text(value), styles["body"]))

        story.append(Spacer(1, 0.2 * cm))
        story.append(Paragraph("Sample Test Cases:", styles["label"]))
        for n, (sample_in, sample_out) in enumerate(
            zip(question.sample_inputs, question.sample_outputs, strict=False), start=1
        ):
            story.append(Paragraph(f"<i>Sample Input {n}:</i>", styles["body"]))
            story.append(Preformatted(sample_in, styles["sample"]))
            story.append(Paragraph(f"<i>Sample Output {n}:</i>", styles["body"]))
            story.append(Preformatted(sample_out, styles["sample"]))

        if index < len(questions) - 1:
            story.append(PageBreak())

    total = sum(q.marks for q in questions)
    story.append(Spacer(1, 0.5 * cm))
    story.append(Paragraph(f"Total Marks: {total}", styles["total"]))

    doc.build(story)
    return buffer.getvalue()


class ReportlabDocumentRenderer:
    """Satisfies the DocumentRenderer protocol. Builds PDFs in a worker thread."""

    async def render(
        self,
        assignment: Assignment,
        course: Course,
        student: Student,
        questions: list[Question],
    ) -> bytes:
        try:
            return await asyncio.to_thread(
                build_assignment_pdf, assignment, course, student, questions
            )
        except Exception as exc:
            # ReportLab reports layout problems as assorted built-in exceptions.
            raise UpstreamError(
                operation="render assignment PDF", reason=str(exc), retriable=False
            ) from exc
