"""JsonFileAssignmentRepository — one JSON document per assignment, guarded by file locks."""

import asyncio
import json
from collections.abc import Callable
from pathlib import Path

import portalocker
from pydantic import ValidationError

from q_alloc.allocation.domain.allocation import Allocation
from q_alloc.allocation.domain.assignment import Assignment
from q_alloc.allocation.domain.errors import AssignmentNotFoundError, RaceConflictError
from q_alloc.core.errors import UpstreamError


class JsonFileAssignmentRepository:
    """Satisfies the AssignmentRepository protocol over ``<data_dir>/<id>.json`` files.

    Every write is a read-modify-write under an exclusive portalocker lock, so
    separate processes sharing data_dir cannot overwrite each other's
    allocations. ``save`` merges: allocations already on disk always win.
    File I/O runs in a worker thread to keep the event loop free.
    """

    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir

    def _path(self, assignment_id: str) -> Path:
        return self._data_dir / f"{assignment_id}.json"

    async def load(self, assignment_id: str) -> Assignment:
        return await asyncio.to_thread(self._load_sync, assignment_id)

    async def save(self, assignment: Assignment) -> None:
        await asyncio.to_thread(self._save_sync, assignment)

    async def insert_allocation_if_absent(
        self, assignment_id: str, student_id: str, allocation: Allocation
    ) -> Allocation:
        return await asyncio.to_thread(
            self._insert_sync, assignment_id, student_id, allocation
        )

    def _load_sync(self, assignment_id: str) -> Assignment:
        path = self._path(assignment_id)
        if not path.exists():
            raise AssignmentNotFoundError(assignment_id=assignment_id)
        try:
            with open(path, encoding="utf-8") as fh:
                portalocker.lock(fh, portalocker.LOCK_SH)
                try:
                    raw = fh.read()
                finally:
                    portalocker.unlock(fh)
        except OSError as exc:
            raise UpstreamError(operation="load assignment", reason=str(exc)) from exc
        return _parse(raw=raw, assignment_id=assignment_id)

    def _save_sync(self, assignment: Assignment) -> None:
        def _merge(current: Assignment | None) -> Assignment:
            merged = assignment.model_copy(deep=True)
            if current is not None:
                merged.students.update(current.students)
            return merged

        self._read_modify_write(assignment_id=assignment.id, modifier=_merge, create=True)

    def _insert_sync(
        self, assignment_id: str, student_id: str, allocation: Allocation
    ) -> Allocation:
        def _insert(current: Assignment | None) -> Assignment:
            if current is None:
                raise AssignmentNotFoundError(assignment_id=assignment_id)
            if student_id in current.students:
                raise RaceConflictError(
                    assignment_id=assignment_id, student_id=student_id
                )
            current.students[student_id] = allocation
            return current

        self._read_modify_write(assignment_id=assignment_id, modifier=_insert, create=False)
        return allocation

    def _read_modify_write(
        self,
        assignment_id: str,
        modifier: Callable[[Assignment | None], Assignment],
        create: bool,
    ) -> None:
        path = self._path(assignment_id)
        if not create and not path.exists():
            raise AssignmentNotFoundError(assignment_id=assignment_id)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            with open(path, "r+", encoding="utf-8") as fh:
                portalocker.lock(fh, portalocker.LOCK_EX)
                try:
                    fh.seek(0)
                    content = fh.read()
                    current = (
                        _parse(raw=content, assignment_id=assignment_id)
                        if content.strip()
                        else None
                    )
                    updated: Assignment = modifier(current)
                    fh.seek(0)
                    fh.truncate()
                    fh.write(updated.model_dump_json(indent=2))
                    fh.flush()
                finally:
                    portalocker.unlock(fh)
        except OSError as exc:
            raise UpstreamError(operation="write assignment", reason=str(exc)) from exc


def _parse(raw: str, assignment_id: str) -> Assignment:
    try:
        return Assignment.model_validate(json.loads(raw))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise UpstreamError(
            operation="load assignment",
            reason=f"stored document for '{assignment_id}' is corrupt: {exc}",
            retriable=False,
        ) from exc
