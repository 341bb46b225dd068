from __future__ import annotations

from datetime import date
from itertools import count

import pytest

from src.absence_system.absence_system.absences.classifier import build_record, classify_coverage
from src.absence_system.absence_system.absences.model import AbsenceRecord, NewAbsence
from src.absence_system.absence_system.core.enums import CoverageType, Subject
from src.absence_system.absence_system.core.exceptions import PersistenceError


class InMemoryAbsences:
    def __init__(self, records=()):
        self._rows: dict[int, AbsenceRecord] = {r.record_id: r for r in records}
        self._next_id = max(self._rows, default=0) + 1
        self.fail_with: PersistenceError | None = None
        self.list_calls = 0

    def list_all(self):
        self.list_calls += 1
        if self.fail_with:
            raise self.fail_with
        return list(self._rows.values())

    def create(self, *, draft: NewAbsence, coverage_type: CoverageType) -> AbsenceRecord:
        if self.fail_with:
            raise self.fail_with
        record = build_record(self._next_id, draft, coverage_type)
        self._rows[record.record_id] = record
        self._next_id += 1
        return record

    def delete(self, *, record_id: int) -> bool:
        if self.fail_with:
            raise self.fail_with
        return self._rows.pop(int(record_id), None) is not None


@pytest.fixture
def make_record():
    ids = count(1)

    def _make(
        absence_date: date,
        *,
        absent_teacher: str = "Ana Pérez",
        absent_subject: Subject = Subject.MATEMATICA,
        replacement_teacher: str = "Luis Soto",
        replacement_subject: Subject = Subject.MATEMATICA,
        hours: int = 1,
        coverage_type: CoverageType | None = None,
    ) -> AbsenceRecord:
        return AbsenceRecord(
            record_id=next(ids),
            absence_date=absence_date,
            absent_teacher=absent_teacher,
            absent_teacher_subject=absent_subject,
            replacement_teacher=replacement_teacher,
            replacement_teacher_subject=replacement_subject,
            hours_covered=hours,
            coverage_type=coverage_type or classify_coverage(absent_subject, replacement_subject),
        )

    return _make


@pytest.fixture
def march_records(make_record):
    return [
        make_record(date(2024, 3, 5), hours=2),
        make_record(
            date(2024, 3, 10),
            absent_teacher="Carlos Díaz",
            absent_subject=Subject.HISTORIA,
            replacement_teacher="María Rojas",
            replacement_subject=Subject.INGLES,
            hours=3,
        ),
    ]


@pytest.fixture
def absences_repo():
    """Factory for an in-memory repository seeded with the given records."""

    def _make(records=()):
        return InMemoryAbsences(records)

    return _make
