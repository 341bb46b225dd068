"""Filter evaluation for the absence records list.

All checks are pure. Date bounds are compared at day granularity and are
inclusive on both ends: the upper bound is advanced by one day and compared
with ``<`` so a record dated exactly on ``date_to`` still passes.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from .model import AbsenceFilters, AbsenceRecord


def _search_fields(record: AbsenceRecord) -> tuple[str, ...]:
    return (
        record.absent_teacher,
        record.replacement_teacher,
        record.absent_teacher_subject.value,
        record.replacement_teacher_subject.value,
    )


def matches_filters(record: AbsenceRecord, filters: AbsenceFilters) -> bool:
    if filters.date_from is not None and record.absence_date < filters.date_from:
        return False
    if filters.date_to is not None and filters.date_to < date.max:
        if record.absence_date >= filters.date_to + timedelta(days=1):
            return False

    if filters.absent_teacher_subject and record.absent_teacher_subject != filters.absent_teacher_subject:
        return False
    if filters.replacement_teacher_subject and record.replacement_teacher_subject != filters.replacement_teacher_subject:
        return False

    term = (filters.search_term or "").strip().lower()
    if term:
        return any(term in field.lower() for field in _search_fields(record))
    return True


def filter_all(records: Iterable[AbsenceRecord], filters: AbsenceFilters) -> list[AbsenceRecord]:
    return [r for r in records if matches_filters(r, filters)]
