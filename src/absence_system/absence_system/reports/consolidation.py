"""Monthly consolidation of absence records.

``consolidate_month`` is a pure function of its inputs: it selects the
records of one calendar month and sums them into per-teacher, per-subject
and global totals. Hours go to the covered or the accounted side according
to the coverage type stored on each record.
"""

from __future__ import annotations

from typing import Iterable

from ..absences.model import AbsenceRecord
from ..core.enums import CoverageType
from ..core.exceptions import ValidationError
from .model import CoverageHours, GlobalTotals, MonthlyConsolidatedData


def in_month(record: AbsenceRecord, month: int, year: int) -> bool:
    """``month`` is zero-based (0 = January)."""
    return record.absence_date.year == year and record.absence_date.month - 1 == month


def consolidate_month(records: Iterable[AbsenceRecord], month: int, year: int) -> MonthlyConsolidatedData:
    month = int(month)
    year = int(year)
    if not 0 <= month <= 11:
        raise ValidationError(f"Mes inválido: {month}")

    records_in_month = tuple(r for r in records if in_month(r, month, year))

    absences_by_teacher: dict[str, int] = {}
    absences_by_subject: dict[str, int] = {}
    replacements_by_teacher: dict[str, CoverageHours] = {}
    coverage_by_original_subject: dict[str, CoverageHours] = {}
    total_hours = 0
    total_covered = 0
    total_accounted = 0

    for r in records_in_month:
        subject = r.absent_teacher_subject.value
        hours = r.hours_covered

        absences_by_teacher[r.absent_teacher] = absences_by_teacher.get(r.absent_teacher, 0) + 1
        absences_by_subject[subject] = absences_by_subject.get(subject, 0) + 1

        by_teacher = replacements_by_teacher.setdefault(r.replacement_teacher, CoverageHours())
        by_subject = coverage_by_original_subject.setdefault(subject, CoverageHours())

        covered = r.coverage_type == CoverageType.COVERED
        replacements_by_teacher[r.replacement_teacher] = by_teacher.add(hours, covered=covered)
        coverage_by_original_subject[subject] = by_subject.add(hours, covered=covered)
        if covered:
            total_covered += hours
        else:
            total_accounted += hours

        total_hours += hours

    return MonthlyConsolidatedData(
        month=month,
        year=year,
        absences_by_teacher=absences_by_teacher,
        absences_by_subject=absences_by_subject,
        replacements_by_teacher=replacements_by_teacher,
        coverage_by_original_subject=coverage_by_original_subject,
        global_totals=GlobalTotals(
            total_absence_events=len(records_in_month),
            total_hours=total_hours,
            total_covered_hours=total_covered,
            total_accounted_hours=total_accounted,
        ),
        records_in_month=records_in_month,
    )
